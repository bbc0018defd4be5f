import pytest

from raycaster.surface import Surface


class RecordingSurface(Surface):
    """Surface stub that records every draw call as a tuple."""

    def __init__(self):
        self.calls = []

    def clear(self):
        self.calls.append(("clear",))

    def present(self):
        self.calls.append(("present",))

    def draw_line(self, x1, y1, x2, y2, color):
        self.calls.append(("line", x1, y1, x2, y2, color))

    def draw_rect(self, x, y, w, h, color):
        self.calls.append(("rect", x, y, w, h, color))

    def draw_filled_rect(self, x, y, w, h, color):
        self.calls.append(("fill", x, y, w, h, color))

    def of_kind(self, kind):
        return [c for c in self.calls if c[0] == kind]


@pytest.fixture
def surface():
    return RecordingSurface()

"""
Drawing surface contract and its pygame/OpenGL implementation.
"""

from __future__ import annotations
import ctypes
import logging
from typing import List, Tuple

import numpy as np
import OpenGL.GL as gl  # noqa: N811
import pygame

from .config import BACKGROUND_COLOR
from .gl_utils import (
    GLResourceManager,
    ShaderProgram,
    bind_array_buffer,
    delete_buffer,
    setup_opengl,
)

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]

# Floats per vertex: x, y (pixels) and r, g, b (0..1)
_VERTEX_SIZE = 5

_VERTEX_SRC = """
#version 120
attribute vec2 aPos;
attribute vec3 aColor;
uniform vec2 uRes;
varying vec3 vColor;
void main() {
    vec2 ndc = vec2(aPos.x / uRes.x * 2.0 - 1.0, 1.0 - aPos.y / uRes.y * 2.0);
    gl_Position = vec4(ndc, 0.0, 1.0);
    vColor = aColor;
}
"""

_FRAGMENT_SRC = """
#version 120
varying vec3 vColor;
void main() {
    gl_FragColor = vec4(vColor, 1.0);
}
"""


class Surface:
    """
    Primitive drawing operations used by the views.
    All coordinates are integer pixels with the origin at the top-left.
    """

    def clear(self) -> None:
        raise NotImplementedError("Surface.clear must be implemented by subclasses")

    def present(self) -> None:
        raise NotImplementedError("Surface.present must be implemented by subclasses")

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: Color) -> None:
        raise NotImplementedError(
            "Surface.draw_line must be implemented by subclasses"
        )

    def draw_rect(self, x: int, y: int, w: int, h: int, color: Color) -> None:
        raise NotImplementedError(
            "Surface.draw_rect must be implemented by subclasses"
        )

    def draw_filled_rect(self, x: int, y: int, w: int, h: int, color: Color) -> None:
        raise NotImplementedError(
            "Surface.draw_filled_rect must be implemented by subclasses"
        )


class DrawQueue:
    """
    Per-frame vertex batches in draw-call order.
    Consecutive calls of the same primitive type share one batch.
    """

    def __init__(self) -> None:
        self.batches: List[Tuple[int, List[float]]] = []

    def clear(self) -> None:
        self.batches = []

    def _push(self, mode: int, color: Color, points: List[Tuple[float, float]]) -> None:
        if not self.batches or self.batches[-1][0] != mode:
            self.batches.append((mode, []))
        verts = self.batches[-1][1]
        r, g, b = (c / 255.0 for c in color)
        for x, y in points:
            verts.extend((x, y, r, g, b))

    def line(self, x1: int, y1: int, x2: int, y2: int, color: Color) -> None:
        # Offset to pixel centers so 1px lines land on the addressed pixels
        self._push(
            gl.GL_LINES, color, [(x1 + 0.5, y1 + 0.5), (x2 + 0.5, y2 + 0.5)]
        )

    def rect(self, x: int, y: int, w: int, h: int, color: Color) -> None:
        x0, y0 = x + 0.5, y + 0.5
        x1, y1 = x + w - 0.5, y + h - 0.5
        self._push(
            gl.GL_LINES,
            color,
            [
                (x0, y0), (x1, y0),
                (x1, y0), (x1, y1),
                (x1, y1), (x0, y1),
                (x0, y1), (x0, y0),
            ],
        )

    def filled_rect(self, x: int, y: int, w: int, h: int, color: Color) -> None:
        if w <= 0 or h <= 0:
            return
        x1, y1 = x + w, y + h
        self._push(
            gl.GL_TRIANGLES,
            color,
            [(x, y), (x1, y), (x1, y1), (x1, y1), (x, y1), (x, y)],
        )

    def arrays(self) -> List[Tuple[int, np.ndarray]]:
        """Batches as (GL mode, float32 array of shape (n, 5))."""
        return [
            (mode, np.asarray(verts, dtype=np.float32).reshape(-1, _VERTEX_SIZE))
            for mode, verts in self.batches
            if verts
        ]


class GLSurface(Surface):
    """Surface backed by a pygame OPENGL window, flat-colored lines and quads."""

    def __init__(
        self,
        width: int,
        height: int,
        background: Color = BACKGROUND_COLOR,
    ) -> None:
        self.w = width
        self.h = height
        setup_opengl(width, height, background)
        self._res = GLResourceManager()
        self.shader = ShaderProgram(
            vertex_source=_VERTEX_SRC,
            fragment_source=_FRAGMENT_SRC,
            name="flat-color",
        )
        self.pos_attr = self.shader.get_attrib("aPos")
        self.color_attr = self.shader.get_attrib("aColor")
        self.u_res_loc = self.shader.get_uniform("uRes")
        self.vbo = self._res.gen(lambda: gl.glGenBuffers(1), delete_buffer)
        self.queue = DrawQueue()
        logger.info("GL surface ready (%dx%d)", width, height)

    def clear(self) -> None:
        gl.glClear(gl.GL_COLOR_BUFFER_BIT)
        self.queue.clear()

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: Color) -> None:
        self.queue.line(x1, y1, x2, y2, color)

    def draw_rect(self, x: int, y: int, w: int, h: int, color: Color) -> None:
        self.queue.rect(x, y, w, h, color)

    def draw_filled_rect(self, x: int, y: int, w: int, h: int, color: Color) -> None:
        self.queue.filled_rect(x, y, w, h, color)

    def present(self) -> None:
        """Flush queued batches to the GPU and swap buffers."""
        self.shader.use()
        gl.glUniform2f(self.u_res_loc, float(self.w), float(self.h))
        with self._res.bind(bind_array_buffer, self.vbo):
            for mode, verts in self.queue.arrays():
                gl.glBufferData(
                    gl.GL_ARRAY_BUFFER, verts.nbytes, verts, gl.GL_STREAM_DRAW
                )
                stride = verts.strides[0]
                gl.glEnableVertexAttribArray(self.pos_attr)
                gl.glVertexAttribPointer(
                    self.pos_attr, 2, gl.GL_FLOAT, gl.GL_FALSE, stride,
                    ctypes.c_void_p(0),
                )
                gl.glEnableVertexAttribArray(self.color_attr)
                gl.glVertexAttribPointer(
                    self.color_attr, 3, gl.GL_FLOAT, gl.GL_FALSE, stride,
                    ctypes.c_void_p(8),
                )
                gl.glDrawArrays(mode, 0, len(verts))
                gl.glDisableVertexAttribArray(self.pos_attr)
                gl.glDisableVertexAttribArray(self.color_attr)
        self.shader.stop()
        self.queue.clear()
        pygame.display.flip()

    def shutdown(self) -> None:
        self._res.shutdown()
        self.shader.delete()

"""
2D vector and angle primitives shared by the ray caster and the views.
"""

from __future__ import annotations
import math
from typing import NamedTuple


class Vector2(NamedTuple):
    """Immutable 2D vector in map coordinates."""

    x: float
    y: float


def neg(v: Vector2) -> Vector2:
    return Vector2(-v.x, -v.y)


def add(a: Vector2, b: Vector2) -> Vector2:
    return Vector2(a.x + b.x, a.y + b.y)


def sub(a: Vector2, b: Vector2) -> Vector2:
    return Vector2(a.x - b.x, a.y - b.y)


def dot(a: Vector2, b: Vector2) -> float:
    return a.x * b.x + a.y * b.y


def div(v: Vector2, k: float) -> Vector2:
    return Vector2(v.x / k, v.y / k)


def length(v: Vector2) -> float:
    return math.sqrt(v.x * v.x + v.y * v.y)


def normalize(v: Vector2) -> Vector2:
    """Scale v to unit length. v must not be the zero vector."""
    return div(v, length(v))


class Angle:
    """
    Orientation stored in radians but built and advanced in degrees.
    The value is never wrapped; sin/cos work on any range.
    """

    def __init__(self, degrees: float = 0.0) -> None:
        self.rad = math.radians(degrees)

    @classmethod
    def from_radians(cls, rad: float) -> Angle:
        angle = cls()
        angle.rad = rad
        return angle

    def copy(self) -> Angle:
        return Angle.from_radians(self.rad)

    def add(self, degrees: float) -> Angle:
        """Advance in place by a delta given in degrees."""
        self.rad += math.radians(degrees)
        return self

    def minus(self, degrees: float) -> Angle:
        """Return a new angle offset backwards by a delta in degrees."""
        return Angle.from_radians(self.rad - math.radians(degrees))

    @property
    def degrees(self) -> float:
        return math.degrees(self.rad)

    def __repr__(self) -> str:
        return f"<Angle {self.degrees:.3f}deg>"


def angle_diff(a: Angle, b: Angle) -> float:
    """Return a - b in radians."""
    return a.rad - b.rad


def from_angle(angle: Angle) -> Vector2:
    """Unit direction vector pointing along the given angle."""
    return normalize(Vector2(math.cos(angle.rad), math.sin(angle.rad)))


def lerp(start: float, end: float, t: float) -> float:
    """Linear interpolation between start and end."""
    return start + (end - start) * t


def map_range(
    x: float, in_min: float, in_max: float, out_min: float, out_max: float
) -> float:
    """Linearly map x from [in_min, in_max] onto [out_min, out_max] (unclamped)."""
    return (x - in_min) * (out_max - out_min) / (in_max - in_min) + out_min


def round_half_away(v: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(v) + 0.5), v))

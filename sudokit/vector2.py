"""Two-component float vector with the usual geometric operations."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Union

from sudokit.mathutil import float_equals

_Operand = Union["Vector2", float, int]


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zero(cls) -> Vector2:
        """Vector with both components 0."""
        return cls(0.0, 0.0)

    @classmethod
    def one(cls) -> Vector2:
        """Vector with both components 1."""
        return cls(1.0, 1.0)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __mul__(self, other: _Operand) -> Vector2:
        """Component-wise product with a vector, or scaling by a number."""
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        if isinstance(other, (int, float)):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vector2:
        if isinstance(other, (int, float)):
            return self.scale(other)
        return NotImplemented

    def __truediv__(self, other: _Operand) -> Vector2:
        """Component-wise quotient with a vector, or division by a number."""
        if isinstance(other, Vector2):
            return Vector2(self.x / other.x, self.y / other.y)
        if isinstance(other, (int, float)):
            return Vector2(self.x / other, self.y / other)
        return NotImplemented

    def add_value(self, value: float) -> Vector2:
        """Add ``value`` to both components."""
        return Vector2(self.x + value, self.y + value)

    def subtract_value(self, value: float) -> Vector2:
        """Subtract ``value`` from both components."""
        return Vector2(self.x - value, self.y - value)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def length_sqr(self) -> float:
        """Squared length."""
        return self.x * self.x + self.y * self.y

    def dot_product(self, other: Vector2) -> float:
        """Dot product with ``other``."""
        return self.x * other.x + self.y * other.y

    def distance(self, other: Vector2) -> float:
        """Distance to ``other``."""
        return math.sqrt(self.distance_sqr(other))

    def distance_sqr(self, other: Vector2) -> float:
        """Squared distance to ``other``."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def angle(self, other: Vector2) -> float:
        """Angle of the line from this point to ``other``, measured from the x axis."""
        return math.atan2(other.y - self.y, other.x - self.x)

    def line_angle(self, other: Vector2) -> float:
        """Angle between two normalized direction vectors."""
        dot = self.x * other.x + self.y * other.y
        return math.acos(max(-1.0, min(1.0, dot)))

    def scale(self, factor: float) -> Vector2:
        """Multiply both components by ``factor``."""
        return Vector2(self.x * factor, self.y * factor)

    def normalize(self) -> Vector2:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length > 0:
            inverse = 1.0 / length
            return Vector2(self.x * inverse, self.y * inverse)
        return Vector2(0.0, 0.0)

    def transform(self, matrix: Any) -> Vector2:
        """Transform by a 4x4 matrix exposing ``m0`` .. ``m15`` (z taken as 0)."""
        return Vector2(
            matrix.m0 * self.x + matrix.m4 * self.y + matrix.m12,
            matrix.m1 * self.x + matrix.m5 * self.y + matrix.m13,
        )

    def lerp(self, other: Vector2, amount: float) -> Vector2:
        """Linear interpolation towards ``other``."""
        return Vector2(
            self.x + amount * (other.x - self.x),
            self.y + amount * (other.y - self.y),
        )

    def reflect(self, normal: Vector2) -> Vector2:
        """Reflect about a surface with the given normal."""
        dot = self.x * normal.x + self.y * normal.y
        return Vector2(
            self.x - (2.0 * normal.x) * dot,
            self.y - (2.0 * normal.y) * dot,
        )

    def rotate(self, angle: float) -> Vector2:
        """Rotate counter-clockwise by ``angle`` radians."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vector2(
            self.x * cos_a - self.y * sin_a,
            self.x * sin_a + self.y * cos_a,
        )

    def move_towards(self, target: Vector2, max_distance: float) -> Vector2:
        """Step towards ``target`` by at most ``max_distance``."""
        dx = target.x - self.x
        dy = target.y - self.y
        value = dx * dx + dy * dy
        if value == 0 or (max_distance >= 0 and value <= max_distance * max_distance):
            return target
        dist = math.sqrt(value)
        return Vector2(
            self.x + dx / dist * max_distance,
            self.y + dy / dist * max_distance,
        )

    def invert(self) -> Vector2:
        """Component-wise reciprocal."""
        return Vector2(1.0 / self.x, 1.0 / self.y)

    def clamp(self, minimum: Vector2, maximum: Vector2) -> Vector2:
        """Clamp each component between the matching components of the bounds."""
        return Vector2(
            min(maximum.x, max(minimum.x, self.x)),
            min(maximum.y, max(minimum.y, self.y)),
        )

    def clamp_value(self, minimum: float, maximum: float) -> Vector2:
        """Clamp the length of the vector to [minimum, maximum]."""
        length_sq = self.x * self.x + self.y * self.y
        if length_sq > 0.0:
            length = math.sqrt(length_sq)
            if length < minimum:
                return self.scale(minimum / length)
            if length > maximum:
                return self.scale(maximum / length)
        return self

    def equals(self, other: Vector2) -> bool:
        """Whether both components are approximately equal."""
        return float_equals(self.x, other.x) and float_equals(self.y, other.y)
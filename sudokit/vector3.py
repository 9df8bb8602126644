"""Three-component float vector with the usual geometric operations."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Union

from sudokit.mathutil import float_equals

_Operand = Union["Vector3", float, int]


def _matrix_values(matrix: Any) -> tuple[float, ...]:
    """Read the sixteen fields ``m0`` .. ``m15`` of a matrix-like object."""
    return tuple(float(getattr(matrix, f"m{i}")) for i in range(16))


def _multiply(left: Sequence[float], right: Sequence[float]) -> list[float]:
    """Product of two matrices given as field lists (index k holds ``mk``)."""
    return [
        sum(left[4 * row + k] * right[4 * k + col] for k in range(4))
        for row in range(4)
        for col in range(4)
    ]


def _invert(m: Sequence[float]) -> list[float]:
    """Inverse of a matrix given as a field list (index k holds ``mk``)."""
    a00, a01, a02, a03 = m[0:4]
    a10, a11, a12, a13 = m[4:8]
    a20, a21, a22, a23 = m[8:12]
    a30, a31, a32, a33 = m[12:16]

    b00 = a00 * a11 - a01 * a10
    b01 = a00 * a12 - a02 * a10
    b02 = a00 * a13 - a03 * a10
    b03 = a01 * a12 - a02 * a11
    b04 = a01 * a13 - a03 * a11
    b05 = a02 * a13 - a03 * a12
    b06 = a20 * a31 - a21 * a30
    b07 = a20 * a32 - a22 * a30
    b08 = a20 * a33 - a23 * a30
    b09 = a21 * a32 - a22 * a31
    b10 = a21 * a33 - a23 * a31
    b11 = a22 * a33 - a23 * a32

    inv_det = 1.0 / (b00 * b11 - b01 * b10 + b02 * b09 + b03 * b08 - b04 * b07 + b05 * b06)

    return [
        (a11 * b11 - a12 * b10 + a13 * b09) * inv_det,
        (-a01 * b11 + a02 * b10 - a03 * b09) * inv_det,
        (a31 * b05 - a32 * b04 + a33 * b03) * inv_det,
        (-a21 * b05 + a22 * b04 - a23 * b03) * inv_det,
        (-a10 * b11 + a12 * b08 - a13 * b07) * inv_det,
        (a00 * b11 - a02 * b08 + a03 * b07) * inv_det,
        (-a30 * b05 + a32 * b02 - a33 * b01) * inv_det,
        (a20 * b05 - a22 * b02 + a23 * b01) * inv_det,
        (a10 * b10 - a11 * b08 + a13 * b06) * inv_det,
        (-a00 * b10 + a01 * b08 - a03 * b06) * inv_det,
        (a30 * b04 - a31 * b02 + a33 * b00) * inv_det,
        (-a20 * b04 + a21 * b02 - a23 * b00) * inv_det,
        (-a10 * b09 + a11 * b07 - a12 * b06) * inv_det,
        (a00 * b09 - a01 * b07 + a02 * b06) * inv_det,
        (-a30 * b03 + a31 * b01 - a32 * b00) * inv_det,
        (a20 * b03 - a21 * b01 + a22 * b00) * inv_det,
    ]


@dataclass(frozen=True)
class Vector3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def zero(cls) -> Vector3:
        """Vector with all components 0."""
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> Vector3:
        """Vector with all components 1."""
        return cls(1.0, 1.0, 1.0)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, other: _Operand) -> Vector3:
        """Component-wise product with a vector, or scaling by a number."""
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: float) -> Vector3:
        if isinstance(other, (int, float)):
            return self.scale(other)
        return NotImplemented

    def __truediv__(self, other: _Operand) -> Vector3:
        """Component-wise quotient with a vector, or division by a number."""
        if isinstance(other, Vector3):
            return Vector3(self.x / other.x, self.y / other.y, self.z / other.z)
        if isinstance(other, (int, float)):
            return Vector3(self.x / other, self.y / other, self.z / other)
        return NotImplemented

    def add_value(self, value: float) -> Vector3:
        """Add ``value`` to every component."""
        return Vector3(self.x + value, self.y + value, self.z + value)

    def subtract_value(self, value: float) -> Vector3:
        """Subtract ``value`` from every component."""
        return Vector3(self.x - value, self.y - value, self.z - value)

    def scale(self, factor: float) -> Vector3:
        """Multiply every component by ``factor``."""
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    def cross_product(self, other: Vector3) -> Vector3:
        """Cross product with ``other``."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def perpendicular(self) -> Vector3:
        """A vector perpendicular to this one, built from the smallest cardinal axis."""
        smallest = abs(self.x)
        axis = Vector3(1.0, 0.0, 0.0)
        if abs(self.y) < smallest:
            smallest = abs(self.y)
            axis = Vector3(0.0, 1.0, 0.0)
        if abs(self.z) < smallest:
            axis = Vector3(0.0, 0.0, 1.0)
        return self.cross_product(axis)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_sqr())

    def length_sqr(self) -> float:
        """Squared length."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def dot_product(self, other: Vector3) -> float:
        """Dot product with ``other``."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def distance(self, other: Vector3) -> float:
        """Distance to ``other``."""
        return math.sqrt(self.distance_sqr(other))

    def distance_sqr(self, other: Vector3) -> float:
        """Squared distance to ``other``."""
        dx = other.x - self.x
        dy = other.y - self.y
        dz = other.z - self.z
        return dx * dx + dy * dy + dz * dz

    def angle(self, other: Vector3) -> float:
        """Angle between this vector and ``other`` in radians."""
        return math.atan2(self.cross_product(other).length(), self.dot_product(other))

    def normalize(self) -> Vector3:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0.0:
            length = 1.0
        return self.scale(1.0 / length)

    def ortho_normalize(self, other: Vector3) -> tuple[Vector3, Vector3]:
        """Gram-Schmidt: return this vector normalized and a unit vector orthogonal to it."""
        first = self.normalize()
        normal = first.cross_product(other).normalize()
        return first, normal.cross_product(first)

    def transform(self, matrix: Any) -> Vector3:
        """Transform by a 4x4 matrix exposing ``m0`` .. ``m15``."""
        m = _matrix_values(matrix)
        return Vector3(
            m[0] * self.x + m[4] * self.y + m[8] * self.z + m[12],
            m[1] * self.x + m[5] * self.y + m[9] * self.z + m[13],
            m[2] * self.x + m[6] * self.y + m[10] * self.z + m[14],
        )

    def rotate_by_quaternion(self, quaternion: Any) -> Vector3:
        """Rotate by a quaternion exposing ``x``, ``y``, ``z`` and ``w``."""
        qx, qy, qz, qw = quaternion.x, quaternion.y, quaternion.z, quaternion.w
        x, y, z = self.x, self.y, self.z
        return Vector3(
            x * (qx * qx + qw * qw - qy * qy - qz * qz)
            + y * (2 * qx * qy - 2 * qw * qz)
            + z * (2 * qx * qz + 2 * qw * qy),
            x * (2 * qw * qz + 2 * qx * qy)
            + y * (qw * qw - qx * qx + qy * qy - qz * qz)
            + z * (-2 * qw * qx + 2 * qy * qz),
            x * (-2 * qw * qy + 2 * qx * qz)
            + y * (2 * qw * qx + 2 * qy * qz)
            + z * (qw * qw - qx * qx - qy * qy + qz * qz),
        )

    def rotate_by_axis_angle(self, axis: Vector3, angle: float) -> Vector3:
        """Rotate around ``axis`` by ``angle`` radians (Euler-Rodrigues)."""
        axis = axis.normalize()
        half = angle / 2.0
        w = axis.scale(math.sin(half))
        a = math.cos(half)
        wv = w.cross_product(self)
        wwv = w.cross_product(wv)
        return self + wv.scale(2 * a) + wwv.scale(2)

    def lerp(self, other: Vector3, amount: float) -> Vector3:
        """Linear interpolation towards ``other``."""
        return Vector3(
            self.x + amount * (other.x - self.x),
            self.y + amount * (other.y - self.y),
            self.z + amount * (other.z - self.z),
        )

    def reflect(self, normal: Vector3) -> Vector3:
        """Reflect about a surface with the given normal."""
        dot = self.dot_product(normal)
        return Vector3(
            self.x - (2.0 * normal.x) * dot,
            self.y - (2.0 * normal.y) * dot,
            self.z - (2.0 * normal.z) * dot,
        )

    def min(self, other: Vector3) -> Vector3:
        """Component-wise minimum."""
        return Vector3(min(self.x, other.x), min(self.y, other.y), min(self.z, other.z))

    def max(self, other: Vector3) -> Vector3:
        """Component-wise maximum."""
        return Vector3(max(self.x, other.x), max(self.y, other.y), max(self.z, other.z))

    def barycenter(self, a: Vector3, b: Vector3, c: Vector3) -> Vector3:
        """Barycentric coordinates (u, v, w) of this point in triangle (a, b, c).

        Raises ZeroDivisionError for a degenerate triangle.
        """
        v0 = b - a
        v1 = c - a
        v2 = self - a
        d00 = v0.dot_product(v0)
        d01 = v0.dot_product(v1)
        d11 = v1.dot_product(v1)
        d20 = v2.dot_product(v0)
        d21 = v2.dot_product(v1)
        denom = d00 * d11 - d01 * d01
        v = (d11 * d20 - d01 * d21) / denom
        w = (d00 * d21 - d01 * d20) / denom
        return Vector3(1.0 - (w + v), v, w)

    def unproject(self, projection: Any, view: Any) -> Vector3:
        """Project a screen-space point back into object space."""
        view_proj = _multiply(_matrix_values(view), _matrix_values(projection))
        inv = _invert(view_proj)
        x, y, z, w = self.x, self.y, self.z, 1.0
        tx = inv[0] * x + inv[4] * y + inv[8] * z + inv[12] * w
        ty = inv[1] * x + inv[5] * y + inv[9] * z + inv[13] * w
        tz = inv[2] * x + inv[6] * y + inv[10] * z + inv[14] * w
        tw = inv[3] * x + inv[7] * y + inv[11] * z + inv[15] * w
        return Vector3(tx / tw, ty / tw, tz / tw)

    def to_tuple(self) -> tuple[float, float, float]:
        """Components as a tuple."""
        return (self.x, self.y, self.z)

    def invert(self) -> Vector3:
        """Component-wise reciprocal."""
        return Vector3(1.0 / self.x, 1.0 / self.y, 1.0 / self.z)

    def clamp(self, minimum: Vector3, maximum: Vector3) -> Vector3:
        """Clamp each component between the matching components of the bounds."""
        return Vector3(
            min(maximum.x, max(minimum.x, self.x)),
            min(maximum.y, max(minimum.y, self.y)),
            min(maximum.z, max(minimum.z, self.z)),
        )

    def clamp_value(self, minimum: float, maximum: float) -> Vector3:
        """Clamp the length of the vector to [minimum, maximum]."""
        length_sq = self.length_sqr()
        if length_sq > 0.0:
            length = math.sqrt(length_sq)
            if length < minimum:
                return self.scale(minimum / length)
            if length > maximum:
                return self.scale(maximum / length)
        return self

    def equals(self, other: Vector3) -> bool:
        """Whether all components are approximately equal."""
        return (
            float_equals(self.x, other.x)
            and float_equals(self.y, other.y)
            and float_equals(self.z, other.z)
        )

    def refract(self, normal: Vector3, ratio: float) -> Vector3:
        """Refracted direction for a normalized ray and normal; zero on total internal reflection."""
        dot = self.dot_product(normal)
        d = 1.0 - ratio * ratio * (1.0 - dot * dot)
        if d < 0.0:
            return Vector3(0.0, 0.0, 0.0)
        d = math.sqrt(d)
        k = ratio * dot + d
        return Vector3(
            ratio * self.x - k * normal.x,
            ratio * self.y - k * normal.y,
            ratio * self.z - k * normal.z,
        )

    def check_collision_spheres(self, radius1: float, center2: Vector3, radius2: float) -> bool:
        """Whether a sphere at this point overlaps a sphere at ``center2``."""
        reach = radius1 + radius2
        return self.distance_sqr(center2) <= reach * reach
"""Quaternion with rotation helpers and conversions to and from matrices."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Union

from sudokit.mathutil import EPSILON
from sudokit.matrix import Matrix
from sudokit.vector3 import Vector3

_Operand = Union["Quaternion", float, int]


def _close(a: float, b: float) -> bool:
    return abs(a - b) <= EPSILON * max(1.0, abs(a), abs(b))


@dataclass(frozen=True)
class Quaternion:
    """An immutable quaternion (x, y, z, w)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    @classmethod
    def identity(cls) -> Quaternion:
        """The identity rotation."""
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_vector3_to_vector3(cls, source: Vector3, target: Vector3) -> Quaternion:
        """Rotation taking direction ``source`` onto direction ``target``."""
        cos2theta = source.dot_product(target)
        cross = source.cross_product(target)
        return cls(cross.x, cross.y, cross.z, 1.0 + cos2theta).normalize()

    @classmethod
    def from_matrix(cls, matrix: Any) -> Quaternion:
        """Quaternion for a rotation matrix exposing ``m0`` .. ``m15``."""
        m0, m1, m2 = matrix.m0, matrix.m1, matrix.m2
        m4, m5, m6 = matrix.m4, matrix.m5, matrix.m6
        m8, m9, m10 = matrix.m8, matrix.m9, matrix.m10

        candidates = [
            m0 + m5 + m10,
            m0 - m5 - m10,
            m5 - m0 - m10,
            m10 - m0 - m5,
        ]
        biggest_index = 0
        biggest = candidates[0]
        for index, value in enumerate(candidates[1:], start=1):
            if value > biggest:
                biggest = value
                biggest_index = index

        biggest_val = math.sqrt(biggest + 1.0) * 0.5
        mult = 0.25 / biggest_val

        if biggest_index == 0:
            return cls(
                (m6 - m9) * mult, (m8 - m2) * mult, (m1 - m4) * mult, biggest_val
            )
        if biggest_index == 1:
            return cls(
                biggest_val, (m1 + m4) * mult, (m8 + m2) * mult, (m6 - m9) * mult
            )
        if biggest_index == 2:
            return cls(
                (m1 + m4) * mult, biggest_val, (m6 + m9) * mult, (m8 - m2) * mult
            )
        return cls(
            (m8 + m2) * mult, (m6 + m9) * mult, biggest_val, (m1 - m4) * mult
        )

    @classmethod
    def from_axis_angle(cls, axis: Vector3, angle: float) -> Quaternion:
        """Rotation of ``angle`` radians around ``axis``; identity for a zero axis."""
        if axis.length() == 0.0:
            return cls.identity()
        half = angle * 0.5
        unit = axis.normalize()
        sin_a = math.sin(half)
        return cls(unit.x * sin_a, unit.y * sin_a, unit.z * sin_a, math.cos(half)).normalize()

    @classmethod
    def from_euler(cls, pitch: float, yaw: float, roll: float) -> Quaternion:
        """Quaternion from Euler angles in radians (rotation order ZYX)."""
        x0, x1 = math.cos(pitch * 0.5), math.sin(pitch * 0.5)
        y0, y1 = math.cos(yaw * 0.5), math.sin(yaw * 0.5)
        z0, z1 = math.cos(roll * 0.5), math.sin(roll * 0.5)
        return cls(
            x1 * y0 * z0 - x0 * y1 * z1,
            x0 * y1 * z0 + x1 * y0 * z1,
            x0 * y0 * z1 - x1 * y1 * z0,
            x0 * y0 * z0 + x1 * y1 * z1,
        )

    def __add__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(*(a - b for a, b in zip(self, other)))

    def __mul__(self, other: _Operand) -> Quaternion:
        """Hamilton product with a quaternion, or scaling by a number."""
        if isinstance(other, Quaternion):
            ax, ay, az, aw = self
            bx, by, bz, bw = other
            return Quaternion(
                ax * bw + aw * bx + ay * bz - az * by,
                ay * bw + aw * by + az * bx - ax * bz,
                az * bw + aw * bz + ax * by - ay * bx,
                aw * bw - ax * bx - ay * by - az * bz,
            )
        if isinstance(other, (int, float)):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: float) -> Quaternion:
        if isinstance(other, (int, float)):
            return self.scale(other)
        return NotImplemented

    def __truediv__(self, other: _Operand) -> Quaternion:
        """Component-wise quotient with a quaternion, or division by a number."""
        if isinstance(other, Quaternion):
            return Quaternion(*(a / b for a, b in zip(self, other)))
        if isinstance(other, (int, float)):
            return Quaternion(*(a / other for a in self))
        return NotImplemented

    def add_value(self, value: float) -> Quaternion:
        """Add ``value`` to every component."""
        return Quaternion(*(a + value for a in self))

    def subtract_value(self, value: float) -> Quaternion:
        """Subtract ``value`` from every component."""
        return Quaternion(*(a - value for a in self))

    def length(self) -> float:
        """Euclidean length of the four components."""
        return math.sqrt(sum(a * a for a in self))

    def normalize(self) -> Quaternion:
        """Unit quaternion; the zero quaternion stays zero."""
        length = self.length()
        if length == 0.0:
            length = 1.0
        return self.scale(1.0 / length)

    def invert(self) -> Quaternion:
        """Multiplicative inverse; the zero quaternion is returned unchanged."""
        length_sq = sum(a * a for a in self)
        if length_sq == 0.0:
            return self
        inv = 1.0 / length_sq
        return Quaternion(-self.x * inv, -self.y * inv, -self.z * inv, self.w * inv)

    def scale(self, factor: float) -> Quaternion:
        """Multiply every component by ``factor``."""
        return Quaternion(*(a * factor for a in self))

    def lerp(self, other: Quaternion, amount: float) -> Quaternion:
        """Linear interpolation towards ``other``."""
        return Quaternion(*(a + amount * (b - a) for a, b in zip(self, other)))

    def nlerp(self, other: Quaternion, amount: float) -> Quaternion:
        """Normalized linear interpolation towards ``other``."""
        return self.lerp(other, amount).normalize()

    def slerp(self, other: Quaternion, amount: float) -> Quaternion:
        """Spherical linear interpolation towards ``other``."""
        cos_half = sum(a * b for a, b in zip(self, other))
        if cos_half < 0:
            other = Quaternion(-other.x, -other.y, -other.z, -other.w)
            cos_half = -cos_half

        if abs(cos_half) >= 1.0:
            return self
        if cos_half > 0.95:
            return self.nlerp(other, amount)

        half_theta = math.acos(cos_half)
        sin_half = math.sqrt(1.0 - cos_half * cos_half)
        if abs(sin_half) < 0.001:
            return Quaternion(*(a * 0.5 + b * 0.5 for a, b in zip(self, other)))
        ratio_a = math.sin((1 - amount) * half_theta) / sin_half
        ratio_b = math.sin(amount * half_theta) / sin_half
        return Quaternion(*(a * ratio_a + b * ratio_b for a, b in zip(self, other)))

    def to_matrix(self) -> Matrix:
        """Rotation matrix for this quaternion."""
        x, y, z, w = self
        a2, b2, c2 = x * x, y * y, z * z
        ac, ab, bc = x * z, x * y, y * z
        ad, bd, cd = w * x, w * y, w * z
        return Matrix(
            m0=1 - 2 * (b2 + c2),
            m1=2 * (ab + cd),
            m2=2 * (ac - bd),
            m4=2 * (ab - cd),
            m5=1 - 2 * (a2 + c2),
            m6=2 * (bc + ad),
            m8=2 * (ac + bd),
            m9=2 * (bc - ad),
            m10=1 - 2 * (a2 + b2),
            m15=1.0,
        )

    def to_axis_angle(self) -> tuple[Vector3, float]:
        """Rotation axis and angle in radians; the axis is (1, 0, 0) for no rotation."""
        q = self.normalize() if abs(self.w) > 1.0 else self
        w = max(-1.0, min(1.0, q.w))
        angle = 2.0 * math.acos(w)
        den = math.sqrt(max(0.0, 1.0 - w * w))
        if den > 0.0001:
            axis = Vector3(q.x / den, q.y / den, q.z / den)
        else:
            axis = Vector3(1.0, 0.0, 0.0)
        return axis, angle

    def to_euler(self) -> Vector3:
        """Euler angles (roll about x, pitch about y, yaw about z) in radians."""
        x, y, z, w = self
        roll = math.atan2(2.0 * (w * x + y * z), 1.0 - 2.0 * (x * x + y * y))
        sin_pitch = max(-1.0, min(1.0, 2.0 * (w * y - z * x)))
        pitch = math.asin(sin_pitch)
        yaw = math.atan2(2.0 * (w * z + x * y), 1.0 - 2.0 * (y * y + z * z))
        return Vector3(roll, pitch, yaw)

    def transform(self, matrix: Any) -> Quaternion:
        """Transform by a 4x4 matrix exposing ``m0`` .. ``m15``."""
        m = [float(getattr(matrix, f"m{i}")) for i in range(16)]
        x, y, z, w = self
        return Quaternion(
            m[0] * x + m[4] * y + m[8] * z + m[12] * w,
            m[1] * x + m[5] * y + m[9] * z + m[13] * w,
            m[2] * x + m[6] * y + m[10] * z + m[14] * w,
            m[3] * x + m[7] * y + m[11] * z + m[15] * w,
        )

    def equals(self, other: Quaternion) -> bool:
        """Whether both quaternions describe approximately the same rotation."""
        same = all(_close(a, b) for a, b in zip(self, other))
        opposite = all(_close(a, -b) for a, b in zip(self, other))
        return same or opposite
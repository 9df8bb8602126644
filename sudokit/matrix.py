"""4x4 float matrix (right handed, column major) with transform builders."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import astuple, dataclass
from typing import Any

from sudokit.vector3 import Vector3, _invert, _multiply


@dataclass(frozen=True)
class Matrix:
    """An immutable 4x4 matrix; field ``mk`` is element k in column-major order."""

    m0: float = 0.0
    m1: float = 0.0
    m2: float = 0.0
    m3: float = 0.0
    m4: float = 0.0
    m5: float = 0.0
    m6: float = 0.0
    m7: float = 0.0
    m8: float = 0.0
    m9: float = 0.0
    m10: float = 0.0
    m11: float = 0.0
    m12: float = 0.0
    m13: float = 0.0
    m14: float = 0.0
    m15: float = 0.0

    def __iter__(self) -> Iterator[float]:
        return iter(astuple(self))

    @classmethod
    def identity(cls) -> Matrix:
        """The identity matrix."""
        return cls(m0=1.0, m5=1.0, m10=1.0, m15=1.0)

    @classmethod
    def translate(cls, x: float, y: float, z: float) -> Matrix:
        """Translation by (x, y, z)."""
        return cls(m0=1.0, m5=1.0, m10=1.0, m15=1.0, m12=x, m13=y, m14=z)

    @classmethod
    def rotate(cls, axis: Any, angle: float) -> Matrix:
        """Rotation of ``angle`` radians around ``axis`` (normalized if needed)."""
        x, y, z = axis.x, axis.y, axis.z
        length_sq = x * x + y * y + z * z
        if length_sq != 1.0 and length_sq != 0.0:
            inverse = 1.0 / math.sqrt(length_sq)
            x, y, z = x * inverse, y * inverse, z * inverse
        sin_a = math.sin(angle)
        cos_a = math.cos(angle)
        t = 1.0 - cos_a
        return cls(
            m0=x * x * t + cos_a,
            m1=y * x * t + z * sin_a,
            m2=z * x * t - y * sin_a,
            m4=x * y * t - z * sin_a,
            m5=y * y * t + cos_a,
            m6=z * y * t + x * sin_a,
            m8=x * z * t + y * sin_a,
            m9=y * z * t - x * sin_a,
            m10=z * z * t + cos_a,
            m15=1.0,
        )

    @classmethod
    def rotate_x(cls, angle: float) -> Matrix:
        """Rotation around the x axis."""
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        return cls(m0=1.0, m5=cos_a, m6=sin_a, m9=-sin_a, m10=cos_a, m15=1.0)

    @classmethod
    def rotate_y(cls, angle: float) -> Matrix:
        """Rotation around the y axis."""
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        return cls(m0=cos_a, m2=-sin_a, m5=1.0, m8=sin_a, m10=cos_a, m15=1.0)

    @classmethod
    def rotate_z(cls, angle: float) -> Matrix:
        """Rotation around the z axis."""
        cos_a, sin_a = math.cos(angle), math.sin(angle)
        return cls(m0=cos_a, m1=sin_a, m4=-sin_a, m5=cos_a, m10=1.0, m15=1.0)

    @classmethod
    def rotate_xyz(cls, angle: Any) -> Matrix:
        """Rotation from per-axis angles held in ``angle.x``, ``angle.y``, ``angle.z``."""
        cosz, sinz = math.cos(-angle.z), math.sin(-angle.z)
        cosy, siny = math.cos(-angle.y), math.sin(-angle.y)
        cosx, sinx = math.cos(-angle.x), math.sin(-angle.x)
        return cls(
            m0=cosz * cosy,
            m1=(cosz * siny * sinx) - (sinz * cosx),
            m2=(cosz * siny * cosx) + (sinz * sinx),
            m4=sinz * cosy,
            m5=(sinz * siny * sinx) + (cosz * cosx),
            m6=(sinz * siny * cosx) - (cosz * sinx),
            m8=-siny,
            m9=cosy * sinx,
            m10=cosy * cosx,
            m15=1.0,
        )

    @classmethod
    def rotate_zyx(cls, angle: Any) -> Matrix:
        """Rotation applying z, then y, then x angles."""
        cz, sz = math.cos(angle.z), math.sin(angle.z)
        cy, sy = math.cos(angle.y), math.sin(angle.y)
        cx, sx = math.cos(angle.x), math.sin(angle.x)
        return cls(
            m0=cz * cy,
            m4=cz * sy * sx - cx * sz,
            m8=sz * sx + cz * cx * sy,
            m1=cy * sz,
            m5=cz * cx + sz * sy * sx,
            m9=cx * sz * sy - cz * sx,
            m2=-sy,
            m6=cy * sx,
            m10=cy * cx,
            m15=1.0,
        )

    @classmethod
    def scale(cls, x: float, y: float, z: float) -> Matrix:
        """Scaling by (x, y, z)."""
        return cls(m0=x, m5=y, m10=z, m15=1.0)

    @classmethod
    def frustum(
        cls, left: float, right: float, bottom: float, top: float, near: float, far: float
    ) -> Matrix:
        """Perspective projection from frustum planes."""
        rl = right - left
        tb = top - bottom
        fn = far - near
        return cls(
            m0=(near * 2.0) / rl,
            m5=(near * 2.0) / tb,
            m8=(right + left) / rl,
            m9=(top + bottom) / tb,
            m10=-(far + near) / fn,
            m11=-1.0,
            m14=-(far * near * 2.0) / fn,
        )

    @classmethod
    def perspective(cls, fovy: float, aspect: float, near: float, far: float) -> Matrix:
        """Perspective projection from a vertical field of view in radians."""
        top = near * math.tan(fovy * 0.5)
        right = top * aspect
        return cls.frustum(-right, right, -top, top, near, far)

    @classmethod
    def ortho(
        cls, left: float, right: float, bottom: float, top: float, near: float, far: float
    ) -> Matrix:
        """Orthographic projection."""
        rl = right - left
        tb = top - bottom
        fn = far - near
        return cls(
            m0=2.0 / rl,
            m5=2.0 / tb,
            m10=-2.0 / fn,
            m12=-(left + right) / rl,
            m13=-(top + bottom) / tb,
            m14=-(far + near) / fn,
            m15=1.0,
        )

    @classmethod
    def look_at(cls, eye: Vector3, target: Vector3, up: Vector3) -> Matrix:
        """View matrix for a camera at ``eye`` looking at ``target``."""
        vz = (eye - target).normalize()
        vx = up.cross_product(vz).normalize()
        vy = vz.cross_product(vx)
        return cls(
            m0=vx.x,
            m1=vy.x,
            m2=vz.x,
            m4=vx.y,
            m5=vy.y,
            m6=vz.y,
            m8=vx.z,
            m9=vy.z,
            m10=vz.z,
            m12=-vx.dot_product(eye),
            m13=-vy.dot_product(eye),
            m14=-vz.dot_product(eye),
            m15=1.0,
        )

    def determinant(self) -> float:
        """Determinant of the matrix."""
        a00, a01, a02, a03, a10, a11, a12, a13, a20, a21, a22, a23, a30, a31, a32, a33 = self
        return (
            a30 * a21 * a12 * a03 - a20 * a31 * a12 * a03 - a30 * a11 * a22 * a03
            + a10 * a31 * a22 * a03 + a20 * a11 * a32 * a03 - a10 * a21 * a32 * a03
            - a30 * a21 * a02 * a13 + a20 * a31 * a02 * a13 + a30 * a01 * a22 * a13
            - a00 * a31 * a22 * a13 - a20 * a01 * a32 * a13 + a00 * a21 * a32 * a13
            + a30 * a11 * a02 * a23 - a10 * a31 * a02 * a23 - a30 * a01 * a12 * a23
            + a00 * a31 * a12 * a23 + a10 * a01 * a32 * a23 - a00 * a11 * a32 * a23
            - a20 * a11 * a02 * a33 + a10 * a21 * a02 * a33 + a20 * a01 * a12 * a33
            - a00 * a21 * a12 * a33 - a10 * a01 * a22 * a33 + a00 * a11 * a22 * a33
        )

    def trace(self) -> float:
        """Sum of the diagonal elements."""
        return self.m0 + self.m5 + self.m10 + self.m15

    def transpose(self) -> Matrix:
        """The transposed matrix."""
        values = self.to_list()
        return Matrix(*(values[4 * col + row] for row in range(4) for col in range(4)))

    def invert(self) -> Matrix:
        """The inverse matrix.

        Raises ZeroDivisionError for a singular matrix.
        """
        return Matrix(*_invert(self.to_list()))

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix(*(a + b for a, b in zip(self, other)))

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix(*(a - b for a, b in zip(self, other)))

    def __mul__(self, other: Matrix) -> Matrix:
        """Matrix product; the order of the operands matters."""
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix(*_multiply(self.to_list(), other.to_list()))

    def to_list(self) -> list[float]:
        """The sixteen elements ``m0`` .. ``m15`` as a list."""
        return list(astuple(self))
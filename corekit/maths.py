"""Angle conversion, small fixed-size vectors and a 4x4 column-major matrix."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Callable, Iterator

PI_F = 3.14159265358
PI_D = math.pi

# Tolerance used by the approximate equality of float vectors.
EPSILON = 1.192092896e-07


def todeg(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * (180.0 / PI_D)


def torad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * (PI_D / 180.0)


def _trunc_div(a: int, b: int) -> int:
    """Integer division that truncates toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


class _Vector:
    """Shared behaviour of the vector dataclasses."""

    __slots__ = ()

    def __iter__(self) -> Iterator:
        return (getattr(self, f.name) for f in fields(self))

    def _zip_with(self, other, op: Callable):
        return type(self)(*(op(a, b) for a, b in zip(self, other)))

    def _map(self, op: Callable):
        return type(self)(*(op(a) for a in self))

    def _sum_squares(self):
        return sum(c * c for c in self)

    def _close_to(self, other, count: int) -> bool:
        pairs = list(zip(self, other))[:count]
        return all(abs(a - b) <= EPSILON for a, b in pairs)


@dataclass(frozen=True)
class V2f(_Vector):
    """Two-component float vector."""

    x: float = 0.0
    y: float = 0.0

    @staticmethod
    def zero() -> V2f:
        return V2f(0.0, 0.0)

    def __add__(self, other: V2f) -> V2f:
        return self._zip_with(other, lambda a, b: a + b)

    def __sub__(self, other: V2f) -> V2f:
        return self._zip_with(other, lambda a, b: a - b)

    def __mul__(self, other: V2f) -> V2f:
        return self._zip_with(other, lambda a, b: a * b)

    def __truediv__(self, other: V2f) -> V2f:
        return self._zip_with(other, lambda a, b: a / b)

    def scale(self, s: float) -> V2f:
        return self._map(lambda a: a * s)

    def mag_sqrd(self) -> float:
        return self._sum_squares()

    def mag(self) -> float:
        return math.sqrt(self.mag_sqrd())

    def normalised(self) -> V2f:
        length = self.mag()
        return self._map(lambda a: a / length)

    def approx_eq(self, other: V2f) -> bool:
        return self._close_to(other, 2)


@dataclass(frozen=True)
class V2i(_Vector):
    """Two-component integer vector."""

    x: int = 0
    y: int = 0

    @staticmethod
    def zero() -> V2i:
        return V2i(0, 0)

    def __add__(self, other: V2i) -> V2i:
        return self._zip_with(other, lambda a, b: a + b)

    def __sub__(self, other: V2i) -> V2i:
        return self._zip_with(other, lambda a, b: a - b)

    def __mul__(self, other: V2i) -> V2i:
        return self._zip_with(other, lambda a, b: a * b)

    def __truediv__(self, other: V2i) -> V2i:
        return self._zip_with(other, _trunc_div)

    def scale(self, s: float) -> V2i:
        """Scale by a float factor, truncating each component toward zero."""
        return self._map(lambda a: int(a * s))

    def mag_sqrd(self) -> int:
        return self._sum_squares()

    def mag(self) -> int:
        return int(math.sqrt(self.mag_sqrd()))


@dataclass(frozen=True)
class V3f(_Vector):
    """Three-component float vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @staticmethod
    def zero() -> V3f:
        return V3f(0.0, 0.0, 0.0)

    def __add__(self, other: V3f) -> V3f:
        return self._zip_with(other, lambda a, b: a + b)

    def __sub__(self, other: V3f) -> V3f:
        return self._zip_with(other, lambda a, b: a - b)

    def __mul__(self, other: V3f) -> V3f:
        return self._zip_with(other, lambda a, b: a * b)

    def __truediv__(self, other: V3f) -> V3f:
        return self._zip_with(other, lambda a, b: a / b)

    def scale(self, s: float) -> V3f:
        return self._map(lambda a: a * s)

    def mag_sqrd(self) -> float:
        return self._sum_squares()

    def mag(self) -> float:
        return math.sqrt(self.mag_sqrd())

    def normalised(self) -> V3f:
        length = self.mag()
        return self._map(lambda a: a / length)

    def approx_eq(self, other: V3f) -> bool:
        return self._close_to(other, 3)

    def dot(self, other: V3f) -> float:
        return sum(a * b for a, b in zip(self, other))

    def cross(self, other: V3f) -> V3f:
        return V3f(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )


@dataclass(frozen=True)
class V3i(_Vector):
    """Three-component integer vector."""

    x: int = 0
    y: int = 0
    z: int = 0

    @staticmethod
    def zero() -> V3i:
        return V3i(0, 0, 0)

    def __add__(self, other: V3i) -> V3i:
        return self._zip_with(other, lambda a, b: a + b)

    def __sub__(self, other: V3i) -> V3i:
        return self._zip_with(other, lambda a, b: a - b)

    def __mul__(self, other: V3i) -> V3i:
        return self._zip_with(other, lambda a, b: a * b)

    def __truediv__(self, other: V3i) -> V3i:
        return self._zip_with(other, _trunc_div)

    def scale(self, s: int) -> V3i:
        return self._map(lambda a: a * s)

    def mag_sqrd(self) -> int:
        return self._sum_squares()

    def mag(self) -> int:
        return int(math.sqrt(self.mag_sqrd()))


@dataclass(frozen=True)
class V4f(_Vector):
    """Four-component float vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @staticmethod
    def zero() -> V4f:
        return V4f(0.0, 0.0, 0.0, 0.0)

    def __add__(self, other: V4f) -> V4f:
        return self._zip_with(other, lambda a, b: a + b)

    def __sub__(self, other: V4f) -> V4f:
        return self._zip_with(other, lambda a, b: a - b)

    def __mul__(self, other: V4f) -> V4f:
        return self._zip_with(other, lambda a, b: a * b)

    def __truediv__(self, other: V4f) -> V4f:
        return self._zip_with(other, lambda a, b: a / b)

    def scale(self, s: float) -> V4f:
        return self._map(lambda a: a * s)

    def mag_sqrd(self) -> float:
        return self._sum_squares()

    def mag(self) -> float:
        return math.sqrt(self.mag_sqrd())

    def normalised(self) -> V4f:
        length = self.mag()
        return self._map(lambda a: a / length)

    def approx_eq(self, other: V4f) -> bool:
        """Compare x, y and z within tolerance; w is not compared."""
        return self._close_to(other, 3)


@dataclass(frozen=True)
class V4i(_Vector):
    """Four-component integer vector."""

    x: int = 0
    y: int = 0
    z: int = 0
    w: int = 0

    @staticmethod
    def zero() -> V4i:
        return V4i(0, 0, 0, 0)

    def __add__(self, other: V4i) -> V4i:
        return self._zip_with(other, lambda a, b: a + b)

    def __sub__(self, other: V4i) -> V4i:
        return self._zip_with(other, lambda a, b: a - b)

    def __mul__(self, other: V4i) -> V4i:
        return self._zip_with(other, lambda a, b: a * b)

    def __truediv__(self, other: V4i) -> V4i:
        return self._zip_with(other, _trunc_div)

    def scale(self, s: int) -> V4i:
        return self._map(lambda a: a * s)

    def mag_sqrd(self) -> int:
        return self._sum_squares()

    def mag(self) -> int:
        return int(math.sqrt(self.mag_sqrd()))


Columns = tuple[tuple[float, float, float, float], ...]

_IDENTITY: Columns = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


@dataclass(frozen=True)
class M4f:
    """4x4 float matrix stored as four columns: ``m[column][row]``."""

    m: Columns = _IDENTITY

    def __post_init__(self) -> None:
        columns = tuple(tuple(col) for col in self.m)
        if len(columns) != 4 or any(len(col) != 4 for col in columns):
            raise ValueError("M4f requires exactly 4 columns of 4 values")
        object.__setattr__(self, "m", columns)

    @staticmethod
    def diagonal(d: float) -> M4f:
        """Matrix with ``d`` on the diagonal and zero elsewhere."""
        return M4f(tuple(
            tuple(d if row == col else 0.0 for row in range(4)) for col in range(4)
        ))

    @staticmethod
    def identity() -> M4f:
        return M4f.diagonal(1.0)

    def __mul__(self, other: M4f) -> M4f:
        rows = list(zip(*self.m))
        return M4f(tuple(
            tuple(sum(a * b for a, b in zip(row, col)) for row in rows)
            for col in other.m
        ))

    def translate(self, v: V3f) -> M4f:
        r = (*_IDENTITY[:3], (v.x, v.y, v.z, 1.0))
        return self * M4f(r)

    def rotate(self, angle: float, axis: V3f) -> M4f:
        """Rotate by ``angle`` radians about ``axis``."""
        c = math.cos(angle)
        s = math.sin(angle)
        omc = 1.0 - c
        x, y, z = axis.x, axis.y, axis.z
        r = (
            (x * x * omc + c, y * x * omc + z * s, x * z * omc - y * s, 0.0),
            (x * y * omc - z * s, y * y * omc + c, y * z * omc + x * s, 0.0),
            (x * z * omc + y * s, y * z * omc - x * s, z * z * omc + c, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
        return self * M4f(r)

    def scale(self, v: V3f) -> M4f:
        r = (
            (v.x, 0.0, 0.0, 0.0),
            (0.0, v.y, 0.0, 0.0),
            (0.0, 0.0, v.z, 0.0),
            (0.0, 0.0, 0.0, 1.0),
        )
        return self * M4f(r)

    def transform(self, v: V4f) -> V4f:
        """Apply to ``v``; the last column is added together with ``v.w`` unscaled."""
        m = self.m
        return V4f(*(
            m[0][j] * v.x + m[1][j] * v.y + m[2][j] * v.z + m[3][j] + v.w
            for j in range(4)
        ))

    @staticmethod
    def lookat(camera: V3f, target: V3f, up: V3f) -> M4f:
        f = (target - camera).normalised()
        u = up.normalised()
        s = f.cross(u).normalised()
        u = s.cross(f)
        return M4f((
            (s.x, u.x, -f.x, 0.0),
            (s.y, u.y, -f.y, 0.0),
            (s.z, u.z, -f.z, 0.0),
            (-s.dot(camera), -u.dot(camera), f.dot(camera), 1.0),
        ))

    @staticmethod
    def perspective(fov: float, aspect: float, near: float, far: float) -> M4f:
        """Perspective projection; ``fov`` is in degrees."""
        q = 1.0 / math.tan(torad(fov) / 2.0)
        a = q / aspect
        b = (near + far) / (near - far)
        c = (2.0 * near * far) / (near - far)
        return M4f((
            (a, 0.0, 0.0, 0.0),
            (0.0, q, 0.0, 0.0),
            (0.0, 0.0, b, -1.0),
            (0.0, 0.0, c, 1.0),
        ))

    @staticmethod
    def orthographic(left: float, right: float, bottom: float, top: float,
                     near: float, far: float) -> M4f:
        return M4f((
            (2.0 / (right - left), 0.0, 0.0, 0.0),
            (0.0, 2.0 / (top - bottom), 0.0, 0.0),
            (0.0, 0.0, 2.0 / (near - far), 0.0),
            (
                (left + right) / (left - right),
                (bottom + top) / (bottom - top),
                (far + near) / (far - near),
                1.0,
            ),
        ))

    def inverted(self) -> M4f:
        """Inverse matrix; raises ZeroDivisionError when singular."""
        m = [e for col in self.m for e in col]

        t0 = m[10] * m[15]
        t1 = m[14] * m[11]
        t2 = m[6] * m[15]
        t3 = m[14] * m[7]
        t4 = m[6] * m[11]
        t5 = m[10] * m[7]
        t6 = m[2] * m[15]
        t7 = m[14] * m[3]
        t8 = m[2] * m[11]
        t9 = m[10] * m[3]
        t10 = m[2] * m[7]
        t11 = m[6] * m[3]
        t12 = m[8] * m[13]
        t13 = m[12] * m[9]
        t14 = m[4] * m[13]
        t15 = m[12] * m[5]
        t16 = m[4] * m[9]
        t17 = m[8] * m[5]
        t18 = m[0] * m[13]
        t19 = m[12] * m[1]
        t20 = m[0] * m[9]
        t21 = m[8] * m[1]
        t22 = m[0] * m[5]
        t23 = m[4] * m[1]

        o0 = (t0 * m[5] + t3 * m[9] + t4 * m[13]) - (t1 * m[5] + t2 * m[9] + t5 * m[13])
        o1 = (t1 * m[1] + t6 * m[9] + t9 * m[13]) - (t0 * m[1] + t7 * m[9] + t8 * m[13])
        o2 = (t2 * m[1] + t7 * m[5] + t10 * m[13]) - (t3 * m[1] + t6 * m[5] + t11 * m[13])
        o3 = (t5 * m[1] + t8 * m[5] + t11 * m[9]) - (t4 * m[1] + t9 * m[5] + t10 * m[9])

        d = 1.0 / (m[0] * o0 + m[4] * o1 + m[8] * o2 + m[12] * o3)

        o = [
            d * o0,
            d * o1,
            d * o2,
            d * o3,
            d * ((t1 * m[4] + t2 * m[8] + t5 * m[12]) - (t0 * m[4] + t3 * m[8] + t4 * m[12])),
            d * ((t0 * m[0] + t7 * m[8] + t8 * m[12]) - (t1 * m[0] + t6 * m[8] + t9 * m[12])),
            d * ((t3 * m[0] + t6 * m[4] + t11 * m[12]) - (t2 * m[0] + t7 * m[4] + t10 * m[12])),
            d * ((t4 * m[0] + t9 * m[4] + t10 * m[8]) - (t5 * m[0] + t8 * m[4] + t11 * m[8])),
            d * ((t12 * m[7] + t15 * m[11] + t16 * m[15]) - (t13 * m[7] + t14 * m[11] + t17 * m[15])),
            d * ((t13 * m[3] + t18 * m[11] + t21 * m[15]) - (t12 * m[3] + t19 * m[11] + t20 * m[15])),
            d * ((t14 * m[3] + t19 * m[7] + t22 * m[15]) - (t15 * m[3] + t18 * m[7] + t23 * m[15])),
            d * ((t17 * m[3] + t20 * m[7] + t23 * m[11]) - (t16 * m[3] + t21 * m[7] + t22 * m[11])),
            d * ((t14 * m[10] + t17 * m[14] + t13 * m[6]) - (t16 * m[14] + t12 * m[6] + t15 * m[10])),
            d * ((t20 * m[14] + t12 * m[2] + t19 * m[10]) - (t18 * m[10] + t21 * m[14] + t13 * m[2])),
            d * ((t18 * m[6] + t23 * m[14] + t15 * m[2]) - (t22 * m[14] + t14 * m[2] + t19 * m[6])),
            d * ((t22 * m[10] + t16 * m[2] + t21 * m[6]) - (t20 * m[6] + t23 * m[10] + t17 * m[2])),
        ]
        return M4f(tuple(tuple(o[i:i + 4]) for i in range(0, 16, 4)))

    def transposed(self) -> M4f:
        return M4f(tuple(zip(*self.m)))
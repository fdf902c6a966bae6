# interpolation.py
"""
Linear, bilinear and trilinear interpolation.

Vectors and quaternions are interpolated component by component. In
particular ``lerp_quaternion`` is not a slerp and does not re-normalize.
"""
from kinemath.quaternion import Quaternion
from kinemath.utils import ieee_divide
from kinemath.vector import Vector2, Vector3


def lerp(a: float, b: float, percent: float) -> float:
    """``a`` at 0, ``b`` at 1."""
    return (1 - percent) * a + percent * b


def lerp_int(a: int, b: int, percent: float) -> int:
    """Integer lerp, truncated towards zero."""
    return int((1 - percent) * a + percent * b)


def lerp_vector3(a: Vector3, b: Vector3, percent: float) -> Vector3:
    return a * (1 - percent) + b * percent


def lerp_vector2(a: Vector2, b: Vector2, percent: float) -> Vector2:
    return a * (1 - percent) + b * percent


def lerp_quaternion(a: Quaternion, b: Quaternion, percent: float) -> Quaternion:
    return Quaternion(lerp(a.x, b.x, percent),
                      lerp(a.y, b.y, percent),
                      lerp(a.z, b.z, percent),
                      lerp(a.w, b.w, percent))


def lerp_between(x: float, x1: float, x2: float, q0: float, q1: float) -> float:
    """
    Value at position ``x`` on the line through ``(x1, q0)`` and ``(x2, q1)``.

    ``x1 == x2`` has no answer; the result is NaN or inf rather than an error.
    """
    span = x2 - x1
    return ieee_divide(x2 - x, span) * q0 + ieee_divide(x - x1, span) * q1


def bilerp(x: float, y: float,
           q00: float, q01: float, q10: float, q11: float,
           x1: float, x2: float, y1: float, y2: float) -> float:
    """
    Bilinear interpolation at ``(x, y)``.

    Args:
        q00: value at (x1, y1).
        q01: value at (x1, y2).
        q10: value at (x2, y1).
        q11: value at (x2, y2).
    """
    q0 = lerp_between(x, x1, x2, q00, q10)
    q1 = lerp_between(x, x1, x2, q01, q11)
    return lerp_between(y, y1, y2, q0, q1)


def bilerp_vector2(target: Vector2,
                   q00: float, q01: float, q10: float, q11: float,
                   known1: Vector2, known2: Vector2) -> float:
    """``bilerp`` with the corner coordinates taken from ``known1`` (x1, y1) and ``known2`` (x2, y2)."""
    return bilerp(target.x, target.y, q00, q01, q10, q11, known1.x, known2.x, known1.y, known2.y)


def trilerp(x: float, y: float, z: float,
            q000: float, q001: float, q010: float, q011: float,
            q100: float, q101: float, q110: float, q111: float,
            x1: float, x2: float, y1: float, y2: float, z1: float, z2: float) -> float:
    """
    Trilinear interpolation at ``(x, y, z)``: along x, then y, then z.

    Corner suffixes are ordered x, z, y: ``q001`` is at (x1, y2, z1) and
    ``q010`` at (x1, y1, z2).
    """
    q00 = lerp_between(x, x1, x2, q000, q100)
    q01 = lerp_between(x, x1, x2, q010, q110)
    q10 = lerp_between(x, x1, x2, q001, q101)
    q11 = lerp_between(x, x1, x2, q011, q111)
    q0 = lerp_between(y, y1, y2, q00, q10)
    q1 = lerp_between(y, y1, y2, q01, q11)
    return lerp_between(z, z1, z2, q0, q1)


def trilerp_vector3(target: Vector3,
                    q000: float, q001: float, q010: float, q011: float,
                    q100: float, q101: float, q110: float, q111: float,
                    known1: Vector3, known2: Vector3) -> float:
    return trilerp(target.x, target.y, target.z,
                   q000, q001, q010, q011, q100, q101, q110, q111,
                   known1.x, known2.x, known1.y, known2.y, known1.z, known2.z)

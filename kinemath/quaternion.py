# quaternion.py
"""
Hamilton quaternions (x, y, z, w) with w the scalar part.

Angles are in degrees throughout. The axis convention matches ``Vector3``:
pitch turns about ``RIGHT`` (x), yaw about ``UP`` (y) and roll about
``FORWARD`` (z).
"""
from dataclasses import dataclass
import math
from typing import Iterator, Optional, Tuple, Union

import numpy as np
from numba import njit

from numba.core.errors import NumbaPerformanceWarning
import warnings
warnings.filterwarnings("ignore", category=NumbaPerformanceWarning)

from kinemath.config import config
from kinemath.utils import ieee_divide
from kinemath.vector import Vector3
from kinemath import vector as vec

# |test| at or above this is treated as pitch at a pole
GIMBAL_LOCK_THRESHOLD = 0.4999


@dataclass(frozen=True, slots=True)
class Quaternion:
    """
    Immutable quaternion.

    Building one directly from components assumes it is already normalized
    and does no work; use ``from_axis_angle`` or ``normalize`` to get a unit
    quaternion from arbitrary input.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))
        object.__setattr__(self, "w", float(self.w))

    @classmethod
    def from_axis_angle(cls, angle: float, axis: Union[Vector3, Tuple[float, float, float]]) -> "Quaternion":
        """
        Rotation of ``angle`` degrees about ``axis``.

        The axis is normalized first, so the result is a unit quaternion. A
        zero axis yields NaN components.
        """
        if not isinstance(axis, Vector3):
            axis = Vector3.from_iterable(axis)
        axis = vec.normalize(axis)
        half = math.radians(angle) * 0.5
        s = math.sin(half)
        return cls(axis.x * s, axis.y * s, axis.z * s, math.cos(half))

    @classmethod
    def from_euler(cls, pitch: float, yaw: float, roll: float) -> "Quaternion":
        return rotation(pitch, yaw, roll)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __mul__(self, other: "Quaternion") -> "Quaternion":
        return multiply(self, other)

    def __neg__(self) -> "Quaternion":
        return Quaternion(-self.x, -self.y, -self.z, -self.w)

    def length(self) -> float:
        return length(self)

    def length_squared(self) -> float:
        return length_squared(self)

    def normalize(self) -> "Quaternion":
        return normalize(self)

    def conjugate(self) -> "Quaternion":
        return conjugate(self)

    def axis_angles(self) -> Vector3:
        return get_axis_angles(self)

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.w)

    def isclose(self, other: "Quaternion", tol: Optional[float] = None) -> bool:
        if tol is None:
            tol = config["tolerance"]
        return all(math.isclose(a, b, abs_tol=tol) for a, b in zip(self, other))


Quaternion.IDENTITY = Quaternion(0.0, 0.0, 0.0, 1.0)


def length_squared(a: Quaternion) -> float:
    return a.x * a.x + a.y * a.y + a.z * a.z + a.w * a.w


def length(a: Quaternion) -> float:
    return math.sqrt(length_squared(a))


def normalize(a: Quaternion) -> Quaternion:
    """Divide every component by the length. A zero quaternion gives NaN components."""
    n = length(a)
    return Quaternion(ieee_divide(a.x, n), ieee_divide(a.y, n), ieee_divide(a.z, n), ieee_divide(a.w, n))


def conjugate(a: Quaternion) -> Quaternion:
    return Quaternion(-a.x, -a.y, -a.z, a.w)


def multiply(a: Quaternion, b: Quaternion) -> Quaternion:
    """Hamilton product ``a * b``; applying the result rotates by ``b`` first, then ``a``."""
    x = a.w * b.x + a.x * b.w + a.y * b.z - a.z * b.y
    y = a.w * b.y + a.y * b.w + a.z * b.x - a.x * b.z
    z = a.w * b.z + a.z * b.w + a.x * b.y - a.y * b.x
    w = a.w * b.w - a.x * b.x - a.y * b.y - a.z * b.z
    return Quaternion(x, y, z, w)


def rotation(pitch: float, yaw: float, roll: float) -> Quaternion:
    """Orientation from Euler angles in degrees, composed as ``yaw * pitch * roll``."""
    qpitch = Quaternion.from_axis_angle(pitch, Vector3.RIGHT)
    qyaw = Quaternion.from_axis_angle(yaw, Vector3.UP)
    qroll = Quaternion.from_axis_angle(roll, Vector3.FORWARD)
    return multiply(multiply(qyaw, qpitch), qroll)


def rotate(a: Quaternion, angle: float, axis: Union[Vector3, Tuple[float, float, float]]) -> Quaternion:
    """``a`` rotated by ``angle`` degrees about ``axis``; the new rotation is the left operand."""
    return multiply(Quaternion.from_axis_angle(angle, axis), a)


def rotation_to(a: Vector3, b: Vector3) -> Quaternion:
    """
    The rotation that turns direction ``a`` onto direction ``b``.

    Equal inputs return ``Quaternion.IDENTITY`` without any math (acos of a
    dot product that rounds above 1 would otherwise be NaN). Opposite inputs
    have no unique axis, and parallel inputs of different length can round
    past 1; both give NaN components rather than raising.
    """
    if a is b or a == b:
        return Quaternion.IDENTITY
    a = vec.normalize(a)
    b = vec.normalize(b)
    # a dot product that rounds past +/-1 gives a NaN angle instead of raising
    with np.errstate(invalid="ignore"):
        angle = float(np.degrees(np.arccos(vec.dot(a, b))))
    return Quaternion.from_axis_angle(angle, vec.cross(a, b))


@njit(cache=True)
def _axis_angles(x: float, y: float, z: float, w: float) -> Tuple[float, float, float]:
    # roll about z, pitch about x, yaw about y
    q0 = w
    q1 = z
    q2 = x
    q3 = y

    test = q0 * q2 - q3 * q1
    if abs(test) < GIMBAL_LOCK_THRESHOLD:
        r1 = math.atan2(2.0 * (q0 * q1 + q2 * q3), 1.0 - 2.0 * (q1 * q1 + q2 * q2))
        r2 = math.asin(2.0 * test)
        r3 = math.atan2(2.0 * (q0 * q3 + q1 * q2), 1.0 - 2.0 * (q2 * q2 + q3 * q3))
    else:
        # pitch at the north or south pole, roll folds into yaw
        sign = -1.0 if test < 0.0 else 1.0
        r1 = 0.0
        r2 = sign * math.pi / 2.0
        r3 = -sign * 2.0 * math.atan2(q1, q0)

    roll = math.degrees(r1)
    pitch = math.degrees(r2)
    yaw = math.degrees(r3)
    if yaw > 180.0:
        yaw -= 360.0
    elif yaw <= -180.0:
        yaw += 360.0
    return pitch, yaw, roll


def get_axis_angles(a: Quaternion) -> Vector3:
    """
    Euler angles of a unit quaternion in degrees, as ``Vector3(pitch, yaw, roll)``.

    The inverse of ``rotation`` away from the poles. When pitch reaches +/-90
    degrees, roll is reported as 0 and the whole twist is put into yaw.
    Yaw is returned in (-180, 180].
    """
    return Vector3(*_axis_angles(a.x, a.y, a.z, a.w))

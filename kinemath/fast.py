# fast.py
"""
Cheap, bounded-error replacements for transcendental functions.

Every function here is compiled with numba and works on a single float.
Nothing wraps its input: the documented error bounds hold only on the
documented domains, and callers that need periodic behaviour must wrap
angles first (see ``wrap_radian``).
"""
import math
import numpy as np
from numba import njit

from numba.core.errors import NumbaPerformanceWarning
import warnings
warnings.filterwarnings("ignore", category=NumbaPerformanceWarning)

from kinemath.constants import PI, SQUARED_PI, HALF_PI, TWO_PI, THREE_PI_HALVES

# parabola fit of sin on [-PI, PI] plus a 9/40 precision correction
_SIN_A = -4.0 / SQUARED_PI
_SIN_B = 4.0 / PI
_SIN_P = 9.0 / 40.0

_ASIN_A = -0.0481295276831013447
_ASIN_B = -0.343835993947915197
_ASIN_C = 0.962761848425913169
_ASIN_D = 1.00138940860107040

_ATAN_A = 0.280872

INVERSE_SQRT_MAGIC = 0x5FE6EB50C7B537AA


@njit(cache=True)
def _signum(x: float) -> float:
    if x > 0.0:
        return 1.0
    if x < 0.0:
        return -1.0
    return 0.0


@njit(cache=True)
def inverse_sqrt(x: float) -> float:
    """
    Approximate 1/sqrt(x) with the bit-level seed and one Newton-Raphson step.

    The float64 bit pattern of ``x`` is read as an int64, ``magic - (bits >> 1)``
    is read back as a float64 and refined once. Relative error is below 0.2%
    for ``x > 0``. The result for ``x <= 0`` (or NaN/inf) is undefined: no
    check is made and whatever the bit trick yields is returned.
    """
    xhalves = 0.5 * x
    bits = np.float64(x).view(np.int64)
    y = np.int64(INVERSE_SQRT_MAGIC - (bits >> 1)).view(np.float64)
    return y * (1.5 - xhalves * y * y)


@njit(cache=True)
def sqrt(x: float) -> float:
    """Approximate square root, ``x * inverse_sqrt(x)``. Same domain as ``inverse_sqrt``."""
    return x * inverse_sqrt(x)


@njit(cache=True)
def sin(x: float) -> float:
    """Approximate sin(x). Max absolute error 0.0015 when -PI <= x <= PI."""
    y = _SIN_A * x * abs(x) + _SIN_B * x
    return _SIN_P * (y * abs(y) - y) + y


@njit(cache=True)
def cos(x: float) -> float:
    """Approximate cos(x) by a quarter-period shift of ``sin``. Max error 0.0015 on [-PI, PI]."""
    if x > HALF_PI:
        return sin(x - THREE_PI_HALVES)
    return sin(x + HALF_PI)


@njit(cache=True, error_model="numpy")
def tan(x: float) -> float:
    # undefined (inf/nan) where the approximated cos is zero
    return sin(x) / cos(x)


@njit(cache=True)
def asin(x: float) -> float:
    """Approximate asin(x) for -1 <= x <= 1. Outside the domain the result is NaN."""
    ax = abs(x)
    return x * (ax * (ax * _ASIN_A + _ASIN_B) + _ASIN_C) + _signum(x) * (_ASIN_D - np.sqrt(1.0 - x * x))


@njit(cache=True)
def acos(x: float) -> float:
    return HALF_PI - asin(x)


@njit(cache=True)
def atan(x: float) -> float:
    """Approximate atan(x); the |x| >= 1 branch uses atan(x) = sign(x)*PI/2 - atan(1/x)."""
    if abs(x) < 1.0:
        return x / (1.0 + _ATAN_A * x * x)
    return _signum(x) * HALF_PI - x / (x * x + _ATAN_A)


@njit(cache=True)
def wrap_angle(angle: float) -> float:
    """Wrap an angle in degrees into (-180, 180]."""
    a = math.fmod(angle, 360.0)
    if a <= -180.0:
        return a + 360.0
    elif a > 180.0:
        return a - 360.0
    return a


@njit(cache=True)
def wrap_angle_pitch(angle: float) -> float:
    """Wrap a pitch angle in degrees, then clamp it to [-90, 90] so it cannot flip over."""
    a = wrap_angle(angle)
    if a < -90.0:
        return -90.0
    if a > 90.0:
        return 90.0
    return a


@njit(cache=True)
def wrap_radian(radian: float) -> float:
    """Wrap an angle in radians into (-PI, PI]."""
    r = math.fmod(radian, TWO_PI)
    if r <= -PI:
        return r + TWO_PI
    elif r > PI:
        return r - TWO_PI
    return r


@njit(cache=True)
def angle_difference(angle1: float, angle2: float) -> float:
    """Unsigned difference of two angles in degrees, in [0, 180]."""
    return abs(wrap_angle(angle1 - angle2))


@njit(cache=True)
def radian_difference(radian1: float, radian2: float) -> float:
    """Unsigned difference of two angles in radians, in [0, PI]."""
    return abs(wrap_radian(radian1 - radian2))

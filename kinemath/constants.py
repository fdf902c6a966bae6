# constants.py
import math
import numpy as np


def double_to_bits(value: float) -> int:
    """Raw IEEE-754 bit pattern of a float64, as an unsigned 64-bit int."""
    return int(np.array([value], dtype=np.float64).view(np.uint64)[0])


def bits_to_double(bits: int) -> float:
    """Reinterpret a 64-bit pattern as a float64."""
    return float(np.array([bits], dtype=np.uint64).view(np.float64)[0])


def float_to_bits(value: float) -> int:
    """Raw IEEE-754 bit pattern of a float32, as an unsigned 32-bit int."""
    return int(np.array([value], dtype=np.float32).view(np.uint32)[0])


def bits_to_float(bits: int) -> float:
    """Reinterpret a 32-bit pattern as a float32 (returned as a Python float)."""
    return float(np.array([bits], dtype=np.uint32).view(np.float32)[0])


# "close to zero" epsilons, 2**-52 and 2**-23
DBL_EPSILON = bits_to_double(0x3cb0000000000000)
FLT_EPSILON = bits_to_float(0x34000000)

PI = math.pi
SQUARED_PI = PI * PI
HALF_PI = 0.5 * PI
QUARTER_PI = 0.5 * HALF_PI
TWO_PI = 2.0 * PI
THREE_PI_HALVES = TWO_PI - HALF_PI
DEGTORAD = PI / 180.0
RADTODEG = 180.0 / PI
SQRTOFTWO = math.sqrt(2.0)
HALF_SQRTOFTWO = 0.5 * SQRTOFTWO

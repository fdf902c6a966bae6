# utils.py

import math
from typing import Union
import numpy as np

from kinemath.errors import RangeExceededError

Number = Union[int, float]


def ieee_divide(a: float, b: float) -> float:
    """a / b with IEEE semantics: division by zero gives inf or nan instead of raising."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(a) / np.float64(b))


def length_squared(*values: float) -> float:
    total = 0.0
    for v in values:
        total += v * v
    return total


def length(*values: float) -> float:
    return math.sqrt(length_squared(*values))


def clamp(value: Number, low: Number, high: Number) -> Number:
    if value < low:
        return low
    if value > high:
        return high
    return value


def round_half_up(value: float) -> float:
    """Round to the nearest integer with ties going towards +inf (2.5 -> 3, -2.5 -> -2)."""
    return float(math.floor(value + 0.5))


def round_to(value: float, decimals: int) -> float:
    p = 10.0 ** decimals
    return round_half_up(value * p) / p


def floor(x: float) -> int:
    return math.floor(x)


def mean(*values: Number) -> Number:
    """Arithmetic mean. Integer inputs give a truncated integer mean."""
    if not values:
        raise ValueError("mean() requires at least one value")
    total = sum(values)
    if all(isinstance(v, int) for v in values):
        q = abs(total) // len(values)
        return q if total >= 0 else -q
    return total / len(values)


def _truncated_remainder(x: Number, div: Number) -> Number:
    if isinstance(x, int) and isinstance(div, int):
        r = abs(x) % abs(div)
        return -r if x < 0 else r
    return math.fmod(x, div)


def mod(x: Number, div: Number) -> Number:
    """Remainder of x / div that is never negative for a positive divisor."""
    r = _truncated_remainder(x, div)
    if r < 0:
        return r + div
    return r


def wrap_byte(value: int) -> int:
    """Wrap an integer into the unsigned byte range [0, 256), so 200 stays 200 rather than becoming -56."""
    return value % 256


def round_up_pow2(x: int, bits: int = 32) -> int:
    """
    Smallest power of two greater than or equal to ``x``.

    Values <= 0 round up to 1. ``bits`` is the width of the signed integer
    range the result must fit in (32 or 64 in practice).

    Raises:
        RangeExceededError: if the result would be 2**(bits-1) or larger.
    """
    if x <= 0:
        return 1
    limit = 1 << (bits - 2)
    if x > limit:
        raise RangeExceededError(
            f"Rounding {x} to the next highest power of two would exceed the {bits}-bit range")
    return 1 << (x - 1).bit_length()


def dec_to_hex(value: int, min_digits: int = 0) -> str:
    """Lowercase hex string, zero padded; negative values print as 32-bit two's complement."""
    if value < 0:
        value &= 0xFFFFFFFF
    return format(value, "x").zfill(min_digits)

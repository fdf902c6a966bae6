# cast.py
"""
Lenient conversions from arbitrary values (config entries, parsed text) to
numbers. Each ``cast_*`` returns ``None`` rather than raising when the value
cannot be converted.
"""
import math
import numbers
from typing import Any, Optional
import numpy as np


def _is_number(o: Any) -> bool:
    # bools are ints in Python but are not treated as numbers here
    return isinstance(o, numbers.Real) and not isinstance(o, bool)


def _wrap(value: int, bits: int) -> int:
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _to_integral(o: Any, bits: int) -> int:
    """Truncate a real towards zero, saturating floats like a C cast, then narrow to ``bits``."""
    if isinstance(o, numbers.Integral):
        return _wrap(int(o), bits)
    f = float(o)
    if math.isnan(f):
        return 0
    width = 64 if bits > 32 else 32
    lo, hi = -(1 << (width - 1)), (1 << (width - 1)) - 1
    if f <= lo:
        return _wrap(lo, bits)
    if f >= hi:
        return _wrap(hi, bits)
    return _wrap(int(f), bits)


def _parse_integral(o: Any, bits: int) -> Optional[int]:
    try:
        value = int(str(o))
    except ValueError:
        return None
    if not -(1 << (bits - 1)) <= value < (1 << (bits - 1)):
        return None
    return value


def _cast_integral(o: Any, bits: int) -> Optional[int]:
    if o is None:
        return None
    if _is_number(o):
        return _to_integral(o, bits)
    return _parse_integral(o, bits)


def cast_double(o: Any) -> Optional[float]:
    if o is None:
        return None
    if _is_number(o):
        return float(o)
    try:
        return float(str(o))
    except ValueError:
        return None


def cast_float(o: Any) -> Optional[float]:
    """Like ``cast_double`` but rounded to single precision."""
    value = cast_double(o)
    if value is None:
        return None
    with np.errstate(over="ignore"):
        return float(np.float32(value))


def cast_byte(o: Any) -> Optional[int]:
    return _cast_integral(o, 8)


def cast_short(o: Any) -> Optional[int]:
    return _cast_integral(o, 16)


def cast_int(o: Any) -> Optional[int]:
    return _cast_integral(o, 32)


def cast_long(o: Any) -> Optional[int]:
    return _cast_integral(o, 64)


def cast_boolean(o: Any) -> Optional[bool]:
    """Bools pass through, strings are True only for "true" (any case); anything else is None."""
    if isinstance(o, bool):
        return o
    if isinstance(o, str):
        return o.lower() == "true"
    return None

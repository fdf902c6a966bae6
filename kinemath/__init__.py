"""
kinemath: fast approximate trigonometry and exact vector, quaternion and matrix algebra for real-time 3D code.

The hot scalar and matrix kernels are compiled with numba; the value types are small immutable dataclasses.
"""

__version__ = version = "0.1.0"

# exposing the public API of the package
from kinemath.constants import (
    PI,
    HALF_PI,
    QUARTER_PI,
    TWO_PI,
    THREE_PI_HALVES,
    DEGTORAD,
    RADTODEG,
    SQRTOFTWO,
    HALF_SQRTOFTWO,
    DBL_EPSILON,
    FLT_EPSILON,
)
from kinemath.errors import KinemathError, DimensionMismatchError, RangeExceededError
from kinemath.config import Config, config
from kinemath.log import init_logger
from kinemath.rng import RandomContext, get_random
from kinemath.vector import Vector2, Vector3
from kinemath.quaternion import Quaternion
from kinemath.matrix import Matrix
from kinemath.direction import Direction
from kinemath.color import Color
from kinemath import fast, vector, quaternion, matrix, interpolation, utils, cast

__all__ = [
    "PI",
    "HALF_PI",
    "QUARTER_PI",
    "TWO_PI",
    "THREE_PI_HALVES",
    "DEGTORAD",
    "RADTODEG",
    "SQRTOFTWO",
    "HALF_SQRTOFTWO",
    "DBL_EPSILON",
    "FLT_EPSILON",
    "KinemathError",
    "DimensionMismatchError",
    "RangeExceededError",
    "Config",
    "config",
    "init_logger",
    "RandomContext",
    "get_random",
    "Vector2",
    "Vector3",
    "Quaternion",
    "Matrix",
    "Direction",
    "Color",
    "fast",
    "vector",
    "quaternion",
    "matrix",
    "interpolation",
    "utils",
    "cast",
]

# vector.py

from dataclasses import dataclass
import math
from typing import Iterator, Optional, Tuple, Union

from kinemath import fast
from kinemath.config import config
from kinemath.rng import RandomContext, get_random
from kinemath.utils import ieee_divide, round_half_up


@dataclass(frozen=True, slots=True)
class Vector3:
    """
    Immutable 3-component vector. Every operation returns a new instance.

    Attributes:
        x (float): first component.
        y (float): second component.
        z (float): third component.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    @classmethod
    def from_iterable(cls, values) -> "Vector3":
        values = tuple(values)
        if len(values) != 3:
            raise ValueError(f"Vector3 needs 3 components, got {len(values)}")
        return cls(*values)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: "Vector3") -> "Vector3":
        return add(self, other)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return subtract(self, other)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, other: Union["Vector3", float]) -> "Vector3":
        if isinstance(other, Vector3):
            return multiply(self, other)
        return scale(self, other)

    def __rmul__(self, other: float) -> "Vector3":
        return scale(self, other)

    def __truediv__(self, other: Union["Vector3", float]) -> "Vector3":
        if isinstance(other, Vector3):
            return divide(self, other)
        return Vector3(ieee_divide(self.x, other), ieee_divide(self.y, other), ieee_divide(self.z, other))

    def dot(self, other: "Vector3") -> float:
        return dot(self, other)

    def cross(self, other: "Vector3") -> "Vector3":
        return cross(self, other)

    def length(self) -> float:
        return length(self)

    def length_squared(self) -> float:
        return length_squared(self)

    def fast_length(self) -> float:
        return fast_length(self)

    def normalize(self) -> "Vector3":
        return normalize(self)

    def distance(self, other: "Vector3") -> float:
        return distance(self, other)

    def to_vector2(self) -> "Vector2":
        return to_vector2(self)

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def isclose(self, other: "Vector3", tol: Optional[float] = None) -> bool:
        """Component-wise comparison with an absolute tolerance (``config["tolerance"]`` by default)."""
        if tol is None:
            tol = config["tolerance"]
        return (math.isclose(self.x, other.x, abs_tol=tol)
                and math.isclose(self.y, other.y, abs_tol=tol)
                and math.isclose(self.z, other.z, abs_tol=tol))

    @staticmethod
    def rand(rng: Optional[RandomContext] = None) -> "Vector3":
        return rand(rng)


@dataclass(frozen=True, slots=True)
class Vector2:
    """Immutable 2-component vector."""

    x: float = 0.0
    y: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __mul__(self, other: Union["Vector2", float]) -> "Vector2":
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        return Vector2(self.x * other, self.y * other)

    __rmul__ = __mul__

    def dot(self, other: "Vector2") -> float:
        return self.x * other.x + self.y * other.y

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalize(self) -> "Vector2":
        # zero vector -> NaN components
        return self * ieee_divide(1.0, self.length())

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


Vector3.ZERO = Vector3(0, 0, 0)
Vector3.ONE = Vector3(1, 1, 1)
Vector3.UNIT_X = Vector3(1, 0, 0)
Vector3.UNIT_Y = Vector3(0, 1, 0)
Vector3.UNIT_Z = Vector3(0, 0, 1)
Vector3.RIGHT = Vector3.UNIT_X
Vector3.LEFT = Vector3(-1, 0, 0)
Vector3.UP = Vector3.UNIT_Y
Vector3.DOWN = Vector3(0, -1, 0)
Vector3.FORWARD = Vector3.UNIT_Z
Vector3.BACKWARD = Vector3(0, 0, -1)

Vector2.ZERO = Vector2(0, 0)
Vector2.ONE = Vector2(1, 1)
Vector2.UNIT_X = Vector2(1, 0)
Vector2.UNIT_Y = Vector2(0, 1)


def add(a: Vector3, b: Vector3) -> Vector3:
    return Vector3(a.x + b.x, a.y + b.y, a.z + b.z)


def subtract(a: Vector3, b: Vector3) -> Vector3:
    return Vector3(a.x - b.x, a.y - b.y, a.z - b.z)


def multiply(a: Vector3, b: Vector3) -> Vector3:
    """Component-wise product."""
    return Vector3(a.x * b.x, a.y * b.y, a.z * b.z)


def scale(a: Vector3, s: float) -> Vector3:
    return Vector3(a.x * s, a.y * s, a.z * s)


def divide(a: Vector3, b: Vector3) -> Vector3:
    """Component-wise quotient. Zero components of ``b`` give inf/nan, they do not raise."""
    return Vector3(ieee_divide(a.x, b.x), ieee_divide(a.y, b.y), ieee_divide(a.z, b.z))


def dot(a: Vector3, b: Vector3) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a: Vector3, b: Vector3) -> Vector3:
    """Right-handed cross product, orthogonal to both ``a`` and ``b``."""
    return Vector3(a.y * b.z - a.z * b.y, a.z * b.x - a.x * b.z, a.x * b.y - a.y * b.x)


def length_squared(a: Vector3) -> float:
    return dot(a, a)


def length(a: Vector3) -> float:
    return math.sqrt(length_squared(a))


def fast_length(a: Vector3) -> float:
    """Approximate length using ``fast.sqrt``; roughly 0.2% relative error."""
    return fast.sqrt(length_squared(a))


def normalize(a: Vector3) -> Vector3:
    """
    ``a`` scaled to unit length.

    A zero-length vector is not guarded against: the result has NaN components,
    which callers can use to detect degenerate geometry.
    """
    return scale(a, ieee_divide(1.0, length(a)))


def minimum(a: Vector3, b: Vector3) -> Vector3:
    return Vector3(min(a.x, b.x), min(a.y, b.y), min(a.z, b.z))


def maximum(a: Vector3, b: Vector3) -> Vector3:
    return Vector3(max(a.x, b.x), max(a.y, b.y), max(a.z, b.z))


def absolute(a: Vector3) -> Vector3:
    return Vector3(abs(a.x), abs(a.y), abs(a.z))


def ceil(a: Vector3) -> Vector3:
    return Vector3(math.ceil(a.x), math.ceil(a.y), math.ceil(a.z))


def floor(a: Vector3) -> Vector3:
    return Vector3(math.floor(a.x), math.floor(a.y), math.floor(a.z))


def round(a: Vector3) -> Vector3:
    """Round each component to the nearest integer, halves rounding up."""
    return Vector3(round_half_up(a.x), round_half_up(a.y), round_half_up(a.z))


def power(a: Vector3, exponent: float) -> Vector3:
    return Vector3(math.pow(a.x, exponent), math.pow(a.y, exponent), math.pow(a.z, exponent))


def distance_squared(a: Vector3, b: Vector3) -> float:
    return length_squared(subtract(a, b))


def distance(a: Vector3, b: Vector3) -> float:
    return length(subtract(a, b))


def rand(rng: Optional[RandomContext] = None) -> Vector3:
    """
    Vector with each component drawn uniformly from [-1, 1].

    The result is NOT normalized; it is a random point in the cube, not a
    random direction.
    """
    if rng is None:
        rng = get_random()
    return Vector3(rng.random() * 2 - 1, rng.random() * 2 - 1, rng.random() * 2 - 1)


def to_vector2(a: Vector3) -> Vector2:
    """Project onto the ground plane: (x, z)."""
    return Vector2(a.x, a.z)


def to_array(a: Vector3) -> list:
    return [a.x, a.y, a.z]


def compare(a: Vector3, b: Vector3) -> int:
    """Ordering by truncated squared length; negative, zero or positive."""
    return int(length_squared(a)) - int(length_squared(b))

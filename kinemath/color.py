# color.py

from dataclasses import dataclass
from typing import Optional

from kinemath.interpolation import lerp_int
from kinemath.rng import RandomContext, get_random


@dataclass(frozen=True, slots=True)
class Color:
    """8-bit RGBA color."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self):
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"Color {name} out of range [0, 255]: {value}")


def lerp_color(a: Color, b: Color, percent: float) -> Color:
    return Color(lerp_int(a.red, b.red, percent),
                 lerp_int(a.green, b.green, percent),
                 lerp_int(a.blue, b.blue, percent),
                 lerp_int(a.alpha, b.alpha, percent))


def blend(a: Color, b: Color) -> Color:
    """Mix ``a`` towards ``b`` by ``a``'s opacity."""
    return lerp_color(a, b, a.alpha / 255.0)


def random_color(rng: Optional[RandomContext] = None) -> Color:
    """Opaque color with each channel drawn from [0, 255)."""
    if rng is None:
        rng = get_random()
    return Color(rng.randint(0, 255), rng.randint(0, 255), rng.randint(0, 255))

from enum import Enum

from kinemath.vector import Vector3


class Direction(Enum):
    FORWARD = 0
    BACKWARD = 1
    LEFT = 2
    RIGHT = 3
    UP = 4
    DOWN = 5

    @property
    def vector(self) -> Vector3:
        return _DIR_TO_VEC[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITE[self]


# map each Direction to its unit vector: x right, y up, z forward
_DIR_TO_VEC = {
    Direction.FORWARD:  Vector3.FORWARD,
    Direction.BACKWARD: Vector3.BACKWARD,
    Direction.LEFT:     Vector3.LEFT,
    Direction.RIGHT:    Vector3.RIGHT,
    Direction.UP:       Vector3.UP,
    Direction.DOWN:     Vector3.DOWN,
}

_OPPOSITE = {
    Direction.FORWARD:  Direction.BACKWARD,
    Direction.BACKWARD: Direction.FORWARD,
    Direction.LEFT:     Direction.RIGHT,
    Direction.RIGHT:    Direction.LEFT,
    Direction.UP:       Direction.DOWN,
    Direction.DOWN:     Direction.UP,
}

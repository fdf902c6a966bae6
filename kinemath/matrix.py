# matrix.py
"""
Square matrices stored as one flat float64 buffer.

Entry ``(x, y)`` lives at ``x * dimension + y``. Builders (``translate``,
``rotate_x`` ...) start from a fresh identity and only ever mutate that
local instance before returning it.

Layout conventions, kept for compatibility with existing callers:

* ``rotate_x/y/z``, ``rotate`` and ``transform`` follow the column-vector
  convention: ``transform`` computes ``res[i] = sum_k m(i, k) * v[k]``.
* ``translate``, ``create_look_at`` and the projection builders store their
  translation and perspective terms in row 3 / column 3 the way a row-vector
  (OpenGL upload order) matrix does. Apply them to a point with
  ``transform(v, transpose(m))``.
"""
import math
from typing import Optional, Sequence, Union

import numpy as np
from numpy import float64 as np_float64
from numba import njit

from numba.core.errors import NumbaPerformanceWarning
import warnings
warnings.filterwarnings("ignore", category=NumbaPerformanceWarning)

from kinemath.config import config
from kinemath.errors import DimensionMismatchError
from kinemath.log import get_logger
from kinemath.quaternion import Quaternion
from kinemath import quaternion as quat
from kinemath.utils import round_half_up
from kinemath.vector import Vector3
from kinemath import vector as vec

logger = get_logger("matrix")


def index(x: int, y: int, dimension: int) -> int:
    return x * dimension + y


@njit(cache=True)
def _identity(dimension: int) -> np.ndarray:
    out = np.zeros(dimension * dimension, dtype=np_float64)
    for i in range(dimension):
        out[i * dimension + i] = 1.0
    return out


@njit(cache=True)
def _multiply(a: np.ndarray, b: np.ndarray, dimension: int) -> np.ndarray:
    out = np.empty(dimension * dimension, dtype=np_float64)
    for i in range(dimension):
        for j in range(dimension):
            acc = 0.0
            for k in range(dimension):
                acc += a[i * dimension + k] * b[k * dimension + j]
            out[i * dimension + j] = acc
    return out


@njit(cache=True)
def _transpose(a: np.ndarray, dimension: int) -> np.ndarray:
    out = np.empty(dimension * dimension, dtype=np_float64)
    for i in range(dimension):
        for j in range(dimension):
            out[j * dimension + i] = a[i * dimension + j]
    return out


@njit(cache=True)
def _transform(m: np.ndarray, dimension: int, x: float, y: float, z: float) -> np.ndarray:
    # homogeneous (x, y, z, 1), zero padded past the fourth component
    v = np.zeros(dimension, dtype=np_float64)
    v[0] = x
    v[1] = y
    v[2] = z
    if dimension > 3:
        v[3] = 1.0
    out = np.zeros(3, dtype=np_float64)
    for i in range(3):
        acc = 0.0
        for k in range(dimension):
            acc += m[i * dimension + k] * v[k]
        out[i] = acc
    return out


@njit(cache=True)
def _quaternion_block(out: np.ndarray, dimension: int, x: float, y: float, z: float, w: float) -> None:
    """Write the rotation of a unit quaternion into the upper-left 3x3 block of ``out``."""
    xx = x*x
    yy = y*y
    zz = z*z
    xy = x*y
    xz = x*z
    yz = y*z
    wx = w*x
    wy = w*y
    wz = w*z

    out[0] = 1 - 2*(yy + zz)
    out[1] = 2*(xy - wz)
    out[2] = 2*(xz + wy)

    out[dimension] = 2*(xy + wz)
    out[dimension + 1] = 1 - 2*(xx + zz)
    out[dimension + 2] = 2*(yz - wx)

    out[2*dimension] = 2*(xz - wy)
    out[2*dimension + 1] = 2*(yz + wx)
    out[2*dimension + 2] = 1 - 2*(xx + yy)


class Matrix:
    """
    Square ``dimension x dimension`` matrix, identity-filled by default.

    Attributes:
        data (np.ndarray): flat float64 buffer of length ``dimension**2``.
    """

    __slots__ = ("_dimension", "data")

    def __init__(self, dimension: Optional[int] = None, data: Optional[Union[np.ndarray, Sequence[float]]] = None):
        if dimension is None:
            if data is None:
                dimension = config["matrix_dimension"]
            else:
                dimension = math.isqrt(np.asarray(data).size)
        dimension = int(dimension)
        if dimension < 1:
            raise ValueError(f"Matrix dimension must be positive, got {dimension}")
        self._dimension = dimension
        if data is None:
            self.data = _identity(dimension)
        else:
            buf = np.array(data, dtype=np_float64).reshape(-1)
            if buf.size != dimension * dimension:
                raise DimensionMismatchError(dimension * dimension, buf.size, "buffer")
            self.data = buf

    @property
    def dimension(self) -> int:
        return self._dimension

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix":
        arr = np.asarray(rows, dtype=np_float64)
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
            raise ValueError(f"Matrix rows must form a square, got shape {arr.shape}")
        return cls(arr.shape[0], arr)

    def get(self, x: int, y: int) -> float:
        return float(self.data[x * self._dimension + y])

    def set(self, x: int, y: int, value: float) -> None:
        self.data[x * self._dimension + y] = value

    def __getitem__(self, key) -> float:
        x, y = key
        return self.get(x, y)

    def __setitem__(self, key, value: float) -> None:
        x, y = key
        self.set(x, y, value)

    def copy(self) -> "Matrix":
        return Matrix(self._dimension, self.data.copy())

    def to_array(self) -> np.ndarray:
        """Flat copy of the buffer."""
        return self.data.copy()

    def as_numpy(self) -> np.ndarray:
        """2-D copy, indexed ``[x, y]`` like ``get``."""
        return self.data.reshape(self._dimension, self._dimension).copy()

    def __add__(self, other: "Matrix") -> "Matrix":
        return add(self, other)

    def __matmul__(self, other: "Matrix") -> "Matrix":
        return multiply(self, other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._dimension == other._dimension and np.array_equal(self.data, other.data)

    __hash__ = None

    def isclose(self, other: "Matrix", tol: Optional[float] = None) -> bool:
        if tol is None:
            tol = config["tolerance"]
        return self._dimension == other._dimension and np.allclose(self.data, other.data, rtol=0.0, atol=tol)

    def __repr__(self) -> str:
        return f"Matrix(dimension={self._dimension}, data={np.array2string(self.as_numpy(), precision=4)})"

    def __str__(self) -> str:
        return self.__repr__()


def _check_dimensions(a: Matrix, b: Matrix, operation: str) -> None:
    if a.dimension != b.dimension:
        logger.debug("Refusing to %s matrices of dimension %d and %d", operation, a.dimension, b.dimension)
        raise DimensionMismatchError(a.dimension, b.dimension, operation)


def add(a: Matrix, b: Matrix) -> Matrix:
    """
    Entry-wise sum.

    Raises:
        DimensionMismatchError: if the dimensions differ.
    """
    _check_dimensions(a, b, "add")
    return Matrix(a.dimension, a.data + b.data)


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """
    Matrix product ``a @ b``.

    Raises:
        DimensionMismatchError: if the dimensions differ.
    """
    _check_dimensions(a, b, "multiply")
    return Matrix(a.dimension, _multiply(a.data, b.data, a.dimension))


def transpose(m: Matrix) -> Matrix:
    return Matrix(m.dimension, _transpose(m.data, m.dimension))


def round(m: Matrix) -> Matrix:
    """Every entry rounded to the nearest integer, halves rounding up."""
    return Matrix(m.dimension, [round_half_up(v) for v in m.data])


def create_identity() -> Matrix:
    """4x4 identity."""
    return Matrix(4)


def translate(vector: Vector3) -> Matrix:
    """4x4 translation with the offset in row 3."""
    res = create_identity()
    res.set(3, 0, vector.x)
    res.set(3, 1, vector.y)
    res.set(3, 2, vector.z)
    return res


def scale(amount: Union[float, Vector3]) -> Matrix:
    """4x4 scale, uniform for a float or per axis for a Vector3."""
    if isinstance(amount, Vector3):
        sx, sy, sz = amount.x, amount.y, amount.z
    else:
        sx = sy = sz = amount
    res = create_identity()
    res.set(0, 0, sx)
    res.set(1, 1, sy)
    res.set(2, 2, sz)
    return res


def rotate_x(angle: float) -> Matrix:
    """Rotation of ``angle`` degrees about the x axis."""
    a = math.radians(angle)
    c, s = math.cos(a), math.sin(a)
    res = create_identity()
    res.set(1, 1, c)
    res.set(1, 2, -s)
    res.set(2, 1, s)
    res.set(2, 2, c)
    return res


def rotate_y(angle: float) -> Matrix:
    """Rotation of ``angle`` degrees about the y axis."""
    a = math.radians(angle)
    c, s = math.cos(a), math.sin(a)
    res = create_identity()
    res.set(0, 0, c)
    res.set(0, 2, s)
    res.set(2, 0, -s)
    res.set(2, 2, c)
    return res


def rotate_z(angle: float) -> Matrix:
    """Rotation of ``angle`` degrees about the z axis."""
    a = math.radians(angle)
    c, s = math.cos(a), math.sin(a)
    res = create_identity()
    res.set(0, 0, c)
    res.set(0, 1, -s)
    res.set(1, 0, s)
    res.set(1, 1, c)
    return res


def rotate(rot: Quaternion) -> Matrix:
    """4x4 rotation matrix of ``rot``; the quaternion is normalized first. Row and column 3 stay identity."""
    r = quat.normalize(rot)
    res = create_identity()
    _quaternion_block(res.data, res.dimension, r.x, r.y, r.z, r.w)
    return res


def transform(vector: Vector3, m: Matrix) -> Vector3:
    """
    Apply ``m`` to the homogeneous point ``(x, y, z, 1)`` and drop the fourth component.

    Raises:
        DimensionMismatchError: if ``m`` is smaller than 3x3.
    """
    if m.dimension < 3:
        raise DimensionMismatchError(3, m.dimension, "transform")
    return Vector3(*_transform(m.data, m.dimension, vector.x, vector.y, vector.z))


def transform_by_quaternion(vector: Vector3, rot: Quaternion) -> Vector3:
    return transform(vector, rotate(rot))


def direction_vector(pitch: float, yaw: float) -> Vector3:
    """Unit x axis turned by ``yaw`` about y, then by ``pitch`` about z (degrees)."""
    rot = quat.multiply(Quaternion.from_axis_angle(pitch, Vector3.UNIT_Z),
                        Quaternion.from_axis_angle(yaw, Vector3.UNIT_Y))
    return transform(Vector3.UNIT_X, rotate(rot))


def direction_from_quaternion(rot: Quaternion) -> Vector3:
    """The ``FORWARD`` vector turned by ``rot``."""
    return transform(Vector3.FORWARD, rotate(rot))


def create_look_at(eye: Vector3, at: Vector3, up: Vector3) -> Matrix:
    """
    View matrix for a camera at ``eye`` looking towards ``at``.

    The camera basis (side, up, -forward) fills the columns of the upper 3x3
    block, and the result is ``translate(-eye)`` composed with that basis.
    """
    f = vec.normalize(vec.subtract(at, eye))
    up = vec.normalize(up)

    s = vec.normalize(vec.cross(f, up))
    u = vec.normalize(vec.cross(s, f))

    mat = Matrix(4)

    mat.set(0, 0, s.x)
    mat.set(1, 0, s.y)
    mat.set(2, 0, s.z)

    mat.set(0, 1, u.x)
    mat.set(1, 1, u.y)
    mat.set(2, 1, u.z)

    mat.set(0, 2, -f.x)
    mat.set(1, 2, -f.y)
    mat.set(2, 2, -f.z)

    return multiply(translate(-eye), mat)


def create_perspective(fov: float, aspect: float, znear: float, zfar: float) -> Matrix:
    """
    Perspective projection from a field of view in degrees.

    Args:
        fov: field of view, degrees.
        aspect: width / height.
        znear: near plane distance, non-zero.
        zfar: far plane distance, different from ``znear``.
    """
    ymax = znear * math.tan(fov * math.pi / 360.0)
    xmax = ymax * aspect
    return create_orthographic(xmax, -xmax, ymax, -ymax, znear, zfar)


def create_orthographic(right: float, left: float, top: float, bottom: float, near: float, far: float) -> Matrix:
    """Viewing frustum from its six planes, with the perspective divide term at (2, 3)."""
    ortho = Matrix(4)
    # degenerate planes give inf/nan entries rather than raising
    temp = np_float64(2.0 * near)
    temp2 = np_float64(right - left)
    temp3 = np_float64(top - bottom)
    temp4 = np_float64(far - near)

    with np.errstate(divide="ignore", invalid="ignore"):
        ortho.set(0, 0, temp / temp2)
        ortho.set(1, 1, temp / temp3)

        ortho.set(0, 2, (right + left) / temp2)
        ortho.set(1, 2, (top + bottom) / temp3)
        ortho.set(2, 2, (-far - near) / temp4)
        ortho.set(2, 3, -1.0)

        ortho.set(3, 2, -temp * far / temp4)
        ortho.set(3, 3, 0.0)
    return ortho

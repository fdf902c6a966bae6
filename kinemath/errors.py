# errors.py


class KinemathError(Exception):
    """Base class for errors raised by kinemath."""


class DimensionMismatchError(KinemathError, ValueError):
    """Raised when two matrices (or a matrix and its buffer) disagree on dimension."""

    def __init__(self, expected: int, actual: int, operation: str = "operation"):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Matrix dimensions must be equal for {operation}: {expected} != {actual}")


class RangeExceededError(KinemathError, ValueError):
    """Raised when a result would not fit in the requested integer range."""

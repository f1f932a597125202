from .array import NDArray
from . import ops
from . import shape
from .matrix import Matrix, matmul
from .errors import (
    AxisError,
    DimensionMismatchError,
    EmptyArrayError,
    IndexOutOfBoundsError,
    LatticeError,
    ShapeError,
    ShapeMismatchError,
)

# package version
__version__ = "0.0.1"

__all__ = [
    "NDArray",
    "Matrix",
    "matmul",
    "LatticeError",
    "ShapeError",
    "ShapeMismatchError",
    "DimensionMismatchError",
    "IndexOutOfBoundsError",
    "AxisError",
    "EmptyArrayError",
]

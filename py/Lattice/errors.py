class LatticeError(Exception):
    """Base class for every error raised by Lattice."""


class ShapeError(LatticeError, ValueError):
    """Invalid shape at construction: non-positive extent or wrong rank."""


class ShapeMismatchError(ShapeError):
    """Two arrays combined elementwise do not share a shape."""


class DimensionMismatchError(ShapeMismatchError):
    """Inner dimensions of a matrix product do not agree."""


class IndexOutOfBoundsError(LatticeError, IndexError):
    pass


class AxisError(IndexOutOfBoundsError):
    pass


class EmptyArrayError(LatticeError, ValueError):
    """Operation needs storage but the array is empty (moved from or never sized)."""

import logging

import numpy as np

from .array import NDArray
from .errors import DimensionMismatchError

logger = logging.getLogger(__name__)


class Matrix(NDArray):
    """Rank-2 NDArray: Matrix(n) is n x n, Matrix((rows, cols)) otherwise."""

    ndim = 2

    @property
    def nrow(self) -> int:
        return 0 if self.empty else self._shape[0]

    @property
    def ncol(self) -> int:
        return 0 if self.empty else self._shape[1]

    def print(self, file=None):
        """Write the rows, tab separated, one line per row."""
        for i in range(self.nrow):
            print("".join(f"{self[i, j]}\t" for j in range(self.ncol)), file=file)

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return matmul(self, other)


def matmul(a: Matrix, b: Matrix) -> Matrix:
    """
    Naive triple-loop product a @ b.

    The result starts zero filled and has the promoted dtype of both
    operands. Raises DimensionMismatchError if a.ncol != b.nrow.
    """
    a._require_storage()
    b._require_storage()
    if a.ncol != b.nrow:
        logger.error("Matrix: dimension not match: %s @ %s", a.shape, b.shape)
        raise DimensionMismatchError(
            f"Matrix: dimension not match: {a.shape} @ {b.shape}"
        )
    c = Matrix((a.nrow, b.ncol), dtype=np.result_type(a.dtype, b.dtype))
    for i in range(c.nrow):
        for j in range(c.ncol):
            for k in range(a.ncol):
                c[i, j] += a[i, k] * b[k, j]
    return c

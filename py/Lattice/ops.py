import numpy as np

from .array import NDArray
from .errors import ShapeMismatchError
from .utils import _logical_offsets


def _accumulate(self, rhs: NDArray, coeff: int) -> NDArray:
    """self += coeff * rhs, element by element over matching coordinates"""
    if self.shape != rhs.shape:
        raise ShapeMismatchError(
            f"NDArray: array shapes do not match: {self.shape} vs {rhs.shape}"
        )
    if self.empty:
        return self
    dst = _logical_offsets(self.shape, self.strides).ravel()
    src = _logical_offsets(rhs.shape, rhs.strides).ravel()
    self._data[dst] = self._data[dst] + coeff * rhs._data[src]
    return self


def array_iadd(self, other):
    if not isinstance(other, NDArray):
        return NotImplemented
    return _accumulate(self, other, 1)


def array_isub(self, other):
    if not isinstance(other, NDArray):
        return NotImplemented
    return _accumulate(self, other, -1)


def array_add(self, other):
    if not isinstance(other, NDArray):
        return NotImplemented
    return _accumulate(self.copy(), other, 1)


def array_sub(self, other):
    if not isinstance(other, NDArray):
        return NotImplemented
    return _accumulate(self.copy(), other, -1)


def array_neg(self):
    out = self.copy()
    if not out.empty:
        np.negative(out._data, out=out._data)
    return out


NDArray.__iadd__ = array_iadd
NDArray.__isub__ = array_isub
NDArray.__add__ = array_add
NDArray.__sub__ = array_sub
NDArray.__neg__ = array_neg

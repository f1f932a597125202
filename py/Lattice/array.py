import logging
from numbers import Integral
from typing import Sequence

import numpy as np

from .errors import EmptyArrayError, IndexOutOfBoundsError, ShapeError, ShapeMismatchError
from .utils import (
    _check_shape,
    _default_strides,
    _infer_shape_and_flatten,
    _logical_offsets,
)

logger = logging.getLogger(__name__)

DEFAULT_DTYPE = np.float64


def _is_int(x):
    return isinstance(x, Integral) and not isinstance(x, bool)


class NDArray:
    """
    Dense array of fixed rank over one contiguous, exclusively owned buffer.

    Shape and strides are plain metadata next to the buffer, so transposing
    only swaps metadata. The stride list keeps one extra slot in front:
    `_stride[k + 1]` is the step of axis k and `_stride[0]` is the size.
    An array is either fully allocated or fully empty.
    """

    # rank fixed by the class; None lets each instance pick its own
    ndim = None

    def __init__(self, shape=None, dtype=None, ndim=None, fill=None):
        """
        Accepts:
         - nothing: an empty array
         - an int width: every axis gets that extent, rank from `ndim`
         - a sequence of extents (list, tuple, numpy int array)
         - another NDArray: converting copy that keeps its current strides
        """
        cls_ndim = type(self).ndim
        if ndim is None:
            ndim = cls_ndim
        elif cls_ndim is not None and ndim != cls_ndim:
            raise ShapeError(
                f"{type(self).__name__}: rank is fixed to {cls_ndim}, got {ndim}"
            )
        if ndim is not None and (not _is_int(ndim) or ndim < 1):
            raise ShapeError(f"NDArray: rank must be at least 1, got {ndim!r}")

        if isinstance(shape, NDArray):
            self._copy_from(shape, dtype, ndim)
            return

        self.ndim = ndim
        self.dtype = np.dtype(DEFAULT_DTYPE if dtype is None else dtype)

        if shape is None:
            self._set_empty()
            return

        if _is_int(shape):
            if ndim is None:
                raise ShapeError("NDArray: a uniform width needs a rank (ndim)")
            shape = (shape,) * ndim
        elif isinstance(shape, (Sequence, np.ndarray)):
            shape = list(shape)
        else:
            raise TypeError(f"NDArray: unsupported shape type: {type(shape)}")

        shape = _check_shape(shape, ndim)
        self.ndim = len(shape)
        self._allocate(shape, fill)

    def _allocate(self, shape, fill=None):
        self._shape = list(shape)
        self._stride = _default_strides(shape)
        self._data = np.zeros(self._stride[0], dtype=self.dtype)
        if fill is not None:
            self._data.fill(fill)
        logger.debug("NDArray: allocated shape=%s dtype=%s", shape, self.dtype)

    def _copy_from(self, src, dtype, ndim):
        if ndim is not None and src.ndim is not None and src.ndim != ndim:
            raise ShapeError(
                f"NDArray: cannot copy a rank {src.ndim} array into rank {ndim}"
            )
        self.ndim = src.ndim if ndim is None else ndim
        self.dtype = np.dtype(src.dtype if dtype is None else dtype)
        if src.empty:
            self._set_empty()
            return
        # current strides, so a transposed source keeps its layout
        self._shape = list(src.shape)
        self._stride = [src.size] + list(src.strides)
        self._data = src._data.astype(self.dtype, copy=True)

    def _set_empty(self):
        self._shape = None
        self._stride = None
        self._data = None

    @classmethod
    def from_list(cls, x, dtype=None):
        """Construct from nested lists/tuples, shape inferred"""
        shape, flat = _infer_shape_and_flatten(x)
        buf = np.array(flat, dtype=dtype)
        inst = cls(shape, dtype=buf.dtype)
        inst._data[:] = buf
        return inst

    @classmethod
    def from_buffer(cls, buf, shape: Sequence[int], dtype=None):
        """Construct from anything numpy can read as a flat buffer, with explicit shape"""
        flat = np.array(buf, dtype=dtype).ravel()
        inst = cls(list(shape), dtype=flat.dtype)
        if flat.size != inst.size:
            raise ShapeError(
                f"NDArray: buffer of size {flat.size} does not fit shape {inst.shape}"
            )
        inst._data[:] = flat
        return inst

    # --- accessors ---

    @property
    def empty(self) -> bool:
        return self._stride is None

    @property
    def size(self) -> int:
        return 0 if self.empty else self._stride[0]

    @property
    def shape(self):
        return () if self.empty else tuple(self._shape)

    @property
    def strides(self):
        """Per-axis strides as currently laid out (after any transposition)."""
        return () if self.empty else tuple(self._stride[1:])

    @property
    def nbytes(self) -> int:
        return 0 if self.empty else self._data.nbytes

    @property
    def data(self):
        """The flat buffer itself, None when empty. Raw offsets index into it."""
        return self._data

    def __len__(self):
        return self.size

    def __iter__(self):
        if self.empty:
            return iter(())
        return iter(self._data)

    # --- indexing ---

    def _require_storage(self):
        if self.empty:
            raise EmptyArrayError(f"{type(self).__name__}: array is empty")

    def _check_raw(self, rawind):
        self._require_storage()
        if not _is_int(rawind):
            raise TypeError("NDArray: raw index must be an int")
        if rawind < 0 or rawind >= self._stride[0]:
            raise IndexOutOfBoundsError(
                f"NDArray: raw index {rawind} out of range for size {self._stride[0]}"
            )
        return int(rawind)

    def offset(self, *idx) -> int:
        """
        Raw offset of the element at coordinates `idx`.

        Fewer indices than the rank are allowed: the trailing axes that are
        left out are taken at 0. Uses the current strides, so the result
        follows any transposition.
        """
        self._require_storage()
        if len(idx) > self.ndim:
            raise IndexOutOfBoundsError("NDArray: too many indices for array")
        offset = 0
        for axis, i in enumerate(idx):
            if not _is_int(i):
                raise TypeError("NDArray: indices must be ints")
            if i < 0 or i >= self._shape[axis]:
                raise IndexOutOfBoundsError(
                    f"NDArray: Index out of range: {i} on axis {axis} "
                    f"with extent {self._shape[axis]}"
                )
            offset += i * self._stride[axis + 1]
        return offset

    def coord_offset(self, coo) -> int:
        """Raw offset for a full coordinate array, one entry per axis."""
        self._require_storage()
        coo = tuple(coo)
        if len(coo) != self.ndim:
            raise IndexOutOfBoundsError(
                f"NDArray: expected {self.ndim} coordinates, got {len(coo)}"
            )
        return self.offset(*coo)

    def _key_offset(self, key):
        if isinstance(key, tuple):
            return self.offset(*key)
        return self._check_raw(key)

    def __getitem__(self, key):
        """
        a[k] reads raw offset k of the buffer.
        a[i, j, ...] reads by coordinates, missing trailing ones are 0.
        """
        return self._data[self._key_offset(key)]

    def __setitem__(self, key, value):
        self._data[self._key_offset(key)] = value

    def at(self, coo):
        return self._data[self.coord_offset(coo)]

    def set_at(self, coo, value):
        self._data[self.coord_offset(coo)] = value

    # --- lifecycle ---

    def copy(self):
        return type(self)(self)

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def move(self):
        """Hand the storage over to a new array and leave this one empty."""
        out = type(self).__new__(type(self))
        out.ndim = self.ndim
        out.dtype = self.dtype
        out._shape, out._stride, out._data = self._shape, self._stride, self._data
        self._set_empty()
        logger.debug("NDArray: moved storage of shape %s", out.shape)
        return out

    def _check_rank(self, other):
        if self.ndim is not None and other.ndim is not None and self.ndim != other.ndim:
            raise ShapeMismatchError(
                f"NDArray: rank {other.ndim} array cannot replace rank {self.ndim}"
            )

    def swap(self, other):
        """Exchange storage and metadata with another array of the same rank."""
        self._check_rank(other)
        for name in ("ndim", "dtype", "_shape", "_stride", "_data"):
            mine = getattr(self, name)
            setattr(self, name, getattr(other, name))
            setattr(other, name, mine)

    def assign(self, other, move=False):
        """
        Replace the contents of this array.

        A scalar fills every element. An array is copied (converted to this
        array's dtype) and swapped in, so a failed copy leaves this array
        untouched. With move=True the storage is taken over and `other` is
        left empty.
        """
        if not isinstance(other, NDArray):
            return self.fill(other)
        if other is self:
            return self
        self._check_rank(other)
        if move:
            self.ndim = other.ndim if self.ndim is None else self.ndim
            self.dtype = other.dtype
            self._shape, self._stride, self._data = other._shape, other._stride, other._data
            other._set_empty()
        else:
            tmp = type(self)(other, dtype=self.dtype, ndim=self.ndim)
            self.swap(tmp)
        return self

    def fill(self, value):
        if not self.empty:
            self._data.fill(value)
        return self

    # --- conversion ---

    def numpy(self):
        """Copy of the elements as a numpy array in logical (coordinate) order"""
        if self.empty:
            return np.empty(0, dtype=self.dtype)
        return self._data[_logical_offsets(self._shape, self._stride[1:])]

    def list(self):
        """Return back a nested list form"""
        if self.empty:
            return []
        return self.numpy().tolist()

    def __repr__(self):
        return (
            f"{type(self).__name__}(shape = {self.shape}, dtype={self.dtype})\n"
            + str(self.list())
        )

    def __str__(self):
        return self.__repr__()

import logging
from numbers import Integral

from .array import NDArray
from .errors import AxisError

logger = logging.getLogger(__name__)


def _normalize_axis(self, axis):
    if isinstance(axis, bool) or not isinstance(axis, Integral):
        raise TypeError("NDArray: axis must be an int")
    if axis < -self.ndim or axis >= self.ndim:
        raise AxisError(f"NDArray: axis {axis} out of range for rank {self.ndim}")
    return axis + self.ndim if axis < 0 else axis


def transpose(self, i: int = 1, j: int = 0):
    """
    Swap axes i and j in place. Only the shape and stride entries of the
    two axes are exchanged, the buffer is untouched.

    Negative axes count from the end. After swapping the last axis its
    stride is in general no longer 1.
    """
    self._require_storage()
    i = _normalize_axis(self, i)
    j = _normalize_axis(self, j)
    st = self._stride
    st[i + 1], st[j + 1] = st[j + 1], st[i + 1]
    self._shape[i], self._shape[j] = self._shape[j], self._shape[i]
    logger.debug(
        "NDArray: transposed axes (%d, %d) -> shape=%s strides=%s",
        i,
        j,
        self.shape,
        self.strides,
    )


@property
def T(self):
    out = self.copy()
    out.transpose()
    return out


def rollindex(self, rawind: int, axis: int, forward: bool = True) -> int:
    """
    Raw offset of the periodic neighbour of `rawind` one step along `axis`.

    Works on the offset directly: the position along `axis` is read from
    the offset and the step wraps around at either end, so the other
    coordinates never need decoding. `axis` must be in [0, ndim).
    """
    rawind = self._check_raw(rawind)
    if isinstance(axis, bool) or not isinstance(axis, Integral):
        raise TypeError("NDArray: axis must be an int")
    if axis < 0 or axis >= self.ndim:
        raise AxisError(f"NDArray: axis {axis} out of range for rank {self.ndim}")

    extent = self._shape[axis]
    step = self._stride[axis + 1]
    # span of one full period of this axis, valid under any axis order
    block = extent * step
    pos = (rawind % block) // step

    if forward:
        rawind += step
        if pos == extent - 1:
            rawind -= block
    else:
        rawind -= step
        if pos == 0:
            rawind += block
    return rawind


def rollind(self, rawind: int, ax: int) -> int:
    """
    Roll with a signed axis: ax >= 0 steps forward along axis ax,
    ax < 0 steps backward along axis ax + ndim (so -1 is the last axis).
    """
    if isinstance(ax, bool) or not isinstance(ax, Integral):
        raise TypeError("NDArray: axis must be an int")
    if ax < 0:
        self._require_storage()
        if ax < -self.ndim:
            raise AxisError(f"NDArray: axis {ax} out of range for rank {self.ndim}")
        return self.rollindex(rawind, ax + self.ndim, forward=False)
    return self.rollindex(rawind, ax, forward=True)


NDArray.transpose = transpose
NDArray.T = T
NDArray.rollindex = rollindex
NDArray.rollind = rollind

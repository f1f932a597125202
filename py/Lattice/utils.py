from numbers import Integral

import numpy as np

from .errors import ShapeError


def _default_strides(shape):
    """
    Row-major strides with one extra slot in front.

    strides[k + 1] is the step of axis k and strides[0] is the total size,
    so strides[k] == strides[k + 1] * shape[k] holds for every axis.
    """
    strides = [1] * (len(shape) + 1)
    for i in range(len(shape) - 1, -1, -1):
        strides[i] = strides[i + 1] * shape[i]
    return strides


def _check_shape(shape, ndim=None):
    shape = tuple(shape)
    if ndim is not None and len(shape) != ndim:
        raise ShapeError(
            f"NDArray: shape {shape} does not match rank {ndim}"
        )
    if len(shape) == 0:
        raise ShapeError("NDArray: rank must be at least 1")
    for s in shape:
        if isinstance(s, bool) or not isinstance(s, Integral):
            raise ShapeError(f"NDArray: shape entries must be integers, got {s!r}")
        if s <= 0:
            raise ShapeError(f"NDArray: positive shape needed, got {shape}")
    return tuple(int(s) for s in shape)


def _logical_offsets(shape, strides):
    """Raw offset of every coordinate, laid out as an array of `shape`."""
    offsets = np.zeros((), dtype=np.intp)
    for n, st in zip(shape, strides):
        offsets = np.add.outer(offsets, np.arange(n, dtype=np.intp) * st)
    return offsets


def _infer_shape_and_flatten(x):
    """
    Takes nested lists/tuples and returns (shape, flat_list).
    ShapeError if ragged or empty.
    """
    if isinstance(x, (list, tuple)):
        if len(x) == 0:
            raise ShapeError("NDArray: empty nested lists have no positive shape")
        shapes = []
        flat = []
        for el in x:
            s, f = _infer_shape_and_flatten(el)
            shapes.append(s)
            flat.extend(f)
        first = shapes[0]
        for s in shapes:
            if s != first:
                raise ShapeError("NDArray: ragged nested lists: differing inner shapes")
        return (len(x),) + first, flat
    return (), [x]

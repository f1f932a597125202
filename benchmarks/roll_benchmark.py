"""
Periodic neighbour benchmarks for Lattice.

This module tests:
1. Correctness - rollind neighbours match numpy.roll, also after a transpose
2. Performance - offset rolling vs decoding and re-encoding coordinates
"""

import time
from typing import Callable

import numpy as np
from Lattice import NDArray


def time_fn(fn: Callable, warmup: int = 1, iterations: int = 5) -> tuple[float, float]:
    """Time a function with warmup iterations.

    Returns:
        tuple of (mean_time, std_time) in milliseconds
    """
    for _ in range(warmup):
        fn()

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        fn()
        end = time.perf_counter()
        times.append((end - start) * 1000)

    return np.mean(times), np.std(times)


def print_header(title: str):
    print("\n" + "=" * 70)
    print(f" {title}")
    print("=" * 70)


def neighbours_by_roll(a: NDArray, ax: int):
    return [a.rollind(r, ax) for r in range(a.size)]


def neighbours_by_coordinates(a: NDArray, ax: int):
    out = []
    for r in range(a.size):
        coo = list(np.unravel_index(r, a.shape))
        coo[ax] = (coo[ax] + 1) % a.shape[ax]
        out.append(a.offset(*coo))
    return out


def check(a: NDArray) -> bool:
    view = a.numpy()
    for ax in range(a.ndim):
        expected = np.roll(view, -1, axis=ax)
        for coo in np.ndindex(*a.shape):
            if a.rollind(a.offset(*coo), ax) != expected[coo]:
                return False
    return True


def run_benchmarks():
    print_header("Correctness")
    for shape in [(8,), (4, 5), (3, 4, 5), (2, 3, 2, 3)]:
        a = NDArray.from_buffer(np.arange(int(np.prod(shape))), shape=shape)
        status = "PASS" if check(a) else "FAIL"
        print(f"  {str(shape):<20} | {status}")
        if a.ndim > 1:
            a.transpose(0, a.ndim - 1)
            status = "PASS" if check(a) else "FAIL"
            print(f"  {str(shape) + ' transposed':<20} | {status}")

    print_header("Performance")
    for shape in [(64, 64), (16, 16, 16)]:
        a = NDArray(shape)
        for ax in range(a.ndim):
            roll_t, _ = time_fn(lambda: neighbours_by_roll(a, ax))
            coo_t, _ = time_fn(lambda: neighbours_by_coordinates(a, ax))
            print(
                f"  {str(shape):<14} axis {ax} | rollind: {roll_t:8.3f}ms | "
                f"coordinates: {coo_t:8.3f}ms"
            )


if __name__ == "__main__":
    run_benchmarks()

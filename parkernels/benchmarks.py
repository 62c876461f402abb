"""Timing harness for the matrix-product and prefix-sum kernels."""

from __future__ import annotations

import random
import sys
import time
from typing import Any, TextIO

from parkernels.parallel import matmul_parallel, matmul_unrolled, prefix_sum_parallel
from parkernels.serial import matmul_serial, prefix_sum_serial
from parkernels.threaded import fill_random

_THREAD_COUNTS = range(4, 9)
_PREFIX_SEED = 42


class Stopwatch:
    """Context manager that measures wall-clock time of its block."""

    def __init__(self) -> None:
        self._start: float | None = None
        self._seconds: float | None = None

    def __enter__(self) -> Stopwatch:
        self._seconds = None
        self._start = time.perf_counter()
        return self

    def __exit__(self, *args: Any) -> None:
        if self._start is None:
            raise RuntimeError("stopwatch was never started")
        self._seconds = time.perf_counter() - self._start

    @property
    def seconds(self) -> float:
        """Elapsed time in seconds; available once the block has finished."""
        if self._seconds is None:
            raise RuntimeError("stopwatch has not finished timing")
        return self._seconds

    @property
    def milliseconds(self) -> int:
        """Elapsed time in whole milliseconds, truncated."""
        return int(self.seconds * 1000)


def random_matrix(count: int, rng: random.Random | None = None) -> list[float]:
    """Return ``count`` uniform values in [0, 1) for use as a flat matrix."""
    return fill_random(count, rng)


def _stream(out: TextIO | None) -> TextIO:
    return out if out is not None else sys.stdout


def benchmark_serial_matmul(m: int, k: int, n: int, out: TextIO | None = None) -> int:
    """Time one serial matrix product of random operands; return milliseconds."""
    stream = _stream(out)
    rng = random.Random()
    a = random_matrix(m * k, rng)
    b = random_matrix(k * n, rng)
    with Stopwatch() as watch:
        matmul_serial(a, b, m, k, n)
    print(f"matmul_serial: {watch.milliseconds} ms", file=stream)
    return watch.milliseconds


def benchmark_serial_prefix_sum(size: int, out: TextIO | None = None) -> int:
    """Time a serial prefix sum over seeded random input; return milliseconds."""
    stream = _stream(out)
    values = random_matrix(size, random.Random(_PREFIX_SEED))
    with Stopwatch() as watch:
        prefix_sum_serial(values)
    print(f"prefix_sum_serial ({size}): {watch.milliseconds} ms", file=stream)
    return watch.milliseconds


def benchmark_matmul(
    m: int, k: int, n: int, out: TextIO | None = None
) -> dict[int, dict[str, int]]:
    """Time both pooled matrix products for 4 to 8 threads.

    Returns milliseconds keyed by thread count, then by kernel name.
    """
    stream = _stream(out)
    rng = random.Random()
    a = random_matrix(m * k, rng)
    b = random_matrix(k * n, rng)
    results: dict[int, dict[str, int]] = {}
    for threads in _THREAD_COUNTS:
        print(f"\n--- Threads: {threads} ---", file=stream)
        timings: dict[str, int] = {}
        for kernel in (matmul_parallel, matmul_unrolled):
            with Stopwatch() as watch:
                kernel(a, b, m, k, n, threads)
            timings[kernel.__name__] = watch.milliseconds
            print(f"{kernel.__name__}: {watch.milliseconds} ms", file=stream)
        results[threads] = timings
    return results


def benchmark_prefix_sum(size: int, out: TextIO | None = None) -> dict[int, int]:
    """Time the pooled prefix sum for 4 to 8 threads; milliseconds by thread count."""
    stream = _stream(out)
    values = random_matrix(size, random.Random(_PREFIX_SEED))
    results: dict[int, int] = {}
    for threads in _THREAD_COUNTS:
        with Stopwatch() as watch:
            prefix_sum_parallel(values, threads)
        results[threads] = watch.milliseconds
        print(
            f"prefix_sum_parallel ({size}) with {threads} threads: "
            f"{watch.milliseconds} ms",
            file=stream,
        )
    return results
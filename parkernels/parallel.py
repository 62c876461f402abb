"""Thread-pool kernels: matrix product per cell and a two-pass prefix sum."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from itertools import accumulate, chain, product

from parkernels.serial import Matrix, _dot, _rows_and_columns

_UNROLL = 4


def _resolve_threads(threads: int | None) -> int:
    if threads is None:
        return os.cpu_count() or 1
    if threads < 1:
        raise ValueError(f"thread count must be at least 1, got {threads}")
    return threads


def _dot_unrolled(row: Sequence[float], column: Sequence[float]) -> float:
    """Dot product accumulated in blocks of four products."""
    total = 0.0
    for start in range(0, len(row), _UNROLL):
        for x, y in zip(row[start:start + _UNROLL], column[start:start + _UNROLL]):
            total += x * y
    return total


def _matmul(
    a: Matrix,
    b: Matrix,
    m: int,
    k: int,
    n: int,
    threads: int | None,
    dot: Callable[[Sequence[float], Sequence[float]], float],
) -> list[float]:
    rows, columns = _rows_and_columns(a, b, m, k, n)
    workers = _resolve_threads(threads)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(lambda cell: dot(*cell), product(rows, columns)))


def matmul_parallel(
    a: Matrix, b: Matrix, m: int, k: int, n: int, threads: int | None = None
) -> list[float]:
    """Multiply m x k by k x n, spreading the output cells over a thread pool."""
    return _matmul(a, b, m, k, n, threads, _dot)


def matmul_unrolled(
    a: Matrix, b: Matrix, m: int, k: int, n: int, threads: int | None = None
) -> list[float]:
    """Like :func:`matmul_parallel`, with the inner product unrolled by four."""
    return _matmul(a, b, m, k, n, threads, _dot_unrolled)


def _shift(block: list[float], offset: float | None) -> list[float]:
    if offset is None:
        return block
    return [value + offset for value in block]


def prefix_sum_parallel(values: Iterable[float], threads: int | None = None) -> list[float]:
    """Inclusive running sum computed as per-chunk scans plus chunk offsets.

    At most ``len(values)`` workers are used; chunks have ceiling size.
    """
    data = [float(value) for value in values]
    size = len(data)
    workers = min(size, _resolve_threads(threads))
    if size == 0:
        return []
    chunk = -(-size // workers)
    slices = [data[start:start + chunk] for start in range(0, workers * chunk, chunk)]

    with ThreadPoolExecutor(max_workers=workers) as pool:
        blocks = list(pool.map(lambda part: list(accumulate(part)), slices))
        totals = (block[-1] if block else 0.0 for block in blocks[:-1])
        offsets: list[float | None] = [None, *accumulate(totals)]
        shifted = pool.map(_shift, blocks, offsets)
        return list(chain.from_iterable(shifted))
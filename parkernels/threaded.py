"""Kernels that start one thread per unit of work and join them all."""

from __future__ import annotations

import random
import threading
from collections.abc import Callable, Iterable
from itertools import accumulate, chain, product
from typing import Any

from parkernels.serial import Matrix, _dot, _rows_and_columns


def _run_all(jobs: Iterable[tuple[Callable[..., Any], tuple[Any, ...]]]) -> None:
    """Start a thread for every job, then wait for all of them."""
    workers = [threading.Thread(target=target, args=args) for target, args in jobs]
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()


def fill_random(count: int, rng: random.Random | None = None) -> list[float]:
    """Return ``count`` uniform values in [0, 1)."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    source = rng if rng is not None else random.Random()
    return [source.random() for _ in range(count)]


def matmul_per_element(a: Matrix, b: Matrix, m: int, k: int, n: int) -> list[float]:
    """Matrix product with one thread per output element."""
    rows, columns = _rows_and_columns(a, b, m, k, n)
    result = [0.0] * (m * n)

    def cell(index: int, row: list[float], column: list[float]) -> None:
        result[index] = _dot(row, column)

    _run_all(
        (cell, (index, row, column))
        for index, (row, column) in enumerate(product(rows, columns))
    )
    return result


def matmul_per_row(a: Matrix, b: Matrix, m: int, k: int, n: int) -> list[float]:
    """Matrix product with one thread per output row."""
    rows, columns = _rows_and_columns(a, b, m, k, n)
    result: list[list[float]] = [[] for _ in range(m)]

    def row_job(index: int, row: list[float]) -> None:
        result[index] = [_dot(row, column) for column in columns]

    _run_all((row_job, (index, row)) for index, row in enumerate(rows))
    return list(chain.from_iterable(result))


def chunk_bounds(size: int, threads: int) -> list[tuple[int, int]]:
    """Split ``range(size)`` into ``threads`` half-open ranges.

    Each range has ``size // threads`` elements; the last one takes the rest.
    """
    if threads < 1:
        raise ValueError(f"thread count must be at least 1, got {threads}")
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    chunk = size // threads
    bounds = [(i * chunk, (i + 1) * chunk) for i in range(threads - 1)]
    bounds.append(((threads - 1) * chunk, size))
    return bounds


def prefix_sum_chunked(values: Iterable[float], threads: int) -> list[float]:
    """Inclusive running sum in two threaded passes over fixed chunks.

    The first pass scans each chunk on its own; the second adds the total of
    all earlier chunks to every element of a chunk.
    """
    data = [float(value) for value in values]
    bounds = chunk_bounds(len(data), threads)
    blocks: list[list[float]] = [[] for _ in bounds]

    def scan(index: int, start: int, end: int) -> None:
        blocks[index] = list(accumulate(data[start:end]))

    _run_all((scan, (index, start, end)) for index, (start, end) in enumerate(bounds))

    totals = (block[-1] if block else 0.0 for block in blocks[:-1])
    offsets = list(accumulate(totals))

    def add_offset(index: int, offset: float) -> None:
        blocks[index] = [value + offset for value in blocks[index]]

    _run_all((add_offset, (index, offset)) for index, offset in enumerate(offsets, start=1))
    return list(chain.from_iterable(blocks))
"""Single-threaded reference kernels: matrix product and running sum."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate
from operator import mul

Matrix = Sequence[float]


def _check_shapes(a: Matrix, b: Matrix, m: int, k: int, n: int) -> None:
    """Raise ValueError unless ``a`` is m x k and ``b`` is k x n, row-major."""
    if m < 0 or k < 0 or n < 0:
        raise ValueError(f"dimensions must be non-negative, got {m}x{k}x{n}")
    if len(a) != m * k:
        raise ValueError(f"left matrix has {len(a)} elements, expected {m * k}")
    if len(b) != k * n:
        raise ValueError(f"right matrix has {len(b)} elements, expected {k * n}")


def _rows_and_columns(
    a: Matrix, b: Matrix, m: int, k: int, n: int
) -> tuple[list[list[float]], list[list[float]]]:
    """Split flat row-major operands into rows of ``a`` and columns of ``b``."""
    _check_shapes(a, b, m, k, n)
    left = list(a)
    right = list(b)
    rows = [left[start:start + k] for start in range(0, m * k, k)] if k else [[] for _ in range(m)]
    columns = [right[j::n] for j in range(n)]
    return rows, columns


def _dot(row: Sequence[float], column: Sequence[float]) -> float:
    """Sum of element-wise products, accumulated left to right."""
    return sum(map(mul, row, column), 0.0)


def matmul_serial(a: Matrix, b: Matrix, m: int, k: int, n: int) -> list[float]:
    """Multiply an m x k matrix by a k x n matrix; all flat and row-major."""
    rows, columns = _rows_and_columns(a, b, m, k, n)
    return [_dot(row, column) for row in rows for column in columns]


def prefix_sum_serial(values: Iterable[float]) -> list[float]:
    """Return the inclusive running sum of ``values``."""
    return list(accumulate(float(value) for value in values))
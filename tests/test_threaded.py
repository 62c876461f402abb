import random

import pytest

from parkernels.serial import matmul_serial, prefix_sum_serial
from parkernels.threaded import (
    chunk_bounds,
    fill_random,
    matmul_per_element,
    matmul_per_row,
    prefix_sum_chunked,
)


def _int_matrix(rng, count):
    return [float(rng.randint(-9, 9)) for _ in range(count)]


def test_fill_random_length_and_range():
    values = fill_random(500, random.Random(11))
    assert len(values) == 500
    assert all(0.0 <= value < 1.0 for value in values)


def test_fill_random_is_reproducible_with_seed():
    first = fill_random(20, random.Random(5))
    second = fill_random(20, random.Random(5))
    assert len(first) == 20
    assert first == second
    assert all(0.0 <= value < 1.0 for value in first)


def test_fill_random_zero():
    assert fill_random(0) == []


def test_fill_random_rejects_negative():
    with pytest.raises(ValueError):
        fill_random(-1)


@pytest.mark.parametrize("kernel", [matmul_per_element, matmul_per_row])
@pytest.mark.parametrize("dims", [(2, 3, 2), (8, 8, 8), (3, 1, 5), (1, 6, 1)])
def test_matmul_matches_serial(kernel, dims):
    m, k, n = dims
    rng = random.Random(sum(dims))
    a = _int_matrix(rng, m * k)
    b = _int_matrix(rng, k * n)
    assert kernel(a, b, m, k, n) == matmul_serial(a, b, m, k, n)


@pytest.mark.parametrize("kernel", [matmul_per_element, matmul_per_row])
def test_matmul_worked_example(kernel):
    a = [1, 2, 3, 4, 5, 6]
    b = [7, 8, 9, 10, 11, 12]
    assert kernel(a, b, 2, 3, 2) == [58.0, 64.0, 139.0, 154.0]


@pytest.mark.parametrize("kernel", [matmul_per_element, matmul_per_row])
def test_matmul_rejects_bad_shape(kernel):
    with pytest.raises(ValueError):
        kernel([1.0], [1.0, 2.0], 1, 1, 1)


def test_chunk_bounds_last_takes_remainder():
    assert chunk_bounds(10, 4) == [(0, 2), (2, 4), (4, 6), (6, 10)]


@pytest.mark.parametrize("size", [0, 1, 3, 7, 10, 100, 1001])
@pytest.mark.parametrize("threads", [1, 4, 5, 8])
def test_chunk_bounds_cover_range_contiguously(size, threads):
    bounds = chunk_bounds(size, threads)
    assert len(bounds) == threads
    assert bounds[0][0] == 0
    assert bounds[-1][1] == size
    assert all(prev[1] == nxt[0] for prev, nxt in zip(bounds, bounds[1:]))
    assert all(start <= end for start, end in bounds)


@pytest.mark.parametrize("size, threads", [(5, 0), (-1, 2)])
def test_chunk_bounds_rejects_bad_input(size, threads):
    with pytest.raises(ValueError):
        chunk_bounds(size, threads)


@pytest.mark.parametrize("size", [0, 1, 3, 10, 33, 1000])
@pytest.mark.parametrize("threads", [1, 4, 6, 8])
def test_prefix_sum_chunked_matches_serial(size, threads):
    rng = random.Random(size + threads * 31)
    values = [float(rng.randint(-30, 30)) for _ in range(size)]
    assert prefix_sum_chunked(values, threads) == prefix_sum_serial(values)


def test_prefix_sum_chunked_final_value_is_total():
    values = [float(v) for v in range(1, 101)]
    result = prefix_sum_chunked(values, 7)
    assert result[-1] == sum(values)
    assert len(result) == len(values)


def test_prefix_sum_chunked_rejects_zero_threads():
    with pytest.raises(ValueError):
        prefix_sum_chunked([1.0], 0)
import random

import pytest

from parkernels.parallel import matmul_parallel, matmul_unrolled, prefix_sum_parallel
from parkernels.serial import matmul_serial, prefix_sum_serial


def _int_matrix(rng, count):
    return [float(rng.randint(-9, 9)) for _ in range(count)]


@pytest.mark.parametrize("kernel", [matmul_parallel, matmul_unrolled])
@pytest.mark.parametrize("dims", [(2, 3, 2), (5, 7, 4), (4, 8, 3), (1, 1, 1), (6, 5, 9)])
@pytest.mark.parametrize("threads", [1, 3, 8])
def test_matmul_matches_serial(kernel, dims, threads):
    m, k, n = dims
    rng = random.Random(m * 100 + k * 10 + n)
    a = _int_matrix(rng, m * k)
    b = _int_matrix(rng, k * n)
    assert kernel(a, b, m, k, n, threads) == matmul_serial(a, b, m, k, n)


@pytest.mark.parametrize("kernel", [matmul_parallel, matmul_unrolled])
def test_matmul_default_threads(kernel):
    rng = random.Random(7)
    a = _int_matrix(rng, 6 * 6)
    b = _int_matrix(rng, 6 * 6)
    assert kernel(a, b, 6, 6, 6) == matmul_serial(a, b, 6, 6, 6)


def test_matmul_worked_example():
    a = [1, 2, 3, 4, 5, 6]
    b = [7, 8, 9, 10, 11, 12]
    assert matmul_unrolled(a, b, 2, 3, 2, 4) == matmul_parallel(a, b, 2, 3, 2, 4)
    assert matmul_parallel(a, b, 2, 3, 2, 4) == [58.0, 64.0, 139.0, 154.0]


@pytest.mark.parametrize("kernel", [matmul_parallel, matmul_unrolled])
def test_matmul_rejects_zero_threads(kernel):
    with pytest.raises(ValueError):
        kernel([1.0], [1.0], 1, 1, 1, 0)


@pytest.mark.parametrize("kernel", [matmul_parallel, matmul_unrolled])
def test_matmul_rejects_bad_shape(kernel):
    with pytest.raises(ValueError):
        kernel([1.0, 2.0, 3.0], [1.0], 2, 2, 1, 2)


@pytest.mark.parametrize("size", [1, 2, 3, 5, 10, 17, 100, 1024])
@pytest.mark.parametrize("threads", [1, 4, 5, 8])
def test_prefix_sum_matches_serial(size, threads):
    rng = random.Random(size * 13 + threads)
    values = [float(rng.randint(-20, 20)) for _ in range(size)]
    assert prefix_sum_parallel(values, threads) == prefix_sum_serial(values)


def test_prefix_sum_default_threads():
    values = [float(v) for v in range(1, 11)]
    result = prefix_sum_parallel(values)
    assert result == prefix_sum_serial(values)
    assert result[-1] == sum(values)


def test_prefix_sum_empty():
    assert prefix_sum_parallel([], 4) == []


def test_prefix_sum_rejects_zero_threads():
    with pytest.raises(ValueError):
        prefix_sum_parallel([1.0, 2.0], 0)
"""Command that demonstrates and times the kernels."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

from parkernels.benchmarks import (
    Stopwatch,
    benchmark_matmul,
    benchmark_prefix_sum,
    benchmark_serial_matmul,
    benchmark_serial_prefix_sum,
    random_matrix,
)
from parkernels.parallel import matmul_parallel, matmul_unrolled, prefix_sum_parallel
from parkernels.serial import matmul_serial

_DEMO_A = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]
_DEMO_B = [7.0, 8.0, 9.0, 10.0, 11.0, 12.0]
_DEMO_SHAPE = (2, 3, 2)
_DEMO_PREFIX = [float(v) for v in range(1, 11)]


def format_matrix(c: Sequence[float], m: int, n: int) -> str:
    """Render a flat row-major m x n matrix, one row per line."""
    if m < 0 or n < 0:
        raise ValueError(f"dimensions must be non-negative, got {m}x{n}")
    if len(c) != m * n:
        raise ValueError(f"matrix has {len(c)} elements, expected {m * n}")
    rows = (c[start:start + n] for start in range(0, m * n, n)) if n else ([] for _ in range(m))
    return "".join("".join(f"{value:g} " for value in row) + "\n" for row in rows)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="parkernels", description="Run and time the matrix and prefix-sum kernels."
    )
    parser.add_argument("--large", type=int, default=1000,
                        help="side of the square matrices in the large run")
    parser.add_argument("--matmul-size", type=int, default=512,
                        help="side of the square matrices in the benchmarks")
    parser.add_argument("--prefix-size", type=int, default=1 << 20,
                        help="number of elements in the prefix-sum benchmarks")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    for name in ("large", "matmul_size", "prefix_size"):
        if getattr(args, name) < 0:
            _parser().error(f"--{name.replace('_', '-')} must be non-negative")

    m, k, n = _DEMO_SHAPE
    demos = [
        ("serial function", "after serial multiplication", "serial matrix multiplication",
         matmul_serial),
        ("OpenMP", "", "matrix multiplication", matmul_parallel),
        ("OpenMP with SIMD", "after SIMD", "matrix multiplication with SIMD",
         matmul_unrolled),
    ]
    for method, suffix, label, kernel in demos:
        print(f"Performing matrix multiplication using {method}...")
        with Stopwatch() as watch:
            c = kernel(_DEMO_A, _DEMO_B, m, k, n)
        heading = f"Result matrix C {suffix}:" if suffix else "Result matrix C:"
        print(heading)
        print(format_matrix(c, m, n), end="")
        print(f"Time taken for {label}: {watch.seconds:g} seconds")

    size = args.large
    rng = random.Random()
    a_large = random_matrix(size * size, rng)
    b_large = random_matrix(size * size, rng)
    large_runs = [
        ("using serial function", "using serial function", matmul_serial),
        ("using OpenMP", "", matmul_parallel),
        ("using OpenMP with SIMD", "with SIMD", matmul_unrolled),
    ]
    for method, tail, kernel in large_runs:
        print(f"Performing large matrix multiplication {method}...")
        with Stopwatch() as watch:
            kernel(a_large, b_large, size, size, size)
        label = f"large matrix multiplication {tail}".rstrip()
        print(f"Time taken for {label}: {watch.seconds:g} seconds")

    print("Performing prefix sum using OpenMP...")
    with Stopwatch() as watch:
        sums = prefix_sum_parallel(_DEMO_PREFIX)
    print("Result of prefix sum:")
    print("".join(f"{value:g} " for value in sums))
    print(f"Time taken for prefix sum using OpenMP: {watch.seconds:g} seconds")

    side = args.matmul_size
    benchmark_serial_matmul(side, side, side)
    benchmark_serial_prefix_sum(args.prefix_size)
    benchmark_matmul(side, side, side)
    benchmark_prefix_sum(args.prefix_size)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
# parkernels

Small numeric kernels written three ways, with a timing harness to compare
them. Matrices are flat row-major sequences of numbers: `a` is `m x k`, `b` is
`k x n`, and every matrix product returns a new flat list of `m * n` floats.
Operands of the wrong length, or negative dimensions, raise `ValueError`.

- `parkernels.serial`
  - `matmul_serial(a, b, m, k, n)`: plain matrix product.
  - `prefix_sum_serial(values)`: inclusive running sum.
- `parkernels.parallel` (thread pool; `threads` defaults to the CPU count and
  must be at least 1)
  - `matmul_parallel(a, b, m, k, n, threads=None)`: one pool task per output cell.
  - `matmul_unrolled(a, b, m, k, n, threads=None)`: the same, with the inner
    product accumulated in blocks of four.
  - `prefix_sum_parallel(values, threads=None)`: scans equal chunks (ceiling
    size, at most `len(values)` workers), then adds the running totals of the
    earlier chunks.
- `parkernels.threaded` (one `threading.Thread` per unit of work)
  - `matmul_per_element(a, b, m, k, n)`: one thread per output element.
  - `matmul_per_row(a, b, m, k, n)`: one thread per output row.
  - `chunk_bounds(size, threads)`: `threads` half-open ranges of
    `size // threads` elements, the last taking the remainder.
  - `prefix_sum_chunked(values, threads)`: scans each chunk from
    `chunk_bounds` in its own thread, then shifts each chunk by the total of the
    chunks before it, again one thread per chunk.
  - `fill_random(count, rng=None)`: `count` uniform floats in `[0, 1)`.

## Installation

```
pip install .
```

## Usage as a library

```python
from parkernels.serial import matmul_serial, prefix_sum_serial
from parkernels.parallel import matmul_parallel, prefix_sum_parallel
from parkernels.threaded import matmul_per_row, prefix_sum_chunked

a = [1, 2, 3,
     4, 5, 6]
b = [7, 8,
     9, 10,
     11, 12]

matmul_serial(a, b, 2, 3, 2)                 # [58.0, 64.0, 139.0, 154.0]
matmul_parallel(a, b, 2, 3, 2, threads=4)    # same result
matmul_per_row(a, b, 2, 3, 2)                # same result

prefix_sum_serial([1, 2, 3, 4])              # [1.0, 3.0, 6.0, 10.0]
prefix_sum_parallel([1, 2, 3, 4], threads=2) # same result
prefix_sum_chunked([1, 2, 3, 4], threads=2)  # same result
```

## Benchmarks

`parkernels.benchmarks` times the kernels on random inputs and prints one line
per run to `out` (standard output when omitted):

- `benchmark_serial_matmul(m, k, n, out=None)` and
  `benchmark_serial_prefix_sum(size, out=None)` return the time in whole
  milliseconds.
- `benchmark_matmul(m, k, n, out=None)` runs `matmul_parallel` and
  `matmul_unrolled` with 4 to 8 threads and returns
  `{threads: {kernel_name: ms}}`.
- `benchmark_prefix_sum(size, out=None)` runs `prefix_sum_parallel` with 4 to
  8 threads and returns `{threads: ms}`.

Prefix-sum inputs are generated from a fixed seed; matrix inputs are not.
`random_matrix(count, rng=None)` builds random operands, and `Stopwatch` is a
context manager whose `seconds` and `milliseconds` give the time of its block.

```python
import sys
from parkernels.benchmarks import Stopwatch, benchmark_matmul, benchmark_prefix_sum

benchmark_matmul(128, 128, 128, sys.stdout)
benchmark_prefix_sum(1 << 16, sys.stdout)

with Stopwatch() as watch:
    sum(range(1_000_000))
print(watch.milliseconds)
```

## Command line

```
parkernels [--large N] [--matmul-size N] [--prefix-size N]
```

multiplies a 2x3 by a 3x2 matrix with `matmul_serial`, `matmul_parallel` and
`matmul_unrolled`, printing each result and its time; times the three kernels
on random square matrices of side `--large` (default 1000); prints the prefix
sum of 1 to 10; then runs the four benchmarks with square matrices of side
`--matmul-size` (default 512) and `--prefix-size` elements (default 1048576).
The defaults make a full run slow; pass smaller sizes for a quick check.

## What it does not do

The kernels are pure Python. Threads share the interpreter lock, so the
thread-based kernels give the same results as the serial ones but are not
expected to run faster; the benchmarks measure how they behave, not native
parallel speed-up.
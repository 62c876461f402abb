"""Serial and thread-based matrix multiplication and prefix-sum kernels, with timing benchmarks and a demo command."""

__version__ = "0.1.0"
__all__ = ["serial", "parallel", "threaded", "benchmarks", "cli"]
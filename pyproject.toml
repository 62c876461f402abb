[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parkernels"
version = "0.1.0"
description = "Serial and thread-based matrix multiplication and prefix-sum kernels with simple timing benchmarks"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "matrix multiplication", "prefix sum", "scan", "threads"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
parkernels = "parkernels.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["parkernels"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

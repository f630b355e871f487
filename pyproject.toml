[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hpclab"
version = "0.1.0"
description = "Small numerical and parallel-computing experiments: heat equation, grid stencils, threaded sums and timing statistics"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "numerical-methods",
    "heat-equation",
    "finite-differences",
    "threads",
    "benchmark",
    "speedup",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
    "Topic :: Education",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hpclab-perfdb = "hpclab.perfdb:main"
hpclab-graph = "hpclab.graph:main"
hpclab-grid-equations = "hpclab.grid_equations:main"
hpclab-config = "hpclab.config:main"
hpclab-grid3d = "hpclab.grid3d:main"
hpclab-heat = "hpclab.heat:main"
hpclab-vector-sum = "hpclab.vector_sum:main"
hpclab-calcstats = "hpclab.calcstats:main"
hpclab-concurrency = "hpclab.concurrency:main"
hpclab-arrays = "hpclab.arrays:main"

[tool.hatch.build.targets.wheel]
packages = ["hpclab"]

[tool.hatch.build.targets.sdist]
include = ["hpclab", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

"""Numerical and parallel-computing experiments: heat equation, grid stencils, graphs, threaded sums, timing statistics and threading patterns."""

__version__ = "0.1.0"
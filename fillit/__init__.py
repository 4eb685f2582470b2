"""Tetromino square-packing solvers and tools for comparing solver programs."""

__version__ = "1.0.0"
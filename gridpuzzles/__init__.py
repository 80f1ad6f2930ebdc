"""Solvers for classic grid, search, text and number puzzles."""

__version__ = "0.1.0"
__all__ = ["grids", "numbers", "search", "text"]
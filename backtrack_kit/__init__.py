"""Backtracking solutions for combination, word, grid and graph search problems."""

__version__ = "0.1.0"
__all__ = ["combinations", "words", "grids"]
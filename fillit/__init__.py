"""Fit tetrominoes into the smallest square."""

__version__ = "1.0.0"
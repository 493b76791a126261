"""Exact lengths for meccano strip frames: integer diagonals and algebraic distances."""

__version__ = "0.1.0"
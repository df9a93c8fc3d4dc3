"""Solvers for a 25-day series of programming puzzles, one module (day01 to day25) per day."""

__version__ = "0.1.0"
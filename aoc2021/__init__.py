"""Advent of Code 2021 puzzle solutions for days 1 to 14, with a solver command and a day scaffold generator."""

__version__ = "0.1.0"
"""Sampling, crossover, mutation and tournament-selection operators for evolutionary algorithms on NumPy arrays."""

__version__ = "0.1.0"
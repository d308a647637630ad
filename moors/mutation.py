"""Mutation operators that modify individuals in place."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

import numpy as np


class MutationOperator(ABC):
    """Base class for operators that mutate an individual in place."""

    @abstractmethod
    def mutate(self, individual: np.ndarray, rng: Any) -> None:
        """Mutate the one-dimensional array ``individual`` in place."""

    def select_individuals_for_mutation(
        self, population_size: int, mutation_rate: float, rng: Any
    ) -> list[bool]:
        """Return a mask marking each individual for mutation with ``mutation_rate``."""
        return [rng.gen_bool(mutation_rate) for _ in range(population_size)]

    def operate(self, population: np.ndarray, mutation_rate: float, rng: Any) -> None:
        """Mutate the rows of ``population`` in place.

        Each row is chosen for mutation with probability ``mutation_rate``;
        the whole mask is drawn before any row is mutated.
        """
        if not isinstance(population, np.ndarray):
            raise TypeError("population must be a numpy array to be mutated in place")
        if population.ndim != 2:
            raise ValueError("population must be a two-dimensional array")
        mask = self.select_individuals_for_mutation(len(population), mutation_rate, rng)
        for individual, selected in zip(population, mask):
            if selected:
                self.mutate(individual, rng)


@dataclass
class BitFlipMutation(MutationOperator):
    """Flips each binary gene with probability ``gene_mutation_rate``."""

    gene_mutation_rate: float

    def mutate(self, individual: np.ndarray, rng: Any) -> None:
        for i, gene in enumerate(individual):
            if rng.gen_bool(self.gene_mutation_rate):
                individual[i] = 1.0 if gene == 0.0 else 0.0


@dataclass
class GaussianMutation(MutationOperator):
    """Adds N(0, sigma) noise to each gene with probability ``gene_mutation_rate``."""

    gene_mutation_rate: float
    sigma: float

    def mutate(self, individual: np.ndarray, rng: Any) -> None:
        if not math.isfinite(self.sigma) or self.sigma < 0.0:
            raise ValueError(
                f"Failed to create normal distribution: invalid sigma {self.sigma}"
            )
        for i in range(len(individual)):
            if rng.gen_bool(self.gene_mutation_rate):
                individual[i] += rng.gauss(0.0, self.sigma)


@dataclass
class UniformBinaryMutation(MutationOperator):
    """Resets each bit to a fresh random 0 or 1 with probability ``gene_mutation_rate``."""

    gene_mutation_rate: float

    def mutate(self, individual: np.ndarray, rng: Any) -> None:
        for i in range(len(individual)):
            if rng.gen_bool(self.gene_mutation_rate):
                individual[i] = 1.0 if rng.gen_bool(0.5) else 0.0


@dataclass
class UniformRealMutation(MutationOperator):
    """Resets each gene to a U(lower, upper) draw with probability ``gene_mutation_rate``."""

    gene_mutation_rate: float
    lower: float
    upper: float

    def mutate(self, individual: np.ndarray, rng: Any) -> None:
        for i in range(len(individual)):
            if rng.gen_bool(self.gene_mutation_rate):
                individual[i] = rng.gen_range_f64(self.lower, self.upper)
"""Crossover operators combining pairs of parents into offspring."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import numpy as np


def _as_parents(parent_a: Any, parent_b: Any) -> tuple[np.ndarray, np.ndarray]:
    a = np.asarray(parent_a, dtype=float)
    b = np.asarray(parent_b, dtype=float)
    if a.shape != b.shape:
        raise ValueError("Parents must have the same length")
    return a, b


class CrossoverOperator(ABC):
    """Base class for operators producing two children from two parents."""

    n_offsprings_per_crossover = 2

    @abstractmethod
    def crossover(
        self, parent_a: Any, parent_b: Any, rng: Any
    ) -> tuple[np.ndarray, np.ndarray]:
        """Return two children created from ``parent_a`` and ``parent_b``."""

    def operate(
        self, parents_a: Any, parents_b: Any, crossover_rate: float, rng: Any
    ) -> np.ndarray:
        """Cross paired rows of two parent populations.

        Each pair is crossed with probability ``crossover_rate``; otherwise
        the parents are copied unchanged. Children of a pair are adjacent
        rows in the result.
        """
        parents_a = np.asarray(parents_a, dtype=float)
        parents_b = np.asarray(parents_b, dtype=float)
        if parents_a.shape[0] != parents_b.shape[0]:
            raise ValueError("Parent populations must be of the same size")
        if parents_a.shape[1] != parents_b.shape[1]:
            raise ValueError("Parent individuals must have the same number of genes")

        offspring: list[np.ndarray] = []
        for parent_a, parent_b in zip(parents_a, parents_b):
            if rng.gen_probability() <= crossover_rate:
                child_a, child_b = self.crossover(parent_a, parent_b, rng)
            else:
                child_a, child_b = parent_a.copy(), parent_b.copy()
            offspring.extend((child_a, child_b))

        if not offspring:
            return np.empty((0, parents_a.shape[1]))
        return np.vstack(offspring)


class ArithmeticCrossover(CrossoverOperator):
    """Whole arithmetic crossover for real-valued individuals.

    With a single alpha drawn from U(0, 1) the children are
    ``alpha*a + (1-alpha)*b`` and ``(1-alpha)*a + alpha*b``.
    """

    def crossover(
        self, parent_a: Any, parent_b: Any, rng: Any
    ) -> tuple[np.ndarray, np.ndarray]:
        a, b = _as_parents(parent_a, parent_b)
        alpha = rng.gen_range_f64(0.0, 1.0)
        child1 = alpha * a + (1.0 - alpha) * b
        child2 = (1.0 - alpha) * a + alpha * b
        return child1, child2


class ExponentialCrossover(CrossoverOperator):
    """Copies a circular run of genes from the other parent.

    Starting at a random position, genes are copied while successive draws
    stay below ``exponential_crossover_rate``.
    """

    def __init__(self, exponential_crossover_rate: float) -> None:
        self.exponential_crossover_rate = exponential_crossover_rate

    def __repr__(self) -> str:
        return f"ExponentialCrossover({self.exponential_crossover_rate!r})"

    def _copy_run(self, target: np.ndarray, donor: np.ndarray, rng: Any) -> None:
        length = len(target)
        start = rng.gen_range_usize(0, length)
        i = start
        while True:
            target[i] = donor[i]
            i = (i + 1) % length
            if i == start:
                break
            if rng.gen_probability() >= self.exponential_crossover_rate:
                break

    def crossover(
        self, parent_a: Any, parent_b: Any, rng: Any
    ) -> tuple[np.ndarray, np.ndarray]:
        a, b = _as_parents(parent_a, parent_b)
        child_a = a.copy()
        child_b = b.copy()
        self._copy_run(child_a, b, rng)
        self._copy_run(child_b, a, rng)
        return child_a, child_b


class OrderCrossover(CrossoverOperator):
    """Order crossover (OX) for permutation-encoded individuals."""

    @staticmethod
    def _fill_from(child: np.ndarray, donor: np.ndarray, start: int) -> None:
        length = len(child)
        fill_index = start % length
        for offset in range(length):
            value = donor[(start + offset) % length]
            if not np.any(child == value):
                child[fill_index] = value
                fill_index = (fill_index + 1) % length

    def crossover(
        self, parent_a: Any, parent_b: Any, rng: Any
    ) -> tuple[np.ndarray, np.ndarray]:
        a, b = _as_parents(parent_a, parent_b)
        length = len(a)
        p1 = rng.gen_range_usize(0, length)
        p2 = rng.gen_range_usize(0, length)
        if p1 > p2:
            p1, p2 = p2, p1

        child_a = np.full(length, np.nan)
        child_b = np.full(length, np.nan)
        child_a[p1:p2] = a[p1:p2]
        child_b[p1:p2] = b[p1:p2]

        self._fill_from(child_a, b, p2)
        self._fill_from(child_b, a, p2)
        return child_a, child_b
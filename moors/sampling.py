"""Operators that sample initial populations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import numpy as np


class SamplingOperator(ABC):
    """Base class for operators generating individuals from scratch."""

    @abstractmethod
    def sample_individual(self, num_vars: int, rng: Any) -> np.ndarray:
        """Return a single individual with ``num_vars`` genes."""

    def operate(self, population_size: int, num_vars: int, rng: Any) -> np.ndarray:
        """Return a population of ``population_size`` sampled individuals as rows."""
        if population_size <= 0:
            raise ValueError("population_size must be positive")
        individuals = [
            np.asarray(self.sample_individual(num_vars, rng), dtype=float)
            for _ in range(population_size)
        ]
        return np.vstack(individuals)


class PermutationSampling(SamplingOperator):
    """Samples shuffled permutations of ``0, 1, ..., num_vars - 1``."""

    def sample_individual(self, num_vars: int, rng: Any) -> np.ndarray:
        indices = [float(i) for i in range(num_vars)]
        rng.shuffle(indices)
        return np.array(indices, dtype=float)


class RandomSamplingBinary(SamplingOperator):
    """Samples genes equal to 0 or 1 with equal probability."""

    def sample_individual(self, num_vars: int, rng: Any) -> np.ndarray:
        return np.array(
            [1.0 if rng.gen_bool(0.5) else 0.0 for _ in range(num_vars)], dtype=float
        )


class RandomSamplingFloat(SamplingOperator):
    """Samples genes uniformly from ``[minimum, maximum)``."""

    def __init__(self, minimum: float, maximum: float) -> None:
        self.minimum = float(minimum)
        self.maximum = float(maximum)

    def __repr__(self) -> str:
        return f"RandomSamplingFloat({self.minimum!r}, {self.maximum!r})"

    def sample_individual(self, num_vars: int, rng: Any) -> np.ndarray:
        return np.array(
            [rng.gen_range_f64(self.minimum, self.maximum) for _ in range(num_vars)],
            dtype=float,
        )


class RandomSamplingInt(SamplingOperator):
    """Samples genes uniformly between two integer bounds, as floats."""

    def __init__(self, minimum: int, maximum: int) -> None:
        self.minimum = int(minimum)
        self.maximum = int(maximum)

    def __repr__(self) -> str:
        return f"RandomSamplingInt({self.minimum!r}, {self.maximum!r})"

    def sample_individual(self, num_vars: int, rng: Any) -> np.ndarray:
        low, high = float(self.minimum), float(self.maximum)
        return np.array(
            [rng.gen_range_f64(low, high) for _ in range(num_vars)], dtype=float
        )
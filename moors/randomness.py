"""Random number generation shared by all evolutionary operators."""

from __future__ import annotations

import math
from collections.abc import MutableSequence
from typing import Any

import numpy as np

_U64_MAX = 2**64 - 1


class RandomGenerator:
    """Seedable source of the random draws the operators need.

    Operators only call the methods below, so any object providing them
    (for instance a deterministic stand-in in tests) can be used instead.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._rng = np.random.default_rng(seed)

    def gen_range_usize(self, low: int, high: int) -> int:
        """Return an integer drawn uniformly from ``[low, high)``."""
        if low >= high:
            raise ValueError(f"empty integer range [{low}, {high})")
        return int(self._rng.integers(low, high))

    def gen_range_f64(self, low: float, high: float) -> float:
        """Return a float drawn uniformly from ``[low, high)``."""
        if not low < high:
            raise ValueError(f"empty float range [{low}, {high})")
        value = float(self._rng.uniform(low, high))
        # Guard against rounding landing exactly on the open upper end.
        return value if value < high else low

    def gen_usize(self) -> int:
        """Return an unsigned 64-bit integer."""
        return int(self._rng.integers(0, _U64_MAX, dtype=np.uint64, endpoint=True))

    def gen_bool(self, p: float) -> bool:
        """Return ``True`` with probability ``p``."""
        if not 0.0 <= p <= 1.0:
            raise ValueError(f"probability {p} is outside [0, 1]")
        return bool(self._rng.random() < p)

    def gen_probability(self) -> float:
        """Return a float drawn uniformly from ``[0, 1)``."""
        return float(self._rng.random())

    def shuffle(self, values: MutableSequence[Any]) -> None:
        """Shuffle ``values`` in place."""
        self._rng.shuffle(values)

    def gauss(self, mean: float, sigma: float) -> float:
        """Return a sample of the normal distribution N(mean, sigma)."""
        if not math.isfinite(sigma) or sigma < 0.0:
            raise ValueError(f"invalid standard deviation {sigma}")
        return float(self._rng.normal(mean, sigma))
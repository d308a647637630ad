"""Mutation operators that reorder genes, suited to permutation encodings."""

from __future__ import annotations

from typing import Any

import numpy as np

from moors.mutation import MutationOperator


def _ordered_pair(rng: Any, length: int) -> tuple[int, int]:
    first = rng.gen_range_usize(0, length)
    second = rng.gen_range_usize(0, length)
    return (first, second) if first <= second else (second, first)


class DisplacementMutation(MutationOperator):
    """Moves a random segment of the chromosome to a random new position."""

    def __repr__(self) -> str:
        return "DisplacementMutation()"

    def mutate(self, individual: np.ndarray, rng: Any) -> None:
        start, end = _ordered_pair(rng, len(individual))
        if start == end:
            return

        segment = individual[start:end].copy()
        remainder = np.concatenate((individual[:start], individual[end:]))
        new_index = rng.gen_range_usize(0, len(remainder) + 1)
        individual[:] = np.concatenate(
            (remainder[:new_index], segment, remainder[new_index:])
        )


class InversionMutation(MutationOperator):
    """Reverses a random contiguous segment, both ends included."""

    def __repr__(self) -> str:
        return "InversionMutation()"

    def mutate(self, individual: np.ndarray, rng: Any) -> None:
        start, end = _ordered_pair(rng, len(individual))
        individual[start : end + 1] = individual[start : end + 1][::-1].copy()


class ScrambleMutation(MutationOperator):
    """Randomly reorders the genes of a random segment."""

    def __repr__(self) -> str:
        return "ScrambleMutation()"

    def mutate(self, individual: np.ndarray, rng: Any) -> None:
        start, end = _ordered_pair(rng, len(individual))
        if start == end:
            return
        segment = [float(value) for value in individual[start:end]]
        rng.shuffle(segment)
        individual[start:end] = segment


class SwapMutation(MutationOperator):
    """Swaps the genes at two distinct random positions."""

    def __repr__(self) -> str:
        return "SwapMutation()"

    def mutate(self, individual: np.ndarray, rng: Any) -> None:
        length = len(individual)
        if length <= 1:
            return
        idx1 = rng.gen_range_usize(0, length)
        idx2 = rng.gen_range_usize(0, length)
        while idx2 == idx1:
            idx2 = rng.gen_range_usize(0, length)
        individual[idx1], individual[idx2] = individual[idx2], individual[idx1]
"""Tournament-based parent selection for multi-objective populations."""

from __future__ import annotations

import enum
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

import numpy as np


class DuelResult(enum.Enum):
    """Outcome of a binary tournament."""

    LEFT_WINS = "left_wins"
    RIGHT_WINS = "right_wins"
    TIE = "tie"


class SurvivalScoringComparison(enum.Enum):
    """Whether a larger or a smaller survival score is better."""

    MAXIMIZE = "maximize"
    MINIMIZE = "minimize"


def _optional_array(value: Any) -> Optional[np.ndarray]:
    return None if value is None else np.asarray(value, dtype=float)


@dataclass
class Individual:
    """A single candidate solution with its evaluation data."""

    genes: np.ndarray
    fitness: np.ndarray
    constraints: Optional[np.ndarray] = None
    rank: Optional[int] = None
    survival_score: Optional[float] = None

    def __post_init__(self) -> None:
        self.genes = np.asarray(self.genes, dtype=float)
        self.fitness = np.asarray(self.fitness, dtype=float)
        self.constraints = _optional_array(self.constraints)

    def is_feasible(self) -> bool:
        """Return ``True`` when no constraint is violated (all values <= 0)."""
        if self.constraints is None:
            return True
        return bool(np.all(self.constraints <= 0.0))

    def constraint_violation_total(self) -> float:
        """Return the summed positive part of the constraint values."""
        if self.constraints is None:
            return 0.0
        return float(np.sum(np.maximum(self.constraints, 0.0)))


@dataclass
class Population:
    """A population stored as arrays whose rows are individuals."""

    genes: np.ndarray
    fitness: np.ndarray
    constraints: Optional[np.ndarray] = None
    rank: Optional[np.ndarray] = None
    survival_score: Optional[np.ndarray] = None

    def __post_init__(self) -> None:
        self.genes = np.atleast_2d(np.asarray(self.genes, dtype=float))
        self.fitness = np.asarray(self.fitness, dtype=float)
        self.constraints = _optional_array(self.constraints)
        if self.rank is not None:
            self.rank = np.asarray(self.rank, dtype=int)
        self.survival_score = _optional_array(self.survival_score)
        size = len(self.genes)
        for name in ("fitness", "constraints", "rank", "survival_score"):
            values = getattr(self, name)
            if values is not None and len(values) != size:
                raise ValueError(f"{name} has {len(values)} rows, expected {size}")

    def __len__(self) -> int:
        return len(self.genes)

    def individual(self, index: int) -> Individual:
        """Return the individual stored at row ``index``."""
        return Individual(
            genes=self.genes[index],
            fitness=self.fitness[index],
            constraints=None if self.constraints is None else self.constraints[index],
            rank=None if self.rank is None else int(self.rank[index]),
            survival_score=(
                None if self.survival_score is None else float(self.survival_score[index])
            ),
        )

    def selected(self, indices: Sequence[int]) -> "Population":
        """Return a new population made of the rows at ``indices``, in order."""
        idx = np.asarray(list(indices), dtype=int)

        def pick(values: Optional[np.ndarray]) -> Optional[np.ndarray]:
            return None if values is None else values[idx]

        return Population(
            genes=self.genes[idx],
            fitness=self.fitness[idx],
            constraints=pick(self.constraints),
            rank=pick(self.rank),
            survival_score=pick(self.survival_score),
        )


def feasibility_dominates(p1: Individual, p2: Individual) -> DuelResult:
    """Compare two individuals by feasibility, then by total violation."""
    feasible1, feasible2 = p1.is_feasible(), p2.is_feasible()
    if feasible1 and not feasible2:
        return DuelResult.LEFT_WINS
    if feasible2 and not feasible1:
        return DuelResult.RIGHT_WINS
    if feasible1 and feasible2:
        return DuelResult.TIE
    sum1 = p1.constraint_violation_total()
    sum2 = p2.constraint_violation_total()
    if sum1 < sum2:
        return DuelResult.LEFT_WINS
    if sum1 > sum2:
        return DuelResult.RIGHT_WINS
    return DuelResult.TIE


def _compare_optional(left: Optional[float], right: Optional[float]) -> Optional[int]:
    """Order optional values with a missing value below any present one.

    Returns -1, 0 or 1, or ``None`` when the values are unordered (NaN).
    """
    if left is None or right is None:
        if left is None and right is None:
            return 0
        return -1 if left is None else 1
    if math.isnan(left) or math.isnan(right):
        return None
    return (left > right) - (left < right)


class SelectionOperator(ABC):
    """Base class for binary-tournament parent selection."""

    pressure = 2
    n_parents_per_crossover = 2

    def select_participants(
        self, population_size: int, n_crossovers: int, rng: Any
    ) -> list[list[int]]:
        """Draw tournament pairs from shuffled permutations of the population."""
        if population_size <= 0:
            raise ValueError("cannot select participants from an empty population")
        total_needed = n_crossovers * self.n_parents_per_crossover * self.pressure
        n_perms = -(-total_needed // population_size)
        all_indices: list[int] = []
        for _ in range(n_perms):
            perm = list(range(population_size))
            rng.shuffle(perm)
            all_indices.extend(perm)
        del all_indices[total_needed:]
        return [all_indices[i : i + 2] for i in range(0, len(all_indices), 2)]

    @abstractmethod
    def tournament_duel(self, p1: Individual, p2: Individual, rng: Any) -> DuelResult:
        """Decide a tournament between two individuals."""

    def operate(
        self, population: Population, n_crossovers: int, rng: Any
    ) -> tuple[Population, Population]:
        """Run the tournaments and split the winners into two parent populations."""
        participants = self.select_participants(len(population), n_crossovers, rng)
        winners: list[int] = []
        for left, right in participants:
            result = self.tournament_duel(
                population.individual(left), population.individual(right), rng
            )
            winners.append(left if result is DuelResult.LEFT_WINS else right)
        mid = len(winners) // 2
        return population.selected(winners[:mid]), population.selected(winners[mid:])


class RandomSelection(SelectionOperator):
    """Feasibility first, otherwise a fair coin decides the winner."""

    def __repr__(self) -> str:
        return "RandomSelection()"

    def tournament_duel(self, p1: Individual, p2: Individual, rng: Any) -> DuelResult:
        result = feasibility_dominates(p1, p2)
        if result is not DuelResult.TIE:
            return result
        return DuelResult.LEFT_WINS if rng.gen_bool(0.5) else DuelResult.RIGHT_WINS


@dataclass
class RankAndScoringSelection(SelectionOperator):
    """Tournament by feasibility, then rank, then survival score."""

    use_rank: bool = True
    use_survival_score: bool = True
    survival_comparison: SurvivalScoringComparison = field(
        default=SurvivalScoringComparison.MAXIMIZE
    )

    def __post_init__(self) -> None:
        if not (self.use_rank or self.use_survival_score):
            raise ValueError(
                "RankAndScoringSelection: At least one criterion "
                "(rank or survival score) must be enabled"
            )

    def tournament_duel(self, p1: Individual, p2: Individual, rng: Any) -> DuelResult:
        result = feasibility_dominates(p1, p2)
        if result is not DuelResult.TIE:
            return result

        if self.use_rank:
            order = _compare_optional(p1.rank, p2.rank)
            if order == -1:
                return DuelResult.LEFT_WINS
            if order == 1:
                return DuelResult.RIGHT_WINS

        if self.use_survival_score:
            order = _compare_optional(p1.survival_score, p2.survival_score)
            if order is None or order == 0:
                return DuelResult.TIE
            better_is_left = order == 1
            if self.survival_comparison is SurvivalScoringComparison.MINIMIZE:
                better_is_left = not better_is_left
            return DuelResult.LEFT_WINS if better_is_left else DuelResult.RIGHT_WINS

        return DuelResult.TIE
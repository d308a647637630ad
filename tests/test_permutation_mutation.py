import numpy as np
import pytest

from moors.permutation_mutation import (
    DisplacementMutation,
    InversionMutation,
    ScrambleMutation,
    SwapMutation,
)
from moors.randomness import RandomGenerator


class FakeRng:
    """Returns predetermined integers and applies a fixed pairwise shuffle."""

    def __init__(self, usize_values):
        self.usize_values = list(usize_values)
        self.calls = 0

    def gen_range_usize(self, low, high):
        self.calls += 1
        return self.usize_values.pop(0)

    def gen_bool(self, p):
        return True

    def shuffle(self, values):
        original = list(values)
        values[0] = original[1]
        values[1] = original[0]
        values[2] = original[3]
        values[3] = original[2]


class FakeInversionRng:
    """First call returns low + 1, later calls high - 2."""

    def __init__(self):
        self.counter = 0

    def gen_range_usize(self, low, high):
        result = low + 1 if self.counter == 0 else high - 2
        self.counter += 1
        return result


@pytest.mark.parametrize("rng_values", [[2, 5, 1], [5, 2, 1]])
def test_displacement_mutation(rng_values):
    individual = np.array([0.0, 1.0, 2.0, 3.0, 4.0, 5.0])
    DisplacementMutation().mutate(individual, FakeRng(rng_values))
    np.testing.assert_array_equal(individual, [0.0, 2.0, 3.0, 4.0, 1.0, 5.0])


def test_displacement_mutation_same_idx():
    individual = np.array([0.0, 1.0, 2.0, 3.0, 4.0, 5.0])
    rng = FakeRng([0, 0])
    DisplacementMutation().mutate(individual, rng)
    np.testing.assert_array_equal(individual, [0.0, 1.0, 2.0, 3.0, 4.0, 5.0])
    assert rng.calls == 2


def test_displacement_mutation_on_row_view_updates_population():
    pop = np.array([[0.0, 1.0, 2.0, 3.0, 4.0, 5.0]])
    DisplacementMutation().mutate(pop[0], FakeRng([2, 5, 1]))
    np.testing.assert_array_equal(pop[0], [0.0, 2.0, 3.0, 4.0, 1.0, 5.0])


def test_inversion_mutation_controlled():
    pop = np.array([[0.0, 1.0, 1.0, 0.0, 0.0, 1.0]])
    InversionMutation().mutate(pop[0], FakeInversionRng())
    np.testing.assert_array_equal(pop[0], [0.0, 0.0, 0.0, 1.0, 1.0, 1.0])


def test_inversion_mutation_reversed_indices():
    individual = np.array([0.0, 1.0, 2.0, 3.0, 4.0])
    InversionMutation().mutate(individual, FakeRng([3, 0]))
    np.testing.assert_array_equal(individual, [3.0, 2.0, 1.0, 0.0, 4.0])


@pytest.mark.parametrize("rng_boundaries", [[0, 4], [4, 0]])
def test_scramble_mutation(rng_boundaries):
    individual = np.array([0.0, 1.0, 2.0, 3.0, 4.0, 5.0])
    ScrambleMutation().mutate(individual, FakeRng(rng_boundaries))
    np.testing.assert_array_equal(individual, [1.0, 0.0, 3.0, 2.0, 4.0, 5.0])


def test_scramble_mutation_same_idx():
    individual = np.array([0.0, 1.0, 2.0, 3.0, 4.0, 5.0])
    ScrambleMutation().mutate(individual, FakeRng([0, 0]))
    np.testing.assert_array_equal(individual, [0.0, 1.0, 2.0, 3.0, 4.0, 5.0])


def test_swap_mutation_controlled():
    original = np.array([[0.0, 1.0, 2.0, 3.0, 4.0]])
    original_row = original[0].copy()
    SwapMutation().operate(original, 1.0, FakeRng([1, 3]))
    mutated = original[0]

    diff_positions = np.flatnonzero(original_row != mutated)
    assert len(diff_positions) == 2
    i, j = diff_positions
    assert original_row[i] == mutated[j]
    assert original_row[j] == mutated[i]


def test_swap_mutation_redraws_equal_index():
    individual = np.array([0.0, 1.0, 2.0, 3.0, 4.0])
    rng = FakeRng([2, 2, 4])
    SwapMutation().mutate(individual, rng)
    np.testing.assert_array_equal(individual, [0.0, 1.0, 4.0, 3.0, 2.0])
    assert rng.calls == 3


def test_swap_mutation_single_gene_untouched():
    individual = np.array([7.0])
    rng = FakeRng([])
    SwapMutation().mutate(individual, rng)
    np.testing.assert_array_equal(individual, [7.0])
    assert rng.calls == 0


@pytest.mark.parametrize(
    "operator",
    [DisplacementMutation(), InversionMutation(), ScrambleMutation(), SwapMutation()],
)
def test_mutations_preserve_permutation(operator):
    rng = RandomGenerator(42)
    population = np.tile(np.arange(10, dtype=float), (20, 1))
    operator.operate(population, 1.0, rng)
    for row in population:
        np.testing.assert_array_equal(np.sort(row), np.arange(10, dtype=float))
    assert population.shape == (20, 10)


def test_swap_mutation_with_real_rng_changes_exactly_two_genes():
    rng = RandomGenerator(7)
    individual = np.arange(8, dtype=float)
    SwapMutation().mutate(individual, rng)
    assert np.count_nonzero(individual != np.arange(8, dtype=float)) == 2
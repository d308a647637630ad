import numpy as np
import pytest

from moors.randomness import RandomGenerator
from moors.sampling import (
    PermutationSampling,
    RandomSamplingBinary,
    RandomSamplingFloat,
    RandomSamplingInt,
)


class ReverseShuffleRng:
    def shuffle(self, values):
        values.reverse()


class MinimumRng:
    def gen_range_usize(self, low, high):
        return low

    def gen_range_f64(self, low, high):
        return low

    def gen_usize(self):
        return 0

    def gen_bool(self, p):
        return False


def test_permutation_sampling_controlled():
    population = PermutationSampling().operate(5, 4, ReverseShuffleRng())
    assert population.shape == (5, 4)
    for row in population:
        assert row.tolist() == [3.0, 2.0, 1.0, 0.0]


def test_permutation_sampling_rows_are_permutations():
    population = PermutationSampling().operate(6, 7, RandomGenerator(11))
    for row in population:
        assert sorted(row.tolist()) == [float(i) for i in range(7)]


def test_random_sampling_float_controlled():
    population = RandomSamplingFloat(-1.0, 1.0).operate(10, 5, MinimumRng())
    assert population.shape == (10, 5)
    assert np.all(population == -1.0)


def test_random_sampling_int_controlled():
    population = RandomSamplingInt(0, 10).operate(10, 5, MinimumRng())
    assert population.shape == (10, 5)
    assert np.all(population == 0.0)


def test_random_sampling_binary_controlled():
    population = RandomSamplingBinary().operate(10, 5, MinimumRng())
    assert population.shape == (10, 5)
    assert np.all(population == 0.0)


def test_random_sampling_float_within_bounds():
    population = RandomSamplingFloat(-1.0, 1.0).operate(20, 8, RandomGenerator(5))
    assert population.shape == (20, 8)
    assert float(population.min()) >= -1.0
    assert float(population.max()) <= 1.0


def test_random_sampling_binary_values():
    population = RandomSamplingBinary().operate(20, 8, RandomGenerator(5))
    assert set(np.unique(population)) <= {0.0, 1.0}


def test_empty_population_rejected():
    with pytest.raises(ValueError):
        RandomSamplingBinary().operate(0, 3, MinimumRng())
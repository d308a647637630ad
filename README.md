# moors

Building blocks for evolutionary and genetic algorithms on NumPy arrays.
Populations are two-dimensional float arrays with one row per individual.
Every operator takes its randomness from a `RandomGenerator`
(`moors.randomness`), so runs can be reproduced from a seed. Any object that
has the same methods (`gen_range_usize`, `gen_range_f64`, `gen_usize`,
`gen_bool`, `gen_probability`, `shuffle`, `gauss`) can stand in for it, which
makes it easy to test operators against scripted random values.

## Installation

```
pip install .
```

## Modules

| Module | Contents |
|--------|----------|
| `moors.randomness` | `RandomGenerator`, a seedable wrapper around NumPy's generator |
| `moors.sampling` | `SamplingOperator`, `PermutationSampling`, `RandomSamplingBinary`, `RandomSamplingFloat`, `RandomSamplingInt` |
| `moors.crossover` | `CrossoverOperator`, `ArithmeticCrossover`, `ExponentialCrossover`, `OrderCrossover` |
| `moors.mutation` | `MutationOperator`, `BitFlipMutation`, `GaussianMutation`, `UniformBinaryMutation`, `UniformRealMutation` |
| `moors.permutation_mutation` | `DisplacementMutation`, `InversionMutation`, `ScrambleMutation`, `SwapMutation` |
| `moors.selection` | `Individual`, `Population`, `DuelResult`, `SurvivalScoringComparison`, `feasibility_dominates`, `SelectionOperator`, `RandomSelection`, `RankAndScoringSelection` |

## Example

```python
import numpy as np

from moors.randomness import RandomGenerator
from moors.sampling import RandomSamplingFloat
from moors.crossover import ArithmeticCrossover
from moors.mutation import GaussianMutation
from moors.selection import Population, RankAndScoringSelection

rng = RandomGenerator(42)

genes = RandomSamplingFloat(0.0, 1.0).operate(10, 3, rng)

offspring = ArithmeticCrossover().operate(genes[:5], genes[5:], 0.9, rng)
GaussianMutation(0.2, 0.05).operate(offspring, 0.5, rng)
print(offspring.shape)  # (10, 3)

population = Population(
    genes=genes,
    fitness=np.zeros((10, 2)),
    rank=np.arange(10) % 3,
    survival_score=np.linspace(0.0, 1.0, 10),
)
parents_a, parents_b = RankAndScoringSelection().operate(population, 4, rng)
print(len(parents_a), len(parents_b))  # 4 4
```

## Behaviour

- `CrossoverOperator.operate` turns `n` pairs of parent rows into `2 * n`
  children, the two children of a pair in adjacent rows. A pair is crossed
  when a draw from `gen_probability()` is at most the crossover rate;
  otherwise both parents are copied unchanged.
- `MutationOperator.operate` changes the population array in place. It first
  draws a mask choosing each row with the mutation rate, then mutates the
  chosen rows. Gene-level operators also take a per-gene mutation rate.
- `SelectionOperator.operate` runs binary tournaments between individuals
  drawn from shuffled permutations of the population and returns two
  populations of `n_crossovers` winners each. A tie goes to the right-hand
  participant.
- `feasibility_dominates` prefers a feasible individual (all constraint
  values at most 0); between two infeasible ones the smaller sum of positive
  constraint values wins. `RandomSelection` settles remaining ties with a
  coin flip; `RankAndScoringSelection` compares by rank (lower wins) and then
  by survival score, maximised or minimised as `survival_comparison` says.
  It raises `ValueError` if both criteria are disabled.

## What this package does not do

It provides operators only. There is no algorithm loop, no survival (environmental
selection) operators, no duplicate removal, no offspring-generation driver, no
simulated binary or binary-string crossovers, no single-objective selection, and
no command-line tool. Problem evaluation, ranking and survival scores must be
computed by the caller and passed in through `Population`.

## Tests

```
pip install .[test]
pytest
```
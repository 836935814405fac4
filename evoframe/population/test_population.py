# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import pytest
import numpy as np
from evoframe.common import tools
from evoframe.common import testing
from evoframe.functions import corefuncs
from .individual import Individual
from .population import Population
from .factory import ParticleFactory
from .comparators import MinimizeFunctionComparator


def _population(size: int = 10, seed: int = 12) -> Population:
    factory = ParticleFactory([-5, -5], [5, 5], np.random.RandomState(seed))
    return Population.from_factory(factory, size)


def test_population_sort() -> None:
    comparator = MinimizeFunctionComparator(corefuncs.sphere)
    population = _population(20)
    population.sort(comparator)
    assert population.size == 20
    assert population.is_sorted(comparator)
    for first, second in tools.pairwise(population):
        assert comparator.compare(first, second) <= 0
    values = population.fitness_values(comparator)
    np.testing.assert_array_equal(values, sorted(values))


def test_population_sort_absolute_sum() -> None:
    comparator = MinimizeFunctionComparator(corefuncs.absolutesum)
    individuals = [Individual(x) for x in ([0.0, 1.0], [0.0, 0.0], [1.0, 1.0], [-2.0, -2.0])]
    population = Population(individuals)
    population.sort(comparator)
    expected = [individuals[k] for k in [1, 0, 2, 3]]
    assert all(a is b for a, b in zip(population, expected))


def test_population_set_keeps_size() -> None:
    population = _population(5)
    new = Individual([0.0, 0.0])
    population[3] = new
    assert population[3] is new
    assert len(population) == 5
    with pytest.raises(TypeError):
        population[2] = [0.0, 0.0]  # type: ignore
    with pytest.raises(IndexError):
        population[5] = new


def test_population_index_of_is_identity_based() -> None:
    first, second = Individual([1.0, 2.0]), Individual([1.0, 2.0])
    population = Population([Individual([0.0, 0.0]), first, second])
    assert population.index_of(second) == 2
    assert population.index_of(first) == 1
    with pytest.raises(ValueError):
        population.index_of(Individual([1.0, 2.0]))


def test_population_snapshot() -> None:
    population = _population(4)
    snapshot = population.snapshot()
    population[0] = Individual([0.0, 0.0])
    assert snapshot[0] is not population[0]
    assert all(a is b for a, b in zip(snapshot[1:], list(population)[1:]))


def test_population_errors() -> None:
    with pytest.raises(ValueError):
        Population([])
    with pytest.raises(TypeError):
        Population([np.zeros(2)])  # type: ignore


def test_fitness_values_slot_order() -> None:
    comparator = MinimizeFunctionComparator(corefuncs.sphere)
    population = Population([Individual([2.0]), Individual([1.0]), Individual([3.0])])
    testing.printed_assert_equal(population.fitness_values(comparator), [4.0, 1.0, 9.0])

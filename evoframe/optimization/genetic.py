# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import evoframe.common.typing as tp
from evoframe.common import errors
from evoframe.population import Individual
from evoframe.population import TerminationCriterion
from evoframe.operators import RandomMutation
from evoframe.operators import AverageCrossover
from evoframe.operators import SinglePointCrossover
from evoframe.operators import Combination
from evoframe.operators import select_normal
from . import base


class _GeneticAlgorithm(base.Algorithm):
    """Generational genetic algorithm: the population is sorted and recorded, a whole
    generation of children is bred from rank-biased parents and mutated, then the children
    replace every slot but the elite ones.
    """

    def __init__(
        self,
        lower: tp.ArrayLike,
        upper: tp.ArrayLike,
        function: base.ObjectiveOrComparator,
        *,
        termination: tp.Optional[tp.Union[float, TerminationCriterion]] = None,
        random_state: tp.Seed = None,
        config: tp.Optional["GeneticAlgorithm"] = None,
    ) -> None:
        self._config = GeneticAlgorithm() if config is None else config
        super().__init__(
            lower,
            upper,
            function,
            termination=termination,
            max_generations=self._config.max_generations,
            random_state=random_state,
        )
        self.popsize = self._config.popsize
        self.mutation = RandomMutation(
            self.factory.lower,
            self.factory.upper,
            self.random_state,
            probability=self._config.mutation_probability,
        )
        self.crossover: Combination = (
            AverageCrossover()
            if self._config.crossover == "average"
            else SinglePointCrossover(self.random_state)
        )

    def _internal_next_generation(self) -> None:
        population = self._get_population()
        population.sort(self.comparator)
        self.record_fitness()
        children: tp.List[Individual] = []
        while len(children) < population.size:
            first = select_normal(population.size, self.random_state)
            second = select_normal(population.size, self.random_state, exclude=first)
            genome = self.crossover.combine(population[first].genome, population[second].genome)
            children.append(Individual(self.mutation.mutate(genome)))
        # population is sorted, so the elite are the first slots
        for index in range(self._config.elitism, population.size):
            population[index] = children[index]


class GeneticAlgorithm(base.ConfiguredAlgorithm):
    """Genetic algorithm with rank-biased parent selection, crossover, random single-gene
    mutation and optional elitism.

    Parameters
    ----------
    popsize: int
        size of the population (at least 2)
    crossover: "average" or "singlepoint"
        "average" takes the mean of both parents, "singlepoint" cuts both parents at a random gene
    mutation_probability: float
        probability of resampling one gene of each child within the bounds
    elitism: int
        number of best individuals kept unchanged from one generation to the next
    max_generations: int
        maximum number of generations of a run
    """

    def __init__(
        self,
        *,
        popsize: int = 40,
        crossover: str = "average",
        mutation_probability: float = 0.01,
        elitism: int = 1,
        max_generations: int = base.DEFAULT_MAX_GENERATIONS,
    ) -> None:
        super().__init__(_GeneticAlgorithm, locals())
        base.check_positive_int("popsize", popsize)
        base.check_positive_int("max_generations", max_generations)
        if popsize < 2:
            raise errors.ConfigurationError(
                f"popsize must be at least 2 to select two parents (got {popsize})"
            )
        if crossover not in ("average", "singlepoint"):
            raise errors.ConfigurationError(
                f'Unknown crossover "{crossover}", use "average" or "singlepoint"'
            )
        if not 0 <= mutation_probability <= 1:
            raise errors.ConfigurationError(
                f"Mutation probability must be in [0, 1] (got {mutation_probability})"
            )
        if not 0 <= elitism < popsize:
            raise errors.ConfigurationError(f"elitism must be in [0, popsize) (got {elitism})")
        self.popsize = popsize
        self.crossover = crossover
        self.mutation_probability = mutation_probability
        self.elitism = elitism
        self.max_generations = max_generations

# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import evoframe.common.typing as tp
from evoframe.common import errors
from evoframe.population import Individual
from evoframe.population import TerminationCriterion
from evoframe.operators import MutationConfig
from evoframe.operators import DifferentialMutation
from evoframe.operators import DifferentialCrossover
from evoframe.operators import Combination
from . import base


class _DE(base.Algorithm):
    """Differential evolution.

    At each generation, the population is sorted best first and its fitness recorded.
    Then for each slot, a trial vector is built by differential mutation, crossed over
    with the slot's individual, and the child replaces the parent unless it is worse
    (ties favor the child, which allows drifting on plateaus).
    """

    def __init__(
        self,
        lower: tp.ArrayLike,
        upper: tp.ArrayLike,
        function: base.ObjectiveOrComparator,
        *,
        termination: tp.Optional[tp.Union[float, TerminationCriterion]] = None,
        random_state: tp.Seed = None,
        config: tp.Optional["DifferentialEvolution"] = None,
    ) -> None:
        self._config = DifferentialEvolution() if config is None else config
        super().__init__(
            lower,
            upper,
            function,
            termination=termination,
            max_generations=self._config.max_generations,
            random_state=random_state,
        )
        self.popsize = self._config.popsize
        self.mutation = DifferentialMutation(self._config.mutation_config(), self.popsize, self.random_state)
        self.crossover: Combination = DifferentialCrossover(self._config.crossover_rate, self.random_state)

    def _internal_next_generation(self) -> None:
        population = self._get_population()
        population.sort(self.comparator)
        self.record_fitness()
        # asynchronous: donors are read from the live population, including the children
        # accepted earlier in this same pass
        donors: tp.Sequence[Individual] = (
            population if self._config.update == "asynchronous" else population.snapshot()
        )
        for index in range(population.size):
            parent = population[index]
            trial = self.mutation.mutate(index, donors, best_index=0)
            child = Individual(self.crossover.combine(trial, parent.genome))
            if self.comparator.is_not_worse(child, parent):
                population[index] = child


# pylint: disable=too-many-arguments, too-many-instance-attributes
class DifferentialEvolution(base.ConfiguredAlgorithm):
    """Differential evolution is typically used for continuous optimization.
    It uses differences between points in the population for doing mutations in fruitful directions;
    it is therefore a kind of covariance adaptation without any explicit covariance.
    This class implements the DE/rand/1, DE/best/1, DE/rand/2 and DE/best/2 variants with
    binomial crossover, and static, dithered or jittered scale factors.

    Parameters
    ----------
    popsize: int
        size of the population, strictly greater than 2 * num_differences + 1
    stepsize: float
        scale factor F of the difference vectors (used by the "static" scale factor variation)
    crossover_rate: float
        probability of taking a gene from the trial vector rather than from the parent
    num_differences: int
        number of difference vectors of the mutation (1 or 2)
    trial_vector_variation: "random" or "best"
        base vector of the mutation: a random individual or the best one
    scale_factor_variation: "static", "dither" or "jitter"
        "static" always uses stepsize, "dither" draws a step size in [0.4, 0.9] for each
        trial vector, and "jitter" for each gene
    update: "asynchronous" or "synchronous"
        whether mutations read the population as it is being updated during a generation
        (asynchronous), or as it was at the beginning of the generation (synchronous)
    max_generations: int
        maximum number of generations of a run
    """

    def __init__(
        self,
        *,
        popsize: int = 40,
        stepsize: float = 0.5,
        crossover_rate: float = 0.5,
        num_differences: int = 1,
        trial_vector_variation: str = "random",
        scale_factor_variation: str = "static",
        update: str = "asynchronous",
        max_generations: int = base.DEFAULT_MAX_GENERATIONS,
    ) -> None:
        super().__init__(_DE, locals())
        base.check_positive_int("popsize", popsize)
        base.check_positive_int("max_generations", max_generations)
        if not 0 <= crossover_rate <= 1:
            raise errors.ConfigurationError(f"Crossover rate must be in [0, 1] (got {crossover_rate})")
        if update not in ("asynchronous", "synchronous"):
            raise errors.ConfigurationError(f'Unknown update "{update}", use "asynchronous" or "synchronous"')
        self.popsize = popsize
        self.stepsize = stepsize
        self.crossover_rate = crossover_rate
        self.num_differences = num_differences
        self.trial_vector_variation = trial_vector_variation
        self.scale_factor_variation = scale_factor_variation
        self.update = update
        self.max_generations = max_generations
        self.mutation_config().check_population_size(popsize)

    def mutation_config(self) -> MutationConfig:
        return MutationConfig(
            stepsize=self.stepsize,
            num_differences=self.num_differences,
            trial_vector_variation=self.trial_vector_variation,
            scale_factor_variation=self.scale_factor_variation,
        )

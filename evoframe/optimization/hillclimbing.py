# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import evoframe.common.typing as tp
from evoframe.common import errors
from evoframe.population import Individual
from evoframe.population import TerminationCriterion
from evoframe.operators import RandomMutation
from . import base


class _HillClimbing(base.Algorithm):
    """Single individual which is replaced by its mutated copy whenever the copy is strictly better"""

    def __init__(
        self,
        lower: tp.ArrayLike,
        upper: tp.ArrayLike,
        function: base.ObjectiveOrComparator,
        *,
        termination: tp.Optional[tp.Union[float, TerminationCriterion]] = None,
        random_state: tp.Seed = None,
        config: tp.Optional["HillClimbing"] = None,
    ) -> None:
        self._config = HillClimbing() if config is None else config
        super().__init__(
            lower,
            upper,
            function,
            termination=termination,
            max_generations=self._config.max_generations,
            random_state=random_state,
        )
        self.popsize = 1
        self.mutation = RandomMutation(
            self.factory.lower,
            self.factory.upper,
            self.random_state,
            probability=self._config.mutation_probability,
        )

    def _internal_next_generation(self) -> None:
        population = self._get_population()
        self.record_fitness()
        candidate = Individual(self.mutation.mutate(population[0].genome))
        if self.comparator.is_better(candidate, population[0]):
            population[0] = candidate


class HillClimbing(base.ConfiguredAlgorithm):
    """Hill climbing: a (1+1) strategy mutating one gene of the current point at a time.

    Parameters
    ----------
    mutation_probability: float
        probability of resampling one gene within the bounds at each generation
    max_generations: int
        maximum number of generations of a run
    """

    def __init__(
        self,
        *,
        mutation_probability: float = 1.0,
        max_generations: int = base.DEFAULT_MAX_GENERATIONS,
    ) -> None:
        super().__init__(_HillClimbing, locals())
        base.check_positive_int("max_generations", max_generations)
        if not 0 <= mutation_probability <= 1:
            raise errors.ConfigurationError(
                f"Mutation probability must be in [0, 1] (got {mutation_probability})"
            )
        self.mutation_probability = mutation_probability
        self.max_generations = max_generations

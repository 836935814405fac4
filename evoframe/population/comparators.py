# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import functools
import evoframe.common.typing as tp
from .individual import Individual


class MinimizeFunctionComparator:
    """Orders individuals for a minimization problem: the lower the objective value,
    the fitter the individual.

    :code:`compare(a, b)` is negative if :code:`a` is fitter than :code:`b`, positive if it is
    less fit and 0 on ties, so that sorting with this comparator puts the best individual first.
    The objective is evaluated lazily, at most once per individual instance, and the value
    is cached on the individual.

    Note
    ----
    NaN values are not guarded: a NaN fitness compares as a tie with any value, so the order
    is only total when the objective never returns NaN. In differential evolution, a NaN child
    then replaces its parent.

    Parameters
    ----------
    function: callable
        the objective function, taking the genome (np.ndarray) and returning a real value.
        It must be deterministic for the cache to be valid.
    """

    def __init__(self, function: tp.ObjectiveFunction) -> None:
        self.function = function
        self.num_evaluations = 0

    def evaluate(self, individual: Individual) -> float:
        """Returns the fitness of the individual, computing and caching it if needed"""
        if individual.fitness is None:
            individual.fitness = self.function(individual.genome)
            self.num_evaluations += 1
        assert individual.fitness is not None
        return individual.fitness

    def compare(self, first: Individual, second: Individual) -> int:
        a, b = self.evaluate(first), self.evaluate(second)
        return (a > b) - (a < b)

    __call__ = compare

    def is_better(self, first: Individual, second: Individual) -> bool:
        """Whether the first individual is strictly fitter than the second"""
        return self.compare(first, second) < 0

    def is_not_worse(self, first: Individual, second: Individual) -> bool:
        return self.compare(first, second) <= 0

    @property
    def key(self) -> tp.Any:
        """Sort key wrapping this comparator (for :code:`sorted`, :code:`min` etc)"""
        return functools.cmp_to_key(self.compare)

    def __repr__(self) -> str:
        name = getattr(self.function, "__name__", self.function.__class__.__name__)
        return f"{self.__class__.__name__}({name})"

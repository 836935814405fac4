# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import evoframe.common.typing as tp
from evoframe.common import tools
from .individual import Individual
from .comparators import MinimizeFunctionComparator


class IndividualFactory(tp.Protocol):
    # pylint: disable=pointless-statement

    def create(self) -> Individual:
        ...


class Population:
    """Fixed-size ordered collection of individuals.
    Slots can be replaced but the population never grows nor shrinks.

    Parameters
    ----------
    individuals: iterable of Individual
        the initial individuals (at least 1)
    """

    def __init__(self, individuals: tp.Iterable[Individual]) -> None:
        self._individuals: tp.List[Individual] = list(individuals)
        if not self._individuals:
            raise ValueError("A population needs at least one individual")
        if not all(isinstance(ind, Individual) for ind in self._individuals):
            raise TypeError("A population can only hold Individual instances")

    @classmethod
    def from_factory(cls, factory: IndividualFactory, size: int) -> "Population":
        return cls(factory.create() for _ in range(size))

    @property
    def size(self) -> int:
        return len(self._individuals)

    def __len__(self) -> int:
        return len(self._individuals)

    def __getitem__(self, index: int) -> Individual:
        return self._individuals[index]

    def __setitem__(self, index: int, individual: Individual) -> None:
        if not isinstance(individual, Individual):
            raise TypeError(f"Expected an Individual but got {individual!r}")
        self._individuals[index] = individual

    def __iter__(self) -> tp.Iterator[Individual]:
        return iter(self._individuals)

    def index_of(self, individual: Individual) -> int:
        """Position of this very instance in the population (identity, not genome equality)"""
        for k, ind in enumerate(self._individuals):
            if ind is individual:
                return k
        raise ValueError(f"{individual!r} is not in the population")

    def sort(self, comparator: MinimizeFunctionComparator) -> None:
        """Sorts in place, best first"""
        self._individuals.sort(key=comparator.key)

    def is_sorted(self, comparator: MinimizeFunctionComparator) -> bool:
        return all(comparator.compare(a, b) <= 0 for a, b in tools.pairwise(self._individuals))

    def fitness_values(self, comparator: MinimizeFunctionComparator) -> tp.List[float]:
        """Fitness of each individual, in slot order (evaluated if need be)"""
        return [comparator.evaluate(ind) for ind in self._individuals]

    def snapshot(self) -> tp.List[Individual]:
        """Shallow copy of the slots, unaffected by later replacements"""
        return list(self._individuals)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self.size})"

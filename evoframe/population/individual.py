# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import numpy as np
import evoframe.common.typing as tp


class Individual:
    """Candidate solution: a real vector genome and its cached fitness.

    Parameters
    ----------
    genome: array-like
        the genes, converted to a 1-dimensional float64 array (copied)

    Note
    ----
    - the fitness is the only cached value. It is reset whenever a new genome
      is assigned, and the genome is frozen (read-only) as soon as a fitness is cached
      so that the cache can not go out of sync through in-place edits.
    - :code:`copy()` provides a writable deep copy with an empty cache.
    """

    def __init__(self, genome: tp.ArrayLike) -> None:
        self._genome = np.array(genome, dtype=float, copy=True)
        if self._genome.ndim != 1:
            raise ValueError(f"Genome must be one-dimensional, got shape {self._genome.shape}")
        self._fitness: tp.Optional[float] = None

    @property
    def genome(self) -> np.ndarray:
        return self._genome

    @genome.setter
    def genome(self, genome: tp.ArrayLike) -> None:
        self._genome = np.array(genome, dtype=float, copy=True)
        self._fitness = None

    @property
    def fitness(self) -> tp.Optional[float]:
        """float or None: the cached objective value, if already evaluated"""
        return self._fitness

    @fitness.setter
    def fitness(self, value: float) -> None:
        self._fitness = float(value)
        self._genome.flags.writeable = False

    @property
    def dimension(self) -> int:
        return self._genome.size

    def copy(self) -> "Individual":
        return Individual(self._genome)

    def allclose(self, other: "Individual", atol: float = 1e-8) -> bool:
        """Elementwise genome equality within absolute tolerance"""
        return self.dimension == other.dimension and bool(
            np.allclose(self._genome, other.genome, rtol=0, atol=atol)
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(genome={self._genome.tolist()}, fitness={self._fitness})"


class TerminationCriterion(Individual):
    """Sentinel individual holding a fitness threshold: a run ends as soon as an
    individual of the population compares strictly better than it.
    """

    def __init__(self, threshold: float) -> None:
        super().__init__(np.zeros(0))
        self.fitness = threshold

    @property
    def threshold(self) -> float:
        assert self._fitness is not None
        return self._fitness

    def copy(self) -> "TerminationCriterion":
        return TerminationCriterion(self.threshold)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.threshold})"

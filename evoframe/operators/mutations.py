# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import numpy as np
import evoframe.common.typing as tp
from evoframe.common import errors
from evoframe.population.individual import Individual
from evoframe.population.factory import check_bounds


TRIAL_VECTOR_VARIATIONS = ("random", "best")
SCALE_FACTOR_VARIATIONS = ("static", "dither", "jitter")
# range of the random step sizes for dither and jitter
RANDOM_STEPSIZE_RANGE = (0.4, 0.9)


class MutationConfig:
    """Settings of the differential mutation.

    Parameters
    ----------
    stepsize: float
        scale factor F applied to the difference vectors ("static" variation only)
    num_differences: int
        number of difference vectors, 1 or 2
    trial_vector_variation: "random" or "best"
        base vector drawn at random or set to the best individual
    scale_factor_variation: "static", "dither" or "jitter"
        "static" uses the stepsize, "dither" draws one step size per trial vector and
        "jitter" one step size per gene, both uniformly in [0.4, 0.9]
    """

    def __init__(
        self,
        stepsize: float = 0.5,
        num_differences: int = 1,
        trial_vector_variation: str = "random",
        scale_factor_variation: str = "static",
    ) -> None:
        if num_differences not in (1, 2):
            raise errors.ConfigurationError(f"num_differences must be 1 or 2 (got {num_differences!r})")
        if trial_vector_variation not in TRIAL_VECTOR_VARIATIONS:
            raise errors.ConfigurationError(
                f'Unknown trial vector variation "{trial_vector_variation}", '
                f"choose among {TRIAL_VECTOR_VARIATIONS}"
            )
        if scale_factor_variation not in SCALE_FACTOR_VARIATIONS:
            raise errors.ConfigurationError(
                f'Unknown scale factor variation "{scale_factor_variation}", '
                f"choose among {SCALE_FACTOR_VARIATIONS}"
            )
        self.stepsize = float(stepsize)
        self.num_differences = int(num_differences)
        self.trial_vector_variation = trial_vector_variation
        self.scale_factor_variation = scale_factor_variation

    @property
    def num_candidates(self) -> int:
        """Number of distinct population indices needed for one trial vector"""
        return 2 * self.num_differences + 1

    def check_population_size(self, population_size: int) -> None:
        # the target itself can not be a donor, hence the strict inequality
        if population_size <= self.num_candidates:
            raise errors.ConfigurationError(
                f"Population size must be strictly greater than {self.num_candidates} "
                f"for {self.num_differences} difference(s), got {population_size}"
            )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(stepsize={self.stepsize}, num_differences={self.num_differences}, "
            f"trial_vector_variation={self.trial_vector_variation!r}, "
            f"scale_factor_variation={self.scale_factor_variation!r})"
        )


class DifferentialMutation:
    """Builds DE trial vectors from the difference of population members.

    The trial vector for the individual at index :code:`i` is
    :code:`base + F * (a - b)` (one difference) or :code:`base + F * (a - b) + F * (c - d)`
    (two differences), where base, a, b, c, d are distinct population slots, all different from
    :code:`i`. With the "best" trial vector variation, the base is the best individual.
    Trial genes are not clamped to any bounds.

    Parameters
    ----------
    config: MutationConfig
        the mutation settings
    population_size: int
        size of the population the mutation will draw donors from
    random_state: np.random.RandomState
        the shared random state
    """

    def __init__(
        self, config: MutationConfig, population_size: int, random_state: np.random.RandomState
    ) -> None:
        config.check_population_size(population_size)
        self.config = config
        self.population_size = population_size
        self.random_state = random_state

    def select_donors(self, index: int, best_index: int = 0) -> tp.List[int]:
        """Draws the base and donor slots for the target at :code:`index`

        Parameters
        ----------
        index: int
            slot of the target individual, excluded from the draws
        best_index: int
            slot of the best individual, used as base with the "best" variation
            (0 for a population sorted best first)

        Returns
        -------
        list of int
            base slot followed by the donor slots, all distinct

        Note
        ----
        With the "best" variation, the base is the best slot even when it is the target itself.
        """
        candidates: tp.List[int] = []
        if self.config.trial_vector_variation == "best":
            candidates.append(best_index)
        max_draws = 1000 * self.population_size * self.config.num_candidates
        num_draws = 0
        while len(candidates) < self.config.num_candidates:
            candidate = self.random_state.randint(self.population_size)
            num_draws += 1
            assert num_draws < max_draws, f"Donor sampling did not finish after {num_draws} draws"
            if candidate != index and candidate not in candidates:
                candidates.append(int(candidate))
        return candidates

    def scale_factor(self, dimension: int) -> tp.Union[float, np.ndarray]:
        """Step size for one trial vector: one value per gene with jitter, a float otherwise"""
        variation = self.config.scale_factor_variation
        if variation == "dither":
            return float(self.random_state.uniform(*RANDOM_STEPSIZE_RANGE))
        if variation == "jitter":
            return self.random_state.uniform(*RANDOM_STEPSIZE_RANGE, size=dimension)  # type: ignore
        return self.config.stepsize

    def mutate(self, index: int, population: tp.Sequence[Individual], best_index: int = 0) -> np.ndarray:
        """Returns a new trial genome for the target at :code:`index`.
        The population is only read from.
        """
        if len(population) != self.population_size:
            raise errors.EvoframeValueError(
                f"Expected a population of size {self.population_size}, got {len(population)}"
            )
        slots = self.select_donors(index, best_index=best_index)
        genomes = [population[k].genome for k in slots]
        stepsize = self.scale_factor(genomes[0].size)
        trial = genomes[0] + stepsize * (genomes[1] - genomes[2])
        if self.config.num_differences == 2:
            trial = trial + stepsize * (genomes[3] - genomes[4])
        return np.asarray(trial, dtype=float)


class RandomMutation:
    """Resamples one randomly chosen gene uniformly within its bounds, with a given probability
    (genetic algorithm and hill climbing mutation).

    Parameters
    ----------
    lower: array-like
        lower bound of each gene
    upper: array-like
        upper bound of each gene
    random_state: np.random.RandomState
        the shared random state
    probability: float
        probability for the genome to be mutated at all
    """

    def __init__(
        self,
        lower: tp.ArrayLike,
        upper: tp.ArrayLike,
        random_state: np.random.RandomState,
        probability: float = 1.0,
    ) -> None:
        if not 0 <= probability <= 1:
            raise errors.ConfigurationError(f"Mutation probability must be in [0, 1] (got {probability})")
        self.lower, self.upper = check_bounds(lower, upper)
        self.random_state = random_state
        self.probability = probability

    def mutate(self, genome: tp.ArrayLike) -> np.ndarray:
        out = np.array(genome, dtype=float, copy=True)
        if out.size != self.lower.size:
            raise errors.EvoframeValueError(f"Expected a genome of size {self.lower.size}, got {out.size}")
        if self.random_state.uniform(0, 1) < self.probability:
            gene = self.random_state.randint(out.size)
            out[gene] = self.random_state.uniform(self.lower[gene], self.upper[gene])
        return out

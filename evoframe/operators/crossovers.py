# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import numpy as np
import evoframe.common.typing as tp
from evoframe.common import errors


class Combination(tp.Protocol):
    """Blends two genomes into a new child genome, leaving both untouched"""

    # pylint: disable=pointless-statement,unused-argument

    def combine(self, first: np.ndarray, second: np.ndarray) -> np.ndarray:
        ...


def _as_pair(first: tp.ArrayLike, second: tp.ArrayLike) -> tp.Tuple[np.ndarray, np.ndarray]:
    a, b = (np.asarray(x, dtype=float) for x in (first, second))
    if a.shape != b.shape or a.ndim != 1:
        raise errors.EvoframeValueError(f"Cannot combine genomes of shapes {a.shape} and {b.shape}")
    return a, b


class DifferentialCrossover:
    """Binomial crossover of differential evolution.

    Each gene is taken from the trial vector with probability :code:`crossover_rate`,
    and from the parent otherwise. One forced index, drawn in {0, 1}, is always
    taken from the trial vector.

    Parameters
    ----------
    crossover_rate: float
        probability, in [0, 1], of inheriting a gene from the trial vector
    random_state: np.random.RandomState
        the shared random state

    Note
    ----
    The forced index is drawn in {0, 1} whatever the dimension, so at least one trial gene
    is only guaranteed for genomes of dimension 2 (see DESIGN.md).
    """

    def __init__(self, crossover_rate: float, random_state: np.random.RandomState) -> None:
        if not 0 <= crossover_rate <= 1:
            raise errors.ConfigurationError(f"Crossover rate must be in [0, 1] (got {crossover_rate})")
        self.crossover_rate = float(crossover_rate)
        self.random_state = random_state

    def combine(self, trial: np.ndarray, parent: np.ndarray) -> np.ndarray:
        trial, parent = _as_pair(trial, parent)
        forced = self.random_state.randint(2)
        from_trial = self.random_state.uniform(0, 1, size=trial.size) < self.crossover_rate
        if forced < trial.size:
            from_trial[forced] = True
        return np.where(from_trial, trial, parent)


class AverageCrossover:
    """Child genes are the mean of both parents' genes"""

    def combine(self, first: np.ndarray, second: np.ndarray) -> np.ndarray:
        first, second = _as_pair(first, second)
        return (first + second) / 2.0


class SinglePointCrossover:
    """Child takes the genes of the first parent up to a random cut point, and the genes
    of the second parent from there on. The cut point is drawn in [1, dimension) so both
    parents contribute (1-dimensional genomes are copied from the first parent).
    """

    def __init__(self, random_state: np.random.RandomState) -> None:
        self.random_state = random_state

    def combine(self, first: np.ndarray, second: np.ndarray) -> np.ndarray:
        first, second = _as_pair(first, second)
        child = np.array(first, copy=True)
        if first.size > 1:
            cut = self.random_state.randint(1, first.size)
            child[cut:] = second[cut:]
        return child

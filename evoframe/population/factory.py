# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import numpy as np
import evoframe.common.typing as tp
from evoframe.common import errors
from .individual import Individual


def check_bounds(lower: tp.ArrayLike, upper: tp.ArrayLike) -> tp.Tuple[np.ndarray, np.ndarray]:
    """Converts bounds to float arrays and checks their consistency"""
    low, up = (np.array(b, dtype=float, copy=True) for b in (lower, upper))
    if low.ndim != 1 or up.ndim != 1:
        raise errors.ConfigurationError("Bounds must be one-dimensional sequences")
    if low.size != up.size:
        raise errors.ConfigurationError(f"Bounds dimensions do not match ({low.size} != {up.size})")
    if not low.size:
        raise errors.ConfigurationError("Bounds must have at least one dimension")
    if np.any(low > up):
        raise errors.ConfigurationError(f"Lower bound {low.tolist()} exceeds upper bound {up.tolist()}")
    return low, up


class ParticleFactory:
    """Creates individuals whose genes are uniformly drawn within axis-aligned bounds.

    Parameters
    ----------
    lower: array-like
        lower bound of each gene
    upper: array-like
        upper bound of each gene (same length as lower)
    random_state: np.random.RandomState
        the shared random state
    """

    def __init__(self, lower: tp.ArrayLike, upper: tp.ArrayLike, random_state: np.random.RandomState) -> None:
        self.lower, self.upper = check_bounds(lower, upper)
        self.random_state = random_state

    @property
    def dimension(self) -> int:
        return self.lower.size

    def create(self) -> Individual:
        return Individual(self.random_state.uniform(self.lower, self.upper))

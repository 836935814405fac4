# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import numpy as np
import evoframe.common.typing as tp


def select_normal(size: int, random_state: np.random.RandomState, exclude: tp.Optional[int] = None) -> int:
    """Rank-biased selection in a population sorted best first.
    The slot is drawn from a half-normal distribution of scale size / 3,
    so that the best ranked individuals are picked most often.

    Parameters
    ----------
    size: int
        population size
    random_state: np.random.RandomState
        the shared random state
    exclude: int (optional)
        slot which can not be selected (eg: the first parent)
    """
    if size < (2 if exclude is not None else 1):
        raise ValueError(f"Cannot select from a population of size {size} (excluding {exclude})")
    while True:
        index = int(min(abs(random_state.normal(0, size / 3.0)), size - 1))
        if index != exclude:
            return index

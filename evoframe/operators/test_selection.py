# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import pytest
import numpy as np
from .selection import select_normal


def test_select_normal_range_and_bias() -> None:
    rng = np.random.RandomState(12)
    draws = [select_normal(40, rng) for _ in range(2000)]
    assert min(draws) == 0
    assert max(draws) <= 39
    assert np.mean(draws) < 15  # uniform selection would average 19.5


def test_select_normal_exclude() -> None:
    rng = np.random.RandomState(12)
    for _ in range(200):
        assert select_normal(5, rng, exclude=0) != 0
    assert select_normal(2, rng, exclude=1) == 0


def test_select_normal_errors() -> None:
    rng = np.random.RandomState(12)
    assert select_normal(1, rng) == 0
    with pytest.raises(ValueError):
        select_normal(1, rng, exclude=0)
    with pytest.raises(ValueError):
        select_normal(0, rng)

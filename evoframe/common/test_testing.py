# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import typing as tp
import numpy as np
from . import testing


def test_printed_assert_equal() -> None:
    testing.printed_assert_equal(0, 0)
    np.testing.assert_raises(AssertionError, testing.printed_assert_equal, 0, 1)


@testing.parametrized(
    same=([1.0, 2.0], [1.0, 2.0], True),
    within_tol=([1.0, 2.0], [1.0, 2.0 + 1e-14], True),
    different=([1.0, 2.0], [1.0, 2.5], False),
)
def test_assert_genomes_close(first: tp.List[float], second: tp.List[float], close: bool) -> None:
    if close:
        testing.assert_genomes_close(first, second)
    else:
        np.testing.assert_raises(AssertionError, testing.assert_genomes_close, first, second)

# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import pytest
import numpy as np
from evoframe.common import testing
from evoframe.optimization import algorithmlib
from . import corefuncs


@testing.parametrized(**{name: (name,) for name in corefuncs.registry})
def test_functions_minimum_at_origin(name: str) -> None:
    func = corefuncs.registry[name]
    np.testing.assert_almost_equal(func(np.zeros(4)), 0.0, decimal=10)
    assert func(np.ones(4)) > 0
    value = func(np.array([0.3, -1.2, 2.0]))
    assert value == func(np.array([0.3, -1.2, 2.0]))  # deterministic


def test_sphere() -> None:
    assert corefuncs.sphere(np.array([1.0, 2.0, 3.0, 4.0])) == 30.0
    assert corefuncs.absolutesum(np.array([-1.0, 2.0])) == 3.0


def test_sinusoid_fit() -> None:
    times = np.linspace(0, 2, 21)
    params = np.array([2.0, 1.5, 0.3, -1.0])
    fit = corefuncs.SinusoidFit(times, corefuncs.SinusoidFit.predict(params, times))
    assert fit(params) == pytest.approx(0.0, abs=1e-20)
    assert fit(params + 0.1) > 0
    with pytest.raises(ValueError):
        fit(np.zeros(3))
    with pytest.raises(ValueError):
        corefuncs.SinusoidFit([0, 1], [1.0])


def test_sinusoid_fit_with_de() -> None:
    times = np.linspace(0, 1, 11)
    params = np.array([1.0, 0.5, 0.0, 0.5])
    fit = corefuncs.SinusoidFit(times, corefuncs.SinusoidFit.predict(params, times))
    algo = algorithmlib.JitterDE([0, 0, -1, 0], [2, 1, 1, 1], fit, random_state=12)
    algo.initialize()
    initial = algo.best.fitness
    for _ in range(100):
        algo.next_generation()
    assert algo.best.fitness < initial

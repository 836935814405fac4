# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import numpy as np
import evoframe.common.typing as tp
from evoframe.common.decorators import Registry


registry: Registry[tp.Callable[[np.ndarray], float]] = Registry()


@registry.register
def sphere(x: np.ndarray) -> float:
    """The most classical continuous optimization testbed.

    If you do not solve that one then you have a bug."""
    x = np.asarray(x, dtype=float)
    assert x.ndim == 1
    return float(x.dot(x))


@registry.register
def ackley(x: np.ndarray) -> float:
    """Multimodal function with a global minimum of 0 at the origin"""
    x = np.asarray(x, dtype=float)
    dim = x.size
    sum_cos = np.sum(np.cos(2 * np.pi * x))
    return float(
        -20.0 * np.exp(-0.2 * np.sqrt(x.dot(x) / dim)) - np.exp(sum_cos / dim) + 20 + np.exp(1)
    )


@registry.register
def absolutesum(x: np.ndarray) -> float:
    """Sum of absolute values (L1 norm)"""
    return float(np.sum(np.abs(x)))


class SinusoidFit:
    """Squared error of a sinusoid :code:`A * sin(2 * pi * f * t + phi) + D` against measurements.
    The genome holds (amplitude A, frequency f, phase phi, offset D).

    Parameters
    ----------
    times: array-like
        time of each measurement
    measurements: array-like
        measured values
    """

    def __init__(self, times: tp.ArrayLike, measurements: tp.ArrayLike) -> None:
        self.times = np.asarray(times, dtype=float)
        self.measurements = np.asarray(measurements, dtype=float)
        if self.times.shape != self.measurements.shape or self.times.ndim != 1:
            raise ValueError(
                "times and measurements must be 1d and of same shape "
                f"({self.times.shape} != {self.measurements.shape})"
            )

    @staticmethod
    def predict(x: np.ndarray, times: np.ndarray) -> np.ndarray:
        amplitude, frequency, phase, offset = x
        return amplitude * np.sin(2 * np.pi * frequency * times + phase) + offset  # type: ignore

    def __call__(self, x: np.ndarray) -> float:
        if len(x) != 4:
            raise ValueError(f"Expected (amplitude, frequency, phase, offset) but got {len(x)} values")
        error = self.measurements - self.predict(np.asarray(x, dtype=float), self.times)
        return float(error.dot(error))

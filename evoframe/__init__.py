# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from .common import typing as typing
from .common import errors as errors
from .population import Individual, TerminationCriterion, Population, MinimizeFunctionComparator
from .optimization import algorithmlib as algorithms  # busy namespace, likely to be simplified
from .optimization import callbacks as callbacks
from .optimization.base import minimize as minimize
from .functions import corefuncs as functions


__all__ = [
    "algorithms",
    "callbacks",
    "functions",
    "errors",
    "minimize",
    "typing",
    "Individual",
    "TerminationCriterion",
    "Population",
    "MinimizeFunctionComparator",
]


__version__ = "0.1.0"

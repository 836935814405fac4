# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from .individual import Individual
from .individual import TerminationCriterion
from .population import Population
from .factory import ParticleFactory
from .comparators import MinimizeFunctionComparator

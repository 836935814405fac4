# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from .mutations import MutationConfig
from .mutations import DifferentialMutation
from .mutations import RandomMutation
from .crossovers import DifferentialCrossover
from .crossovers import AverageCrossover
from .crossovers import SinglePointCrossover
from .selection import select_normal
from .crossovers import Combination

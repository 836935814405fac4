# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

# pylint: disable=unused-import
from .base import registry as registry
from .base import minimize as minimize
from .differentialevolution import DifferentialEvolution
from .genetic import GeneticAlgorithm
from .hillclimbing import HillClimbing


# # # # # differential evolution # # # # #

DE = DifferentialEvolution().set_name("DE", register=True)
BestDE = DifferentialEvolution(trial_vector_variation="best").set_name("BestDE", register=True)
DitherDE = DifferentialEvolution(scale_factor_variation="dither").set_name("DitherDE", register=True)
JitterDE = DifferentialEvolution(scale_factor_variation="jitter").set_name("JitterDE", register=True)
TwoDiffDE = DifferentialEvolution(num_differences=2).set_name("TwoDiffDE", register=True)
BestTwoDiffDE = DifferentialEvolution(num_differences=2, trial_vector_variation="best").set_name(
    "BestTwoDiffDE", register=True
)
SynchronousDE = DifferentialEvolution(update="synchronous").set_name("SynchronousDE", register=True)

# # # # # genetic algorithms # # # # #

GA = GeneticAlgorithm().set_name("GA", register=True)
SinglePointGA = GeneticAlgorithm(crossover="singlepoint").set_name("SinglePointGA", register=True)
NoElitismGA = GeneticAlgorithm(elitism=0).set_name("NoElitismGA", register=True)

# # # # # hill climbing # # # # #

HC = HillClimbing().set_name("HillClimbing", register=True)

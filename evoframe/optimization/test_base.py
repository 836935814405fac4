# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import pytest
import numpy as np
from evoframe.common import errors
from evoframe.common import testing
from evoframe.functions import corefuncs
from evoframe.population import MinimizeFunctionComparator
from evoframe.population import TerminationCriterion
from . import base
from . import algorithmlib
from .differentialevolution import DifferentialEvolution


def test_presets_are_registered() -> None:
    expected = {"DE", "BestDE", "DitherDE", "JitterDE", "TwoDiffDE", "BestTwoDiffDE", "SynchronousDE"}
    expected |= {"GA", "SinglePointGA", "NoElitismGA", "HillClimbing"}
    assert expected <= set(algorithmlib.registry)
    assert algorithmlib.registry is base.registry
    assert algorithmlib.registry["BestDE"].trial_vector_variation == "best"  # type: ignore


def test_configured_algorithm_equality() -> None:
    assert DifferentialEvolution() == algorithmlib.registry["DE"]
    assert DifferentialEvolution(popsize=12) != algorithmlib.registry["DE"]
    assert algorithmlib.registry["DE"].config()["popsize"] == 40


def test_registration_collision() -> None:
    with pytest.raises(RuntimeError):
        DifferentialEvolution().set_name("DE", register=True)


def test_algorithm_instance() -> None:
    algo = algorithmlib.DE([-5, -5], [5, 5], corefuncs.sphere, termination=0.01, random_state=12)
    assert algo.name == "DE"
    assert algo.dimension == 2
    assert repr(algo) == "Instance of DE(dimension=2, popsize=40)"
    assert isinstance(algo.termination, TerminationCriterion)
    assert algo.termination.threshold == 0.01
    assert algo.population is None
    with pytest.raises(errors.EvoframeRuntimeError):
        algo.best  # pylint: disable=pointless-statement
    with pytest.raises(AssertionError):
        algo.register_callback("blublu", lambda a, v: None)


def test_shared_random_state_and_comparator() -> None:
    rng = np.random.RandomState(12)
    comparator = MinimizeFunctionComparator(corefuncs.sphere)
    algo = algorithmlib.DE([-5, -5], [5, 5], comparator, random_state=rng)
    assert algo.random_state is rng
    assert algo.factory.random_state is rng
    assert algo.comparator is comparator
    algo.initialize()
    algo.next_generation()
    assert comparator.num_evaluations >= 80


def test_remove_all_callbacks() -> None:
    calls = []
    algo = algorithmlib.HC([-5, -5], [5, 5], corefuncs.sphere, random_state=12)
    algo.register_callback("generation", lambda a, v: calls.append(v))
    algo.remove_all_callbacks()
    algo.initialize()
    algo.next_generation()
    assert not calls


@testing.parametrized(
    de=("DE",),
    best_two_diffs=("BestTwoDiffDE",),
    jitter=("JitterDE",),
    synchronous=("SynchronousDE",),
)
def test_minimize(name: str) -> None:
    records = []
    best = base.minimize(
        name,
        corefuncs.sphere,
        [-5, -5],
        [5, 5],
        termination=1e-6,
        random_state=12,
        callbacks=[lambda a, v: records.append(min(v))],
    )
    assert best.fitness is not None and best.fitness < 1e-6
    assert records[-1] == best.fitness


def test_minimize_same_seed_same_result() -> None:
    config = DifferentialEvolution(scale_factor_variation="dither", max_generations=50)
    bests = [base.minimize(config, corefuncs.ackley, [-5] * 3, [5] * 3, random_state=24) for _ in range(2)]
    testing.assert_genomes_close(bests[0], bests[1], atol=0)
    assert bests[0].fitness == bests[1].fitness


def test_minimize_unknown_algorithm() -> None:
    with pytest.raises(KeyError):
        base.minimize("blublu", corefuncs.sphere, [0], [1])

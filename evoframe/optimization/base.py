# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import logging
import warnings
import numpy as np
import evoframe.common.typing as tp
from evoframe.common import tools
from evoframe.common import errors
from evoframe.common.decorators import Registry
from evoframe.population import Individual
from evoframe.population import TerminationCriterion
from evoframe.population import Population
from evoframe.population import ParticleFactory
from evoframe.population import MinimizeFunctionComparator


logger = logging.getLogger(__name__)
registry: Registry["ConfiguredAlgorithm"] = Registry()
_GenerationCallBack = tp.Callable[["Algorithm", tp.List[float]], None]
ObjectiveOrComparator = tp.Union[tp.ObjectiveFunction, MinimizeFunctionComparator]
DEFAULT_MAX_GENERATIONS = 1000


class Algorithm:  # pylint: disable=too-many-instance-attributes
    """Population-based minimization over a box-bounded real vector domain.

    The run follows a simple loop:

    - :code:`initialize()` samples the population uniformly within the bounds.
    - :code:`next_generation()` evolves the population in place (to be implemented in
      :code:`_internal_next_generation`).
    - :code:`run()` iterates generations until an individual is strictly better than the
      termination criterion, or until :code:`max_generations` is reached.

    Each time a subclass records the fitness of the population, the callbacks registered on
    "generation" are called with the algorithm and the list of fitness values.

    Parameters
    ----------
    lower: array-like
        lower bounds of the initialization domain
    upper: array-like
        upper bounds of the initialization domain
    function: callable or MinimizeFunctionComparator
        objective function to minimize (taking the genome as a np.ndarray), or a comparator
        already wrapping it
    termination: float, TerminationCriterion or None
        fitness threshold ending the run as soon as it is bettered. If None, the run lasts
        exactly max_generations generations
    max_generations: int
        maximum number of generations of a run
    random_state: int, np.random.RandomState or None
        seed or random state shared by every random operation of the algorithm
    """

    def __init__(
        self,
        lower: tp.ArrayLike,
        upper: tp.ArrayLike,
        function: ObjectiveOrComparator,
        *,
        termination: tp.Optional[tp.Union[float, TerminationCriterion]] = None,
        max_generations: int = DEFAULT_MAX_GENERATIONS,
        random_state: tp.Seed = None,
    ) -> None:
        if max_generations < 1:
            raise errors.ConfigurationError(f"max_generations must be positive (got {max_generations})")
        self.random_state = tools.make_random_state(random_state)
        self.factory = ParticleFactory(lower, upper, self.random_state)
        self.comparator = (
            function
            if isinstance(function, MinimizeFunctionComparator)
            else MinimizeFunctionComparator(function)
        )
        if termination is not None and not isinstance(termination, TerminationCriterion):
            termination = TerminationCriterion(termination)
        self.termination = termination
        self.max_generations = int(max_generations)
        self.name = self.__class__.__name__  # printed name in repr
        self.popsize = 1
        self.population: tp.Optional[Population] = None
        self.runaway = False
        self._num_generations = 0
        self._callbacks: tp.Dict[str, tp.List[_GenerationCallBack]] = {}

    @property
    def dimension(self) -> int:
        """int: Dimension of the optimization space."""
        return self.factory.dimension

    @property
    def num_generations(self) -> int:
        """int: Number of generations since initialization."""
        return self._num_generations

    @property
    def terminated(self) -> bool:
        return self.population is not None and (
            self.is_termination_condition() or self._num_generations >= self.max_generations
        )

    @property
    def best(self) -> Individual:
        """Individual: the fittest individual of the current population"""
        population = self._get_population()
        best = min(population, key=self.comparator.key)
        self.comparator.evaluate(best)  # min does not call the key on a single individual
        return best

    def __repr__(self) -> str:
        return f"Instance of {self.name}(dimension={self.dimension}, popsize={self.popsize})"

    def register_callback(self, name: str, callback: _GenerationCallBack) -> None:
        """Add a callback called each time the fitness of the population is recorded
        (once per generation, and once at the end of a run).

        Parameters
        ----------
        name: str
            name of the event to register the callback for (only :code:`generation`)
        callback: callable
            a callable taking the algorithm and the list of fitness values of the population
        """
        assert name == "generation", f'Only "generation" callbacks are supported (not {name})'
        self._callbacks.setdefault(name, []).append(callback)

    def remove_all_callbacks(self) -> None:
        """Removes all registered callables"""
        self._callbacks = {}

    def _get_population(self) -> Population:
        if self.population is None:
            raise errors.EvoframeRuntimeError("The population is not initialized, call initialize() first")
        return self.population

    def initialize(self) -> None:
        """Samples a new population within the bounds"""
        self.population = Population.from_factory(self.factory, self.popsize)
        self._num_generations = 0
        self.runaway = False

    def record_fitness(self) -> tp.List[float]:
        """Sends the fitness values of the population, in slot order, to the registered callbacks"""
        values = self._get_population().fitness_values(self.comparator)
        for callback in self._callbacks.get("generation", []):
            callback(self, values)
        return values

    def next_generation(self) -> None:
        """Evolves the population by one generation"""
        self._get_population()
        self._internal_next_generation()
        self._num_generations += 1

    def _internal_next_generation(self) -> None:
        raise NotImplementedError

    def is_termination_condition(self) -> bool:
        """Whether any individual is strictly better than the termination criterion"""
        if self.termination is None:
            return False
        return any(self.comparator.is_better(ind, self.termination) for ind in self._get_population())

    def run(self) -> Individual:
        """Runs a full optimization from a new population

        Returns
        -------
        Individual
            the best individual of the final population
        """
        self.initialize()
        population = self._get_population()
        while not self.is_termination_condition() and self._num_generations < self.max_generations:
            logger.debug("%s generation %s", self.name, self._num_generations)
            self.next_generation()
        if self.termination is not None and not self.is_termination_condition():
            self.runaway = True
            logger.warning(
                "%s stopped after %s generations without reaching %s",
                self.name,
                self._num_generations,
                self.termination,
            )
            warnings.warn(
                f"Reached {self.max_generations} generations before the termination criterion "
                f"(fitness < {self.termination.threshold})",
                errors.RunawayWarning,
            )
        population.sort(self.comparator)
        self.record_fitness()
        best = population[0]
        logger.info(
            "%s best genome after %s generations: %s (fitness %s)",
            self.name,
            self._num_generations,
            best.genome.tolist(),
            best.fitness,
        )
        return best


class ConfiguredAlgorithm:
    """Creates algorithm-like instances with configuration.

    Parameters
    ----------
    AlgorithmClass: type
        class of the algorithm to configure, which receives this instance as :code:`config` kwarg
    config: dict
        dictionnary of all the configurations (typically :code:`locals()`)

    Note
    ----
    This provides a default repr which can be bypassed through set_name
    """

    def __init__(self, AlgorithmClass: tp.Type[Algorithm], config: tp.Dict[str, tp.Any]) -> None:
        self._AlgorithmClass = AlgorithmClass
        config.pop("self", None)  # self comes from "locals()"
        config.pop("__class__", None)  # self comes from "locals()"
        self._config = config  # keep all, to avoid weird behavior at mismatch between algorithm and config
        diff = tools.different_from_defaults(instance=self, instance_dict=config, check_mismatches=True)
        params = ", ".join(f"{x}={y!r}" for x, y in sorted(diff.items()))
        self.name = f"{self.__class__.__name__}({params})"

    def config(self) -> tp.Dict[str, tp.Any]:
        return dict(self._config)

    def __call__(
        self,
        lower: tp.ArrayLike,
        upper: tp.ArrayLike,
        function: ObjectiveOrComparator,
        *,
        termination: tp.Optional[tp.Union[float, TerminationCriterion]] = None,
        random_state: tp.Seed = None,
    ) -> Algorithm:
        """Creates an algorithm instance for a given problem

        Parameters
        ----------
        lower: array-like
            lower bounds of the initialization domain
        upper: array-like
            upper bounds of the initialization domain
        function: callable or MinimizeFunctionComparator
            objective function to minimize
        termination: float, TerminationCriterion or None
            fitness threshold ending the run
        random_state: int, np.random.RandomState or None
            seed or random state of the run
        """
        run = self._AlgorithmClass(  # type: ignore
            lower, upper, function, termination=termination, random_state=random_state, config=self
        )
        run.name = self.name
        return run

    def __repr__(self) -> str:
        return self.name

    def set_name(self, name: str, register: bool = False) -> "ConfiguredAlgorithm":
        """Set a new representation for the instance"""
        self.name = name
        if register:
            registry.register_name(name, self)
        return self

    def __eq__(self, other: tp.Any) -> tp.Any:
        if self.__class__ == other.__class__:
            if self._config == other._config:
                return True
        return False


def minimize(
    algorithm: tp.Union[str, ConfiguredAlgorithm],
    function: ObjectiveOrComparator,
    lower: tp.ArrayLike,
    upper: tp.ArrayLike,
    *,
    termination: tp.Optional[float] = None,
    random_state: tp.Seed = None,
    callbacks: tp.Iterable[_GenerationCallBack] = (),
) -> Individual:
    """Runs a registered (or provided) configured algorithm on a function and returns the best individual

    Example
    -------
    >>> best = minimize("DE", corefuncs.sphere, [-5, -5], [5, 5], termination=1e-6, random_state=12)
    """
    configured = registry[algorithm] if isinstance(algorithm, str) else algorithm
    algo = configured(lower, upper, function, termination=termination, random_state=random_state)
    for callback in callbacks:
        algo.register_callback("generation", callback)
    return algo.run()


def check_positive_int(name: str, value: tp.Any) -> None:
    if not isinstance(value, (int, np.integer)) or isinstance(value, bool) or value < 1:
        raise errors.ConfigurationError(f"{name} must be a positive integer (got {value!r})")

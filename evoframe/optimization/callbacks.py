# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import logging
import warnings
from pathlib import Path
import evoframe.common.typing as tp
from evoframe.common import errors
from . import base

global_logger = logging.getLogger(__name__)


def create_log_file(filepath: tp.PathLike) -> Path:
    """Creates a new empty log file, with its parent folders.
    If the file already exists, a counter is inserted before the suffix
    until a free name is found: name.csv, name1.csv, name2.csv...

    Returns
    -------
    Path
        the path of the created file
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(exist_ok=True, parents=True)
    candidate = filepath
    counter = 1
    while True:
        try:
            candidate.touch(exist_ok=False)
        except FileExistsError:
            candidate = filepath.with_name(f"{filepath.stem}{counter}{filepath.suffix}")
            counter += 1
        else:
            return candidate


# -------------------------------------------------------------------------------------


class CsvFitnessLogger:
    """Appends the fitness values of the population to a CSV file, one line per
    generation, to register as "generation" callback of an algorithm.

    Parameters
    ----------
    filepath: str or pathlib.Path
        the path to dump data to. A new file is created, with a numeric suffix if the
        path is already taken (see :code:`create_log_file`)

    Example
    -------

    .. code-block:: python

        logger = CsvFitnessLogger("data/de_40.csv")
        algorithm.register_callback("generation", logger)
        algorithm.run()
        fitness_per_generation = logger.load()

    Note
    ----
    Failing to write a record only issues a :code:`LogWriteWarning`, the run goes on.
    """

    def __init__(self, filepath: tp.PathLike) -> None:
        self.filepath = create_log_file(filepath)

    def append_record(self, values: tp.Iterable[float]) -> None:
        line = ",".join(str(float(v)) for v in values)
        try:  # avoid bugging as much as possible
            with self.filepath.open("a") as f:
                f.write(line + "\n")
        except OSError as e:
            warnings.warn(f"Failing to log fitness to {self.filepath}: {e}", errors.LogWriteWarning)

    def __call__(self, algorithm: base.Algorithm, values: tp.List[float]) -> None:
        self.append_record(values)

    def load(self) -> tp.List[tp.List[float]]:
        """Loads the records of the log file"""
        data: tp.List[tp.List[float]] = []
        if self.filepath.exists():
            with self.filepath.open("r") as f:
                for line in f.read().splitlines():
                    if line:
                        data.append([float(x) for x in line.split(",")])
        return data


# -------------------------------------------------------------------------------------


class GenerationLogger:
    """Logger to register as "generation" callback of an algorithm, for logging the
    best fitness regularly.

    Parameters
    ----------
    logger:
        given logger that callback will use to log
    log_level:
        log level that logger will write to
    log_interval: int
        number of generations between two logs
    """

    def __init__(
        self,
        *,
        logger: logging.Logger = global_logger,
        log_level: int = logging.INFO,
        log_interval: int = 1,
    ) -> None:
        assert log_interval > 0
        self._logger = logger
        self._log_level = log_level
        self._log_interval = int(log_interval)
        self._num_calls = 0

    def __call__(self, algorithm: base.Algorithm, values: tp.List[float]) -> None:
        if not self._num_calls % self._log_interval:
            self._logger.log(
                self._log_level,
                "%s after %s generations, best fitness is %s",
                algorithm.name,
                algorithm.num_generations,
                min(values),
            )
        self._num_calls += 1

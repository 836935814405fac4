# Copyright (c) Meta Platforms, Inc. and affiliates.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import logging
from pathlib import Path
import pytest
from evoframe.common import errors
from evoframe.functions import corefuncs
from . import callbacks
from .differentialevolution import DifferentialEvolution


def test_create_log_file(tmp_path: Path) -> None:
    filepath = tmp_path / "logs" / "de.csv"
    paths = [callbacks.create_log_file(filepath) for _ in range(3)]
    assert [p.name for p in paths] == ["de.csv", "de1.csv", "de2.csv"]
    assert all(p.exists() for p in paths)
    nosuffix = [callbacks.create_log_file(tmp_path / "log").name for _ in range(2)]
    assert nosuffix == ["log", "log1"]


def test_csv_fitness_logger(tmp_path: Path) -> None:
    logger = callbacks.CsvFitnessLogger(tmp_path / "fitness.csv")
    logger.append_record([1.5, 2.25, 0.75])
    assert logger.filepath.read_text() == "1.5,2.25,0.75\n"
    logger.append_record([3])
    assert logger.load() == [[1.5, 2.25, 0.75], [3.0]]
    other = callbacks.CsvFitnessLogger(tmp_path / "fitness.csv")
    assert other.filepath.name == "fitness1.csv"
    assert not other.load()


def test_csv_fitness_logger_with_algorithm(tmp_path: Path) -> None:
    logger = callbacks.CsvFitnessLogger(tmp_path / "fitness.csv")
    config = DifferentialEvolution(popsize=5, max_generations=3)
    algo = config([-1, -1], [1, 1], corefuncs.sphere, random_state=12)
    algo.register_callback("generation", logger)
    algo.run()
    data = logger.load()
    assert len(data) == 4
    assert all(len(line) == 5 for line in data)
    assert data[-1] == sorted(data[-1])


def test_csv_fitness_logger_write_failure(tmp_path: Path) -> None:
    logger = callbacks.CsvFitnessLogger(tmp_path / "sub" / "fitness.csv")
    logger.filepath.unlink()
    logger.filepath.parent.rmdir()
    config = DifferentialEvolution(popsize=5, max_generations=2)
    algo = config([-1, -1], [1, 1], corefuncs.sphere, random_state=12)
    algo.register_callback("generation", logger)
    with pytest.warns(errors.LogWriteWarning):
        best = algo.run()  # the run goes on
    assert algo.num_generations == 2
    assert best.fitness is not None


def test_generation_logger(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("evoframe_test_generation_logger")
    config = DifferentialEvolution(popsize=5, max_generations=4)
    algo = config([-1, -1], [1, 1], corefuncs.sphere, random_state=12)
    algo.register_callback("generation", callbacks.GenerationLogger(logger=logger, log_interval=2))
    with caplog.at_level(logging.INFO):
        algo.run()
    messages = [r.getMessage() for r in caplog.records if r.name == logger.name]
    assert len(messages) == 3  # 4 generations plus the final record, one every 2 calls
    assert messages[0].startswith("DifferentialEvolution(max_generations=4, popsize=5) after 0 generations")
    assert "best fitness is" in messages[-1]

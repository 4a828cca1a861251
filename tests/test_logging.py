import logging

import pytest

from log_config import ROOT_LOGGER_NAME, get_logger, set_global_log_level


@pytest.fixture
def restore_level():
    root = logging.getLogger(ROOT_LOGGER_NAME)
    level = root.level
    yield root
    set_global_log_level(level)


def test_module_loggers_hang_off_the_root():
    assert get_logger("algorithms.dijkstra").name == "dijkstra_viz.algorithms.dijkstra"
    assert get_logger("dijkstra_viz.engine").name == "dijkstra_viz.engine"
    assert get_logger(ROOT_LOGGER_NAME).name == ROOT_LOGGER_NAME


def test_root_has_single_handler():
    get_logger("a")
    get_logger("b")
    assert len(logging.getLogger(ROOT_LOGGER_NAME).handlers) == 1


def test_set_global_level_by_name(restore_level):
    set_global_log_level("debug")
    assert restore_level.level == logging.DEBUG
    assert get_logger("engine.driver").getEffectiveLevel() == logging.DEBUG


def test_unknown_level_name_rejected(restore_level):
    with pytest.raises(ValueError):
        set_global_log_level("chatty")


def test_step_detail_logged_at_debug(sample, caplog):
    from algorithms import DijkstraStepper

    caplog.set_level(logging.DEBUG, logger=ROOT_LOGGER_NAME)
    DijkstraStepper(sample, "a", "z").advance()

    messages = [r.getMessage() for r in caplog.records if r.levelno == logging.DEBUG]
    assert "Finalize 'a' at distance 0" in messages
    assert "Relax 'a'-'b': inf -> 22" in messages

"""Tests for logging setup."""

import logging

import pytest

from wordsphere.logging_config import ANIMATION_LOGGER, PACKAGE_LOGGER, setup_logging


@pytest.fixture
def restore_loggers():
    package = logging.getLogger(PACKAGE_LOGGER)
    animation = logging.getLogger(ANIMATION_LOGGER)
    saved = (package.level, list(package.handlers), animation.level)
    yield
    package.setLevel(saved[0])
    package.handlers[:] = saved[1]
    animation.setLevel(saved[2])


def test_animation_logger_is_quiet_by_default(restore_loggers):
    setup_logging(level=logging.DEBUG)
    assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG
    assert logging.getLogger(ANIMATION_LOGGER).level == logging.WARNING


def test_animation_level_can_be_raised_for_tracing(restore_loggers):
    setup_logging(level=logging.INFO, animation_level=logging.DEBUG)
    assert logging.getLogger(ANIMATION_LOGGER).isEnabledFor(logging.DEBUG)
    assert not logging.getLogger("wordsphere.controller.cloud").isEnabledFor(logging.DEBUG)


def test_repeated_setup_does_not_duplicate_handlers(restore_loggers, tmp_path):
    log_file = tmp_path / "wordsphere.log"
    setup_logging(log_file=str(log_file))
    setup_logging(log_file=str(log_file))
    handlers = logging.getLogger(PACKAGE_LOGGER).handlers
    assert len(handlers) == 2
    for handler in handlers:
        handler.close()
    assert "Logging initialized" in log_file.read_text(encoding="utf-8")

"""Unit tests for the package logging helpers."""

import logging
import sys

import pytest

from chart_forge.logging import LOGGER_NAME, configure_logging, get_logger


@pytest.fixture
def package_logger():
    logger = logging.getLogger(LOGGER_NAME)
    saved = logger.handlers[:], logger.level
    logger.handlers.clear()
    yield logger
    logger.handlers[:], logger.level = saved[0], saved[1]


def _stderr_handlers(logger):
    return [h for h in logger.handlers if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr]


def test_get_logger_defaults_to_package_logger():
    assert get_logger().name == "chart_forge"
    assert get_logger("chart_forge.maths").name == "chart_forge.maths"


def test_configure_logging_installs_single_handler(package_logger):
    configure_logging(level="DEBUG")
    configure_logging(level="DEBUG")
    assert package_logger.level == logging.DEBUG
    assert len(_stderr_handlers(package_logger)) == 1


def test_configure_logging_reads_environment(package_logger, monkeypatch):
    monkeypatch.setenv("CHART_FORGE_LOG_LEVEL", "warning")
    configure_logging()
    assert package_logger.level == logging.WARNING


def test_configure_logging_force_replaces_handler(package_logger):
    configure_logging(level="INFO")
    first = package_logger.handlers[0]
    configure_logging(level="ERROR", force=True)
    assert package_logger.handlers != [first]
    assert package_logger.level == logging.ERROR

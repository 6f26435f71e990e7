"""Tests for setup_logging."""

import logging

import pytest

from pagescore.logging_setup import setup_logging


@pytest.fixture()
def restore_logger():
    logger = logging.getLogger("pagescore")
    saved = (logger.level, logger.propagate, list(logger.handlers))
    yield logger
    logger.setLevel(saved[0])
    logger.propagate = saved[1]
    logger.handlers = saved[2]


def test_level_from_argument(restore_logger):
    setup_logging("debug")
    assert restore_logger.level == logging.DEBUG
    assert len(restore_logger.handlers) == 1


def test_default_level(restore_logger, monkeypatch):
    monkeypatch.setattr("pagescore.logging_setup.LOG_LEVEL", "warning")
    setup_logging()
    assert restore_logger.level == logging.WARNING

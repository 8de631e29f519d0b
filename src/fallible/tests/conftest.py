"""Shared fixtures for fallible tests."""

import logging

import pytest

from fallible.foundation.config import clear_settings_cache


@pytest.fixture(autouse=True)
def clean_settings() -> object:
    """Re-read the environment for each test."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture(autouse=True)
def clean_logger() -> object:
    """Undo configure_logging() so caplog keeps seeing fallible records."""
    logger = logging.getLogger("fallible")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate

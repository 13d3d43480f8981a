"""Pytest configuration and fixtures."""
from __future__ import annotations

import logging
from typing import Generator

import pytest

import fallible.shared.logging as fallible_logging
from fallible.shared.config import Settings, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Drop cached settings so environment changes in a test take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def reset_logging() -> Generator[None, None, None]:
    """Undo configure_logging side effects on the fallible logger."""
    library_logger = logging.getLogger(fallible_logging.LIBRARY_LOGGER)
    handlers = list(library_logger.handlers)
    level = library_logger.level
    propagate = library_logger.propagate
    fallible_logging._configured = False
    yield
    for handler in library_logger.handlers[:]:
        if handler not in handlers:
            library_logger.removeHandler(handler)
            handler.close()
    library_logger.setLevel(level)
    library_logger.propagate = propagate
    fallible_logging._configured = False


@pytest.fixture
def test_settings() -> Settings:
    """Settings with captured-error logging switched on."""
    return Settings(log_level="DEBUG", log_captured_errors=True)

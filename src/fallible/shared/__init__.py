"""Shared module.

Cross-cutting concerns: configuration and logging.
"""
from fallible.shared.config import Settings, get_settings
from fallible.shared.logging import configure_logging, get_logger

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
]

"""Top-level pytest configuration for cumerr."""

import logging

import pytest

from cumerr.config import get_settings
from cumerr.logging import ROOT_LOGGER_NAME
from cumerr.registry import default_registry

CUMERR_ENV_KEYS = [
    "CUMERR_CHECKED_INDICES",
    "CUMERR_ABORT_ON_EMPTY",
    "CUMERR_LOG_EVENTS",
    "CUMERR_LOGGING_LEVEL",
    "CUMERR_LOGGING_JSON_FORMAT",
    "CUMERR_LOGGING_INCLUDE_TIMESTAMP",
    "CUMERR_LOGGING_CONSOLE_ENABLED",
]


@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    """Give every test the built-in tag table, default settings and a quiet logger."""
    for key in CUMERR_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    default_registry.reset()
    get_settings.cache_clear()

    yield

    default_registry.reset()
    get_settings.cache_clear()
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_cumerr_managed", False):
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)

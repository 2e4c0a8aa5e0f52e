"""Pytest configuration and fixtures."""

import io
import logging

import pytest


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Drop every logger under the dietest prefix so setup_logger can reuse names."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("dietest")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


@pytest.fixture
def out():
    """In-memory stream to capture verdict lines."""
    return io.StringIO()

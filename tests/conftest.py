"""Pytest configuration and shared fixtures for klaw-option tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from klaw_option import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from klaw_option import Nothing

    return Nothing


@pytest.fixture
def sample_one():
    """Sample One value for testing."""
    from klaw_option import One

    return One(10)


@pytest.fixture
def sample_many():
    """Sample Many value for testing."""
    from klaw_option import Many

    return Many([10, 20, 30])


@pytest.fixture
def restore_loggers() -> Generator[None]:
    """Restore root and klaw_option logger state after tests that configure logging."""
    from klaw_option import _logging

    saved = []
    for logger in (logging.getLogger(), logging.getLogger(_logging.LIBRARY_LOGGER)):
        saved.append((logger, list(logger.handlers), logger.level, logger.propagate))
    handler = _logging._handler
    yield
    for logger, handlers, level, propagate in saved:
        logger.handlers[:] = handlers
        logger.setLevel(level)
        logger.propagate = propagate
    _logging._handler = handler

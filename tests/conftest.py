"""Shared fixtures for httpview tests."""

from unittest.mock import MagicMock

import pytest

from httpview.logging import HttpviewLoggerAdapter, configure_logging


@pytest.fixture(autouse=True)
def reset_logger_factory():
    """Restore the stdlib logger factory after each test."""
    yield
    configure_logging(None)


@pytest.fixture
def recording_logger():
    """HttpviewLoggerAdapter backed by a mock so calls can be asserted."""
    inner = MagicMock()
    return HttpviewLoggerAdapter(inner), inner

"""Shared pytest fixtures for deptree tests."""

import pytest
import structlog


@pytest.fixture(autouse=True)
def _silence_structlog():
    """Keep log lines out of captured stdout; capture_logs still sees events."""
    structlog.configure(logger_factory=structlog.ReturnLoggerFactory())
    yield
    structlog.reset_defaults()

"""Shared fixtures for the test-suite.

The application package root (``app/``) is put on ``sys.path`` by the pytest
``pythonpath`` setting in pyproject.toml, so ``infrastructure.*`` and
``tests.factories.*`` import directly.
"""

import pytest
import structlog


@pytest.fixture(autouse=True)
def clean_logging_context():
    """Ensure no scope or correlation ID leaks between tests."""
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()

"""Root test fixtures shared across all test types.

Unit tests work on a bare ``Store``; integration tests in
tests/integration/conftest.py wrap one in an app and an HTTP client.
"""

import os

os.environ.setdefault("APP_ENV", "testing")
# Cheap hashing - tests register many users
os.environ.setdefault("ARGON2_TIME_COST", "1")
os.environ.setdefault("ARGON2_MEMORY_COST", "1024")

# ruff: noqa: E402 - Imports must be after env var setup
import pytest
import structlog
from structlog.testing import CapturingLogger

from src.app.core.config import get_settings
from src.app.core.logging import clear_request_context
from src.app.core.security import get_password_hasher
from src.app.repositories import Store

# Clear caches so the test environment variables are picked up
get_settings.cache_clear()
get_password_hasher.cache_clear()


@pytest.fixture
def store() -> Store:
    """A fresh, empty store per test."""
    return Store()


@pytest.fixture
def capturing_logger():
    """Route structlog output into a CapturingLogger for the test."""
    cap_logger = CapturingLogger()
    old_config = structlog.get_config()

    structlog.configure(
        processors=[structlog.contextvars.merge_contextvars],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=lambda *args, **kwargs: cap_logger,
        cache_logger_on_first_use=False,
    )

    clear_request_context()
    yield cap_logger
    clear_request_context()
    structlog.configure(**old_config)

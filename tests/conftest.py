"""
Pytest configuration and fixtures.
"""

import os
import pytest


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Setup test environment variables."""

    test_env = {
        "SHAMBAGO_LOG_LEVEL": "WARNING",
        "SHAMBAGO_STORAGE_SECRET": "test_secret",
    }

    for key, value in test_env.items():
        os.environ[key] = value

    yield

    # Cleanup
    for key in test_env:
        os.environ.pop(key, None)


@pytest.fixture
def store():
    """In-memory stand-in for the local key-value store."""
    return {}


@pytest.fixture
def session(store):
    from shambago.auth_service.session_manager import SessionManager

    manager = SessionManager(store)
    manager.load()
    yield manager
    manager.teardown()

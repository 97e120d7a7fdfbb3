"""Root conftest: shared test configuration."""

import os

import pytest

# Keep hashing fast and DNS lookups off during tests
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("PASSWORD_HASH_ITERATIONS", "1000")
os.environ.setdefault("EMAIL_CHECK_DELIVERABILITY", "false")

from signup_service.core.di.service_locator import ServiceLocator  # noqa: E402


@pytest.fixture(autouse=True)
def reset_service_locator():
    ServiceLocator.reset()
    yield
    ServiceLocator.reset()

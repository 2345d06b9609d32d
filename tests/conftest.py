"""Pytest configuration and shared fixtures."""

from django.core.cache import cache
from django.test import Client

import pytest

from notices.auth.context import clear_current_user
from notices.services.notice_registry import notice_registry


@pytest.fixture(autouse=True)
def isolated_notice_state():
    """Reset process-wide notice state around every test."""
    notice_registry.clear()
    cache.clear()
    clear_current_user()
    yield
    notice_registry.clear()
    cache.clear()
    clear_current_user()


@pytest.fixture
def api_client():
    """Provide Django test client."""
    return Client()

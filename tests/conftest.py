"""Test configuration and fixtures."""

import pytest

from reactions.config import AuthSettings
from tests.harness import ADMIN_TOKEN, GUEST_COOKIE, JWT_SECRET


@pytest.fixture(autouse=True)
def _test_settings(monkeypatch):
    """Pin the settings tests rely on, whatever the local .env says."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("REACTIONS__DEFAULT_MODE", "like_dislike")
    monkeypatch.setenv("AUTH__JWT_SECRET", JWT_SECRET)
    monkeypatch.setenv("AUTH__GUEST_COOKIE_NAME", GUEST_COOKIE)
    monkeypatch.setenv("ADMIN__TOKEN", ADMIN_TOKEN)


@pytest.fixture
def auth_settings() -> AuthSettings:
    """Auth settings matching the pinned environment."""
    return AuthSettings(jwt_secret=JWT_SECRET, guest_cookie_name=GUEST_COOKIE)

"""Shared fixtures for the log query tests."""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from logquery.config import settings
from logquery.engine import SearchSuggestions
from logquery.models import Suggestion
from logquery.server import app

WORKFLOWS = ["Daily report", "Weekly digest", "Report archive"]
FOLDERS = ["Ops", "Marketing"]


@pytest.fixture
def suggestions() -> SearchSuggestions:
    """Engine seeded with a few workflows and folders."""
    return SearchSuggestions(workflows=WORKFLOWS, folders=FOLDERS)


@pytest.fixture
def empty_suggestions() -> SearchSuggestions:
    """Engine with no dynamic domains."""
    return SearchSuggestions()


@pytest.fixture
def fixed_now() -> datetime:
    """Wednesday 2026-10-14 15:30 local time."""
    return datetime(2026, 10, 14, 15, 30, 12, 345000).astimezone()


@pytest.fixture
def make_suggestion():
    """Build a Suggestion with only the fields a test cares about."""

    def _make(value: str, category: str = "filters") -> Suggestion:
        return Suggestion(id=f"test-{value}", value=value, label=value, category=category)

    return _make


@pytest.fixture
def client():
    """Test client with the lifespan run, so the engine exists."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_key(monkeypatch) -> str:
    """Configure an admin key for domain updates."""
    monkeypatch.setattr(settings, "admin_api_key", "secret-admin-key")
    return "secret-admin-key"

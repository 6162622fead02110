"""
Configuration for pytest tests.
"""

import os
import pytest
from unittest.mock import MagicMock

os.environ.setdefault("ENVIRONMENT", "development")

from fastapi.testclient import TestClient

from app.api.app import app
from app.config import config
from app.db.token_store import InMemoryTokenStore, get_token_store
from app.models.schemas import NotionTokenRecord


@pytest.fixture
def token_store():
    """Fresh token store injected into the app for one test."""
    store = InMemoryTokenStore()
    app.dependency_overrides[get_token_store] = lambda: store
    yield store
    app.dependency_overrides.pop(get_token_store, None)


@pytest.fixture
def client(token_store):
    """Test client bound to an isolated token store."""
    return TestClient(app)


@pytest.fixture
def notion_settings(monkeypatch):
    """Configure the Notion OAuth integration."""
    monkeypatch.setattr(config, "NOTION_CLIENT_ID", "client-123")
    monkeypatch.setattr(config, "NOTION_CLIENT_SECRET", "secret-456")
    monkeypatch.setattr(config, "NOTION_REDIRECT_URI", "http://localhost:5000/api/notion/callback")
    monkeypatch.setattr(config, "FRONTEND_URL", "http://localhost:3000")
    return config


@pytest.fixture
def token_record():
    return NotionTokenRecord(
        access_token="secret_token",
        refresh_token="refresh_token",
        bot_id="bot-1",
        workspace_id="ws-1",
        workspace_name="Test Workspace",
    )


@pytest.fixture(scope="session")
def test_video_url():
    """Return a test YouTube video URL."""
    return "https://youtu.be/V3TUEeB0kW0?si=-InVol0JhtWji-6R"


@pytest.fixture(scope="session")
def long_transcript():
    """A transcript comfortably above every minimum length."""
    return (
        "In this video we walk through the basics of unit testing in Python. "
        "We cover pytest fixtures, mocking external services, and how to keep "
        "tests fast and isolated from the network."
    )


@pytest.fixture
def make_snippets():
    """Factory for caption fragments shaped like youtube-transcript-api snippets."""
    def _make(*texts):
        snippets = []
        for text in texts:
            snippet = MagicMock()
            snippet.text = text
            snippets.append(snippet)
        return snippets
    return _make

"""
Daily Lyrics - Pytest Configuration & Shared Fixtures

Provides reusable fixtures for:
- A raw ``songs`` row as Supabase returns it
- The matching Song model
- A TestClient bound to the application
- A helper that stubs the database lookup used by the routes
"""

from typing import Any, Dict
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from daily_lyrics.main import app
from daily_lyrics.models import Song

# ---------------------------------------------------------------------------
# Data fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def song_row() -> Dict[str, Any]:
    """Return a row shaped like the Supabase REST response for one song."""
    return {
        "id": 42,
        "date": "2024/02/29",
        "name": "Leap Day",
        "artist": "The Calendars",
        "lyrics": ["one extra day", "every four years", "we dance", "till March"],
        "spotifyId": "4uLU6hMCjMI75M1A2tKUQC",
        "imageUrl": "https://i.scdn.co/image/leapday.jpg",
    }


@pytest.fixture
def song(song_row) -> Song:
    return Song.from_row(song_row)


# ---------------------------------------------------------------------------
# HTTP fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def client() -> TestClient:
    """TestClient that does not follow redirects."""
    return TestClient(app, follow_redirects=False)


@pytest.fixture
def stub_lookup():
    """
    Factory fixture: call with a return value (or ``side_effect=``) to
    replace the database lookup used by the routes.  Returns the AsyncMock
    so tests can assert on how it was awaited.
    """
    patchers = []

    def _factory(return_value=None, side_effect=None) -> AsyncMock:
        mock = AsyncMock(return_value=return_value, side_effect=side_effect)
        patcher = patch("daily_lyrics.routes.pages.fetch_song_by_date", mock)
        patcher.start()
        patchers.append(patcher)
        return mock

    yield _factory

    for patcher in patchers:
        patcher.stop()

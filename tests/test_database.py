"""
Daily Lyrics - Supabase Client Tests

Tests for daily_lyrics/database.py using httpx.MockTransport in place of
the hosted database. Validates:
- The PostgREST query shape (table, date filter, limit, auth headers)
- Row → Song conversion and the empty-result case
- Every failure mode surfacing as DatabaseError
- The connection probe used by the health endpoint
"""

import asyncio
from unittest.mock import patch

import httpx
import pytest

from daily_lyrics.database import (
    DatabaseError,
    check_connection,
    fetch_song_by_date,
    is_configured,
)

SUPABASE_URL = "https://project.supabase.co"
SUPABASE_KEY = "anon-key"


@pytest.fixture
def configured():
    with patch.multiple(
        "daily_lyrics.database", SUPABASE_URL=SUPABASE_URL, SUPABASE_KEY=SUPABASE_KEY
    ):
        yield


def _transport(handler) -> httpx.MockTransport:
    return httpx.MockTransport(handler)


# ===========================================================================
# is_configured
# ===========================================================================


class TestIsConfigured:
    def test_configured(self, configured):
        assert is_configured()

    def test_missing_key(self):
        with patch.multiple("daily_lyrics.database", SUPABASE_URL=SUPABASE_URL, SUPABASE_KEY=""):
            assert not is_configured()


# ===========================================================================
# fetch_song_by_date
# ===========================================================================


class TestFetchSongByDate:
    def test_query_shape(self, configured, song_row):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["request"] = request
            return httpx.Response(200, json=[song_row])

        asyncio.run(fetch_song_by_date("2024/02/29", transport=_transport(handler)))

        request = seen["request"]
        assert request.method == "GET"
        assert request.url.path == "/rest/v1/songs"
        assert request.url.params["date"] == "eq.2024/02/29"
        assert request.url.params["limit"] == "1"
        assert request.url.params["select"] == "*"
        assert request.headers["apikey"] == SUPABASE_KEY
        assert request.headers["authorization"] == f"Bearer {SUPABASE_KEY}"

    def test_returns_song(self, configured, song_row):
        transport = _transport(lambda request: httpx.Response(200, json=[song_row]))
        song = asyncio.run(fetch_song_by_date("2024/02/29", transport=transport))
        assert song is not None
        assert song.name == "Leap Day"
        assert song.artist == "The Calendars"

    def test_uses_first_row_only(self, configured, song_row):
        other = dict(song_row, name="Second")
        transport = _transport(lambda request: httpx.Response(200, json=[song_row, other]))
        song = asyncio.run(fetch_song_by_date("2024/02/29", transport=transport))
        assert song.name == "Leap Day"

    def test_no_rows(self, configured):
        transport = _transport(lambda request: httpx.Response(200, json=[]))
        assert asyncio.run(fetch_song_by_date("2024/01/01", transport=transport)) is None

    def test_not_configured(self):
        with patch.multiple("daily_lyrics.database", SUPABASE_URL="", SUPABASE_KEY=""):
            with pytest.raises(DatabaseError, match="not configured"):
                asyncio.run(fetch_song_by_date("2024/01/01"))

    def test_http_error_status(self, configured):
        transport = _transport(lambda request: httpx.Response(401, text="bad key"))
        with pytest.raises(DatabaseError, match="HTTP 401"):
            asyncio.run(fetch_song_by_date("2024/01/01", transport=transport))

    def test_transport_failure(self, configured):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(DatabaseError, match="connection refused"):
            asyncio.run(fetch_song_by_date("2024/01/01", transport=_transport(handler)))

    def test_non_json_body(self, configured):
        transport = _transport(lambda request: httpx.Response(200, text="<html>oops</html>"))
        with pytest.raises(DatabaseError, match="Invalid JSON"):
            asyncio.run(fetch_song_by_date("2024/01/01", transport=transport))

    def test_non_list_body(self, configured):
        transport = _transport(lambda request: httpx.Response(200, json={"message": "odd"}))
        with pytest.raises(DatabaseError, match="Expected a list"):
            asyncio.run(fetch_song_by_date("2024/01/01", transport=transport))

    def test_malformed_row(self, configured):
        transport = _transport(lambda request: httpx.Response(200, json=[{"date": "2024/01/01"}]))
        with pytest.raises(DatabaseError, match="missing columns"):
            asyncio.run(fetch_song_by_date("2024/01/01", transport=transport))


# ===========================================================================
# check_connection
# ===========================================================================


class TestCheckConnection:
    def test_connected(self, configured):
        transport = _transport(lambda request: httpx.Response(200, json=[]))
        status = asyncio.run(check_connection(transport=transport))
        assert status == {"connected": True, "url": SUPABASE_URL}

    def test_rejected(self, configured):
        transport = _transport(lambda request: httpx.Response(503, text="down"))
        status = asyncio.run(check_connection(transport=transport))
        assert status["connected"] is False
        assert "503" in status["error"]

    def test_not_configured(self):
        with patch.multiple("daily_lyrics.database", SUPABASE_URL="", SUPABASE_KEY=""):
            status = asyncio.run(check_connection())
        assert status["connected"] is False

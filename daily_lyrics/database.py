"""
Daily Lyrics - Supabase Client

Read-only access to the hosted ``songs`` table through Supabase's PostgREST
endpoint.  Uses httpx for async HTTP; a fresh client is opened per lookup so
no connection state is shared between requests.

Rows are created and updated elsewhere.  This module only ever asks for
"the one row whose date equals X".
"""

from __future__ import annotations

from typing import Any, Optional

import httpx
from loguru import logger

from daily_lyrics.config import (
    SONGS_TABLE,
    SUPABASE_KEY,
    SUPABASE_TIMEOUT,
    SUPABASE_URL,
)
from daily_lyrics.models import Song


class DatabaseError(Exception):
    """The hosted database could not answer a query."""


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def is_configured() -> bool:
    """Return True if the Supabase URL and key are both set."""
    return bool(SUPABASE_URL and SUPABASE_KEY)


def _table_url(table: str = SONGS_TABLE) -> str:
    return f"{SUPABASE_URL.rstrip('/')}/rest/v1/{table}"


def _headers() -> dict[str, str]:
    return {
        "apikey": SUPABASE_KEY,
        "Authorization": f"Bearer {SUPABASE_KEY}",
        "Accept": "application/json",
    }


def _client(transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        headers=_headers(),
        timeout=SUPABASE_TIMEOUT,
        transport=transport,
    )


# ---------------------------------------------------------------------------
# Public API (async)
# ---------------------------------------------------------------------------
async def fetch_song_by_date(
    date: str,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Optional[Song]:
    """
    Fetch the song for a ``YYYY/MM/DD`` date string.

    Returns None when no row matches.  Raises :class:`DatabaseError` when
    the database is unconfigured, unreachable, answers with a non-2xx
    status, or returns a row that cannot be turned into a Song.
    """
    if not is_configured():
        raise DatabaseError(
            "Supabase is not configured. Set SUPABASE_URL and SUPABASE_KEY."
        )

    params = {"select": "*", "date": f"eq.{date}", "limit": "1"}

    try:
        async with _client(transport) as client:
            response = await client.get(_table_url(), params=params)
    except httpx.HTTPError as e:
        logger.error(f"❌ Supabase query for {date} failed: {e}")
        raise DatabaseError(str(e)) from e

    if response.status_code >= 400:
        msg = f"HTTP {response.status_code}: {response.text[:200]}"
        logger.error(f"❌ Supabase query for {date} rejected: {msg}")
        raise DatabaseError(msg)

    try:
        rows: list[dict[str, Any]] = response.json()
    except ValueError as e:
        logger.error(f"❌ Supabase returned a non-JSON body for {date}")
        raise DatabaseError("Invalid JSON in database response") from e

    if not isinstance(rows, list):
        raise DatabaseError(f"Expected a list of rows, got {type(rows).__name__}")

    if not rows:
        logger.info(f"🔍 No song stored for {date}")
        return None

    try:
        return Song.from_row(rows[0])
    except (TypeError, ValueError) as e:
        logger.error(f"❌ Malformed songs row for {date}: {e}")
        raise DatabaseError(str(e)) from e


async def check_connection(
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> dict[str, Any]:
    """
    Probe the songs table with a zero-row query.
    Returns a status dict with 'connected' bool and optional error info.
    """
    if not is_configured():
        return {
            "connected": False,
            "error": "Supabase is not configured. Set SUPABASE_URL and SUPABASE_KEY.",
        }

    try:
        async with _client(transport) as client:
            response = await client.get(
                _table_url(), params={"select": "date", "limit": "0"}
            )
    except httpx.HTTPError as e:
        logger.error(f"❌ Supabase connection failed: {e}")
        return {"connected": False, "error": str(e)}

    if response.status_code < 400:
        return {"connected": True, "url": SUPABASE_URL}

    msg = f"HTTP {response.status_code}: {response.text[:200]}"
    logger.warning(f"⚠️ Supabase connection issue: {msg}")
    return {"connected": False, "error": msg}

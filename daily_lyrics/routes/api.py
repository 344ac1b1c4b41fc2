"""
Daily Lyrics - REST API Routes

JSON counterparts of the date page plus a health endpoint.  The song
endpoint shares the page's lookup and status codes, so a date returns the
same outcome over HTML and JSON.
"""

import time

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from daily_lyrics.config import APP_VERSION, CACHE_CONTROL
from daily_lyrics.database import check_connection, is_configured
from daily_lyrics.models import Success
from daily_lyrics.routes.pages import resolve_page_state

router = APIRouter(prefix="/api", tags=["API"])

_START_TIME = time.time()


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------
@router.get("/health")
async def health_check():
    """Health check endpoint for the service."""
    uptime = round(time.time() - _START_TIME, 2)
    db_configured = is_configured()
    db_connected = False

    if db_configured:
        status = await check_connection()
        db_connected = status.get("connected", False)

    return {
        "status": "ok" if db_connected else "degraded",
        "database_configured": db_configured,
        "database_connected": db_connected,
        "uptime_seconds": uptime,
        "version": APP_VERSION,
    }


# ---------------------------------------------------------------------------
# Songs
# ---------------------------------------------------------------------------
@router.get("/songs/{yyyy}/{mm}/{dd}")
async def api_get_song(yyyy: str, mm: str, dd: str):
    """Return the song for a date as JSON."""
    state = await resolve_page_state(yyyy, mm, dd)

    if isinstance(state, Success):
        body = {
            "date": state.date,
            "song": state.song.to_dict(),
            "prev": state.prev_date,
            "next": state.next_date,
        }
    else:
        body = {
            "date": state.date,
            "error": {"status": state.status_code, "message": state.message},
            "prev": state.prev_date,
            "next": state.next_date,
        }

    return JSONResponse(
        body,
        status_code=state.status_code,
        headers={"Cache-Control": CACHE_CONTROL},
    )

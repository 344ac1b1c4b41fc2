"""
Daily Lyrics - Page Routes

Serves the two browser-facing views:

- ``/`` redirects to today's date page.
- ``/{yyyy}/{mm}/{dd}`` renders the song for that date, or an error page
  when the date is malformed or has no song.

Every date page, including the error variants, is sent with a one-year
immutable Cache-Control header.
"""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from loguru import logger

from daily_lyrics.config import (
    CACHE_CONTROL,
    LASTFM_USER_ID,
    PLACEHOLDER_IMAGE_URL,
    SITE_DOMAIN,
    TIMEZONE,
    TWITTER_ID,
)
from daily_lyrics.database import DatabaseError, fetch_song_by_date
from daily_lyrics.dates import format_date, join_segments, parse_date, today
from daily_lyrics.models import InvalidDate, NotFound, PageState, Success
from daily_lyrics.seo import build_head_tags, render_head

router = APIRouter(tags=["Pages"])


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
async def resolve_page_state(yyyy: str, mm: str, dd: str) -> PageState:
    """
    Turn raw path segments into a page state.

    A date that does not parse never reaches the database.  A database
    failure is reported the same way as a missing row.
    """
    date = join_segments(yyyy, mm, dd)

    if parse_date(date) is None:
        logger.debug(f"🚫 Rejected malformed date {date!r}")
        return InvalidDate(date=date)

    try:
        song = await fetch_song_by_date(date)
    except DatabaseError as e:
        logger.warning(f"⚠️ Lookup for {date} failed, rendering not found: {e}")
        return NotFound(date=date)

    if song is None:
        return NotFound(date=date)

    logger.debug(f"🎵 {date}: {song.name} / {song.artist}")
    return Success(date=date, song=song)


def _head_for(state: PageState, path: str):
    if isinstance(state, Success):
        song = state.song
        return build_head_tags(
            title=f"📅 {state.date}",
            description=f"{song.excerpt} ― {song.name} / {song.artist}",
            image_url=song.image_url,
            site_domain=SITE_DOMAIN,
            social_handle=TWITTER_ID,
            path=path,
        )
    return build_head_tags(
        title=f"{state.status_code} {state.status_label}",
        description=state.message,
        image_url=PLACEHOLDER_IMAGE_URL,
        site_domain=SITE_DOMAIN,
        social_handle=TWITTER_ID,
        path=path,
    )


# ---------------------------------------------------------------------------
# Today
# ---------------------------------------------------------------------------
@router.get("/")
async def index():
    """Permanent redirect to today's date page."""
    current = format_date(today(TIMEZONE))
    return RedirectResponse(url=f"/{current}", status_code=308)


# ---------------------------------------------------------------------------
# Date page
# ---------------------------------------------------------------------------
@router.get("/{yyyy}/{mm}/{dd}", response_class=HTMLResponse)
async def date_page(request: Request, yyyy: str, mm: str, dd: str):
    """Render the song for a single calendar day."""
    state = await resolve_page_state(yyyy, mm, dd)

    context = {
        "state": state,
        "head": render_head(_head_for(state, request.url.path)),
        "lastfm_user_id": LASTFM_USER_ID,
    }
    return request.app.state.templates.TemplateResponse(
        request,
        "date_page.html",
        context,
        status_code=state.status_code,
        headers={"Cache-Control": CACHE_CONTROL},
    )

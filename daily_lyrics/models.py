"""
Daily Lyrics - Data Models

``Song`` mirrors one row of the hosted ``songs`` table.  The three page
states are the only shapes the date page template ever receives.
"""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Mapping, Optional, Union

from daily_lyrics.config import (
    INVALID_DATE_MESSAGE,
    NOT_FOUND_MESSAGE,
    SPOTIFY_EMBED_URL,
)
from daily_lyrics.dates import adjacent_dates

# Columns every row must carry to be renderable
REQUIRED_COLUMNS = ("date", "name", "artist", "lyrics", "spotifyId", "imageUrl")


@dataclass(frozen=True)
class Song:
    """A single day's song as stored in the ``songs`` table."""

    date: str
    name: str
    artist: str
    lyrics: tuple[str, ...]
    spotify_id: str
    image_url: str

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Song:
        """Build a Song from a raw database row (camelCase column names)."""
        missing = [col for col in REQUIRED_COLUMNS if col not in row]
        if missing:
            raise ValueError(f"songs row is missing columns: {', '.join(missing)}")

        lyrics = row["lyrics"] or []
        if isinstance(lyrics, str):
            lyrics = [lyrics]

        return cls(
            date=str(row["date"]),
            name=str(row["name"] or ""),
            artist=str(row["artist"] or ""),
            lyrics=tuple(str(fragment) for fragment in lyrics),
            spotify_id=str(row["spotifyId"] or ""),
            image_url=str(row["imageUrl"] or ""),
        )

    @property
    def excerpt(self) -> str:
        """Lyric fragments joined with single spaces."""
        return " ".join(self.lyrics)

    @property
    def embed_url(self) -> str:
        return SPOTIFY_EMBED_URL.format(spotify_id=self.spotify_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "name": self.name,
            "artist": self.artist,
            "lyrics": list(self.lyrics),
            "spotifyId": self.spotify_id,
            "imageUrl": self.image_url,
        }


# ---------------------------------------------------------------------------
# Page states
# ---------------------------------------------------------------------------
class _DatedState:
    """Navigation helpers shared by every page state."""

    date: str
    status_code: int

    @property
    def status_label(self) -> str:
        return HTTPStatus(self.status_code).phrase

    @property
    def prev_date(self) -> Optional[str]:
        return adjacent_dates(self.date)[0]

    @property
    def next_date(self) -> Optional[str]:
        return adjacent_dates(self.date)[1]

    @property
    def is_error(self) -> bool:
        return self.status_code >= 400


@dataclass(frozen=True)
class Success(_DatedState):
    date: str
    song: Song
    status_code: int = 200


@dataclass(frozen=True)
class InvalidDate(_DatedState):
    date: str
    message: str = INVALID_DATE_MESSAGE
    status_code: int = 500


@dataclass(frozen=True)
class NotFound(_DatedState):
    date: str
    message: str = ""
    status_code: int = 404

    def __post_init__(self) -> None:
        if not self.message:
            object.__setattr__(self, "message", NOT_FOUND_MESSAGE.format(date=self.date))


PageState = Union[Success, InvalidDate, NotFound]

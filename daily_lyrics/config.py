"""
Daily Lyrics - Configuration
All settings loaded from environment variables with sensible defaults.

The service is stateless.  The only persistent data (the ``songs`` table)
lives in a hosted Supabase project and is read through its REST endpoint.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
_ = load_dotenv()

# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------
APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
APP_PORT = int(os.getenv("APP_PORT", "8000"))
APP_ENV = os.getenv("APP_ENV", "development")
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
DEBUG = os.getenv("DEBUG", "false").lower() == "true"

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
BASE_DIR = Path(__file__).resolve().parent

TEMPLATES_DIR = BASE_DIR / "templates"
STATIC_DIR = BASE_DIR / "static"

# ---------------------------------------------------------------------------
# Logging — stdout only
# ---------------------------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# ---------------------------------------------------------------------------
# Site identity
# ---------------------------------------------------------------------------
# Used for the canonical URL and og:site_name
SITE_DOMAIN = os.getenv("SITE_DOMAIN", "localhost:8000")
# Twitter / X handle without the leading "@"
TWITTER_ID = os.getenv("TWITTER_ID", "iamtakagi")
# last.fm account whose top tracks the lyrics are picked from
LASTFM_USER_ID = os.getenv("LASTFM_USER_ID", "iamtakagi")

# "Today" is always evaluated in this zone, whatever the host's local time.
TIMEZONE = os.getenv("TIMEZONE", "Asia/Tokyo")

# Preview image used on error pages (there is no song artwork to show)
PLACEHOLDER_IMAGE_URL = os.getenv(
    "PLACEHOLDER_IMAGE_URL",
    "https://placehold.jp/1200x630.png?text=Daily%20Lyrics",
)

# ---------------------------------------------------------------------------
# Supabase (hosted PostgREST)
# ---------------------------------------------------------------------------
SUPABASE_URL = os.getenv("SUPABASE_URL", "")  # e.g. https://xyz.supabase.co
SUPABASE_KEY = os.getenv("SUPABASE_KEY", "")
SUPABASE_TIMEOUT = float(os.getenv("SUPABASE_TIMEOUT", "10"))
SONGS_TABLE = "songs"

# ---------------------------------------------------------------------------
# Response policy
# ---------------------------------------------------------------------------
# A published date page never changes, so every response is cacheable for a
# year, including the error pages.
CACHE_CONTROL = "public, max-age=31536000, immutable"

# The whole site stays out of search indexes.
ROBOTS = "noindex,nofollow,noarchive"

STYLESHEETS = [
    "https://fonts.googleapis.com/css2?family=Noto+Sans+JP:wght@500;700&family=Open+Sans:wght@600;700&display=swap",
    "https://cdn.jsdelivr.net/npm/yakuhanjp@3.4.1/dist/css/yakuhanjp.min.css",
    "/static/index.css",
]

SPOTIFY_EMBED_URL = "https://open.spotify.com/embed/track/{spotify_id}"

# ---------------------------------------------------------------------------
# User-facing messages
# ---------------------------------------------------------------------------
INVALID_DATE_MESSAGE = "日付の形式が正しくありません"
NOT_FOUND_MESSAGE = "{date} の歌詞は見つかりませんでした"

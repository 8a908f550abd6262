"""Global configuration and constants for the scraping pipeline and web service."""

from __future__ import annotations

import os
from typing import Final

BASE_URL: Final = os.environ.get("GA_BASE_URL", "https://proclubshead.com")
CLUB_ID: Final = os.environ.get("GA_CLUB_ID", "420295")
# Season segment of upstream paths ("26" -> /26/club-squad/...)
SEASON: Final = os.environ.get("GA_SEASON", "26")
GENERATION: Final = os.environ.get("GA_GENERATION", "gen5")
SOURCE_NAME: Final = "proclubshead"

DEFAULT_USER_AGENT: Final = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/115.0 Safari/537.36"
)
DEFAULT_TIMEOUT: Final = 15  # seconds
DEFAULT_CONCURRENCY: Final = int(os.environ.get("GA_CONCURRENCY", "8"))
PIPELINE_TIMEOUT: Final = 120  # seconds, whole scrape run
CACHE_TTL_SECONDS: Final = 10 * 60

DATA_DIR: Final = os.environ.get("GA_DATA_DIR", "data")
SNAPSHOT_FILENAME: Final = "stats.json"
PASTE_SOURCE: Final = "ea-paste"
PASTE_ENV_VAR: Final = "EA_JSON"

AUTH_COOKIE_NAME: Final = "auth"
AUTH_COOKIE_MAX_AGE: Final = 60 * 60 * 24 * 7
COOKIE_SECURE: Final = os.environ.get("GA_COOKIE_SECURE", "1") not in {"0", "false", "no"}

LOG_LEVEL: Final = os.environ.get("GA_LOG_LEVEL", "INFO")


def site_password() -> str | None:
    # Read per call so the secret can be rotated without a restart
    return os.environ.get("SITE_PASSWORD") or None


def snapshot_path(data_dir: str | None = None) -> str:
    return os.path.join(data_dir or DATA_DIR, SNAPSHOT_FILENAME)

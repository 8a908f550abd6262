"""HTML/text helper utilities shared by the parsers."""

from __future__ import annotations

import re
from urllib.parse import urlparse

WS_RE = re.compile(r"\s+")


def collapse_ws(text: str) -> str:
    return WS_RE.sub(" ", text).strip()


def name_from_url(url: str) -> str:
    """Fallback display name from a profile URL.

    ``/26/club-player/gen5-420295-Striker9/`` -> ``Striker9`` (text after the
    last dash of the last non-empty path segment).
    """
    path = urlparse(url).path if "://" in url else url
    segments = [s for s in path.split("/") if s]
    if not segments:
        return ""
    return segments[-1].rsplit("-", 1)[-1].strip()

"""Roster link extraction from the club squad page (BeautifulSoup)."""

from __future__ import annotations

from urllib.parse import urljoin

from bs4 import BeautifulSoup

from config import settings


def profile_path_fragment(club_id: str, season: str, gen: str) -> str:
    return f"/{season}/club-player/{gen}-{club_id}-"


def squad_url(
    club_id: str, season: str | None = None, gen: str | None = None, base_url: str | None = None
) -> str:
    season = season or settings.SEASON
    gen = gen or settings.GENERATION
    base = (base_url or settings.BASE_URL).rstrip("/")
    return f"{base}/{season}/club-squad/{gen}-{club_id}/"


def extract_roster_links(
    html: str,
    club_id: str,
    *,
    season: str | None = None,
    gen: str | None = None,
    base_url: str | None = None,
) -> set[str]:
    """Collect absolute profile URLs of the club's players.

    Only anchors whose href contains ``/<season>/club-player/<gen>-<club_id>-``
    are kept; relative hrefs are resolved against ``base_url``.
    """
    fragment = profile_path_fragment(club_id, season or settings.SEASON, gen or settings.GENERATION)
    base = base_url or settings.BASE_URL
    soup = BeautifulSoup(html, "html.parser")
    links: set[str] = set()
    for a in soup.find_all("a", href=True):
        href = a["href"].strip()
        if fragment in href:
            links.add(urljoin(base, href))
    return links

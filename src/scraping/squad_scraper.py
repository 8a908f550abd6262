"""Club squad page scraping."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from core import async_http
from parsing import link_extractor

logger = logging.getLogger(__name__)


async def fetch_roster_links(
    club_id: str,
    *,
    season: str | None = None,
    gen: str | None = None,
    base_url: str | None = None,
    client: Optional[httpx.AsyncClient] = None,
) -> list[str]:
    """Fetch the squad page and return the club's profile URLs, sorted.

    Fetch failures propagate: without a roster there is nothing to rank.
    """
    url = link_extractor.squad_url(club_id, season, gen, base_url)
    html = await async_http.fetch(url, client=client)
    links = link_extractor.extract_roster_links(
        html, club_id, season=season, gen=gen, base_url=base_url
    )
    logger.info("Squad page %s lists %d players", url, len(links))
    return sorted(links)

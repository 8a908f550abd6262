"""Player profile scraping."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from core import async_http
from domain.models import PlayerRecord
from parsing import profile_parser
from parsing.field_extractor import FieldExtractor

logger = logging.getLogger(__name__)


async def fetch_player(
    url: str,
    *,
    client: Optional[httpx.AsyncClient] = None,
    extractor: FieldExtractor | None = None,
) -> PlayerRecord:
    html = await async_http.fetch(url, client=client)
    return profile_parser.extract_player_totals(html, url, extractor=extractor)


async def try_fetch_player(
    url: str,
    *,
    client: Optional[httpx.AsyncClient] = None,
    extractor: FieldExtractor | None = None,
) -> PlayerRecord | None:
    """Like ``fetch_player`` but a failed fetch yields ``None`` (player omitted)."""
    try:
        return await fetch_player(url, client=client, extractor=extractor)
    except async_http.FetchError as e:
        logger.warning("Dropping player %s: %s", url, e)
        return None

"""High-level orchestration pipeline: squad page -> player pages -> ranking -> snapshot."""

from __future__ import annotations

import asyncio
import logging
from typing import Iterable, List, Optional

import httpx

from config import settings
from core import async_http
from domain import ranking
from domain.models import PlayerRecord, Snapshot
from parsing import paste_parser
from parsing.field_extractor import FieldExtractor
from scraping import player_scraper, squad_scraper
from services import snapshot_store

logger = logging.getLogger(__name__)


class PipelineTimeout(RuntimeError):
    pass


async def collect_players(
    urls: Iterable[str],
    *,
    client: httpx.AsyncClient,
    concurrency: int | None = None,
    extractor: FieldExtractor | None = None,
) -> List[PlayerRecord]:
    """Fetch and parse every profile with at most ``concurrency`` requests in flight.

    Results keep the order of ``urls``; players whose fetch failed are dropped.
    """
    limit = asyncio.Semaphore(max(1, concurrency or settings.DEFAULT_CONCURRENCY))

    async def _one(url: str) -> PlayerRecord | None:
        async with limit:
            return await player_scraper.try_fetch_player(url, client=client, extractor=extractor)

    results = await asyncio.gather(*(_one(u) for u in urls))
    return [r for r in results if r is not None]


async def _scrape(
    club_id: str,
    *,
    season: str | None,
    gen: str | None,
    base_url: str | None,
    min_games: float,
    concurrency: int | None,
    client: httpx.AsyncClient,
) -> Snapshot:
    urls = await squad_scraper.fetch_roster_links(
        club_id, season=season, gen=gen, base_url=base_url, client=client
    )
    players = await collect_players(urls, client=client, concurrency=concurrency)
    dropped = len(urls) - len(players)
    if dropped:
        logger.warning("%d of %d player pages could not be fetched", dropped, len(urls))
    degraded = sum(1 for p in players if p.is_degraded)
    if degraded:
        logger.info("%d players have defaulted stat fields", degraded)
    return Snapshot.create(ranking.rank(players, min_games=min_games))


async def build_snapshot(
    club_id: str | None = None,
    *,
    season: str | None = None,
    gen: str | None = None,
    base_url: str | None = None,
    min_games: float = 0,
    concurrency: int | None = None,
    client: Optional[httpx.AsyncClient] = None,
    timeout: float | None = settings.PIPELINE_TIMEOUT,
) -> Snapshot:
    """Run the scrape pipeline and return a ranked snapshot.

    Raises ``async_http.FetchError`` when the squad page cannot be fetched and
    ``PipelineTimeout`` when the whole run exceeds ``timeout`` seconds.
    """
    club_id = club_id or settings.CLUB_ID
    close_client = False
    if client is None:
        client = async_http.make_client()
        close_client = True
    try:
        coro = _scrape(
            club_id,
            season=season,
            gen=gen,
            base_url=base_url,
            min_games=min_games,
            concurrency=concurrency,
            client=client,
        )
        try:
            return await asyncio.wait_for(coro, timeout=timeout)
        except asyncio.TimeoutError as e:
            raise PipelineTimeout(f"Scrape of club {club_id} exceeded {timeout}s") from e
    finally:
        if close_client:
            await client.aclose()


async def run_batch(
    club_id: str | None = None,
    *,
    season: str | None = None,
    gen: str | None = None,
    output_path: str | None = None,
    min_games: float = 0,
    concurrency: int | None = None,
    client: Optional[httpx.AsyncClient] = None,
) -> dict:
    """Scrape, rank and write the snapshot file; return a run summary.

    The snapshot is only written after the whole pipeline succeeded, so a
    failed run leaves the previous file in place.
    """
    club_id = club_id or settings.CLUB_ID
    output_path = output_path or settings.snapshot_path()
    snapshot = await build_snapshot(
        club_id,
        season=season,
        gen=gen,
        min_games=min_games,
        concurrency=concurrency,
        client=client,
    )
    snapshot_store.write_snapshot(snapshot, output_path)
    return _summary(snapshot, output_path, source=settings.SOURCE_NAME, club_id=club_id)


def run_paste_import(raw: str, *, output_path: str | None = None) -> dict:
    output_path = output_path or settings.snapshot_path()
    records = paste_parser.parse_members(raw)
    snapshot = Snapshot.create(ranking.rank(records))
    snapshot_store.write_snapshot(snapshot, output_path)
    return _summary(snapshot, output_path, source=settings.PASTE_SOURCE)


def _summary(snapshot: Snapshot, output_path: str, **extra) -> dict:
    return {
        **extra,
        "generated_at": snapshot.generated_at.isoformat(),
        "players": len(snapshot.rows),
        "degraded_players": sum(1 for r in snapshot.rows if r.is_degraded),
        "output_path": output_path,
    }

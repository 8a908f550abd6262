"""Single-slot in-memory cache for the on-demand leaderboard.

Holds the most recent snapshot and when it was computed. Callers go through
``get_or_refresh``; concurrent misses wait on one shared refresh instead of
each hitting the upstream site.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Awaitable, Callable, Optional, Tuple

from config import settings
from domain.models import CacheEntry, Snapshot

logger = logging.getLogger(__name__)


class LeaderboardCache:
    def __init__(
        self,
        refresh: Callable[[], Awaitable[Snapshot]],
        *,
        ttl: float = settings.CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._refresh = refresh
        self._ttl = ttl
        self._clock = clock
        self._entry: Optional[CacheEntry] = None
        self._lock = asyncio.Lock()

    @property
    def entry(self) -> Optional[CacheEntry]:
        return self._entry

    def _fresh(self, now: float) -> Optional[Snapshot]:
        entry = self._entry
        if entry is not None and entry.age(now) < self._ttl:
            return entry.snapshot
        return None

    async def get_or_refresh(self, now: float | None = None) -> Tuple[Snapshot, bool]:
        """Return ``(snapshot, cached)``.

        A failed refresh propagates and leaves the current entry untouched.
        """
        def _now() -> float:
            return self._clock() if now is None else now

        hit = self._fresh(_now())
        if hit is not None:
            logger.debug("Leaderboard cache hit")
            return hit, True
        async with self._lock:
            # Another caller may have refreshed while we waited on the lock
            hit = self._fresh(_now())
            if hit is not None:
                return hit, True
            logger.info("Refreshing leaderboard")
            snapshot = await self._refresh()
            self._entry = CacheEntry(snapshot=snapshot, computed_at=_now())
            return snapshot, False

    def invalidate(self) -> None:
        self._entry = None

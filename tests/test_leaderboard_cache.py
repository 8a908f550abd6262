import asyncio

import pytest

from core.async_http import UpstreamUnavailable
from services.leaderboard_cache import LeaderboardCache

from factories import make_snapshot


class _Refresher:
    def __init__(self, delay: float = 0.0) -> None:
        self.calls = 0
        self.delay = delay
        self.fail = False

    async def __call__(self):
        self.calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.fail:
            raise UpstreamUnavailable("https://example.test/squad", 500)
        return make_snapshot(("Alpha", 10, 4, 6), ("Bravo", 1, 0, 0))


async def test_second_call_within_ttl_is_cached():
    refresh = _Refresher()
    cache = LeaderboardCache(refresh, ttl=600)

    first, cached_first = await cache.get_or_refresh(now=0.0)
    second, cached_second = await cache.get_or_refresh(now=1.0)

    assert (cached_first, cached_second) == (False, True)
    assert second.rows == first.rows
    assert refresh.calls == 1


async def test_entry_expires_after_ttl():
    refresh = _Refresher()
    cache = LeaderboardCache(refresh, ttl=600)

    await cache.get_or_refresh(now=0.0)
    _, cached = await cache.get_or_refresh(now=599.9)
    assert cached is True
    _, cached = await cache.get_or_refresh(now=600.0)
    assert cached is False
    assert refresh.calls == 2
    assert cache.entry.computed_at == 600.0


async def test_uses_injected_clock():
    ticks = iter([0.0, 0.0, 0.0, 10.0, 700.0, 700.0, 700.0])
    refresh = _Refresher()
    cache = LeaderboardCache(refresh, ttl=600, clock=lambda: next(ticks))

    assert (await cache.get_or_refresh())[1] is False
    assert (await cache.get_or_refresh())[1] is True
    assert (await cache.get_or_refresh())[1] is False
    assert refresh.calls == 2


async def test_concurrent_misses_share_one_refresh():
    refresh = _Refresher(delay=0.02)
    cache = LeaderboardCache(refresh, ttl=600)

    results = await asyncio.gather(*(cache.get_or_refresh(now=0.0) for _ in range(5)))

    assert refresh.calls == 1
    assert sorted(cached for _, cached in results) == [False, True, True, True, True]
    assert len({id(snapshot) for snapshot, _ in results}) == 1


async def test_failed_refresh_leaves_cache_untouched():
    refresh = _Refresher()
    cache = LeaderboardCache(refresh, ttl=600)
    snapshot, _ = await cache.get_or_refresh(now=0.0)

    refresh.fail = True
    with pytest.raises(UpstreamUnavailable):
        await cache.get_or_refresh(now=1000.0)
    assert cache.entry.snapshot is snapshot
    assert cache.entry.computed_at == 0.0


async def test_failed_first_refresh_stores_nothing():
    refresh = _Refresher()
    refresh.fail = True
    cache = LeaderboardCache(refresh, ttl=600)
    with pytest.raises(UpstreamUnavailable):
        await cache.get_or_refresh(now=0.0)
    assert cache.entry is None


async def test_invalidate_forces_refresh():
    refresh = _Refresher()
    cache = LeaderboardCache(refresh, ttl=600)
    await cache.get_or_refresh(now=0.0)
    cache.invalidate()
    _, cached = await cache.get_or_refresh(now=1.0)
    assert cached is False
    assert refresh.calls == 2

"""Ranking of player records by G+A per match."""

from __future__ import annotations

from typing import Iterable, List

from domain.models import PlayerRecord


def filter_min_games(records: Iterable[PlayerRecord], min_games: float = 0) -> List[PlayerRecord]:
    return [r for r in records if r.games >= min_games]


def rank(
    records: Iterable[PlayerRecord], *, min_games: float = 0, tie_break: bool = True
) -> List[PlayerRecord]:
    """Order records by ``ga_per_match`` descending.

    Records with fewer than ``min_games`` games are dropped first. With
    ``tie_break`` equal rates are ordered by games played descending. The
    sort is stable, so remaining ties keep their input order.
    """
    kept = filter_min_games(records, min_games)
    if tie_break:
        return sorted(kept, key=lambda r: (-r.ga_per_match, -r.games))
    return sorted(kept, key=lambda r: -r.ga_per_match)

from domain import ranking
from domain.models import PlayerRecord


def _p(name: str, games: int, goals: int, assists: int) -> PlayerRecord:
    return PlayerRecord(name=name, games=games, goals=goals, assists=assists, source="test")


PLAYERS = [
    _p("low", 10, 1, 0),  # 0.1
    _p("zero-games", 0, 0, 0),  # 0.0
    _p("top", 4, 3, 3),  # 1.5
    _p("mid-few", 2, 1, 0),  # 0.5
    _p("mid-many", 8, 2, 2),  # 0.5
]


def test_derived_values_are_recomputed():
    for p in PLAYERS:
        assert p.ga == p.goals + p.assists
        assert p.ga_per_match == (p.ga / p.games if p.games > 0 else 0)


def test_rank_orders_by_rate_descending():
    ranked = ranking.rank(PLAYERS)
    rates = [r.ga_per_match for r in ranked]
    assert rates == sorted(rates, reverse=True)
    assert ranked[0].name == "top"
    assert ranked[-1].name == "zero-games"


def test_tie_break_on_games_played():
    names = [r.name for r in ranking.rank(PLAYERS)]
    assert names.index("mid-many") < names.index("mid-few")


def test_without_tie_break_ties_keep_input_order():
    names = [r.name for r in ranking.rank(PLAYERS, tie_break=False)]
    assert names.index("mid-few") < names.index("mid-many")


def test_min_games_filters_before_ranking():
    ranked = ranking.rank(PLAYERS, min_games=4)
    assert {r.name for r in ranked} == {"low", "top", "mid-many"}
    full = [r for r in ranking.rank(PLAYERS) if r.games >= 4]
    assert ranked == full


def test_min_games_zero_keeps_everyone():
    assert len(ranking.rank(PLAYERS, min_games=0)) == len(PLAYERS)


def test_filter_min_games_preserves_order():
    ranked = ranking.rank(PLAYERS)
    assert ranking.filter_min_games(ranked, 3) == [r for r in ranked if r.games >= 3]


def test_rank_empty():
    assert ranking.rank([]) == []

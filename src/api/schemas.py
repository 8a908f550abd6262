"""Pydantic request/response models for the leaderboard API (camelCase on the wire)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from domain.models import PlayerRecord, Snapshot


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PlayerRowResponse(_CamelModel):
    name: str
    games: int
    goals: int
    assists: int
    ga: int
    ga_per_match: float
    source: str
    provenance: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_record(cls, record: PlayerRecord) -> "PlayerRowResponse":
        return cls(
            name=record.name,
            games=record.games,
            goals=record.goals,
            assists=record.assists,
            ga=record.ga,
            ga_per_match=record.ga_per_match,
            source=record.source,
            provenance={k: v.value for k, v in record.provenance.items()},
        )


class LeaderboardResponse(_CamelModel):
    club_id: str
    source: str
    generated_at: str
    min_games: float
    cached: bool
    rows: list[PlayerRowResponse]

    @classmethod
    def from_snapshot(
        cls,
        snapshot: Snapshot,
        rows: list[PlayerRecord],
        *,
        club_id: str,
        source: str,
        min_games: float,
        cached: bool,
    ) -> "LeaderboardResponse":
        return cls(
            club_id=club_id,
            source=source,
            generated_at=snapshot.generated_at.isoformat(),
            min_games=min_games,
            cached=cached,
            rows=[PlayerRowResponse.from_record(r) for r in rows],
        )


class LoginRequest(BaseModel):
    password: str | None = None


class ErrorResponse(BaseModel):
    error: str

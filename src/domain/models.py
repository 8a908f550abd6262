"""Domain models for the leaderboard pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Tuple

STAT_FIELDS: Tuple[str, ...] = ("games", "goals", "assists")


class FieldSource(str, Enum):
    EXTRACTED = "extracted"
    DEFAULTED = "defaulted"


def _all_extracted() -> Dict[str, FieldSource]:
    return {name: FieldSource.EXTRACTED for name in STAT_FIELDS}


@dataclass(frozen=True, slots=True)
class PlayerRecord:
    name: str
    games: int
    goals: int
    assists: int
    source: str
    provenance: Dict[str, FieldSource] = field(default_factory=_all_extracted)

    @property
    def ga(self) -> int:
        return self.goals + self.assists

    @property
    def ga_per_match(self) -> float:
        return self.ga / self.games if self.games > 0 else 0.0

    @property
    def is_degraded(self) -> bool:
        return any(src is FieldSource.DEFAULTED for src in self.provenance.values())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "games": self.games,
            "goals": self.goals,
            "assists": self.assists,
            "ga": self.ga,
            "gaPerMatch": self.ga_per_match,
            "source": self.source,
            "provenance": {k: v.value for k, v in self.provenance.items()},
        }


@dataclass(frozen=True, slots=True)
class Snapshot:
    generated_at: datetime
    rows: Tuple[PlayerRecord, ...]

    @classmethod
    def create(cls, rows) -> "Snapshot":
        return cls(generated_at=datetime.now(timezone.utc), rows=tuple(rows))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "generatedAt": self.generated_at.isoformat(),
            "rows": [r.to_dict() for r in self.rows],
        }


@dataclass(frozen=True, slots=True)
class CacheEntry:
    snapshot: Snapshot
    computed_at: float  # clock seconds (monotonic by default)

    def age(self, now: float) -> float:
        return now - self.computed_at

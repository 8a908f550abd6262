from datetime import datetime, timezone

import pytest

from domain.models import CacheEntry, FieldSource, PlayerRecord, Snapshot


def test_to_dict_row_schema():
    record = PlayerRecord(
        name="Alpha",
        games=3,
        goals=1,
        assists=1,
        source="https://example.test/p",
        provenance={
            "games": FieldSource.EXTRACTED,
            "goals": FieldSource.EXTRACTED,
            "assists": FieldSource.DEFAULTED,
        },
    )
    row = record.to_dict()
    assert row["ga"] == 2
    assert row["gaPerMatch"] == pytest.approx(2 / 3)
    assert row["provenance"] == {"games": "extracted", "goals": "extracted", "assists": "defaulted"}
    assert set(row) == {"name", "games", "goals", "assists", "ga", "gaPerMatch", "source", "provenance"}


def test_derived_fields_cannot_be_assigned():
    record = PlayerRecord(name="A", games=1, goals=1, assists=0, source="s")
    with pytest.raises((AttributeError, TypeError)):
        record.ga = 5  # type: ignore[misc]


def test_default_provenance_is_extracted():
    record = PlayerRecord(name="A", games=1, goals=0, assists=0, source="s")
    assert not record.is_degraded


def test_snapshot_to_dict():
    at = datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    snap = Snapshot(generated_at=at, rows=(PlayerRecord("A", 2, 1, 1, "s"),))
    data = snap.to_dict()
    assert data["generatedAt"] == "2025-01-02T03:04:05+00:00"
    assert data["rows"][0]["gaPerMatch"] == 1.0


def test_cache_entry_age():
    entry = CacheEntry(snapshot=Snapshot.create([]), computed_at=100.0)
    assert entry.age(160.0) == 60.0

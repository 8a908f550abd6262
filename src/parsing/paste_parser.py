"""Parsing of a manually pasted members/stats JSON export.

Used when the stats site is unavailable: someone pastes the club's members
response (``{"members": [{"name", "gamesPlayed", "goals", "assists"}, ...]}``)
and the batch job ranks it like a scraped roster.
"""

from __future__ import annotations

import json
import math
from typing import Any, List, Tuple

from config import settings
from domain.models import FieldSource, PlayerRecord
from parsing.errors import EmptyInputError, InvalidPasteError, MissingMembersError
from utils import html_utils

# member key -> PlayerRecord field
MEMBER_FIELDS = (("gamesPlayed", "games"), ("goals", "goals"), ("assists", "assists"))


def _to_count(value: Any) -> Tuple[int, FieldSource]:
    if isinstance(value, bool):
        return int(value), FieldSource.EXTRACTED
    if isinstance(value, (int, float)):
        num = float(value)
    elif isinstance(value, str) and value.strip():
        try:
            num = float(value.strip())
        except ValueError:
            return 0, FieldSource.DEFAULTED
    else:
        return 0, FieldSource.DEFAULTED
    if not math.isfinite(num) or num < 0:
        return 0, FieldSource.DEFAULTED
    return int(num), FieldSource.EXTRACTED


def _member_to_record(member: dict) -> PlayerRecord:
    values = {}
    provenance = {}
    for member_key, field_name in MEMBER_FIELDS:
        values[field_name], provenance[field_name] = _to_count(member.get(member_key))
    raw_name = member.get("name")
    name = str(raw_name).strip() if raw_name is not None else ""
    return PlayerRecord(
        name=name or "Unknown",
        source=settings.PASTE_SOURCE,
        provenance=provenance,
        **values,
    )


def parse_members(raw: str) -> List[PlayerRecord]:
    if not raw or not raw.strip():
        raise EmptyInputError("Pasted JSON is empty.")
    try:
        data = json.loads(raw)
    except ValueError as e:
        head = html_utils.collapse_ws(raw[:120])
        raise InvalidPasteError(
            f"Could not parse pasted JSON. Starts with: {head}", context={"head": head}
        ) from e
    members = data.get("members") if isinstance(data, dict) else None
    if not isinstance(members, list):
        raise MissingMembersError(
            "Parsed JSON does not contain members[]. Paste the full members/stats response."
        )
    return [_member_to_record(m) for m in members if isinstance(m, dict)]

"""Label-anchored numeric extraction over flattened page text.

Each rule searches, case-insensitively, for the first occurrence of its label
and takes the first numeral that follows within ``window`` characters. This
assumes the upstream page puts a stat's value right after its label; if the
label also appears earlier in unrelated prose the wrong number is read. That
is a known limitation of the approach, kept visible through the per-field
``FieldSource`` flag rather than hidden.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple

from domain.models import FieldSource

DEFAULT_WINDOW = 120


def _pattern(label: str, window: int) -> re.Pattern[str]:
    return re.compile(re.escape(label) + r"[\s\S]{0,%d}?(\d+(?:\.\d+)?)" % window, re.IGNORECASE)


def pick_number_near(label: str, text: str, window: int = DEFAULT_WINDOW) -> Optional[float]:
    m = _pattern(label, window).search(text)
    return float(m.group(1)) if m else None


@dataclass(frozen=True)
class FieldRule:
    key: str
    label: str
    window: int = DEFAULT_WINDOW


@dataclass(frozen=True)
class FieldValue:
    value: int
    source: FieldSource


DEFAULT_RULES: Tuple[FieldRule, ...] = (
    FieldRule("games", "Matches played"),
    FieldRule("goals", "Goals"),
    FieldRule("assists", "Assists"),
)


class FieldExtractor:
    def __init__(self, rules: Iterable[FieldRule] = DEFAULT_RULES):
        self.rules = tuple(rules)
        self._compiled = [(rule, _pattern(rule.label, rule.window)) for rule in self.rules]

    def extract(self, text: str) -> Dict[str, FieldValue]:
        """Return one ``FieldValue`` per rule; unmatched rules default to 0."""
        out: Dict[str, FieldValue] = {}
        for rule, pattern in self._compiled:
            m = pattern.search(text)
            if m:
                # Counts are integral; a decimal reading is truncated
                out[rule.key] = FieldValue(int(float(m.group(1))), FieldSource.EXTRACTED)
            else:
                out[rule.key] = FieldValue(0, FieldSource.DEFAULTED)
        return out

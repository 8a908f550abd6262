"""Parsing of player profile pages into season totals."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup

from domain.models import STAT_FIELDS, FieldSource, PlayerRecord
from parsing.field_extractor import FieldExtractor, FieldValue
from utils import html_utils

logger = logging.getLogger(__name__)

UNKNOWN_NAME = "Unknown"

_default_extractor = FieldExtractor()


def _player_name(soup: BeautifulSoup, url: str) -> str:
    h1 = soup.find("h1")
    name = html_utils.collapse_ws(h1.get_text(" ")) if h1 else ""
    return name or html_utils.name_from_url(url) or UNKNOWN_NAME


def extract_player_totals(
    html: str, url: str, *, extractor: FieldExtractor | None = None
) -> PlayerRecord:
    """Extract name and matches/goals/assists totals from a profile page.

    Never raises on odd markup: fields that cannot be found read as 0 and are
    flagged ``FieldSource.DEFAULTED`` in the record's provenance.
    """
    extractor = extractor or _default_extractor
    soup = BeautifulSoup(html, "html.parser")
    name = _player_name(soup, url)
    text = html_utils.collapse_ws(soup.get_text(" "))
    extracted = extractor.extract(text)
    missing = FieldValue(0, FieldSource.DEFAULTED)
    fields = {key: extracted.get(key, missing) for key in STAT_FIELDS}

    defaulted = [k for k, v in fields.items() if v.source is FieldSource.DEFAULTED]
    if defaulted:
        logger.debug("Defaulted %s to 0 for %s", ", ".join(defaulted), url)

    return PlayerRecord(
        name=name,
        games=fields["games"].value,
        goals=fields["goals"].value,
        assists=fields["assists"].value,
        source=url,
        provenance={k: v.source for k, v in fields.items()},
    )

"""Structured parsing/validation errors for manually supplied datasets.

Scraped pages never raise these: the profile parser degrades missing values
to zero instead.
"""

from __future__ import annotations
from typing import Any


class ParsingError(Exception):
    """Base class for parsing related issues."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class EmptyInputError(ParsingError):
    """Raised when the pasted dataset is empty or whitespace only."""


class InvalidPasteError(ParsingError):
    """Raised when the pasted dataset is not valid JSON."""


class MissingMembersError(ParsingError):
    """Raised when the parsed JSON lacks a ``members`` list."""

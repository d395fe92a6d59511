"""
Error types raised by the ingestion pipeline.

The views turn these into HTTP responses: validation and parse problems are
the user's fault (400), processing errors are ours (500).
"""
from __future__ import annotations


class SpreadsheetError(Exception):
    """Base class so the views can catch everything from this app in one go."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(SpreadsheetError):
    """Bad request data: missing file or title, wrong file type, bad mapping."""


class DuplicateTitle(ValidationError):
    """The user already has an upload with this exact title."""


class ParseError(SpreadsheetError):
    """The uploaded blob could not be turned into header + data rows."""


class ProcessingError(SpreadsheetError):
    """Anything unexpected after a successful parse (aggregation, storage, DB)."""

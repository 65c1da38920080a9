"""Sheetloader exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each load stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class SheetLoaderError(Exception):
    """Base exception for all sheetloader failures."""


class SheetConfigError(SheetLoaderError):
    """Raised for invalid runtime or source configuration."""


class SheetFetchError(SheetLoaderError):
    """Raised when the remote grid cannot be retrieved.

    Attributes:
        status_code: HTTP status, or None for transport failures.
        reason: Status text or transport error description.
    """

    def __init__(self, message: str, status_code: int | None = None, reason: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


class SheetValidationError(SheetLoaderError):
    """Raised when a row fails the collection schema.

    Attributes:
        entry_id: Id of the row that failed validation.
    """

    def __init__(self, message: str, entry_id: str) -> None:
        super().__init__(message)
        self.entry_id = entry_id


class SheetStoreError(SheetLoaderError):
    """Raised for entry store persistence failures."""

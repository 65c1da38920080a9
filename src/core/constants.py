"""Core constants used across sheetloader modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATA_ROOT = Path(".sheetloader")
COLLECTIONS_DIR_NAME = "collections"
ENTRIES_FILE_NAME = "entries.json"
SHEETS_API_BASE_URL = "https://sheets.googleapis.com/v4/spreadsheets"
SHEET_COLUMN_SPAN = "A:ZZ"
SHEET_PROPERTIES_FIELDS = "sheets.properties"
ROW_ID_PREFIX = "row-"
DEFAULT_REQUEST_TIMEOUT_SECONDS = 30.0
DEFAULT_HAS_HEADERS = True
HASH_ALGORITHM = "sha256"

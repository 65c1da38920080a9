"""Runtime configuration model for sheetloader.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import DEFAULT_DATA_ROOT, DEFAULT_REQUEST_TIMEOUT_SECONDS
from core.errors import SheetConfigError
from core.types import SheetSource


@dataclass(frozen=True)
class SheetLoaderConfig:
    """Validated runtime configuration.

    Attributes:
        data_root: Local root directory for stored collections.
        request_timeout: Seconds to wait on the sheets API.
        api_key: Default API key for sources that do not set one.
        sheet_id: Default spreadsheet id.
        sheet_name: Default tab name.
    """

    data_root: Path
    request_timeout: float
    api_key: str | None
    sheet_id: str | None
    sheet_name: str | None

    @classmethod
    def from_env(cls) -> "SheetLoaderConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            SheetConfigError: If environment values are invalid.
        """
        data_root_value = os.getenv("SHEETLOADER_DATA_ROOT", str(DEFAULT_DATA_ROOT))
        timeout_value = os.getenv(
            "SHEETLOADER_REQUEST_TIMEOUT", str(DEFAULT_REQUEST_TIMEOUT_SECONDS)
        )
        return cls(
            data_root=Path(data_root_value).expanduser().resolve(),
            request_timeout=_parse_request_timeout(timeout_value),
            api_key=os.getenv("GOOGLE_SHEETS_API_KEY") or None,
            sheet_id=os.getenv("GOOGLE_SHEET_ID") or None,
            sheet_name=os.getenv("GOOGLE_SHEET_NAME") or None,
        )


def validate_sheet_source(source: SheetSource) -> SheetSource:
    """Check that a sheet source carries the required identifiers.

    The API key is only checked for presence; the remote service
    decides whether it is valid.

    Args:
        source: Source to check.

    Returns:
        The same source, unchanged.

    Raises:
        SheetConfigError: If sheet id or API key is empty.
    """
    if not source.sheet_id or not source.sheet_id.strip():
        raise SheetConfigError(
            "Invalid sheet source: sheet_id is empty. "
            "Copy the document id from the spreadsheet URL."
        )
    if not source.api_key:
        raise SheetConfigError(
            f"Invalid sheet source for {source.sheet_id}: api_key is empty. "
            "Set GOOGLE_SHEETS_API_KEY or pass an API key explicitly."
        )
    return source


def _parse_request_timeout(raw_value: str) -> float:
    """Parse the request timeout environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Parsed positive timeout in seconds.

    Raises:
        SheetConfigError: If value is not a positive number.
    """
    try:
        timeout = float(raw_value)
    except ValueError as error:
        raise SheetConfigError(
            "Invalid SHEETLOADER_REQUEST_TIMEOUT value: "
            f"expected number of seconds, got '{raw_value}'. "
            "Set SHEETLOADER_REQUEST_TIMEOUT to a numeric value."
        ) from error
    if timeout <= 0:
        raise SheetConfigError(
            "Invalid SHEETLOADER_REQUEST_TIMEOUT value: "
            f"expected a positive number, got '{raw_value}'."
        )
    return timeout

"""Remote grid fetcher for the sheets values API.

This module builds values-API URLs and downloads the raw cell grid
for a sheet source. It does not interpret rows or headers.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import requests

from core.config import validate_sheet_source
from core.constants import (
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    SHEET_COLUMN_SPAN,
    SHEET_PROPERTIES_FIELDS,
    SHEETS_API_BASE_URL,
)
from core.errors import SheetFetchError
from core.logging_config import get_logger
from core.types import RawGrid, SheetSource

_LOGGER = get_logger(__name__)


def build_sheet_range(sheet_name: str | None) -> str:
    """Return the A1 range covering every fetched column.

    Args:
        sheet_name: Optional tab name.

    Returns:
        ``{sheet_name}!A:ZZ`` or ``A:ZZ``.
    """
    if sheet_name:
        return f"{sheet_name}!{SHEET_COLUMN_SPAN}"
    return SHEET_COLUMN_SPAN


def build_values_url(sheet_id: str, sheet_range: str, api_key: str) -> str:
    """Build the values-API URL for one range.

    Args:
        sheet_id: Spreadsheet document id.
        sheet_range: A1 range, encoded as a single path segment.
        api_key: API key query parameter.

    Returns:
        Fully-qualified request URL.
    """
    encoded_range = quote(sheet_range, safe="")
    return f"{SHEETS_API_BASE_URL}/{sheet_id}/values/{encoded_range}?key={api_key}"


def fetch_grid(
    source: SheetSource,
    session: Any | None = None,
    timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
) -> RawGrid:
    """Download the raw cell grid for a sheet source.

    Args:
        source: Sheet coordinates and credentials.
        session: Optional ``requests.Session``-like object.
        timeout: Request timeout in seconds.

    Returns:
        Rows of string cells; empty when the sheet holds no values.

    Raises:
        SheetConfigError: If the source has no sheet id or API key.
        SheetFetchError: If the request fails or returns a non-2xx status.
    """
    validate_sheet_source(source)
    _LOGGER.info("sheet_load_started", sheet_id=source.sheet_id)
    if session is not None:
        return _fetch_values(source, session, timeout)
    with requests.Session() as owned_session:
        return _fetch_values(source, owned_session, timeout)


def _fetch_values(source: SheetSource, session: Any, timeout: float) -> RawGrid:
    """Resolve the tab and read its values through an open session."""
    sheet_name = source.sheet_name
    if not sheet_name and source.gid:
        sheet_name = resolve_sheet_title(source, session, timeout)
    url = build_values_url(source.sheet_id, build_sheet_range(sheet_name), source.api_key)
    payload = _get_json(session, url, timeout, source.sheet_id)
    values = payload.get("values")
    if not values:
        return []
    return [list(row) for row in values]


def resolve_sheet_title(source: SheetSource, session: Any, timeout: float) -> str:
    """Map a numeric tab gid onto its tab title.

    Args:
        source: Sheet source carrying a ``gid``.
        session: ``requests.Session``-like object.
        timeout: Request timeout in seconds.

    Returns:
        Title of the tab whose sheet id equals the gid.

    Raises:
        SheetFetchError: If metadata cannot be read or no tab matches.
    """
    url = (
        f"{SHEETS_API_BASE_URL}/{source.sheet_id}"
        f"?fields={SHEET_PROPERTIES_FIELDS}&key={source.api_key}"
    )
    payload = _get_json(session, url, timeout, source.sheet_id)
    for sheet in payload.get("sheets", []):
        properties = sheet.get("properties", {})
        if str(properties.get("sheetId")) == str(source.gid):
            return str(properties["title"])
    raise SheetFetchError(
        f"Failed to fetch Google Sheet {source.sheet_id}: no tab with gid {source.gid}. "
        "Check the gid in the sheet URL or set sheet_name instead.",
        reason="unknown gid",
    )


def _get_json(session: Any, url: str, timeout: float, sheet_id: str) -> dict[str, Any]:
    """Issue a GET request and decode its JSON object body.

    Raises:
        SheetFetchError: On transport errors, non-2xx status, or bad JSON.
    """
    try:
        response = session.get(url, timeout=timeout)
    except requests.RequestException as error:
        raise SheetFetchError(
            f"Failed to fetch Google Sheet {sheet_id}: {error}. "
            "Check network access and retry the load.",
            reason=str(error),
        ) from error
    if not response.ok:
        raise SheetFetchError(
            f"Failed to fetch Google Sheet {sheet_id}: "
            f"{response.status_code} {response.reason}. "
            "Check the sheet id, tab name, and API key.",
            status_code=response.status_code,
            reason=str(response.reason),
        )
    try:
        payload = response.json()
    except ValueError as error:
        raise SheetFetchError(
            f"Failed to fetch Google Sheet {sheet_id}: response body is not JSON.",
            status_code=response.status_code,
            reason="invalid json",
        ) from error
    if not isinstance(payload, dict):
        raise SheetFetchError(
            f"Failed to fetch Google Sheet {sheet_id}: expected JSON object at top level.",
            status_code=response.status_code,
            reason="invalid json",
        )
    return payload

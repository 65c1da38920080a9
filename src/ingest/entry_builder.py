"""Entry construction from normalized records.

This module assigns positional ids, runs the collection schema, and
attaches a change-detection digest to each surviving row.
"""

from __future__ import annotations

from core.constants import ROW_ID_PREFIX
from core.types import DigestFn, Entry, NormalizedRecord, ParseDataFn


def build_row_id(row_index: int) -> str:
    """Return the id for a 0-based position in the header-stripped rows.

    Positions are counted before blank rows are skipped, so skipped
    rows leave gaps in the id sequence.
    """
    return f"{ROW_ID_PREFIX}{row_index + 1}"


def build_entry(
    record: NormalizedRecord,
    row_index: int,
    parse_data: ParseDataFn,
    generate_digest: DigestFn,
) -> Entry:
    """Validate one record and wrap it as a store entry.

    Args:
        record: Normalized header-keyed record.
        row_index: 0-based position within the header-stripped rows.
        parse_data: Schema hook called with ``id`` and ``data``.
        generate_digest: Fingerprint function for validated data.

    Returns:
        Entry carrying id, validated data, and digest.

    Raises:
        SheetValidationError: If the schema rejects the record.
    """
    entry_id = build_row_id(row_index)
    parsed_data = parse_data(id=entry_id, data=record)
    return Entry(id=entry_id, data=parsed_data, digest=generate_digest(parsed_data))

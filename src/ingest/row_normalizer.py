"""Row normalization into header-keyed records."""

from __future__ import annotations

from core.types import HeaderSet, NormalizedRecord, RawRow


def is_blank_row(row: RawRow) -> bool:
    """Return whether a row is missing or holds only blank cells."""
    if not row:
        return True
    return all(cell is None or not str(cell).strip() for cell in row)


def normalize_row(row: RawRow, headers: HeaderSet) -> NormalizedRecord | None:
    """Convert one raw row into a record keyed by every header.

    Cells are copied verbatim. Missing trailing cells become ``""`` and
    cells past the last header are dropped.

    Args:
        row: Raw row cells, possibly shorter or longer than headers.
        headers: Column labels used as record keys.

    Returns:
        Normalized record, or None when the row should be skipped.
    """
    if is_blank_row(row):
        return None
    cells = row or ()
    record: NormalizedRecord = {header: "" for header in headers}
    for index, header in enumerate(headers):
        if index >= len(cells):
            break
        value = cells[index]
        if value is not None:
            record[header] = str(value)
    return record

"""Column header resolution for raw grids.

Headers come from the first row, or are synthesized as spreadsheet
column letters when the sheet has no header row.
"""

from __future__ import annotations

from core.types import HeaderSet, RawGrid


def resolve_headers(grid: RawGrid, has_headers: bool) -> tuple[HeaderSet, RawGrid]:
    """Split a grid into its header set and data rows.

    Args:
        grid: Raw rows from the fetcher.
        has_headers: Whether the first row holds column names.

    Returns:
        Pair of header labels and the remaining data rows.
    """
    if has_headers and grid:
        return tuple(grid[0]), grid[1:]
    max_columns = max((len(row) for row in grid), default=0)
    return tuple(column_label(index) for index in range(max_columns)), grid


def column_label(index: int) -> str:
    """Return the spreadsheet column letter for a 0-based index.

    Args:
        index: Column position, 0 for ``A``.

    Returns:
        ``A`` .. ``Z``, then ``AA``, ``AB`` and so on.
    """
    position = index + 1
    label = ""
    while position:
        position, remainder = divmod(position - 1, 26)
        label = chr(65 + remainder) + label
    return label

"""Shared typed models.

This module defines the grid, record, and entry models passed between
the fetch, normalize, build, and store stages of a sheet load.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Sequence

from core.constants import DEFAULT_HAS_HEADERS

RawGrid = list[list[str]]
"""Rows of string cells as returned by the source; rows may be ragged."""

RawRow = Optional[Sequence[Optional[str]]]
HeaderSet = tuple[str, ...]
NormalizedRecord = dict[str, str]

ParseDataFn = Callable[..., Any]
"""Schema hook called as ``parse_data(id=..., data=...)``."""

DigestFn = Callable[[Any], str]


@dataclass(frozen=True)
class SheetSource:
    """Remote sheet coordinates for one collection.

    Attributes:
        sheet_id: Spreadsheet document id from the sheet URL.
        api_key: API key sent with every request.
        sheet_name: Optional tab name; first tab when omitted.
        gid: Optional numeric tab id, used when sheet_name is absent.
        has_headers: Whether the first row holds column names.
    """

    sheet_id: str
    api_key: str
    sheet_name: str | None = None
    gid: str | None = None
    has_headers: bool = DEFAULT_HAS_HEADERS


@dataclass(frozen=True)
class Entry:
    """Validated content entry ready for the store.

    Attributes:
        id: Stable positional id, e.g. ``row-3``.
        data: Output of the collection schema.
        digest: Change-detection fingerprint of ``data``.
    """

    id: str
    data: Any
    digest: str


@dataclass(frozen=True)
class ChangeSummary:
    """Digest comparison between the previous and the new entry set."""

    added: tuple[str, ...] = ()
    changed: tuple[str, ...] = ()
    unchanged: tuple[str, ...] = ()
    removed: tuple[str, ...] = ()


@dataclass(frozen=True)
class LoadResult:
    """Outcome of one load cycle.

    Attributes:
        collection_name: Collection that was loaded.
        row_count: Header-stripped data rows seen, skipped rows included.
        entry_count: Entries committed to the store.
        entry_ids: Committed ids in row order.
        changes: Digest comparison against the prior store contents.
    """

    collection_name: str
    row_count: int
    entry_count: int
    entry_ids: tuple[str, ...] = ()
    changes: ChangeSummary = field(default_factory=ChangeSummary)


def entry_digests(entries: Sequence[Entry]) -> Mapping[str, str]:
    """Map entry ids to digests."""
    return {entry.id: entry.digest for entry in entries}

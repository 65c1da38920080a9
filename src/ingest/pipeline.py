"""Load orchestration for one sheet-backed collection.

This module coordinates fetching, header resolution, row normalization,
entry building, and the final store commit. Entries are buffered until
every row has been validated, so a failed load leaves the store as it was.
"""

from __future__ import annotations

from typing import Any

from core.constants import DEFAULT_REQUEST_TIMEOUT_SECONDS
from core.logging_config import get_logger
from core.types import (
    DigestFn,
    Entry,
    HeaderSet,
    LoadResult,
    ParseDataFn,
    RawGrid,
    SheetSource,
)
from ingest.entry_builder import build_entry, build_row_id
from ingest.grid_fetcher import fetch_grid
from ingest.header_resolver import resolve_headers
from ingest.row_normalizer import normalize_row
from store.collection_sync import synchronize_store
from store.entry_store import EntryStore
from transforms.content_digest import generate_digest as default_generate_digest
from transforms.schema_parsing import passthrough_parser

_LOGGER = get_logger(__name__)


class SheetLoadRunner:
    """Runner for a single, non-reentrant collection load cycle."""

    def __init__(
        self,
        collection_name: str,
        source: SheetSource,
        store: EntryStore,
        parse_data: ParseDataFn | None = None,
        generate_digest: DigestFn | None = None,
        session: Any | None = None,
        timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
    ) -> None:
        self._collection_name = collection_name
        self._source = source
        self._store = store
        self._parse_data = parse_data or passthrough_parser
        self._generate_digest = generate_digest or default_generate_digest
        self._session = session
        self._timeout = timeout

    def run(self) -> LoadResult:
        """Execute the load and commit entries to the store.

        Returns:
            Summary of rows seen and entries committed.

        Raises:
            SheetConfigError: If the source is missing required fields.
            SheetFetchError: If the grid cannot be fetched.
            SheetValidationError: If any row fails the schema.
        """
        try:
            return self._run()
        except Exception as error:
            _LOGGER.error(
                "sheet_load_failed",
                collection_name=self._collection_name,
                sheet_id=self._source.sheet_id,
                error=str(error),
            )
            raise

    def _run(self) -> LoadResult:
        grid = fetch_grid(self._source, session=self._session, timeout=self._timeout)
        if not grid:
            _LOGGER.warning(
                "sheet_empty",
                collection_name=self._collection_name,
                sheet_id=self._source.sheet_id,
            )
            return LoadResult(collection_name=self._collection_name, row_count=0, entry_count=0)
        headers, data_rows = resolve_headers(grid, self._source.has_headers)
        entries = self._build_entries(headers, data_rows)
        changes = synchronize_store(self._store, entries)
        _LOGGER.info(
            "sheet_load_completed",
            collection_name=self._collection_name,
            sheet_id=self._source.sheet_id,
            row_count=len(data_rows),
            entry_count=len(entries),
            added=len(changes.added),
            changed=len(changes.changed),
            unchanged=len(changes.unchanged),
            removed=len(changes.removed),
        )
        return LoadResult(
            collection_name=self._collection_name,
            row_count=len(data_rows),
            entry_count=len(entries),
            entry_ids=tuple(entry.id for entry in entries),
            changes=changes,
        )

    def _build_entries(self, headers: HeaderSet, data_rows: RawGrid) -> list[Entry]:
        entries: list[Entry] = []
        for row_index, row in enumerate(data_rows):
            record = normalize_row(row, headers)
            if record is None:
                continue
            if row_index == 0:
                _LOGGER.debug("first_entry_before_parse", entry_id=build_row_id(0), data=record)
            entry = build_entry(record, row_index, self._parse_data, self._generate_digest)
            if row_index == 0:
                _LOGGER.debug("first_entry_after_parse", entry_id=entry.id, digest=entry.digest)
            entries.append(entry)
        return entries


def load_sheet_collection(
    collection_name: str,
    source: SheetSource,
    store: EntryStore,
    parse_data: ParseDataFn | None = None,
    generate_digest: DigestFn | None = None,
    session: Any | None = None,
    timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
) -> LoadResult:
    """Load one sheet into a store, replacing its previous contents.

    Args:
        collection_name: Collection identifier used in logs.
        source: Sheet coordinates and credentials.
        store: Store exposing ``clear`` and ``set``.
        parse_data: Optional schema hook; rows pass through when omitted.
        generate_digest: Optional digest function; sha256 of JSON by default.
        session: Optional ``requests.Session``-like object.
        timeout: Request timeout in seconds.

    Returns:
        Load summary.
    """
    runner = SheetLoadRunner(
        collection_name,
        source,
        store,
        parse_data=parse_data,
        generate_digest=generate_digest,
        session=session,
        timeout=timeout,
    )
    return runner.run()

"""Collection definitions for sheet-backed content.

A collection pairs a sheet source with an optional pydantic schema. The
site build defines its collections once and loads each into its own store.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sequence

from pydantic import BaseModel

from core.config import SheetLoaderConfig
from core.logging_config import get_logger
from core.types import LoadResult, ParseDataFn, SheetSource
from ingest.pipeline import load_sheet_collection
from store.entry_store import EntryStore
from transforms.schema_parsing import build_schema_parser, passthrough_parser

_LOGGER = get_logger(__name__)

StoreFactory = Callable[[str], EntryStore]


@dataclass(frozen=True)
class SheetCollection:
    """One named content collection.

    Attributes:
        name: Collection identifier, unique per site.
        source: Sheet coordinates and credentials.
        schema: Optional pydantic model validating each row.
    """

    name: str
    source: SheetSource
    schema: type[BaseModel] | None = None

    def parser(self) -> ParseDataFn:
        """Return the parse hook for this collection's schema."""
        if self.schema is None:
            return passthrough_parser
        return build_schema_parser(self.schema)


def load_collections(
    collections: Sequence[SheetCollection],
    store_factory: StoreFactory,
    config: SheetLoaderConfig,
    session: Any | None = None,
) -> dict[str, LoadResult]:
    """Load every collection into the store the factory provides.

    Stores exposing ``flush`` are flushed after a successful load. The
    first failing collection stops the run and its error propagates.

    Args:
        collections: Collections to load, in order.
        store_factory: Returns the store for a collection name.
        config: Runtime configuration.
        session: Optional shared ``requests.Session``-like object.

    Returns:
        Load result per collection name.
    """
    results: dict[str, LoadResult] = {}
    for collection in collections:
        store = store_factory(collection.name)
        try:
            results[collection.name] = load_sheet_collection(
                collection.name,
                collection.source,
                store,
                parse_data=collection.parser(),
                session=session,
                timeout=config.request_timeout,
            )
        except Exception:
            _LOGGER.error("collection_load_aborted", collection_name=collection.name)
            raise
        flush = getattr(store, "flush", None)
        if callable(flush):
            flush()
    return results

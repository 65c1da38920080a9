"""Public SDK surface for sheetloader.

This module provides a stable import path for site builds.
It re-exports the loader entry points, stores, and typed models.
"""

from __future__ import annotations

from core.config import SheetLoaderConfig
from core.errors import (
    SheetConfigError,
    SheetFetchError,
    SheetLoaderError,
    SheetStoreError,
    SheetValidationError,
)
from core.types import ChangeSummary, Entry, LoadResult, SheetSource
from ingest.collections import SheetCollection, load_collections
from ingest.pipeline import SheetLoadRunner, load_sheet_collection
from store.entry_store import EntryStore, MemoryEntryStore
from store.json_entry_store import JsonEntryStore
from transforms.content_digest import generate_digest
from transforms.schema_parsing import build_schema_parser

__all__ = [
    "ChangeSummary",
    "Entry",
    "EntryStore",
    "JsonEntryStore",
    "LoadResult",
    "MemoryEntryStore",
    "SheetCollection",
    "SheetConfigError",
    "SheetFetchError",
    "SheetLoadRunner",
    "SheetLoaderConfig",
    "SheetLoaderError",
    "SheetSource",
    "SheetStoreError",
    "SheetValidationError",
    "build_schema_parser",
    "generate_digest",
    "load_collections",
    "load_sheet_collection",
]

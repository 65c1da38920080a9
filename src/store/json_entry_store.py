"""File-backed entry store.

This module persists one collection's entries as a JSON document under
the data root so a static-site build can read them. Mutations are staged
in memory and written atomically by ``flush``.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Iterator

from core.config import SheetLoaderConfig
from core.constants import COLLECTIONS_DIR_NAME, ENTRIES_FILE_NAME
from core.errors import SheetStoreError
from core.logging_config import get_logger
from core.types import Entry
from store.entry_payload import entry_from_payload, entry_to_payload

_LOGGER = get_logger(__name__)


class JsonEntryStore:
    """Entry store persisted at ``{data_root}/collections/{name}/entries.json``."""

    def __init__(self, config: SheetLoaderConfig, collection_name: str) -> None:
        """Initialize the store and load any persisted entries.

        Args:
            config: Runtime configuration.
            collection_name: Collection identifier.

        Raises:
            SheetStoreError: If the name is not a plain directory name or an
                existing entries file is unreadable.
        """
        _check_collection_name(collection_name)
        self._collection_name = collection_name
        self._entries_path = (
            config.data_root / COLLECTIONS_DIR_NAME / collection_name / ENTRIES_FILE_NAME
        )
        self._entries: dict[str, Entry] = {
            entry.id: entry for entry in _read_entries_file(self._entries_path)
        }

    @property
    def path(self) -> Path:
        """Location of the persisted entries document."""
        return self._entries_path

    def clear(self) -> None:
        self._entries.clear()

    def set(self, entry: Entry) -> None:
        self._entries[entry.id] = entry

    def get(self, entry_id: str) -> Entry | None:
        return self._entries.get(entry_id)

    def keys(self) -> list[str]:
        return list(self._entries)

    def entries(self) -> Iterator[Entry]:
        return iter(list(self._entries.values()))

    def flush(self) -> Path:
        """Write staged entries to disk, replacing the previous document.

        Returns:
            Path of the written entries file.

        Raises:
            SheetStoreError: If the file cannot be written.
        """
        document = {
            "collection": self._collection_name,
            "entries": [entry_to_payload(entry) for entry in self._entries.values()],
        }
        temp_path = self._entries_path.with_suffix(".json.tmp")
        try:
            self._entries_path.parent.mkdir(parents=True, exist_ok=True)
            temp_path.write_text(json.dumps(document, indent=2) + "\n", encoding="utf-8")
            os.replace(temp_path, self._entries_path)
        except OSError as error:
            temp_path.unlink(missing_ok=True)
            raise SheetStoreError(
                f"Failed to write entries for collection '{self._collection_name}' "
                f"at {self._entries_path}: {error}. Check the data root permissions."
            ) from error
        _LOGGER.info(
            "collection_flushed",
            collection_name=self._collection_name,
            entry_count=len(self._entries),
            path=str(self._entries_path),
        )
        return self._entries_path


def _check_collection_name(collection_name: str) -> None:
    """Reject names that would resolve outside the collections directory."""
    if (
        not collection_name
        or collection_name in (".", "..")
        or "/" in collection_name
        or "\\" in collection_name
    ):
        raise SheetStoreError(
            f"Invalid collection name '{collection_name}': expected a plain directory name "
            "without path separators or '..'."
        )


def _read_entries_file(entries_path: Path) -> list[Entry]:
    """Read persisted entries, or nothing when the file is absent.

    Raises:
        SheetStoreError: If the document is not valid JSON or malformed.
    """
    if not entries_path.exists():
        return []
    try:
        document = json.loads(entries_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as error:
        raise SheetStoreError(
            f"Failed to parse entries file at {entries_path}: {error.msg}. "
            "Delete the file and reload the collection."
        ) from error
    payloads: Any = document.get("entries") if isinstance(document, dict) else None
    if not isinstance(payloads, list):
        raise SheetStoreError(
            f"Failed to parse entries file at {entries_path}: "
            "expected an object with an 'entries' list. Reload the collection."
        )
    try:
        return [entry_from_payload(payload) for payload in payloads]
    except (ValueError, AttributeError) as error:
        raise SheetStoreError(
            f"Failed to parse entries file at {entries_path}: {error}. Reload the collection."
        ) from error

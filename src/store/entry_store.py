"""Entry store interface and in-memory implementation.

The loader only needs ``clear`` and ``set``; the read methods serve
change detection and downstream consumers.
"""

from __future__ import annotations

from typing import Iterator, Protocol, runtime_checkable

from core.types import Entry


@runtime_checkable
class EntryStore(Protocol):
    """Keyed collection of entries owned by one collection loader."""

    def clear(self) -> None:
        """Remove every stored entry."""

    def set(self, entry: Entry) -> None:
        """Insert or replace an entry by id."""

    def get(self, entry_id: str) -> Entry | None:
        """Return an entry by id, or None."""

    def keys(self) -> list[str]:
        """Return stored ids in insertion order."""

    def entries(self) -> Iterator[Entry]:
        """Iterate stored entries in insertion order."""


class MemoryEntryStore:
    """Insertion-ordered in-memory entry store."""

    def __init__(self, entries: list[Entry] | None = None) -> None:
        self._entries: dict[str, Entry] = {}
        for entry in entries or []:
            self.set(entry)

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

    def __len__(self) -> int:
        return len(self._entries)

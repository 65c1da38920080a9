"""Unit tests for the in-memory entry store and synchronizer."""

from __future__ import annotations

from core.types import Entry
from store.collection_sync import summarize_changes, synchronize_store
from store.entry_store import EntryStore, MemoryEntryStore


def _entry(entry_id: str, digest: str) -> Entry:
    return Entry(id=entry_id, data={"id": entry_id}, digest=digest)


def test_memory_store_satisfies_protocol() -> None:
    """MemoryEntryStore should be a valid EntryStore."""
    assert isinstance(MemoryEntryStore(), EntryStore)


def test_memory_store_set_replaces_by_id_and_keeps_order() -> None:
    """Upserts should replace in place without reordering."""
    store = MemoryEntryStore([_entry("row-1", "a"), _entry("row-2", "b")])

    store.set(_entry("row-1", "c"))

    assert store.keys() == ["row-1", "row-2"]
    assert store.get("row-1") == _entry("row-1", "c")


def test_synchronize_store_replaces_contents_in_order() -> None:
    """Synchronization should clear prior entries and insert in order."""
    store = MemoryEntryStore([_entry("row-7", "old")])
    entries = [_entry("row-3", "x"), _entry("row-1", "y")]

    synchronize_store(store, entries)

    assert store.keys() == ["row-3", "row-1"]


def test_summarize_changes_classifies_ids() -> None:
    """Digests should classify ids as added, changed, unchanged, or removed."""
    previous = {"row-1": "a", "row-2": "b", "row-3": "c"}
    entries = [_entry("row-1", "a"), _entry("row-2", "B"), _entry("row-4", "d")]

    changes = summarize_changes(previous, entries)

    assert changes.added == ("row-4",)
    assert changes.changed == ("row-2",)
    assert changes.unchanged == ("row-1",)
    assert changes.removed == ("row-3",)

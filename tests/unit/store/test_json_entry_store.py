"""Unit tests for the file-backed entry store."""

from __future__ import annotations

from dataclasses import replace
from datetime import date
import json

import pytest

from core.config import SheetLoaderConfig
from core.errors import SheetStoreError
from core.types import Entry
from store import json_entry_store
from store.json_entry_store import JsonEntryStore


def _config(tmp_path) -> SheetLoaderConfig:
    return replace(SheetLoaderConfig.from_env(), data_root=tmp_path)


def test_flush_persists_entries_for_reload(tmp_path) -> None:
    """Flushed entries should be readable by a new store instance."""
    config = _config(tmp_path)
    store = JsonEntryStore(config, "reviews")
    store.set(Entry(id="row-1", data={"data": date(2024, 5, 1), "reviewID": 7}, digest="d1"))

    path = store.flush()
    reloaded = JsonEntryStore(config, "reviews")

    assert path == tmp_path / "collections" / "reviews" / "entries.json"
    assert reloaded.get("row-1") == Entry(
        id="row-1", data={"data": "2024-05-01", "reviewID": 7}, digest="d1"
    )


def test_unflushed_changes_are_not_persisted(tmp_path) -> None:
    """Clearing without flushing should leave the file unchanged."""
    config = _config(tmp_path)
    store = JsonEntryStore(config, "products")
    store.set(Entry(id="row-1", data={}, digest="d"))
    store.flush()

    store.clear()

    assert JsonEntryStore(config, "products").keys() == ["row-1"]


def test_store_raises_for_corrupt_file(tmp_path) -> None:
    """Malformed entries files should raise a store error."""
    entries_path = tmp_path / "collections" / "broken" / "entries.json"
    entries_path.parent.mkdir(parents=True)
    entries_path.write_text("{not json", encoding="utf-8")

    with pytest.raises(SheetStoreError):
        JsonEntryStore(_config(tmp_path), "broken")


def test_store_raises_for_wrong_document_shape(tmp_path) -> None:
    """Documents without an entries list should raise a store error."""
    entries_path = tmp_path / "collections" / "odd" / "entries.json"
    entries_path.parent.mkdir(parents=True)
    entries_path.write_text(json.dumps({"entries": {}}), encoding="utf-8")

    with pytest.raises(SheetStoreError):
        JsonEntryStore(_config(tmp_path), "odd")


@pytest.mark.parametrize("collection_name", ["../escape", "a/b", "a\\b", "..", ".", ""])
def test_store_rejects_names_outside_collections_dir(tmp_path, collection_name: str) -> None:
    """Collection names with path parts should be rejected."""
    with pytest.raises(SheetStoreError):
        JsonEntryStore(_config(tmp_path), collection_name)

    assert not (tmp_path / "escape").exists()


def test_flush_failure_removes_staged_file(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    """A failed replace should not leave the temporary file behind."""
    store = JsonEntryStore(_config(tmp_path), "products")
    store.set(Entry(id="row-1", data={}, digest="d"))

    def failing_replace(source, destination) -> None:
        raise OSError("disk full")

    monkeypatch.setattr(json_entry_store.os, "replace", failing_replace)

    with pytest.raises(SheetStoreError):
        store.flush()

    collection_dir = tmp_path / "collections" / "products"
    assert list(collection_dir.iterdir()) == []

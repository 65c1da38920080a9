"""Integration tests for the sheet-to-store workflow."""

from __future__ import annotations

from dataclasses import replace
from datetime import date

from pydantic import BaseModel

from core.config import SheetLoaderConfig
from core.types import SheetSource
from ingest.collections import SheetCollection, load_collections
from store.json_entry_store import JsonEntryStore
from tests.fake_sheets import FakeResponse, FakeSession


class Review(BaseModel):
    reviewer: str
    reviews: str
    rating: str
    data: date
    source: str
    reviewID: int


REVIEW_GRID = [
    ["reviewer", "reviews", "rating", "data", "source", "reviewID"],
    ["Ann", "Great", "5", "2024-05-01", "web", "1"],
    [],
    ["Bo", "Fine", "4", "2024-06-02", "shop", "2", "ignored"],
]


def test_reviews_load_persists_and_detects_changes(tmp_path) -> None:
    """Reloading with one edited row should report exactly one change."""
    config = replace(SheetLoaderConfig.from_env(), data_root=tmp_path)
    collection = SheetCollection("reviews", SheetSource("sheet-1", "key-1", "Sheet1"), Review)

    def store_factory(name: str) -> JsonEntryStore:
        return JsonEntryStore(config, name)

    first = load_collections(
        [collection], store_factory, config, FakeSession(FakeResponse({"values": REVIEW_GRID}))
    )
    edited_grid = [list(row) for row in REVIEW_GRID]
    edited_grid[3][2] = "3"
    second = load_collections(
        [collection], store_factory, config, FakeSession(FakeResponse({"values": edited_grid}))
    )
    stored = JsonEntryStore(config, "reviews")

    assert first["reviews"].entry_ids == ("row-1", "row-3")
    assert second["reviews"].changes.unchanged == ("row-1",)
    assert second["reviews"].changes.changed == ("row-3",)
    assert stored.get("row-3").data["rating"] == "3"
    assert stored.get("row-1").data["data"] == "2024-05-01"

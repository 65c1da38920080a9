"""Unit tests for content digests."""

from __future__ import annotations

from datetime import date

from transforms.content_digest import generate_digest


def test_generate_digest_ignores_key_order() -> None:
    """Structurally equal data should share a digest."""
    assert generate_digest({"a": "1", "b": "2"}) == generate_digest({"b": "2", "a": "1"})


def test_generate_digest_changes_with_any_field() -> None:
    """A changed field should change the digest."""
    assert generate_digest({"a": "1", "b": "2"}) != generate_digest({"a": "1", "b": "3"})


def test_generate_digest_accepts_dates() -> None:
    """Coerced dates should digest deterministically."""
    data = {"published": date(2024, 5, 1), "rating": 4}

    assert generate_digest(data) == generate_digest(dict(data))

"""Shared JSON serialization for Entry payloads.

This module centralizes Entry JSON serialization logic used by the
file-backed entry store.
"""

from __future__ import annotations

import json
from typing import Any

from core.types import Entry


def entry_to_payload(entry: Entry) -> dict[str, object]:
    """Serialize Entry into JSON-safe payload.

    Args:
        entry: Entry instance.

    Returns:
        Dictionary payload for JSON encoding.
    """
    return {
        "id": entry.id,
        "data": _json_safe(entry.data),
        "digest": entry.digest,
    }


def entry_from_payload(payload: dict[str, Any]) -> Entry:
    """Deserialize JSON payload into Entry.

    Args:
        payload: Serialized entry payload.

    Returns:
        Parsed Entry.

    Raises:
        ValueError: If the payload has no id or digest.
    """
    entry_id = payload.get("id")
    digest = payload.get("digest")
    if not isinstance(entry_id, str) or not isinstance(digest, str):
        raise ValueError("Invalid entry payload: expected string fields 'id' and 'digest'")
    return Entry(id=entry_id, data=payload.get("data"), digest=digest)


def _json_safe(data: Any) -> Any:
    """Round-trip data through JSON so dates and decimals become strings."""
    return json.loads(json.dumps(data, default=str))

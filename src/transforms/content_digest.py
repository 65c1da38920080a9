"""Content digest for change detection.

Digests are a sha256 over canonical JSON, so structurally equal data
always yields the same token.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any

from core.constants import HASH_ALGORITHM


def generate_digest(data: Any) -> str:
    """Compute a stable digest for validated entry data.

    Args:
        data: JSON-like data; dates and other scalars are stringified.

    Returns:
        Hex digest string.
    """
    normalized = json.dumps(data, sort_keys=True, separators=(",", ":"), default=str)
    hash_builder = hashlib.new(HASH_ALGORITHM)
    hash_builder.update(normalized.encode("utf-8"))
    return hash_builder.hexdigest()

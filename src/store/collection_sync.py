"""Store synchronization for built entries.

Entries are committed as a full replacement: the store is cleared and
repopulated in row order. Digests of the prior contents are compared
against the new set to report what changed.
"""

from __future__ import annotations

from typing import Mapping, Sequence

from core.types import ChangeSummary, Entry, entry_digests
from store.entry_store import EntryStore


def synchronize_store(store: EntryStore, entries: Sequence[Entry]) -> ChangeSummary:
    """Replace the store contents with ``entries``.

    Args:
        store: Target store for one collection.
        entries: Fully built entries in row order.

    Returns:
        Digest comparison between prior and new contents.
    """
    previous_digests = entry_digests(list(store.entries()))
    changes = summarize_changes(previous_digests, entries)
    store.clear()
    for entry in entries:
        store.set(entry)
    return changes


def summarize_changes(
    previous_digests: Mapping[str, str],
    entries: Sequence[Entry],
) -> ChangeSummary:
    """Classify entry ids by comparing digests.

    Args:
        previous_digests: Digest per id from the prior load.
        entries: Newly built entries.

    Returns:
        Added, changed, unchanged, and removed ids.
    """
    added: list[str] = []
    changed: list[str] = []
    unchanged: list[str] = []
    for entry in entries:
        previous = previous_digests.get(entry.id)
        if previous is None:
            added.append(entry.id)
        elif previous == entry.digest:
            unchanged.append(entry.id)
        else:
            changed.append(entry.id)
    current_ids = {entry.id for entry in entries}
    removed = [entry_id for entry_id in previous_digests if entry_id not in current_ids]
    return ChangeSummary(
        added=tuple(added),
        changed=tuple(changed),
        unchanged=tuple(unchanged),
        removed=tuple(removed),
    )

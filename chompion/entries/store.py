"""
In-memory record store.

Stands in for the persistence layer: one category set and the entries
scored against it. Per-entry writes are independent so bulk recompute can
update entries from worker threads.
"""
from __future__ import annotations

import threading
from decimal import Decimal

from ..errors import NotFoundError
from .models import Entry, RatingCategory

_categories: dict[str, RatingCategory] = {}
_entries: dict[str, Entry] = {}
_lock = threading.Lock()


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------


def save_categories(categories: list[RatingCategory]) -> None:
    """Replace the whole category set."""
    with _lock:
        _categories.clear()
        _categories.update({c.id: c for c in categories})


def get_categories() -> list[RatingCategory]:
    with _lock:
        return sorted(_categories.values(), key=lambda c: c.sort_order)


def get_category(category_id: str) -> RatingCategory:
    with _lock:
        category = _categories.get(category_id)
    if category is None:
        raise NotFoundError("category", category_id)
    return category


# ---------------------------------------------------------------------------
# Entries
# ---------------------------------------------------------------------------


def save_entry(entry: Entry) -> None:
    with _lock:
        _entries[entry.id] = entry


def get_entry(entry_id: str) -> Entry:
    with _lock:
        entry = _entries.get(entry_id)
    if entry is None:
        raise NotFoundError("entry", entry_id)
    return entry


def list_entries() -> list[Entry]:
    with _lock:
        return sorted(_entries.values(), key=lambda e: e.eaten_at)


def update_composite_score(entry_id: str, score: Decimal) -> Entry:
    with _lock:
        entry = _entries.get(entry_id)
        if entry is None:
            raise NotFoundError("entry", entry_id)
        updated = entry.model_copy(update={"composite_score": score})
        _entries[entry_id] = updated
    return updated


def delete_entry(entry_id: str) -> None:
    with _lock:
        if _entries.pop(entry_id, None) is None:
            raise NotFoundError("entry", entry_id)


def clear_store() -> None:
    with _lock:
        _categories.clear()
        _entries.clear()

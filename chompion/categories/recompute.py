"""
Bulk recompute of stored composite scores.

Run explicitly after a weight change. Every entry is rescored on its own
(read ratings, score, write), so the batch can run on a thread pool in any
order, and an interrupted run is finished by simply running it again.
"""
from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, Mapping

from ..entries import store
from ..entries.models import RatingCategory
from ..errors import NotFoundError
from ..scoring.composite import category_weights, composite_score
from ..scoring.weights import check_fraction_total
from .config import DEFAULT_CATEGORY_CONFIG, CategoryConfig

logger = logging.getLogger(__name__)


@dataclass
class RecomputeResult:
    updated: dict[str, Decimal] = field(default_factory=dict)
    missing: list[str] = field(default_factory=list)
    cancelled: list[str] = field(default_factory=list)


def recompute_entry(entry_id: str, weights: Mapping[str, Decimal]) -> Decimal:
    """Rescore one stored entry against ``weights`` and overwrite its score."""
    entry = store.get_entry(entry_id)
    score = composite_score(entry.ratings, weights)
    store.update_composite_score(entry_id, score)
    return score


def bulk_recompute(
    categories: Iterable[RatingCategory] | None = None,
    entry_ids: Iterable[str] | None = None,
    config: CategoryConfig = DEFAULT_CATEGORY_CONFIG,
    cancel: threading.Event | None = None,
) -> RecomputeResult:
    """Overwrite the composite score of every entry in scope.

    Defaults to the stored category set and every stored entry. Entries that
    disappear mid-run are skipped and listed in ``missing``; once ``cancel``
    is set no further entries are touched.
    """
    categories = list(categories) if categories is not None else store.get_categories()
    check_fraction_total(categories, config.weight_tolerance)
    weights = category_weights(categories)
    ids = list(entry_ids) if entry_ids is not None else [e.id for e in store.list_entries()]

    def _run(entry_id: str) -> tuple[str, Decimal | None, bool]:
        if cancel is not None and cancel.is_set():
            return entry_id, None, True
        try:
            return entry_id, recompute_entry(entry_id, weights), False
        except NotFoundError:
            logger.warning("Entry %s not found during recompute, skipping", entry_id)
            return entry_id, None, False

    result = RecomputeResult()
    if config.recompute_workers > 1 and len(ids) > 1:
        with ThreadPoolExecutor(max_workers=config.recompute_workers) as pool:
            outcomes = list(pool.map(_run, ids))
    else:
        outcomes = map(_run, ids)

    for entry_id, score, cancelled in outcomes:
        if cancelled:
            result.cancelled.append(entry_id)
        elif score is None:
            result.missing.append(entry_id)
        else:
            result.updated[entry_id] = score

    logger.info(
        "Recomputed %d entries (%d missing, %d cancelled)",
        len(result.updated), len(result.missing), len(result.cancelled),
    )
    return result

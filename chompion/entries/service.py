from __future__ import annotations

import logging
import uuid
from typing import Iterable, Sequence

from ..categories.config import DEFAULT_CATEGORY_CONFIG, CategoryConfig
from ..categories.recompute import recompute_entry
from ..cuisine.classifier import classify
from ..errors import ValidationError
from ..scoring.composite import category_weights, composite_score
from ..scoring.weights import check_fraction_total
from . import store
from .models import CategoryScore, Entry, EntryDraft, RatingCategory

logger = logging.getLogger(__name__)


def _rating_problems(
    ratings: Iterable[CategoryScore],
    categories: Sequence[RatingCategory] | None,
) -> list[str]:
    """Rated scores must exist, and must point at known categories when those are given."""
    rated = [r for r in ratings if r.score > 0]
    if categories is None:
        return [] if rated else ["rate at least one category"]

    known = {c.id for c in categories}
    problems = [f"unknown rating category {r.category_id!r}" for r in rated if r.category_id not in known]
    if not any(r.category_id in known for r in rated):
        problems.append("rate at least one category")
    return problems


def validate_draft(
    draft: EntryDraft,
    categories: Sequence[RatingCategory] | None = None,
) -> None:
    """Raise ``ValidationError`` listing everything wrong with ``draft``."""
    problems: list[str] = []
    if not draft.restaurant_name.strip():
        problems.append("restaurant name is required")
    if not draft.city.strip():
        problems.append("city is required")
    if not any(d.name.strip() for d in draft.dishes):
        problems.append("at least one dish is required")
    problems.extend(_rating_problems(draft.ratings, categories))
    if problems:
        raise ValidationError(*problems)


def _resolve(categories: Iterable[RatingCategory] | None) -> list[RatingCategory]:
    return list(categories) if categories is not None else store.get_categories()


def create_entry(
    draft: EntryDraft,
    categories: Iterable[RatingCategory] | None = None,
    config: CategoryConfig = DEFAULT_CATEGORY_CONFIG,
) -> Entry:
    """Validate, classify and score a new entry, then store it."""
    categories = _resolve(categories)
    validate_draft(draft, categories)
    check_fraction_total(categories, config.weight_tolerance)

    dishes = [d for d in draft.dishes if d.name.strip()]
    cuisine = draft.cuisine or classify([d.name for d in dishes], draft.restaurant_name)
    entry = Entry(
        id=uuid.uuid4().hex,
        restaurant_name=draft.restaurant_name.strip(),
        city=draft.city.strip(),
        cost=draft.cost,
        quantity=draft.quantity,
        eaten_at=draft.eaten_at,
        cuisine=cuisine,
        composite_score=composite_score(draft.ratings, category_weights(categories)),
        subtype=draft.subtype,
        dishes=dishes,
        ratings=[r for r in draft.ratings if r.score > 0],
    )
    store.save_entry(entry)
    logger.info("Stored entry %s at %s (score %s, cuisine %s)",
                entry.id, entry.restaurant_name, entry.composite_score, cuisine)
    return entry


def update_ratings(
    entry_id: str,
    ratings: list[CategoryScore],
    categories: Iterable[RatingCategory] | None = None,
    config: CategoryConfig = DEFAULT_CATEGORY_CONFIG,
) -> Entry:
    """Replace an entry's ratings and refresh its stored composite score."""
    categories = _resolve(categories)
    problems = _rating_problems(ratings, categories)
    if problems:
        raise ValidationError(*problems)
    check_fraction_total(categories, config.weight_tolerance)
    entry = store.get_entry(entry_id)

    store.save_entry(entry.model_copy(update={"ratings": [r for r in ratings if r.score > 0]}))
    recompute_entry(entry_id, category_weights(categories))
    return store.get_entry(entry_id)


def delete_entry(entry_id: str) -> None:
    store.delete_entry(entry_id)
    logger.info("Deleted entry %s", entry_id)

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable, Mapping

from ..entries.models import CategoryScore, RatingCategory
from .rounding import round_half_up, to_decimal
from .weights import WeightCollection

logger = logging.getLogger(__name__)

SCORE_PLACES = 2


def weighted_score(pairs: Iterable[tuple[int, Decimal | float]]) -> Decimal:
    """Sum of ``score * weight`` over rated pairs, rounded half away from zero.

    Weights are used as given: leaving a category unrated drops its share
    instead of inflating the others.
    """
    total = Decimal("0")
    for score, weight in pairs:
        if score <= 0:
            continue
        total += Decimal(score) * to_decimal(weight)
    return round_half_up(total, SCORE_PLACES)


def category_weights(categories: Iterable[RatingCategory]) -> dict[str, Decimal]:
    return {c.id: to_decimal(c.weight) for c in categories}


def composite_score(
    ratings: Iterable[CategoryScore],
    weights: WeightCollection | Mapping[str, Decimal | float],
) -> Decimal:
    """Composite 0-5 score of one entry. Never rejects an incomplete weight set."""
    fractions = weights.fractions() if isinstance(weights, WeightCollection) else weights

    pairs: list[tuple[int, Decimal | float]] = []
    for rating in ratings:
        if rating.score <= 0:
            continue
        weight = fractions.get(rating.category_id)
        if weight is None:
            logger.debug("No weight for category %s, rating ignored", rating.category_id)
            continue
        pairs.append((rating.score, weight))
    return weighted_score(pairs)

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from .keywords import CUISINE_KEYWORDS


def _texts(dish_names: Iterable[str], venue_name: str | None) -> list[str]:
    texts = [name.lower() for name in dish_names if name]
    if venue_name:
        texts.append(venue_name.lower())
    return texts


def score_cuisines(
    dish_names: Iterable[str],
    venue_name: str | None = None,
    table: Mapping[str, Sequence[str]] = CUISINE_KEYWORDS,
) -> dict[str, int]:
    """Count keyword hits per cuisine.

    Every (text, keyword) substring hit counts once, so one dish name can
    feed several cuisines, or the same cuisine more than once.
    """
    scores: dict[str, int] = {}
    for text in _texts(dish_names, venue_name):
        for cuisine, keywords in table.items():
            for keyword in keywords:
                if keyword in text:
                    scores[cuisine] = scores.get(cuisine, 0) + 1
    return scores


def classify(
    dish_names: Iterable[str],
    venue_name: str | None = None,
    table: Mapping[str, Sequence[str]] = CUISINE_KEYWORDS,
) -> str | None:
    """Return the best-matching cuisine label, or ``None`` when nothing matched.

    Ties go to whichever cuisine is declared first in ``table``.
    """
    scores = score_cuisines(dish_names, venue_name, table)

    best: str | None = None
    best_score = 0
    for cuisine in table:
        hits = scores.get(cuisine, 0)
        if hits > best_score:
            best, best_score = cuisine, hits
    return best

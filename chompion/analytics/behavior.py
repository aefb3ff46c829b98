"""
Behavioral traits.

Four independent 0-5 scores summarising how someone eats out:

* **adventurous** - share of visits that went to a different restaurant
* **diverse palate** - share of distinct orders among entries with an order;
  ``None`` when no entry records an order at all
* **discerning** - how widely composite scores are spread (population
  standard deviation, normalised by ``DISCERNMENT_SPREAD``)
* **loyal** - share of visits that went to the single most visited restaurant
"""
from __future__ import annotations

from collections import Counter
from typing import Sequence

import numpy as np

from ..entries.models import Entry
from ..scoring.rounding import rounded
from .config import DEFAULT_ANALYTICS_CONFIG, DISCERNMENT_SPREAD, AnalyticsConfig
from .models import BehavioralMetrics

MAX_TRAIT = 5.0


def _trait(value: float) -> float:
    return rounded(min(max(value, 0.0), MAX_TRAIT), 1)


def adventurousness(entries: Sequence[Entry]) -> float:
    if not entries:
        return 0.0
    distinct = len({e.restaurant_name for e in entries})
    return _trait(distinct / len(entries) * MAX_TRAIT)


def diverse_palate(entries: Sequence[Entry]) -> float | None:
    with_order = [e.subtype for e in entries if e.subtype]
    if not with_order:
        return None
    return _trait(len(set(with_order)) / len(with_order) * MAX_TRAIT)


def discernment(entries: Sequence[Entry], spread: float = DISCERNMENT_SPREAD) -> float:
    scores = [float(e.composite_score) for e in entries if e.composite_score is not None]
    if len(scores) < 2:
        return 0.0
    std = float(np.std(np.array(scores)))
    return _trait(min(std / spread, 1.0) * MAX_TRAIT)


def loyalty(entries: Sequence[Entry]) -> float:
    if not entries:
        return 0.0
    max_visits = max(Counter(e.restaurant_name for e in entries).values())
    return _trait(max_visits / len(entries) * MAX_TRAIT)


def compute_behavioral_metrics(
    entries: Sequence[Entry],
    config: AnalyticsConfig = DEFAULT_ANALYTICS_CONFIG,
) -> BehavioralMetrics:
    entries = list(entries)
    return BehavioralMetrics(
        adventurous=adventurousness(entries),
        diverse_palate=diverse_palate(entries),
        discerning=discernment(entries, config.discernment_spread),
        loyal=loyalty(entries),
    )

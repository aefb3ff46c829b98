from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from chompion.analytics.behavior import (
    adventurousness,
    compute_behavioral_metrics,
    discernment,
    diverse_palate,
    loyalty,
)
from chompion.analytics.config import DISCERNMENT_SPREAD, AnalyticsConfig
from chompion.entries.models import Entry


def _entries(*specs):
    """Build entries from ``(restaurant, score, subtype)`` tuples."""
    return [
        Entry(
            id=str(i),
            restaurant_name=restaurant,
            city="SF",
            composite_score=Decimal(score) if score is not None else None,
            subtype=subtype,
            eaten_at=datetime(2026, 1, i + 1),
        )
        for i, (restaurant, score, subtype) in enumerate(specs)
    ]


def test_single_entry():
    metrics = compute_behavioral_metrics(_entries(("A", "4.0", None)))
    assert metrics.discerning == 0.0
    assert metrics.adventurous == 5.0
    assert metrics.loyal == 5.0
    assert metrics.diverse_palate is None


def test_empty_collection():
    metrics = compute_behavioral_metrics([])
    assert metrics.adventurous == 0.0
    assert metrics.discerning == 0.0
    assert metrics.loyal == 0.0
    assert metrics.diverse_palate is None


def test_all_distinct_restaurants_is_fully_adventurous():
    entries = _entries(("A", "4.0", None), ("B", "4.0", None), ("C", "4.0", None), ("D", "4.0", None))
    assert adventurousness(entries) == 5.0


def test_one_restaurant_is_fully_loyal():
    entries = _entries(*[("A", "4.0", None)] * 4)
    assert loyalty(entries) == 5.0
    # 1/4 * 5 = 1.25, rounded half up
    assert adventurousness(entries) == 1.3


def test_diverse_palate_only_counts_entries_with_an_order():
    entries = _entries(
        ("A", "4.0", "Latte"),
        ("A", "4.0", "Latte"),
        ("B", "4.0", "Espresso"),
        ("C", "4.0", None),
    )
    assert diverse_palate(entries) == 3.3


def test_diverse_palate_is_none_without_orders():
    assert diverse_palate(_entries(("A", "4.0", None), ("B", "3.0", None))) is None


class TestDiscernment:
    def test_needs_two_scored_entries(self):
        entries = _entries(("A", "4.0", None), ("B", None, None))
        assert discernment(entries) == 0.0

    def test_identical_scores(self):
        assert discernment(_entries(("A", "3.5", None), ("B", "3.5", None))) == 0.0

    def test_population_std_dev(self):
        # scores 3 and 5: mean 4, population std 1 -> 1 / 1.2 * 5
        assert discernment(_entries(("A", "3.0", None), ("B", "5.0", None))) == 4.2

    def test_capped_at_five(self):
        assert discernment(_entries(("A", "1.0", None), ("B", "5.0", None))) == 5.0

    def test_spread_is_tunable(self):
        entries = _entries(("A", "3.0", None), ("B", "5.0", None))
        assert discernment(entries, spread=2.0) == 2.5
        metrics = compute_behavioral_metrics(entries, AnalyticsConfig(discernment_spread=2.0))
        assert metrics.discerning == 2.5

    def test_default_spread(self):
        assert DISCERNMENT_SPREAD == 1.2


def test_traits_stay_within_bounds():
    entries = _entries(
        ("A", "1.0", "x"), ("A", "5.0", "y"), ("B", "2.5", "x"), ("C", None, None), ("A", "4.0", "z"),
    )
    metrics = compute_behavioral_metrics(entries)
    for value in (metrics.adventurous, metrics.diverse_palate, metrics.discerning, metrics.loyal):
        assert 0.0 <= value <= 5.0

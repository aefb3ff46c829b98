from __future__ import annotations

from decimal import Decimal

import pytest

from chompion.entries.models import RatingCategory
from chompion.errors import InvalidWeightSet, ValidationError
from chompion.scoring.weights import (
    WeightCollection,
    check_fraction_total,
    even_split,
)


# ── Even distribution ────────────────────────────────────────────────────


class TestEvenSplit:
    def test_three_categories(self):
        assert even_split(3) == [34, 33, 33]

    def test_seven_categories_remainder_goes_to_first_two(self):
        assert even_split(7) == [15, 15, 14, 14, 14, 14, 14]

    def test_single_category_takes_everything(self):
        assert even_split(1) == [100]

    def test_always_sums_to_100(self):
        for n in range(1, 151):
            shares = even_split(n)
            assert len(shares) == n
            assert sum(shares) == 100

    def test_zero_categories(self):
        assert even_split(0) == []

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            even_split(-1)


def test_distribute_evenly_keeps_order_and_names():
    weights = WeightCollection.from_pairs([("Taste", 80), ("Value", 10), ("Vibe", 10)])
    evened = weights.distribute_evenly()
    assert evened.names == ["Taste", "Value", "Vibe"]
    assert evened.percents == [34, 33, 33]


def test_distribute_evenly_is_a_fixed_point():
    weights = WeightCollection.from_pairs([(f"c{i}", 0) for i in range(7)])
    once = weights.distribute_evenly()
    assert once.distribute_evenly() == once


# ── Completeness & validation ────────────────────────────────────────────


def test_is_complete():
    assert WeightCollection.from_pairs([("Taste", 60), ("Value", 40)]).is_complete()
    assert not WeightCollection.from_pairs([("Taste", 60), ("Value", 30)]).is_complete()


def test_validate_rejects_incomplete_set():
    weights = WeightCollection.from_pairs([("Taste", 60), ("Value", 30)])
    with pytest.raises(InvalidWeightSet) as err:
        weights.validate()
    assert "90%" in str(err.value)


def test_invalid_weight_set_is_a_validation_error():
    assert issubclass(InvalidWeightSet, ValidationError)


def test_validate_rejects_duplicate_names():
    weights = WeightCollection.from_pairs([("Taste", 50), ("Taste", 50)])
    with pytest.raises(ValidationError) as err:
        weights.validate()
    assert not isinstance(err.value, InvalidWeightSet)
    assert "duplicate" in str(err.value)


def test_names_are_case_sensitive():
    WeightCollection.from_pairs([("Taste", 50), ("taste", 50)]).validate()


def test_validate_rejects_empty_name():
    with pytest.raises(ValidationError):
        WeightCollection.from_pairs([("  ", 50), ("Value", 50)]).validate()


def test_validate_rejects_out_of_range_weight():
    with pytest.raises(ValidationError):
        WeightCollection.from_pairs([("Taste", 120), ("Value", -20)]).validate()


# ── Conversions ──────────────────────────────────────────────────────────


def test_from_categories_converts_fractions_to_percent():
    categories = [
        RatingCategory(id="v", name="Value", weight=Decimal("0.33"), sort_order=1),
        RatingCategory(id="t", name="Taste", weight=Decimal("0.34"), sort_order=0),
        RatingCategory(id="p", name="Presentation", weight=Decimal("0.33"), sort_order=2),
    ]
    weights = WeightCollection.from_categories(categories)
    assert weights.names == ["Taste", "Value", "Presentation"]
    assert weights.percents == [34, 33, 33]
    assert weights.is_complete()


def test_fractions_keyed_by_category_id():
    categories = [
        RatingCategory(id="t", name="Taste", weight=Decimal("0.5")),
        RatingCategory(id="v", name="Value", weight=Decimal("0.5"), sort_order=1),
    ]
    fractions = WeightCollection.from_categories(categories).fractions()
    assert fractions == {"t": Decimal("0.5"), "v": Decimal("0.5")}


def test_fractions_fall_back_to_name_without_ids():
    fractions = WeightCollection.from_pairs([("Taste", 70), ("Value", 30)]).fractions()
    assert fractions == {"Taste": Decimal("0.7"), "Value": Decimal("0.3")}


def test_fraction_total_within_tolerance():
    categories = [
        RatingCategory(id="a", name="A", weight=Decimal("0.334")),
        RatingCategory(id="b", name="B", weight=Decimal("0.333")),
        RatingCategory(id="c", name="C", weight=Decimal("0.331")),
    ]
    check_fraction_total(categories, tolerance=0.005)


def test_fraction_total_outside_tolerance():
    categories = [
        RatingCategory(id="a", name="A", weight=Decimal("0.5")),
        RatingCategory(id="b", name="B", weight=Decimal("0.4")),
    ]
    with pytest.raises(InvalidWeightSet):
        check_fraction_total(categories, tolerance=0.005)

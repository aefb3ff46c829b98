from __future__ import annotations

import pytest

from chompion.cuisine.classifier import classify, score_cuisines
from chompion.cuisine.keywords import CUISINE_KEYWORDS, CUISINE_LIST


def test_pad_thai_is_thai():
    assert classify(["Pad Thai"], "Any Restaurant") == "Thai"


def test_burrito_is_mexican():
    assert classify(["Burrito"], None) == "Mexican"


def test_unknown_food_is_none():
    assert classify(["mystery food"], None) is None


def test_no_input_is_none():
    assert classify([], None) is None


def test_case_insensitive():
    assert classify(["BURRITO BOWL"]) == "Mexican"


def test_venue_name_counts():
    assert classify([], "Sushi Zen") == "Japanese"


def test_multi_word_keyword_and_generic_keyword_both_hit():
    assert score_cuisines(["Pad Thai"]) == {"Thai": 2}


def test_one_text_can_feed_several_cuisines():
    scores = score_cuisines(["Ramen and Tacos"])
    assert scores["Japanese"] == 1
    assert scores["Mexican"] == 2  # "taco" and "tacos"


def test_tie_goes_to_first_declared_cuisine():
    # "pizza" is both an Italian and a Pizza keyword; Italian is declared first
    assert score_cuisines(["Pizza"]) == {"Italian": 1, "Pizza": 1}
    assert classify(["Pizza"]) == "Italian"


def test_highest_total_wins_over_declaration_order():
    # Thai is declared before Japanese, but sushi gets more hits
    assert classify(["Thai Iced Tea", "Sushi", "Sashimi", "Miso Soup"]) == "Japanese"


def test_explicit_table_substitution():
    table = {"First": ("foo",), "Second": ("bar",)}
    assert classify(["foo bar"], table=table) == "First"

    reversed_table = {"Second": ("bar",), "First": ("foo",)}
    assert classify(["foo bar"], table=reversed_table) == "Second"


def test_keyword_table_is_read_only():
    with pytest.raises(TypeError):
        CUISINE_KEYWORDS["Fusion"] = ("fusion",)


def test_cuisine_list_is_sorted_and_complete():
    assert CUISINE_LIST == sorted(CUISINE_KEYWORDS)
    assert len(CUISINE_LIST) == 17
    assert all(kw == kw.lower() for kws in CUISINE_KEYWORDS.values() for kw in kws)

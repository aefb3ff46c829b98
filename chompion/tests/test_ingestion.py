from datetime import datetime
from decimal import Decimal
from pathlib import Path

import pandas as pd
import pytest

from chompion.data_ingestion.config import IngestionConfig
from chompion.data_ingestion.ingest import (
    CANONICAL_COLUMNS,
    entries_frame,
    load_entries_csv,
    write_entries_csv,
)
from chompion.entries.models import CategoryScore, Dish, Entry

EXPORT = """\
id,restaurant_name,city,cost,eaten_at,composite_score,subtype,dishes,ratings
a1,Blue Bottle,SF,6.50,2025-11-15T09:30:00,4.20,Latte,Latte:5;Croissant,taste:4;value:5
a2,Stumptown,Portland,abc,2025-12-10,3.80,,,
a3,Verve,Santa Cruz,,2026-02-01,,,Cortado,
"""


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "entries.csv"
    path.write_text(text)
    return path


def test_load_parses_rows_and_skips_bad_ones(tmp_path: Path):
    entries = load_entries_csv(_write(tmp_path, EXPORT))

    assert [e.id for e in entries] == ["a1", "a3"], "Row with unparseable cost should be skipped"

    first = entries[0]
    assert first.cost == Decimal("6.50")
    assert first.eaten_at == datetime(2025, 11, 15, 9, 30)
    assert first.composite_score == Decimal("4.20")
    assert [(d.name, d.rating) for d in first.dishes] == [("Latte", 5), ("Croissant", None)]
    assert [(r.category_id, r.score) for r in first.ratings] == [("taste", 4), ("value", 5)]

    last = entries[1]
    assert last.cost is None
    assert last.composite_score is None
    assert last.quantity is None
    assert last.ratings == []


def test_missing_required_column_is_rejected(tmp_path: Path):
    path = _write(tmp_path, "restaurant_name,eaten_at\nBlue Bottle,2025-11-15\n")
    with pytest.raises(ValueError, match="city"):
        load_entries_csv(path)


def test_write_then_load(tmp_path: Path):
    """
    Exports written by write_entries_csv can be read back without loss.
    """
    entry = Entry(
        id="e1",
        restaurant_name="Sushi Zen",
        city="Berkeley",
        cost=Decimal("32.50"),
        quantity=2,
        eaten_at=datetime(2026, 3, 14, 19, 30),
        cuisine="Japanese",
        composite_score=Decimal("4.00"),
        dishes=[Dish(name="Salmon Nigiri", rating=5)],
        ratings=[CategoryScore(category_id="taste", score=4)],
    )
    cfg = IngestionConfig(export_dir=tmp_path / "exports")

    output_path = write_entries_csv([entry], config=cfg)

    assert output_path == tmp_path / "exports" / "entries.csv"
    assert list(pd.read_csv(output_path).columns) == CANONICAL_COLUMNS
    assert load_entries_csv(config=cfg) == [entry]


def test_entries_frame_shape():
    df = entries_frame([])
    assert df.empty
    assert list(df.columns) == CANONICAL_COLUMNS


def test_empty_optional_cells_load_as_none(tmp_path: Path):
    path = _write(tmp_path, (
        "id,restaurant_name,city,cost,quantity,eaten_at,cuisine,composite_score,subtype,dishes,ratings\n"
        "b1,Verve,Santa Cruz,,,2026-02-01,,,,,\n"
    ))
    [entry] = load_entries_csv(path)

    assert entry.cost is None
    assert entry.quantity is None
    assert entry.cuisine is None
    assert entry.subtype is None
    assert entry.composite_score is None
    assert entry.dishes == []


def test_separators_inside_names_survive_round_trip(tmp_path: Path):
    entry = Entry(
        id="e2",
        restaurant_name="Fish Shack",
        city="SF",
        eaten_at=datetime(2026, 4, 1, 12, 0),
        dishes=[
            Dish(name="Fish; Chips", rating=4),
            Dish(name="Combo:5"),
            Dish(name="Combo:2", rating=3),
            Dish(name="Back\\slash"),
        ],
        ratings=[CategoryScore(category_id="a:b;c", score=5)],
    )
    cfg = IngestionConfig(export_dir=tmp_path)

    write_entries_csv([entry], config=cfg)

    assert load_entries_csv(config=cfg) == [entry]

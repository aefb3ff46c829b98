from __future__ import annotations

import logging
import re
from decimal import Decimal
from pathlib import Path
from typing import Any, List, Sequence

import pandas as pd

from ..entries.models import CategoryScore, Dish, Entry
from .config import DEFAULT_INGESTION_CONFIG, IngestionConfig

logger = logging.getLogger(__name__)

CANONICAL_COLUMNS: List[str] = [
    "id",
    "restaurant_name",
    "city",
    "cost",
    "quantity",
    "eaten_at",
    "cuisine",
    "composite_score",
    "subtype",
    "dishes",
    "ratings",
]

REQUIRED_COLUMNS: List[str] = ["restaurant_name", "city", "eaten_at"]


def _text(value: Any) -> str | None:
    if value is None or pd.isna(value):
        return None
    text = str(value).strip()
    return text or None


def _decimal(value: Any) -> Decimal | None:
    text = _text(value)
    return Decimal(text) if text is not None else None


def _int(value: Any) -> int | None:
    text = _text(value)
    return int(Decimal(text)) if text is not None else None


# ---------------------------------------------------------------------------
# Packed dish / rating cells
# ---------------------------------------------------------------------------
# A backslash escapes the next character, so names may contain either
# separator or end in ":<digits>".


def _escape(text: str, config: IngestionConfig) -> str:
    for ch in ("\\", config.item_separator, config.value_separator):
        text = text.replace(ch, "\\" + ch)
    return text


def _unescape(text: str) -> str:
    return re.sub(r"\\(.)", r"\1", text, flags=re.DOTALL)


def _split_unescaped(text: str, sep: str) -> list[str]:
    parts: list[str] = []
    start = i = 0
    while i < len(text):
        if text[i] == "\\":
            i += 2
        elif text.startswith(sep, i):
            parts.append(text[start:i])
            i += len(sep)
            start = i
        else:
            i += 1
    parts.append(text[start:])
    return parts


def _split_pairs(raw: str | None, config: IngestionConfig) -> list[tuple[str, str | None]]:
    """``"Pad Thai:5;Spring Rolls"`` -> ``[("Pad Thai", "5"), ("Spring Rolls", None)]``"""
    if not raw:
        return []
    pairs: list[tuple[str, str | None]] = []
    for part in _split_unescaped(raw, config.item_separator):
        part = part.strip()
        if not part:
            continue
        pieces = _split_unescaped(part, config.value_separator)
        value = pieces[-1].strip()
        if len(pieces) > 1 and value.isdigit():
            name = part[: len(part) - len(pieces[-1]) - len(config.value_separator)]
            pairs.append((_unescape(name.strip()), value))
        else:
            pairs.append((_unescape(part), None))
    return pairs


def _dishes(raw: str | None, config: IngestionConfig) -> list[Dish]:
    return [
        Dish(name=name, rating=int(rating) if rating else None)
        for name, rating in _split_pairs(raw, config)
    ]


def _ratings(raw: str | None, config: IngestionConfig) -> list[CategoryScore]:
    ratings: list[CategoryScore] = []
    for category_id, score in _split_pairs(raw, config):
        if score is None:
            raise ValueError(f"rating for {category_id!r} has no score")
        ratings.append(CategoryScore(category_id=category_id, score=int(score)))
    return ratings


def _row_to_entry(row: pd.Series, index: Any, config: IngestionConfig) -> Entry:
    eaten_at = _text(row["eaten_at"])
    if eaten_at is None:
        raise ValueError("eaten_at is required")
    return Entry(
        id=_text(row["id"]) or f"row-{index}",
        restaurant_name=_text(row["restaurant_name"]) or "",
        city=_text(row["city"]) or "",
        cost=_decimal(row["cost"]),
        quantity=_int(row["quantity"]),
        eaten_at=pd.to_datetime(eaten_at).to_pydatetime(),
        cuisine=_text(row["cuisine"]),
        composite_score=_decimal(row["composite_score"]),
        subtype=_text(row["subtype"]),
        dishes=_dishes(_text(row["dishes"]), config),
        ratings=_ratings(_text(row["ratings"]), config),
    )


def load_entries_csv(
    path: Path | None = None,
    config: IngestionConfig = DEFAULT_INGESTION_CONFIG,
) -> list[Entry]:
    """
    Read an entries export into Entry records.

    Rows that cannot be parsed are logged and skipped; a file missing one of
    the required columns is rejected outright.
    """
    path = path or config.entries_path
    df = pd.read_csv(path, dtype=str)

    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"{path} is missing columns: {', '.join(missing)}")

    for col in CANONICAL_COLUMNS:
        if col not in df.columns:
            df[col] = None

    entries: list[Entry] = []
    for index, row in df.iterrows():
        try:
            entries.append(_row_to_entry(row, index, config))
        except (ValueError, ArithmeticError):
            logger.warning("Skipping unreadable export row %s in %s", index, path, exc_info=True)

    logger.info("Loaded %d of %d entries from %s", len(entries), len(df), path)
    return entries


def entries_frame(
    entries: Sequence[Entry],
    config: IngestionConfig = DEFAULT_INGESTION_CONFIG,
) -> pd.DataFrame:
    def _join(pairs: list[tuple[str, Any]]) -> str:
        return config.item_separator.join(
            _escape(name, config) if value is None
            else f"{_escape(name, config)}{config.value_separator}{value}"
            for name, value in pairs
        )

    rows = [
        {
            "id": e.id,
            "restaurant_name": e.restaurant_name,
            "city": e.city,
            "cost": str(e.cost) if e.cost is not None else None,
            "quantity": e.quantity,
            "eaten_at": e.eaten_at.isoformat(),
            "cuisine": e.cuisine,
            "composite_score": str(e.composite_score) if e.composite_score is not None else None,
            "subtype": e.subtype,
            "dishes": _join([(d.name, d.rating) for d in e.dishes]),
            "ratings": _join([(r.category_id, r.score) for r in e.ratings]),
        }
        for e in entries
    ]
    return pd.DataFrame(rows, columns=CANONICAL_COLUMNS)


def write_entries_csv(
    entries: Sequence[Entry],
    path: Path | None = None,
    config: IngestionConfig = DEFAULT_INGESTION_CONFIG,
) -> Path:
    path = path or config.entries_path
    path.parent.mkdir(parents=True, exist_ok=True)
    entries_frame(entries, config).to_csv(path, index=False)
    return path


if __name__ == "__main__":
    loaded = load_entries_csv()
    print(f"Loaded {len(loaded)} entries from {DEFAULT_INGESTION_CONFIG.entries_path}")

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator


def naive_utc(value: datetime) -> datetime:
    """Offset-aware timestamps are shifted to UTC and stored naive."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class RatingCategory(BaseModel):
    id: str = Field(..., min_length=1)
    name: str
    weight: Decimal = Field(..., ge=0, le=1, description="Fractional weight, 0.34 == 34%")
    sort_order: int = 0


class CategoryScore(BaseModel):
    category_id: str
    score: int = Field(..., ge=0, le=5, description="Stars; 0 means not rated")


class Dish(BaseModel):
    name: str
    rating: int | None = Field(default=None, ge=1, le=5)


class EntryDraft(BaseModel):
    """Write-side shape of an entry, validated before it is scored."""

    restaurant_name: str = ""
    city: str = ""
    cost: Decimal | None = Field(default=None, ge=0)
    quantity: int | None = Field(default=None, ge=0)
    eaten_at: datetime
    cuisine: str | None = None
    subtype: str | None = None
    dishes: list[Dish] = Field(default_factory=list)
    ratings: list[CategoryScore] = Field(default_factory=list)

    @field_validator("eaten_at")
    @classmethod
    def _normalise_eaten_at(cls, value: datetime) -> datetime:
        return naive_utc(value)


class Entry(BaseModel):
    id: str
    restaurant_name: str
    city: str
    cost: Decimal | None = None
    quantity: int | None = None
    eaten_at: datetime
    cuisine: str | None = None
    composite_score: Decimal | None = None
    subtype: str | None = Field(default=None, description="Order label, e.g. 'Latte'")
    dishes: list[Dish] = Field(default_factory=list)
    ratings: list[CategoryScore] = Field(default_factory=list)

    @field_validator("eaten_at")
    @classmethod
    def _normalise_eaten_at(cls, value: datetime) -> datetime:
        return naive_utc(value)

from __future__ import annotations

from pydantic import BaseModel, Field

from .entries.models import CategoryScore, Entry, RatingCategory


class ScoreRequest(BaseModel):
    ratings: list[CategoryScore]
    weights: dict[str, float] = Field(
        ..., description="Fractional weight per category id, e.g. {'taste': 0.5}"
    )


class ScoreResponse(BaseModel):
    score: float


class CuisineRequest(BaseModel):
    dish_names: list[str] = Field(default_factory=list)
    venue_name: str | None = None


class CuisineResponse(BaseModel):
    cuisine: str | None


class EntriesRequest(BaseModel):
    entries: list[Entry] = Field(default_factory=list)
    categories: list[RatingCategory] = Field(default_factory=list)


class CategoryOut(BaseModel):
    id: str
    name: str
    weight_percent: int
    sort_order: int


class CategoryCreate(BaseModel):
    name: str


class WeightsUpdate(BaseModel):
    weights: dict[str, int] = Field(..., description="Whole percentage per category id")
    names: dict[str, str] = Field(default_factory=dict)


class RecomputeRequest(BaseModel):
    confirm: bool = Field(
        default=False,
        description="Must be true: overwrites every stored composite score",
    )


class RecomputeResponse(BaseModel):
    updated: int
    missing: list[str]
    cancelled: list[str]


class RatingsUpdate(BaseModel):
    ratings: list[CategoryScore]

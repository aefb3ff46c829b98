from __future__ import annotations

from pydantic import BaseModel, Field


class SummaryStats(BaseModel):
    total_entries: int
    total_spent: float
    unique_restaurants: int
    unique_cities: int


class LeaderboardEntry(BaseModel):
    name: str
    avg_rating: float
    visits: int


class MonthlyCount(BaseModel):
    month: str
    count: int


class MonthlySpend(BaseModel):
    month: str
    total: float


class BreakdownItem(BaseModel):
    name: str
    count: int


class CostRatingPoint(BaseModel):
    cost: float
    rating: float
    restaurant: str


class RatingPoint(BaseModel):
    date: str
    score: float
    restaurant: str


class CategoryAverage(BaseModel):
    category: str
    score: float


class VisitCount(BaseModel):
    name: str
    visits: int


class BestValue(BaseModel):
    restaurant: str
    score: float
    cost: float
    entry_id: str


class RatingTrend(BaseModel):
    recent_avg: float
    previous_avg: float
    change: float
    direction: str


class DishHighlight(BaseModel):
    name: str
    rating: int
    restaurant: str
    entry_id: str


class BehavioralMetrics(BaseModel):
    adventurous: float = Field(..., ge=0.0, le=5.0)
    diverse_palate: float | None = Field(
        default=None, ge=0.0, le=5.0, description="None when no entry records an order"
    )
    discerning: float = Field(..., ge=0.0, le=5.0)
    loyal: float = Field(..., ge=0.0, le=5.0)


class InsightsReport(BaseModel):
    insights_unlocked: bool
    summary: SummaryStats
    average_rating: float | None = None
    weekly_streak: int = 0
    most_visited: VisitCount | None = None
    top_restaurants: list[LeaderboardEntry] = Field(default_factory=list)
    monthly_activity: list[MonthlyCount] = Field(default_factory=list)
    monthly_spend: list[MonthlySpend] = Field(default_factory=list)
    order_breakdown: list[BreakdownItem] = Field(default_factory=list)
    city_breakdown: list[BreakdownItem] = Field(default_factory=list)
    cost_vs_rating: list[CostRatingPoint] = Field(default_factory=list)
    rating_over_time: list[RatingPoint] = Field(default_factory=list)
    category_averages: list[CategoryAverage] = Field(default_factory=list)
    best_value: BestValue | None = None
    rating_trend: RatingTrend | None = None
    top_dishes: list[DishHighlight] = Field(default_factory=list)

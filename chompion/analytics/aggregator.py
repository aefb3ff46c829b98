from __future__ import annotations

from collections import Counter
from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Iterable, Sequence

from ..entries.models import Entry, RatingCategory
from ..scoring.rounding import rounded
from .config import DEFAULT_ANALYTICS_CONFIG, AnalyticsConfig
from .models import (
    BestValue,
    BreakdownItem,
    CategoryAverage,
    CostRatingPoint,
    DishHighlight,
    InsightsReport,
    LeaderboardEntry,
    MonthlyCount,
    MonthlySpend,
    RatingPoint,
    RatingTrend,
    SummaryStats,
    VisitCount,
)


def _scored(entries: Iterable[Entry]) -> list[Entry]:
    return [e for e in entries if e.composite_score is not None]


def _mean(values: Sequence[Decimal]) -> Decimal:
    return sum(values, Decimal("0")) / len(values)


def _month_label(year: int, month: int) -> str:
    return datetime(year, month, 1).strftime("%b %y")


def _day_label(when: datetime) -> str:
    return f"{when:%b} {when.day}"


def _counts(labels: Iterable[str]) -> list[BreakdownItem]:
    # most_common keeps first-seen order among equal counts
    return [BreakdownItem(name=n, count=c) for n, c in Counter(labels).most_common()]


# ---------------------------------------------------------------------------
# Headline numbers
# ---------------------------------------------------------------------------


def compute_summary(entries: Sequence[Entry]) -> SummaryStats:
    spent = sum((e.cost for e in entries if e.cost is not None), Decimal("0"))
    return SummaryStats(
        total_entries=len(entries),
        total_spent=rounded(spent, 2),
        unique_restaurants=len({e.restaurant_name for e in entries}),
        unique_cities=len({e.city for e in entries}),
    )


def average_rating(entries: Sequence[Entry]) -> float | None:
    scored = _scored(entries)
    if not scored:
        return None
    return rounded(_mean([e.composite_score for e in scored]), 2)


def most_visited(entries: Sequence[Entry]) -> VisitCount | None:
    visits = Counter(e.restaurant_name for e in entries).most_common(1)
    if not visits:
        return None
    name, count = visits[0]
    return VisitCount(name=name, visits=count)


def _week_start(day: date) -> date:
    # Weeks start on Sunday
    return day - timedelta(days=(day.weekday() + 1) % 7)


def weekly_streak(entries: Sequence[Entry], today: date | None = None) -> int:
    """Consecutive weeks with at least one entry, counting back from this week."""
    weeks = {_week_start(e.eaten_at.date()) for e in entries}
    check = _week_start(today or date.today())
    streak = 0
    while check in weeks:
        streak += 1
        check -= timedelta(days=7)
    return streak


# ---------------------------------------------------------------------------
# Leaderboard
# ---------------------------------------------------------------------------


def top_restaurants(
    entries: Sequence[Entry],
    config: AnalyticsConfig = DEFAULT_ANALYTICS_CONFIG,
) -> list[LeaderboardEntry]:
    """Best restaurants by average composite score.

    Unscored entries never enter the grouping. When any restaurant has been
    visited ``repeat_visit_threshold`` times, one-off visits are dropped so the
    board shows proven favourites. Equal averages are ordered by name.
    """
    totals: dict[str, Decimal] = {}
    visits: Counter[str] = Counter()
    for e in _scored(entries):
        totals[e.restaurant_name] = totals.get(e.restaurant_name, Decimal("0")) + e.composite_score
        visits[e.restaurant_name] += 1

    threshold = config.repeat_visit_threshold
    has_repeats = any(count >= threshold for count in visits.values())

    rows = [
        LeaderboardEntry(
            name=name,
            avg_rating=rounded(totals[name] / visits[name], 1),
            visits=visits[name],
        )
        for name in totals
        if not has_repeats or visits[name] >= threshold
    ]
    rows.sort(key=lambda r: (-r.avg_rating, r.name))
    return rows[: config.leaderboard_size]


# ---------------------------------------------------------------------------
# Time series
# ---------------------------------------------------------------------------


def _by_month(entries: Iterable[Entry]) -> dict[tuple[int, int], list[Entry]]:
    buckets: dict[tuple[int, int], list[Entry]] = {}
    for e in entries:
        buckets.setdefault((e.eaten_at.year, e.eaten_at.month), []).append(e)
    return dict(sorted(buckets.items()))


def monthly_activity(entries: Sequence[Entry]) -> list[MonthlyCount]:
    return [
        MonthlyCount(month=_month_label(year, month), count=len(bucket))
        for (year, month), bucket in _by_month(entries).items()
    ]


def monthly_spend(entries: Sequence[Entry]) -> list[MonthlySpend]:
    points: list[MonthlySpend] = []
    for (year, month), bucket in _by_month(entries).items():
        total = sum((e.cost for e in bucket if e.cost is not None), Decimal("0"))
        points.append(MonthlySpend(month=_month_label(year, month), total=rounded(total, 2)))
    return points


def rating_over_time(entries: Sequence[Entry]) -> list[RatingPoint]:
    return [
        RatingPoint(
            date=_day_label(e.eaten_at),
            score=rounded(e.composite_score, 1),
            restaurant=e.restaurant_name,
        )
        for e in sorted(_scored(entries), key=lambda e: e.eaten_at)
    ]


def rating_trend(
    entries: Sequence[Entry],
    config: AnalyticsConfig = DEFAULT_ANALYTICS_CONFIG,
) -> RatingTrend | None:
    """Average of the latest window of scores against the window before it."""
    window = config.trend_window
    latest_first = sorted(_scored(entries), key=lambda e: e.eaten_at, reverse=True)
    if len(latest_first) <= window:
        return None

    recent = _mean([e.composite_score for e in latest_first[:window]])
    previous = _mean([e.composite_score for e in latest_first[window: window * 2]])
    change = recent - previous
    if abs(change) < Decimal(str(config.trend_min_change)):
        return None
    return RatingTrend(
        recent_avg=rounded(recent, 2),
        previous_avg=rounded(previous, 2),
        change=rounded(change, 1),
        direction="up" if change > 0 else "down",
    )


# ---------------------------------------------------------------------------
# Breakdowns
# ---------------------------------------------------------------------------


def order_breakdown(
    entries: Sequence[Entry],
    config: AnalyticsConfig = DEFAULT_ANALYTICS_CONFIG,
) -> list[BreakdownItem]:
    return _counts(e.subtype or config.missing_subtype_label for e in entries)


def city_breakdown(
    entries: Sequence[Entry],
    config: AnalyticsConfig = DEFAULT_ANALYTICS_CONFIG,
) -> list[BreakdownItem]:
    return _counts(e.city for e in entries)[: config.city_breakdown_size]


def category_averages(
    entries: Sequence[Entry],
    categories: Iterable[RatingCategory] = (),
) -> list[CategoryAverage]:
    """Mean raw star score per rating category; unrated (0) scores are skipped."""
    names = {c.id: c.name for c in categories}
    totals: dict[str, list[int]] = {}
    for e in entries:
        for r in e.ratings:
            if r.score <= 0:
                continue
            bucket = totals.setdefault(names.get(r.category_id, r.category_id), [0, 0])
            bucket[0] += r.score
            bucket[1] += 1
    return [
        CategoryAverage(category=name, score=rounded(Decimal(total) / count, 2))
        for name, (total, count) in totals.items()
    ]


# ---------------------------------------------------------------------------
# Price vs quality
# ---------------------------------------------------------------------------


def cost_vs_rating(entries: Sequence[Entry]) -> list[CostRatingPoint]:
    return [
        CostRatingPoint(
            cost=float(e.cost),
            rating=rounded(e.composite_score, 1),
            restaurant=e.restaurant_name,
        )
        for e in entries
        if e.cost is not None and e.composite_score is not None
    ]


def best_value(entries: Sequence[Entry]) -> BestValue | None:
    candidates = [
        e for e in _scored(entries) if e.cost is not None and e.cost > 0
    ]
    if len(candidates) < 2:
        return None
    best = max(candidates, key=lambda e: e.composite_score / e.cost)
    return BestValue(
        restaurant=best.restaurant_name,
        score=rounded(best.composite_score, 1),
        cost=float(best.cost),
        entry_id=best.id,
    )


def top_dishes(
    entries: Sequence[Entry],
    config: AnalyticsConfig = DEFAULT_ANALYTICS_CONFIG,
) -> list[DishHighlight]:
    dishes = [
        DishHighlight(name=d.name, rating=d.rating, restaurant=e.restaurant_name, entry_id=e.id)
        for e in entries
        for d in e.dishes
        if d.rating
    ]
    if len(dishes) < config.min_dishes_for_ranking:
        return []
    dishes.sort(key=lambda d: -d.rating)
    return dishes[: config.top_dishes_size]


# ---------------------------------------------------------------------------
# Everything at once
# ---------------------------------------------------------------------------


def compute_insights(
    entries: Sequence[Entry],
    categories: Iterable[RatingCategory] = (),
    config: AnalyticsConfig = DEFAULT_ANALYTICS_CONFIG,
    today: date | None = None,
) -> InsightsReport:
    entries = list(entries)
    return InsightsReport(
        insights_unlocked=len(entries) >= config.min_entries_for_insights,
        summary=compute_summary(entries),
        average_rating=average_rating(entries),
        weekly_streak=weekly_streak(entries, today),
        most_visited=most_visited(entries),
        top_restaurants=top_restaurants(entries, config),
        monthly_activity=monthly_activity(entries),
        monthly_spend=monthly_spend(entries),
        order_breakdown=order_breakdown(entries, config),
        city_breakdown=city_breakdown(entries, config),
        cost_vs_rating=cost_vs_rating(entries),
        rating_over_time=rating_over_time(entries),
        category_averages=category_averages(entries, categories),
        best_value=best_value(entries),
        rating_trend=rating_trend(entries, config),
        top_dishes=top_dishes(entries, config),
    )

from __future__ import annotations

from dataclasses import dataclass

# Empirical: a score spread of 1.2 stars maps to a full discernment score.
DISCERNMENT_SPREAD = 1.2


@dataclass(frozen=True)
class AnalyticsConfig:
    leaderboard_size: int = 8
    repeat_visit_threshold: int = 2
    city_breakdown_size: int = 10
    top_dishes_size: int = 5
    min_dishes_for_ranking: int = 3
    min_entries_for_insights: int = 3
    trend_window: int = 5
    trend_min_change: float = 0.1
    discernment_spread: float = DISCERNMENT_SPREAD
    missing_subtype_label: str = "No order specified"


DEFAULT_ANALYTICS_CONFIG = AnalyticsConfig()

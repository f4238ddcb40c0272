"""Day-by-day beach forecast.

Groups a multi-day forecast by calendar date, scores one representative
snapshot per day and picks the best day of the week.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, time
from itertools import groupby
from typing import Optional, Sequence

from beachbuddy.core.conditions import Badge, ConditionSnapshot, UserPreferences
from beachbuddy.core.scorer import BeachScorer, round_half_up


logger = logging.getLogger(__name__)


FORECAST_DAYS = 7
MAX_DAY_BADGES = 3

# Daily forecasts describe the day by its midday conditions
REPRESENTATIVE_TIME = time(12, 0)


@dataclass
class DayForecast:
    """Score summary for one calendar day."""
    date: date
    day_name: str
    score: int
    high_temp: int
    low_temp: int
    conditions: ConditionSnapshot
    badges: list[Badge] = field(default_factory=list)
    is_best: bool = False


def day_label(index: int, day: date) -> str:
    """Label a forecast day as "Today", "Tomorrow" or its weekday name."""
    if index == 0:
        return "Today"
    if index == 1:
        return "Tomorrow"
    return day.strftime("%A")


def representative_snapshot(snapshots: Sequence[ConditionSnapshot]) -> ConditionSnapshot:
    """The snapshot closest to midday, the earlier one on ties."""
    def distance_from_midday(snapshot: ConditionSnapshot) -> float:
        moment = snapshot.timestamp
        midday = datetime.combine(moment.date(), REPRESENTATIVE_TIME, moment.tzinfo)
        return abs((moment - midday).total_seconds())

    return min(snapshots, key=distance_from_midday)


def daily_forecast(
    snapshots: Sequence[ConditionSnapshot],
    scorer: Optional[BeachScorer] = None,
    preferences: Optional[UserPreferences] = None,
    days: int = FORECAST_DAYS,
) -> list[DayForecast]:
    """Build a day-by-day forecast with the best day highlighted.

    Args:
        snapshots: Condition snapshots in ascending time order, possibly
            spanning several days
        scorer: Scorer to use. Defaults to the built-in scoring config.
        preferences: Optional user preferences passed to the scorer
        days: Maximum number of calendar days to return

    Returns:
        One DayForecast per calendar date in date order, with the best day
        marked is_best
    """
    scorer = scorer or BeachScorer()
    ordered = sorted(snapshots, key=lambda s: s.timestamp)

    forecast = []
    for index, (day, group) in enumerate(groupby(ordered, key=lambda s: s.timestamp.date())):
        if index >= days:
            break
        day_snapshots = list(group)
        snapshot = representative_snapshot(day_snapshots)
        window = scorer.calculate_score(snapshot, preferences).window

        forecast.append(DayForecast(
            date=day,
            day_name=day_label(index, day),
            score=window.score,
            high_temp=round_half_up(max(s.temp for s in day_snapshots)),
            low_temp=round_half_up(min(s.temp for s in day_snapshots)),
            conditions=snapshot,
            badges=window.badges[:MAX_DAY_BADGES],
        ))

    best = find_best_day(forecast)
    if best is not None:
        best.is_best = True
        logger.debug(f"Best day of {len(forecast)}: {best.day_name} (score {best.score})")

    return forecast


def find_best_day(forecast: Sequence[DayForecast]) -> Optional[DayForecast]:
    """Highest-scoring day, the earliest one on ties."""
    best = None
    for day in forecast:
        if best is None or day.score > best.score:
            best = day
    return best

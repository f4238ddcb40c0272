#!/usr/bin/env python3
"""Test script for the day-by-day forecast and best day pick.

Run from project root:
    python scripts/test_forecast.py
"""

import sys
from datetime import date, datetime, timedelta
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from beachbuddy.core.conditions import ConditionSnapshot
from beachbuddy.core.forecast import (
    DayForecast,
    daily_forecast,
    day_label,
    find_best_day,
    representative_snapshot,
)


START = datetime(2025, 6, 14)  # A Saturday


def make_snapshot(timestamp: datetime, **overrides) -> ConditionSnapshot:
    """Good beach conditions (score 98) at the given time."""
    values = dict(
        timestamp=timestamp,
        temp=85,
        feels_like=85,
        humidity=60,
        cloud_cover=10,
        weather_code="01d",
        wind_speed=7,
        uv_index=2,
        tide_type="slack",
    )
    values.update(overrides)
    return ConditionSnapshot(**values)


def week(days: int = 8, calm_day: int = 3) -> list[ConditionSnapshot]:
    """Three snapshots a day, with a calm noon on one day."""
    snapshots = []
    for d in range(days):
        day = START + timedelta(days=d)
        snapshots.append(make_snapshot(day.replace(hour=9), temp=80))
        wind = 3 if d == calm_day else 7
        snapshots.append(make_snapshot(day.replace(hour=12), wind_speed=wind))
        snapshots.append(make_snapshot(day.replace(hour=15), temp=88.4))
    return snapshots


def print_forecast(forecast):
    for day in forecast:
        marker = " <- BEST" if day.is_best else ""
        badges = ", ".join(b.id for b in day.badges)
        print(f"  {day.day_name:<9} {day.date}  {day.score:3d}  "
              f"{day.low_temp}-{day.high_temp}°F  [{badges}]{marker}")


def test_week_forecast():
    """Seven days, labelled and scored from midday conditions."""
    forecast = daily_forecast(week())
    print_forecast(forecast)

    assert len(forecast) == 7
    assert [d.day_name for d in forecast] == [
        "Today", "Tomorrow", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday",
    ]
    assert forecast[0].date == date(2025, 6, 14)
    assert forecast[-1].date == date(2025, 6, 20)
    assert all(d.conditions.timestamp.hour == 12 for d in forecast)
    assert forecast[0].score == 98
    assert forecast[0].high_temp == 88
    assert forecast[0].low_temp == 80


def test_best_day():
    """The calm day wins and is the only one highlighted."""
    forecast = daily_forecast(week(calm_day=3))

    assert forecast[3].score == 100
    assert forecast[3].is_best
    assert sum(d.is_best for d in forecast) == 1
    assert find_best_day(forecast) is forecast[3]


def test_best_day_ties():
    """Equal scores pick the earliest day."""
    forecast = daily_forecast(week(days=3, calm_day=-1))

    assert [d.score for d in forecast] == [98, 98, 98]
    assert forecast[0].is_best
    assert not forecast[1].is_best
    assert find_best_day([]) is None


def test_top_badges():
    """Only the first three badges are kept per day."""
    forecast = daily_forecast(week(days=4, calm_day=3))

    assert [b.id for b in forecast[0].badges] == ["temp-perfect", "uv-low", "tide-good"]
    assert [b.id for b in forecast[3].badges] == ["temp-perfect", "uv-low", "wind-calm"]
    assert all(len(d.badges) <= 3 for d in forecast)


def test_representative_snapshot():
    """The snapshot closest to noon speaks for the day."""
    ten = make_snapshot(START.replace(hour=10))
    eleven = make_snapshot(START.replace(hour=11))
    two = make_snapshot(START.replace(hour=14))
    half_one = make_snapshot(START.replace(hour=13, minute=30))

    assert representative_snapshot([ten, two]) is ten
    assert representative_snapshot([eleven, half_one]) is eleven
    assert representative_snapshot([two]) is two


def test_unsorted_and_short_input():
    """Input order does not matter and short forecasts are fine."""
    snapshots = week(days=2, calm_day=1)
    forecast = daily_forecast(list(reversed(snapshots)))

    assert [d.day_name for d in forecast] == ["Today", "Tomorrow"]
    assert forecast[1].is_best
    assert daily_forecast([]) == []
    assert len(daily_forecast(week(), days=3)) == 3


def test_day_label():
    assert day_label(0, date(2025, 6, 18)) == "Today"
    assert day_label(1, date(2025, 6, 18)) == "Tomorrow"
    assert day_label(2, date(2025, 6, 18)) == "Wednesday"
    assert isinstance(daily_forecast(week(days=1))[0], DayForecast)


def run_all_tests():
    """Run all tests and report results."""
    print("\n" + "#"*60)
    print("# DAILY FORECAST TEST SUITE")
    print("#"*60)

    tests = [
        ("Week Forecast", test_week_forecast),
        ("Best Day", test_best_day),
        ("Best Day Ties", test_best_day_ties),
        ("Top Badges", test_top_badges),
        ("Representative Snapshot", test_representative_snapshot),
        ("Unsorted and Short Input", test_unsorted_and_short_input),
        ("Day Label", test_day_label),
    ]

    passed = 0
    failed = 0

    for name, test_func in tests:
        try:
            test_func()
            passed += 1
            print(f"  ✓ {name}")
        except AssertionError as e:
            failed += 1
            print(f"\n  ✗ FAILED: {name}")
            print(f"    Error: {e}")
        except Exception as e:
            failed += 1
            print(f"\n  ✗ ERROR: {name}")
            print(f"    Exception: {e}")

    print("\n" + "="*60)
    print(f"  Passed: {passed}  Failed: {failed}  Total: {len(tests)}")
    print("="*60)

    return failed == 0


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)

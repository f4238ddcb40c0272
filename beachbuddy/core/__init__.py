"""Core beach scoring and windowing engine."""

from beachbuddy.core.beach import (
    Beach,
    BeachDatabase,
    BeachDatabaseError,
    Coordinates,
    Facilities,
    Parking,
    distance_miles,
    format_distance,
    get_beach,
    get_beach_database,
)
from beachbuddy.core.conditions import (
    ActivityGoal,
    Badge,
    BadgeType,
    ConditionSnapshot,
    TempRange,
    TideType,
    UserPreferences,
    WeatherCategory,
    Window,
)
from beachbuddy.core.forecast import DayForecast, daily_forecast, find_best_day
from beachbuddy.core.scorer import (
    BeachScorer,
    ScoreBreakdown,
    ScoredWindow,
    explain_score,
    quick_score,
)
from beachbuddy.core.tides import TidePrediction, classify_tide, next_tide_events
from beachbuddy.core.weights import (
    DEFAULT_CONFIG,
    DEFAULT_WEIGHTS,
    ScoreRating,
    ScoreWeights,
    ScoringConfig,
    ScoringConfigError,
    load_scoring_config,
    rate_score,
)
from beachbuddy.core.windows import (
    WindowGenerator,
    WindowOptions,
    align_now,
    find_best_window,
    format_window_time,
    generate_windows,
    get_good_windows,
    is_window_now,
    is_window_suitable,
)

__all__ = [
    # Beach
    "Beach",
    "BeachDatabase",
    "BeachDatabaseError",
    "Coordinates",
    "Facilities",
    "Parking",
    "distance_miles",
    "format_distance",
    "get_beach",
    "get_beach_database",
    # Conditions
    "ActivityGoal",
    "Badge",
    "BadgeType",
    "ConditionSnapshot",
    "TempRange",
    "TideType",
    "UserPreferences",
    "WeatherCategory",
    "Window",
    # Forecast
    "DayForecast",
    "daily_forecast",
    "find_best_day",
    # Scorer
    "BeachScorer",
    "ScoreBreakdown",
    "ScoredWindow",
    "explain_score",
    "quick_score",
    # Tides
    "TidePrediction",
    "classify_tide",
    "next_tide_events",
    # Weights
    "DEFAULT_CONFIG",
    "DEFAULT_WEIGHTS",
    "ScoreRating",
    "ScoreWeights",
    "ScoringConfig",
    "ScoringConfigError",
    "load_scoring_config",
    "rate_score",
    # Windows
    "WindowGenerator",
    "WindowOptions",
    "align_now",
    "find_best_window",
    "format_window_time",
    "generate_windows",
    "get_good_windows",
    "is_window_now",
    "is_window_suitable",
]

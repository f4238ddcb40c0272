"""BeachScore weights, thresholds and score ratings.

All scoring parameters live in a ScoringConfig value that is passed into the
scorer. The defaults below can be overridden per call or from
config/scoring.yaml.

Default weights (must sum to 1.0):
- Temperature: 30% - Comfort on feels-like temperature
- UV: 25% - Sun safety
- Wind: 25% - Comfort
- Tide: 10% - Slack and low tides preferred
- Weather: 10% - Sky conditions
"""

import logging
from dataclasses import dataclass, field, fields, replace
from enum import Enum
from pathlib import Path
from typing import Optional

import yaml

from beachbuddy.core.conditions import WeatherCategory


logger = logging.getLogger(__name__)


class ScoringConfigError(Exception):
    """Exception raised for invalid scoring configuration."""

    pass


@dataclass(frozen=True)
class ScoreWeights:
    """Weight per scoring dimension."""
    temp: float = 0.30
    uv: float = 0.25
    wind: float = 0.25
    tide: float = 0.10
    weather: float = 0.10

    @property
    def total(self) -> float:
        return self.temp + self.uv + self.wind + self.tide + self.weather

    def normalized(self) -> "ScoreWeights":
        """Return a copy scaled so the five weights sum to 1.0."""
        total = self.total
        if total <= 0:
            raise ScoringConfigError(f"Score weights must have a positive sum, got {total}")
        return ScoreWeights(
            temp=self.temp / total,
            uv=self.uv / total,
            wind=self.wind / total,
            tide=self.tide / total,
            weather=self.weather / total,
        )

    def as_dict(self) -> dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


DEFAULT_WEIGHTS = ScoreWeights()

WEIGHT_SUM_TOLERANCE = 1e-9


def _default_weather_scores() -> dict[WeatherCategory, int]:
    return {
        WeatherCategory.CLEAR: 100,
        WeatherCategory.FEW_CLOUDS: 90,
        WeatherCategory.SCATTERED_CLOUDS: 80,
        WeatherCategory.BROKEN_CLOUDS: 70,
        WeatherCategory.SHOWER_RAIN: 30,
        WeatherCategory.RAIN: 20,
        WeatherCategory.THUNDERSTORM: 10,
        WeatherCategory.SNOW: 40,
        WeatherCategory.MIST: 60,
    }


def _default_tide_scores() -> dict[str, int]:
    return {
        "slack": 100,
        "low": 90,
        "rising": 80,
        "falling": 80,
        "high": 70,
    }


@dataclass(frozen=True)
class ScoringConfig:
    """Complete set of scoring parameters."""

    weights: ScoreWeights = DEFAULT_WEIGHTS

    # Temperature bands (Fahrenheit, inclusive), evaluated in order
    temp_optimal: tuple[float, float] = (80, 90)
    temp_good: tuple[float, float] = (75, 95)
    temp_acceptable: tuple[float, float] = (70, 98)
    temp_poor: tuple[float, float] = (65, 100)
    temp_good_taper: float = 2       # Points lost per degree outside optimal
    temp_acceptable_score: float = 70
    temp_poor_score: float = 40
    temp_fallback_score: float = 20

    # User temperature range curve
    temp_range_edge_drop: float = 20   # Points lost at the edge of the range
    temp_range_outside_start: float = 80
    temp_range_outside_slope: float = 10

    # UV index thresholds (inclusive upper bounds) and their scores
    uv_thresholds: tuple[float, ...] = (2, 5, 7, 10)
    uv_scores: tuple[float, ...] = (100, 80, 60, 40, 20)

    # Wind thresholds (mph, exclusive upper bounds) and their scores
    wind_thresholds: tuple[float, ...] = (5, 10, 15, 20, 25)
    wind_scores: tuple[float, ...] = (100, 90, 70, 50, 30, 20)
    wind_tolerance: float = 25
    wind_over_tolerance_score: float = 20
    gust_margin: float = 5             # Gust must exceed sustained by this much

    tide_scores: dict[str, int] = field(default_factory=_default_tide_scores)
    tide_default_score: float = 80

    weather_scores: dict[WeatherCategory, int] = field(default_factory=_default_weather_scores)
    weather_default_score: float = 50
    cloud_cover_penalty_above: float = 75
    cloud_cover_penalty_min_base: float = 70
    cloud_cover_penalty: float = 10

    # Default window length stamped by the scorer (hours)
    window_hours: float = 3

    def __post_init__(self):
        weights = self.weights
        if any(w < 0 for w in weights.as_dict().values()):
            raise ScoringConfigError("Score weights must be non-negative")
        # Totals stay within 0-100 only while the weights sum to 1.0
        if abs(weights.total - 1.0) > WEIGHT_SUM_TOLERANCE:
            object.__setattr__(self, "weights", weights.normalized())

    def with_weights(self, weights: ScoreWeights) -> "ScoringConfig":
        return replace(self, weights=weights)


DEFAULT_CONFIG = ScoringConfig()


class ScoreRating(Enum):
    """Verbal rating for a BeachScore."""
    PERFECT = "Perfect"
    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    MARGINAL = "Marginal"
    POOR = "Poor"

    @property
    def verdict(self) -> str:
        return _VERDICTS[self]


_VERDICTS = {
    ScoreRating.PERFECT: "Go now! Perfect beach day!",
    ScoreRating.EXCELLENT: "Go now! Excellent conditions.",
    ScoreRating.GOOD: "Pretty good, bring sunscreen!",
    ScoreRating.FAIR: "Okay day, check conditions.",
    ScoreRating.MARGINAL: "Not ideal, but doable.",
    ScoreRating.POOR: "Maybe tomorrow?",
}


def rate_score(score: float) -> ScoreRating:
    """Convert numeric score to a rating.

    Args:
        score: Score 0-100

    Returns:
        ScoreRating
    """
    if score >= 90:
        return ScoreRating.PERFECT
    elif score >= 80:
        return ScoreRating.EXCELLENT
    elif score >= 70:
        return ScoreRating.GOOD
    elif score >= 60:
        return ScoreRating.FAIR
    elif score >= 40:
        return ScoreRating.MARGINAL
    else:
        return ScoreRating.POOR


def _find_config_path(filename: str) -> Optional[Path]:
    possible_paths = [
        Path(__file__).parent.parent.parent / "config" / filename,
        Path.cwd() / "config" / filename,
    ]
    for path in possible_paths:
        if path.exists():
            return path
    return None


def load_scoring_config(config_path: Optional[Path] = None) -> ScoringConfig:
    """Load scoring overrides from YAML on top of the defaults.

    Args:
        config_path: Path to scoring.yaml. Defaults to config/scoring.yaml,
            falling back to built-in defaults when no file exists.

    Returns:
        ScoringConfig
    """
    if config_path is None:
        config_path = _find_config_path("scoring.yaml")
        if config_path is None:
            logger.debug("No scoring.yaml found, using default scoring config")
            return DEFAULT_CONFIG

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ScoringConfigError(f"Failed to read scoring config {config_path}: {e}") from e

    return parse_scoring_config(data)


def parse_scoring_config(data: dict) -> ScoringConfig:
    """Build a ScoringConfig from a parsed YAML mapping."""
    overrides = {}

    weights_data = data.get("weights")
    if weights_data:
        unknown = set(weights_data) - set(DEFAULT_WEIGHTS.as_dict())
        if unknown:
            raise ScoringConfigError(f"Unknown weight names: {', '.join(sorted(unknown))}")
        overrides["weights"] = replace(
            DEFAULT_WEIGHTS, **{k: float(v) for k, v in weights_data.items()}
        )

    thresholds = data.get("thresholds", {})
    if "uv" in thresholds:
        overrides["uv_thresholds"] = tuple(thresholds["uv"])
    if "wind" in thresholds:
        overrides["wind_thresholds"] = tuple(thresholds["wind"])
    if "wind_tolerance" in thresholds:
        overrides["wind_tolerance"] = float(thresholds["wind_tolerance"])
    for band in ("optimal", "good", "acceptable", "poor"):
        key = f"temp_{band}"
        if key in thresholds:
            low, high = thresholds[key]
            overrides[key] = (float(low), float(high))

    if "window_hours" in data:
        overrides["window_hours"] = float(data["window_hours"])

    config = replace(DEFAULT_CONFIG, **overrides)
    if len(config.uv_scores) != len(config.uv_thresholds) + 1:
        raise ScoringConfigError("UV thresholds must have one fewer entry than UV scores")
    if len(config.wind_scores) != len(config.wind_thresholds) + 1:
        raise ScoringConfigError("Wind thresholds must have one fewer entry than wind scores")

    logger.debug(f"Loaded scoring config overrides: {sorted(overrides)}")
    return config

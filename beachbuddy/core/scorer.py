"""BeachScore calculation engine.

Scoring approach:
- Each condition is scored 0-100 on its own curve
- Total score is a weighted combination rounded to an integer
- Badges explain the notable conditions behind the score

Scoring Factors (default weights):
- Temperature: 30% - Feels-like temperature, 80-90°F is ideal
- UV: 25% - Lower is safer
- Wind: 25% - Calm preferred, gusts count when well above sustained
- Tide: 10% - Slack and low tides preferred
- Weather: 10% - Clear skies preferred, heavy cloud cover penalized

User preferences shift the weights by activity and replace the temperature
and wind curves with the user's own range and tolerance.
"""

import logging
import math
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import Optional

from beachbuddy.core.conditions import (
    ActivityGoal,
    Badge,
    BadgeType,
    ConditionSnapshot,
    TideType,
    UserPreferences,
    WeatherCategory,
    Window,
    tide_key,
)
from beachbuddy.core.weights import (
    DEFAULT_CONFIG,
    ScoreRating,
    ScoreWeights,
    ScoringConfig,
    rate_score,
)


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreBreakdown:
    """Sub-scores and weighted total for one snapshot."""
    temp_score: float
    uv_score: float
    wind_score: float
    tide_score: float
    weather_score: float
    total_score: int
    weights: ScoreWeights

    @property
    def rating(self) -> ScoreRating:
        return rate_score(self.total_score)


@dataclass
class ScoredWindow:
    """A window together with the breakdown that produced its score."""
    window: Window
    breakdown: ScoreBreakdown


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (97.5 -> 98)."""
    return int(math.floor(value + 0.5))


def window_id(start_time: datetime) -> str:
    return f"window-{int(start_time.timestamp() * 1000)}"


class BeachScorer:
    """Scores beach conditions for a single forecast instant."""

    def __init__(self, config: Optional[ScoringConfig] = None):
        """Initialize the scorer.

        Args:
            config: Scoring parameters. Defaults to the built-in config.
        """
        self.config = config or DEFAULT_CONFIG

    def resolve_weights(self, preferences: Optional[UserPreferences]) -> ScoreWeights:
        """Resolve the weights to use for a set of preferences.

        Photographers care more about weather and less about UV. Swimmers care
        more about tide and temperature and less about wind. Customized
        weights are renormalized to sum to 1.0.

        Args:
            preferences: User preferences, or None for the configured defaults

        Returns:
            ScoreWeights
        """
        weights = self.config.weights
        if preferences is None:
            return weights

        if preferences.has_goal(ActivityGoal.PHOTOGRAPHY):
            weights = replace(weights, weather=0.20, uv=0.15)

        if preferences.has_goal(ActivityGoal.SWIM):
            weights = replace(weights, tide=0.15, temp=0.35, wind=0.20)

        return weights.normalized()

    def score_temperature(
        self,
        feels_like: float,
        preferences: Optional[UserPreferences] = None,
    ) -> float:
        """Score feels-like temperature.

        With a user range: 100 at the midpoint, losing up to 20 points toward
        either edge, then 10 points per degree outside the range starting
        from 80. Without: banded curve peaking at 80-90°F.

        Args:
            feels_like: Feels-like temperature in Fahrenheit
            preferences: Optional user preferences

        Returns:
            Score 0-100
        """
        cfg = self.config

        if preferences is not None and preferences.temp_range is not None:
            low, high = preferences.temp_range.min, preferences.temp_range.max
            if low <= feels_like <= high:
                half_range = (high - low) / 2
                if half_range == 0:
                    return 100.0
                deviation = abs(feels_like - (low + high) / 2)
                return 100.0 - (deviation / half_range) * cfg.temp_range_edge_drop
            elif feels_like < low:
                diff = low - feels_like
            else:
                diff = feels_like - high
            return max(0.0, cfg.temp_range_outside_start - diff * cfg.temp_range_outside_slope)

        opt_low, opt_high = cfg.temp_optimal
        if opt_low <= feels_like <= opt_high:
            return 100.0
        elif cfg.temp_good[0] <= feels_like <= cfg.temp_good[1]:
            if feels_like < opt_low:
                return 100.0 - (opt_low - feels_like) * cfg.temp_good_taper
            return 100.0 - (feels_like - opt_high) * cfg.temp_good_taper
        elif cfg.temp_acceptable[0] <= feels_like <= cfg.temp_acceptable[1]:
            return cfg.temp_acceptable_score
        elif cfg.temp_poor[0] <= feels_like <= cfg.temp_poor[1]:
            return cfg.temp_poor_score
        else:
            return cfg.temp_fallback_score

    def score_uv(self, uv_index: float) -> float:
        """Score UV index. Lower is safer.

        Args:
            uv_index: UV index

        Returns:
            Score 0-100
        """
        for threshold, score in zip(self.config.uv_thresholds, self.config.uv_scores):
            if uv_index <= threshold:
                return score
        return self.config.uv_scores[-1]

    def effective_wind(self, wind_speed: float, wind_gust: Optional[float]) -> float:
        """Use the gust when it exceeds sustained speed by more than the margin."""
        if wind_gust is not None and wind_gust > wind_speed + self.config.gust_margin:
            return wind_gust
        return wind_speed

    def score_wind(
        self,
        wind_speed: float,
        wind_gust: Optional[float] = None,
        preferences: Optional[UserPreferences] = None,
    ) -> float:
        """Score wind comfort.

        Args:
            wind_speed: Sustained wind speed in mph
            wind_gust: Gust speed in mph, if reported
            preferences: Optional user preferences carrying a wind tolerance

        Returns:
            Score 0-100
        """
        cfg = self.config
        wind = self.effective_wind(wind_speed, wind_gust)

        tolerance = cfg.wind_tolerance
        if preferences is not None and preferences.wind_tolerance:
            tolerance = preferences.wind_tolerance

        if wind > tolerance:
            return cfg.wind_over_tolerance_score

        for threshold, score in zip(cfg.wind_thresholds, cfg.wind_scores):
            if wind < threshold:
                return score
        return cfg.wind_scores[-1]

    def score_tide(self, tide_type: str) -> float:
        """Score tide phase. Slack and low tides are best for wading and swimming."""
        return self.config.tide_scores.get(tide_key(tide_type), self.config.tide_default_score)

    def score_weather(self, category: WeatherCategory, cloud_cover: float) -> float:
        """Score sky conditions.

        A clear-sky code under heavy cloud cover loses a few points.

        Args:
            category: Classified weather code
            cloud_cover: Cloud cover percentage

        Returns:
            Score 0-100
        """
        cfg = self.config
        base = cfg.weather_scores.get(category, cfg.weather_default_score)

        if cloud_cover > cfg.cloud_cover_penalty_above and base > cfg.cloud_cover_penalty_min_base:
            return base - cfg.cloud_cover_penalty

        return base

    def calculate_score(
        self,
        conditions: ConditionSnapshot,
        preferences: Optional[UserPreferences] = None,
    ) -> ScoredWindow:
        """Calculate the complete BeachScore for a snapshot.

        Args:
            conditions: Conditions at one forecast instant
            preferences: Optional user preferences

        Returns:
            ScoredWindow with a window starting at the snapshot timestamp
        """
        weights = self.resolve_weights(preferences)
        category = conditions.weather_category

        temp_score = self.score_temperature(conditions.feels_like, preferences)
        uv_score = self.score_uv(conditions.uv_index)
        wind_score = self.score_wind(conditions.wind_speed, conditions.wind_gust, preferences)
        tide_score = self.score_tide(conditions.tide_type)
        weather_score = self.score_weather(category, conditions.cloud_cover)

        total_score = round_half_up(
            temp_score * weights.temp +
            uv_score * weights.uv +
            wind_score * weights.wind +
            tide_score * weights.tide +
            weather_score * weights.weather
        )

        breakdown = ScoreBreakdown(
            temp_score=temp_score,
            uv_score=uv_score,
            wind_score=wind_score,
            tide_score=tide_score,
            weather_score=weather_score,
            total_score=total_score,
            weights=weights,
        )

        logger.debug(
            f"Scored {conditions.timestamp.isoformat()}: total={total_score} "
            f"temp={temp_score} uv={uv_score} wind={wind_score} "
            f"tide={tide_score} weather={weather_score}"
        )

        start = conditions.timestamp
        window = Window(
            id=window_id(start),
            start_time=start,
            end_time=start + timedelta(hours=self.config.window_hours),
            score=total_score,
            badges=generate_badges(conditions, breakdown),
            conditions=conditions,
        )

        return ScoredWindow(window=window, breakdown=breakdown)


def generate_badges(conditions: ConditionSnapshot, breakdown: ScoreBreakdown) -> list[Badge]:
    """Generate explanatory badges, at most one per condition category.

    Args:
        conditions: Raw conditions
        breakdown: Sub-scores for the same conditions

    Returns:
        Badges in category order: temperature, UV, wind, tide, weather
    """
    badges = []

    # Temperature
    if breakdown.temp_score >= 90:
        badges.append(Badge("temp-perfect", "Perfect temp", "🌡️", BadgeType.POSITIVE))
    elif breakdown.temp_score < 50:
        if conditions.feels_like < 70:
            badges.append(Badge("temp-cold", "Cool weather", "🥶", BadgeType.WARNING))
        else:
            badges.append(Badge("temp-hot", "Very hot", "🥵", BadgeType.WARNING))

    # UV
    if conditions.uv_index <= 2:
        badges.append(Badge("uv-low", "Low UV", "☀️", BadgeType.POSITIVE))
    elif conditions.uv_index >= 8:
        badges.append(Badge("uv-high", "High UV: SPF 50+", "🧴", BadgeType.WARNING))
    elif conditions.uv_index >= 6:
        badges.append(Badge("uv-moderate", "Bring sunscreen", "🧴", BadgeType.NEUTRAL))

    # Wind (sustained speed)
    if conditions.wind_speed < 5:
        badges.append(Badge("wind-calm", "Gentle breeze", "🍃", BadgeType.POSITIVE))
    elif conditions.wind_speed >= 15:
        label = "Very windy" if conditions.wind_speed >= 20 else "Breezy"
        badges.append(Badge("wind-strong", label, "💨", BadgeType.WARNING))

    # Tide
    tide = tide_key(conditions.tide_type)
    if tide in (TideType.SLACK.value, TideType.LOW.value):
        label = "Slack tide" if tide == TideType.SLACK.value else "Low tide"
        badges.append(Badge("tide-good", label, "🌊", BadgeType.POSITIVE))

    # Weather
    category = conditions.weather_category
    if category.is_clear:
        badges.append(Badge("weather-clear", "Clear skies", "☀️", BadgeType.POSITIVE))
    elif category.is_rain:
        badges.append(Badge("weather-rain", "Rain expected", "🌧️", BadgeType.NEGATIVE))
    elif category == WeatherCategory.THUNDERSTORM:
        badges.append(Badge("weather-storm", "Thunderstorms", "⛈️", BadgeType.NEGATIVE))

    return badges


def explain_score(breakdown: ScoreBreakdown) -> str:
    """Explain in plain words which conditions pulled the score down."""
    explanations = []

    if breakdown.temp_score < 70:
        explanations.append("Temperature is outside comfortable range")
    if breakdown.uv_score < 60:
        explanations.append("UV index is high, extra sun protection needed")
    if breakdown.wind_score < 60:
        explanations.append("Wind conditions may be uncomfortable")
    if breakdown.weather_score < 70:
        explanations.append("Weather conditions are not ideal")

    if not explanations:
        return "All conditions are favorable!"

    return ". ".join(explanations) + "."


def quick_score(
    feels_like: float,
    uv_index: float,
    wind_speed: float = 8,
    tide_type: str = "rising",
    weather_code: str = "01d",
    timestamp: Optional[datetime] = None,
) -> ScoredWindow:
    """Quick scoring with minimal inputs.

    Args:
        feels_like: Feels-like temperature in Fahrenheit
        uv_index: UV index
        wind_speed: Sustained wind in mph (default 8)
        tide_type: Tide phase (default rising)
        weather_code: Weather icon code (default clear)
        timestamp: Snapshot time. Defaults to now.

    Returns:
        ScoredWindow
    """
    conditions = ConditionSnapshot(
        timestamp=timestamp or datetime.now(),
        temp=feels_like,
        feels_like=feels_like,
        humidity=60,
        cloud_cover=0,
        weather_code=weather_code,
        wind_speed=wind_speed,
        uv_index=uv_index,
        tide_type=tide_type,
    )
    return BeachScorer().calculate_score(conditions)

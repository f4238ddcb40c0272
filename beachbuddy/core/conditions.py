"""Beach condition, window and preference models.

A ConditionSnapshot is one consolidated reading of weather, tide and UV
values at a point in time. The scorer turns a snapshot into a Window carrying
a 0-100 BeachScore and a handful of explanatory badges.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class TideType(str, Enum):
    """Tide phase at the time of a snapshot."""
    HIGH = "high"
    LOW = "low"
    RISING = "rising"
    FALLING = "falling"
    SLACK = "slack"


class WeatherCategory(Enum):
    """Sky condition family parsed from an OpenWeather-style icon code."""
    CLEAR = "clear"
    FEW_CLOUDS = "few_clouds"
    SCATTERED_CLOUDS = "scattered_clouds"
    BROKEN_CLOUDS = "broken_clouds"
    SHOWER_RAIN = "shower_rain"
    RAIN = "rain"
    THUNDERSTORM = "thunderstorm"
    SNOW = "snow"
    MIST = "mist"
    UNKNOWN = "unknown"

    @classmethod
    def from_code(cls, weather_code: Optional[str]) -> "WeatherCategory":
        """Classify a weather code such as "01d" or "10n" by its family prefix.

        Args:
            weather_code: Icon code; only the first two characters matter.

        Returns:
            WeatherCategory, UNKNOWN for missing or unrecognized codes
        """
        if not weather_code:
            return cls.UNKNOWN
        return _CODE_FAMILIES.get(weather_code[:2], cls.UNKNOWN)

    @property
    def is_clear(self) -> bool:
        return self in (WeatherCategory.CLEAR, WeatherCategory.FEW_CLOUDS)

    @property
    def is_rain(self) -> bool:
        return self in (WeatherCategory.SHOWER_RAIN, WeatherCategory.RAIN)


_CODE_FAMILIES = {
    "01": WeatherCategory.CLEAR,
    "02": WeatherCategory.FEW_CLOUDS,
    "03": WeatherCategory.SCATTERED_CLOUDS,
    "04": WeatherCategory.BROKEN_CLOUDS,
    "09": WeatherCategory.SHOWER_RAIN,
    "10": WeatherCategory.RAIN,
    "11": WeatherCategory.THUNDERSTORM,
    "13": WeatherCategory.SNOW,
    "50": WeatherCategory.MIST,
}


class ActivityGoal(str, Enum):
    """What the user wants to do at the beach."""
    CHILL = "chill"
    SWIM = "swim"
    WALK = "walk"
    PHOTOGRAPHY = "photography"
    SHELLING = "shelling"
    READING = "reading"


class BadgeType(str, Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    WARNING = "warning"
    NEGATIVE = "negative"


@dataclass(frozen=True)
class ConditionSnapshot:
    """Conditions at a beach for a single forecast instant."""
    timestamp: datetime

    # Weather (Fahrenheit, percentages 0-100)
    temp: float
    feels_like: float
    humidity: float
    cloud_cover: float
    weather_code: str
    weather_description: str = ""

    # Wind (mph)
    wind_speed: float = 0.0
    wind_gust: Optional[float] = None  # Only reported when well above sustained
    wind_direction: Optional[float] = None

    # UV
    uv_index: float = 0.0
    uv_max: Optional[float] = None

    # Tide
    tide_type: str = TideType.SLACK.value
    tide_height: Optional[float] = None  # feet

    # Sun, for the snapshot's calendar day
    sunrise: Optional[datetime] = None
    sunset: Optional[datetime] = None

    beach_id: Optional[str] = None

    @property
    def weather_category(self) -> WeatherCategory:
        return WeatherCategory.from_code(self.weather_code)

    @property
    def has_daylight_bounds(self) -> bool:
        return self.sunrise is not None and self.sunset is not None


@dataclass(frozen=True)
class Badge:
    """Short explanatory tag attached to a window."""
    id: str
    label: str
    icon: str
    type: BadgeType


@dataclass
class Window:
    """A fixed-duration beach visit window with its score."""
    id: str
    start_time: datetime
    end_time: datetime
    score: int
    conditions: ConditionSnapshot
    badges: list[Badge] = field(default_factory=list)
    is_go_now: bool = False

    @property
    def midpoint(self) -> datetime:
        return self.start_time + (self.end_time - self.start_time) / 2

    def contains(self, moment: datetime) -> bool:
        """Check if a moment falls inside the window (both ends inclusive)."""
        return self.start_time <= moment <= self.end_time

    def has_badge(self, badge_id: str) -> bool:
        return any(b.id == badge_id for b in self.badges)


@dataclass(frozen=True)
class TempRange:
    """Preferred feels-like temperature range in Fahrenheit."""
    min: float
    max: float


@dataclass
class UserPreferences:
    """Optional user preferences that reshape weights and scoring curves."""
    temp_range: Optional[TempRange] = None
    wind_tolerance: Optional[float] = None  # max comfortable wind, mph
    activity_goals: list[ActivityGoal] = field(default_factory=list)
    favorite_beaches: list[str] = field(default_factory=list)

    def has_goal(self, goal: ActivityGoal) -> bool:
        return goal in self.activity_goals


def tide_key(tide_type) -> str:
    """Normalize a tide phase given as TideType or string to its lowercase name."""
    if isinstance(tide_type, TideType):
        return tide_type.value
    return str(tide_type).strip().lower()

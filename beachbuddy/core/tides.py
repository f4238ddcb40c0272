"""Tide phase classification from high/low tide predictions.

Given the day's predicted high and low tides, the phase at a moment is:
- slack near either turning point (first/last 15% of the interval by default)
- rising when heading toward a high tide
- falling when heading toward a low tide
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

from beachbuddy.core.conditions import TideType


DEFAULT_SLACK_BAND = 0.15


@dataclass(frozen=True)
class TidePrediction:
    """A predicted high or low tide."""
    time: datetime
    type: str  # "high" or "low"
    height_ft: float

    @property
    def is_high(self) -> bool:
        return self.type == TideType.HIGH.value


def classify_tide(
    predictions: Sequence[TidePrediction],
    at: datetime,
    slack_band: float = DEFAULT_SLACK_BAND,
) -> TideType:
    """Classify the tide phase at a moment.

    Args:
        predictions: High/low predictions in ascending time order
        at: Moment to classify
        slack_band: Fraction of the interval at each end treated as slack

    Returns:
        TideType; SLACK when the moment is not bracketed by two predictions
    """
    if len(predictions) < 2:
        return TideType.SLACK

    previous_tide = None
    next_tide = None
    for i, prediction in enumerate(predictions):
        if prediction.time > at:
            next_tide = prediction
            previous_tide = predictions[i - 1] if i > 0 else None
            break

    if previous_tide is None or next_tide is None:
        return TideType.SLACK

    total = (next_tide.time - previous_tide.time).total_seconds()
    if total <= 0:
        return TideType.SLACK

    progress = (at - previous_tide.time).total_seconds() / total
    if progress < slack_band or progress > 1 - slack_band:
        return TideType.SLACK

    return TideType.RISING if next_tide.is_high else TideType.FALLING


def next_tide_events(
    predictions: Sequence[TidePrediction],
    at: datetime,
) -> tuple[Optional[TidePrediction], Optional[TidePrediction]]:
    """Find the next high and next low tide after a moment.

    Returns:
        Tuple of (next_high, next_low), either may be None
    """
    next_high = next((p for p in predictions if p.is_high and p.time > at), None)
    next_low = next((p for p in predictions if not p.is_high and p.time > at), None)
    return next_high, next_low

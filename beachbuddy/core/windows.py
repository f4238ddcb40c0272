"""Beach visit window generator.

Turns an ordered forecast of condition snapshots into scored visit windows:
- Past snapshots are skipped
- Each snapshot becomes one fixed-length window scored by BeachScorer
- Windows after sunset or before sunrise are flattened to a night score
- Windows are returned in chronological order
- At most one window is marked "Go Now"
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional, Sequence

from beachbuddy.core.conditions import (
    Badge,
    BadgeType,
    ConditionSnapshot,
    UserPreferences,
    Window,
)
from beachbuddy.core.scorer import BeachScorer


logger = logging.getLogger(__name__)


NIGHTTIME_BADGE = Badge("nighttime", "Nighttime", "🌙", BadgeType.NEGATIVE)


@dataclass
class WindowOptions:
    """Options for window generation."""
    duration_hours: float = 3
    count: int = 4  # Next 12 hours with 3-hour snapshots
    preferences: Optional[UserPreferences] = None

    # Go Now selection
    go_now_lookahead_minutes: float = 60
    go_now_min_score: int = 60

    # Flat score given to windows outside daylight
    night_score: int = 30


def current_time_for(snapshots: Sequence[ConditionSnapshot]) -> datetime:
    """Wall-clock now, timezone-aware when the snapshots are."""
    if snapshots and snapshots[0].timestamp.tzinfo is not None:
        return datetime.now(tz=snapshots[0].timestamp.tzinfo)
    return datetime.now()


def align_now(now: datetime, snapshots: Sequence[ConditionSnapshot]) -> datetime:
    """Match now's timezone awareness to the snapshots so they compare.

    A naive now against aware snapshots takes the first snapshot's timezone.
    An aware now against naive snapshots becomes naive local time.
    """
    if not snapshots:
        return now

    snapshot_tz = snapshots[0].timestamp.tzinfo
    if snapshot_tz is not None and now.tzinfo is None:
        return now.replace(tzinfo=snapshot_tz)
    if snapshot_tz is None and now.tzinfo is not None:
        return now.astimezone().replace(tzinfo=None)
    return now


def is_nighttime(window: Window) -> bool:
    """Check if a window's midpoint falls outside its day's sunrise-sunset span.

    Windows whose conditions carry no sunrise/sunset are never nighttime.
    """
    conditions = window.conditions
    if not conditions.has_daylight_bounds:
        return False

    midpoint = window.midpoint
    return midpoint < conditions.sunrise or midpoint > conditions.sunset


class WindowGenerator:
    """Generates scored, ordered beach visit windows from a forecast."""

    def __init__(
        self,
        scorer: Optional[BeachScorer] = None,
        options: Optional[WindowOptions] = None,
    ):
        """Initialize the generator.

        Args:
            scorer: Beach scorer. Defaults to one with the built-in config.
            options: Window options. Defaults to 3-hour windows, 4 snapshots.
        """
        self.scorer = scorer or BeachScorer()
        self.options = options or WindowOptions()

    def generate_windows(
        self,
        snapshots: Sequence[ConditionSnapshot],
        now: Optional[datetime] = None,
    ) -> list[Window]:
        """Generate windows for a forecast.

        Args:
            snapshots: Condition snapshots in ascending time order
            now: Reference time. Defaults to the current wall-clock time.

        Returns:
            Windows sorted by start time, with at most one marked Go Now
        """
        opts = self.options
        if now is None:
            now = current_time_for(snapshots)
        else:
            now = align_now(now, snapshots)

        duration = timedelta(hours=opts.duration_hours)
        windows = []

        for snapshot in snapshots[:max(opts.count, 0)]:
            # Skip past windows
            if snapshot.timestamp < now:
                logger.debug(f"Skipping past snapshot {snapshot.timestamp.isoformat()}")
                continue

            window = self.scorer.calculate_score(snapshot, opts.preferences).window
            window.end_time = window.start_time + duration

            if is_nighttime(window):
                window.score = opts.night_score
                window.badges.append(NIGHTTIME_BADGE)
                logger.debug(f"Window {window.id} is at night, score set to {opts.night_score}")

            windows.append(window)

        windows.sort(key=lambda w: w.start_time)

        go_now = self.find_go_now(windows, now)
        if go_now is not None:
            go_now.is_go_now = True

        logger.debug(
            f"Generated {len(windows)} windows from {len(snapshots)} snapshots"
            f" (go now: {go_now.id if go_now else 'none'})"
        )
        return windows

    def find_go_now(self, windows: Sequence[Window], now: datetime) -> Optional[Window]:
        """Pick the window to mark Go Now.

        First choice is the earliest window happening right now that is not a
        night window. Otherwise the earliest window starting within the
        lookahead that scores well enough.

        Args:
            windows: Windows in chronological order
            now: Reference time

        Returns:
            The Go Now window, or None when nothing qualifies
        """
        opts = self.options

        for window in windows:
            if window.contains(now) and window.score > opts.night_score:
                return window

        lookahead_end = now + timedelta(minutes=opts.go_now_lookahead_minutes)
        for window in windows:
            if now <= window.start_time <= lookahead_end and window.score >= opts.go_now_min_score:
                return window

        return None


def generate_windows(
    snapshots: Sequence[ConditionSnapshot],
    options: Optional[WindowOptions] = None,
    now: Optional[datetime] = None,
    scorer: Optional[BeachScorer] = None,
) -> list[Window]:
    """Quick function to generate windows with default scoring."""
    return WindowGenerator(scorer, options).generate_windows(snapshots, now=now)


def find_best_window(windows: Sequence[Window]) -> Optional[Window]:
    """Highest-scoring window, the earliest one on ties."""
    best = None
    for window in windows:
        if best is None or window.score > best.score:
            best = window
    return best


def is_window_suitable(window: Window, min_score: int = 60) -> bool:
    return window.score >= min_score


def get_good_windows(windows: Sequence[Window], min_score: int = 70) -> list[Window]:
    return [w for w in windows if w.score >= min_score]


def is_window_now(window: Window, now: Optional[datetime] = None) -> bool:
    if now is None:
        now = current_time_for([window.conditions])
    return window.contains(align_now(now, [window.conditions]))


def format_time(moment: datetime) -> str:
    """Format a time like "10:30 AM"."""
    hour = moment.hour % 12 or 12
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment.minute:02d} {suffix}"


def format_window_time(window: Window) -> str:
    """Format a window's span like "10:30 AM - 1:30 PM"."""
    return f"{format_time(window.start_time)} - {format_time(window.end_time)}"

"""Format beach windows and plans for output.

Supports SMS (short) and plain text (full) formats.
"""

import math
from typing import Optional, Sequence

from beachbuddy.core.beach import Beach
from beachbuddy.core.conditions import Window
from beachbuddy.core.forecast import DayForecast, find_best_day
from beachbuddy.core.weights import rate_score
from beachbuddy.core.windows import find_best_window, format_time, format_window_time
from beachbuddy.plans.checklist import ChecklistCategory
from beachbuddy.plans.planner import Plan


class PlanFormatter:
    """Formats a beach forecast and optional plan for different output channels."""

    # SMS character limits
    SMS_MAX_LENGTH = 1600  # Standard SMS limit with concatenation
    SMS_SEGMENT_LENGTH = 160

    def __init__(
        self,
        beach: Beach,
        windows: Sequence[Window],
        plan: Optional[Plan] = None,
        week: Optional[Sequence[DayForecast]] = None,
    ):
        """Initialize formatter.

        Args:
            beach: The beach the windows belong to.
            windows: Windows in chronological order.
            plan: Optional trip plan for one of the windows.
            week: Optional day-by-day forecast to append.
        """
        self.beach = beach
        self.windows = list(windows)
        self.plan = plan
        self.week = list(week or [])

    @property
    def go_now(self) -> Optional[Window]:
        return next((w for w in self.windows if w.is_go_now), None)

    def format_sms(self) -> str:
        """Format for SMS delivery.

        Returns:
            SMS-formatted string, truncated to SMS_MAX_LENGTH.
        """
        lines = [f"BEACH: {self._shorten_name(self.beach.name)}"]

        if not self.windows:
            lines.append("No upcoming windows")
            return "\n".join(lines)

        go_now = self.go_now
        if go_now:
            lines.append(f"GO NOW! Score {go_now.score}")
        else:
            lines.append("No good window right now")

        best = find_best_window(self.windows)
        if best is not None and best is not go_now:
            lines.append(f"Best: {format_time(best.start_time)} ({best.score})")

        lines.append("")
        for window in self.windows:
            lines.append(f"{format_time(window.start_time)} {window.score}")

        if self.plan:
            lines.append("")
            lines.append(f"Leave {format_time(self.plan.departure_time)}")

        best_day = find_best_day(self.week)
        if best_day is not None:
            lines.append("")
            lines.append(f"Best day: {best_day.day_name} ({best_day.score})")

        message = "\n".join(lines)
        if len(message) > self.SMS_MAX_LENGTH:
            message = message[:self.SMS_MAX_LENGTH - 3] + "..."
        return message

    def sms_segments(self, message: str) -> int:
        """Count the SMS segments a message is sent as."""
        return max(1, math.ceil(len(message) / self.SMS_SEGMENT_LENGTH))

    def format_text(self) -> str:
        """Format as plain text with badges and checklist.

        Returns:
            Plain text string.
        """
        lines = []
        title = f"BEACH BUDDY - {self.beach.name}"
        lines.append(title)
        lines.append("=" * len(title))
        lines.append("")

        if not self.windows:
            lines.append("No upcoming windows in the forecast.")
        else:
            go_now = self.go_now
            if go_now:
                lines.append(f">> GO NOW: {format_window_time(go_now)} (score {go_now.score})")
            else:
                lines.append("No good window right now.")
            lines.append("")

            lines.append("WINDOWS")
            lines.append("-" * 40)
            for window in self.windows:
                lines.extend(self._format_window(window))

        if self.plan:
            lines.append("")
            lines.extend(self._format_plan(self.plan))

        if self.week:
            lines.append("")
            lines.extend(self._format_week(self.week))

        return "\n".join(lines)

    def _format_window(self, window: Window) -> list[str]:
        rating = rate_score(window.score)
        marker = " *" if window.is_go_now else ""
        lines = [
            f"{window.start_time:%a %m/%d} {format_window_time(window)}  "
            f"{window.score:3d} {rating.value}{marker}"
        ]
        c = window.conditions
        lines.append(
            f"    {c.feels_like:.0f}°F feels, UV {c.uv_index:.1f}, "
            f"wind {c.wind_speed:.0f} mph, {c.tide_type} tide"
        )
        if window.badges:
            lines.append("    " + " | ".join(f"{b.icon} {b.label}" for b in window.badges))
        return lines

    def _format_plan(self, plan: Plan) -> list[str]:
        lines = [
            "PLAN",
            "-" * 40,
            f"Leave at {format_time(plan.departure_time)}, arrive {format_time(plan.arrival_time)}",
            f"Parking: {plan.parking_tips}",
            "",
            "CHECKLIST",
        ]
        for category in ChecklistCategory:
            items = [i for i in plan.checklist if i.category == category]
            if not items:
                continue
            lines.append(f"  {category.value}:")
            for item in items:
                reason = f" ({item.reason})" if item.reason else ""
                lines.append(f"    [ ] {item.item} [{item.priority.value}]{reason}")
        return lines

    def _format_week(self, week: Sequence[DayForecast]) -> list[str]:
        lines = ["WEEK", "-" * 40]
        for day in week:
            marker = "  << best day" if day.is_best else ""
            lines.append(
                f"{day.day_name:<9} {day.date:%m/%d}  {day.score:3d}  "
                f"{day.low_temp}-{day.high_temp}°F{marker}"
            )
            if day.badges:
                lines.append("    " + " | ".join(f"{b.icon} {b.label}" for b in day.badges))
        return lines

    def _shorten_name(self, name: str, max_len: int = 20) -> str:
        """Shorten beach name for SMS."""
        for suffix in (" State Park", " Park"):
            if name.endswith(suffix):
                name = name[:-len(suffix)]
                break
        if len(name) > max_len:
            return name[:max_len - 1] + "."
        return name


def format_sms(
    beach: Beach,
    windows: Sequence[Window],
    plan: Optional[Plan] = None,
    week: Optional[Sequence[DayForecast]] = None,
) -> str:
    """Format windows for SMS."""
    return PlanFormatter(beach, windows, plan, week).format_sms()


def format_text(
    beach: Beach,
    windows: Sequence[Window],
    plan: Optional[Plan] = None,
    week: Optional[Sequence[DayForecast]] = None,
) -> str:
    """Format windows as plain text."""
    return PlanFormatter(beach, windows, plan, week).format_text()

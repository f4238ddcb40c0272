"""Beach trip plan for a chosen window."""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Optional

from beachbuddy.core.beach import Beach
from beachbuddy.core.conditions import Window
from beachbuddy.plans.checklist import ChecklistItem, Priority, generate_checklist


logger = logging.getLogger(__name__)

DEFAULT_LEAD_MINUTES = 30


@dataclass
class Plan:
    """A beach trip: where, when to leave, and what to bring."""
    id: str
    beach: Beach
    window: Window
    departure_time: datetime
    arrival_time: datetime
    checklist: list[ChecklistItem] = field(default_factory=list)
    parking_tips: str = ""
    created_at: Optional[datetime] = None

    @property
    def essentials(self) -> list[ChecklistItem]:
        return [i for i in self.checklist if i.priority == Priority.ESSENTIAL]


def build_plan(
    beach: Beach,
    window: Window,
    lead_minutes: float = DEFAULT_LEAD_MINUTES,
    created_at: Optional[datetime] = None,
) -> Plan:
    """Build a trip plan for a beach window.

    Args:
        beach: Beach to visit
        window: Chosen visit window
        lead_minutes: How long before the window starts to leave
        created_at: Creation time. Defaults to now.

    Returns:
        Plan
    """
    created_at = created_at or datetime.now(tz=window.start_time.tzinfo)
    departure = window.start_time - timedelta(minutes=lead_minutes)
    checklist = generate_checklist(window.conditions)

    logger.info(
        f"Plan for {beach.name}: leave {departure.isoformat()}, "
        f"{len(checklist)} checklist items"
    )

    return Plan(
        id=f"plan-{int(created_at.timestamp() * 1000)}",
        beach=beach,
        window=window,
        departure_time=departure,
        arrival_time=window.start_time,
        checklist=checklist,
        parking_tips=beach.parking_tips,
        created_at=created_at,
    )

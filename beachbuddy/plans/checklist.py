"""Packing checklist generation.

Builds a beach-day packing list tuned to the conditions of a window:
sunscreen strength follows UV, water follows temperature, and wind or cool
weather adds extra layers.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from beachbuddy.core.conditions import ConditionSnapshot


class ChecklistCategory(str, Enum):
    ESSENTIALS = "essentials"
    SUN_PROTECTION = "sun-protection"
    HYDRATION = "hydration"
    SAFETY = "safety"
    COMFORT = "comfort"
    FUN = "fun"


class Priority(str, Enum):
    ESSENTIAL = "essential"
    RECOMMENDED = "recommended"
    OPTIONAL = "optional"


@dataclass
class ChecklistItem:
    """One thing to pack."""
    id: str
    category: ChecklistCategory
    item: str
    priority: Priority
    reason: Optional[str] = None
    checked: bool = False


def sunscreen_spf(uv_index: float) -> str:
    if uv_index >= 8:
        return "SPF 50+"
    elif uv_index >= 6:
        return "SPF 30+"
    return "SPF 30"


class ChecklistBuilder:
    """Accumulates checklist items with sequential ids."""

    def __init__(self):
        self.items: list[ChecklistItem] = []

    def add(
        self,
        category: ChecklistCategory,
        item: str,
        priority: Priority,
        reason: Optional[str] = None,
    ) -> None:
        self.items.append(ChecklistItem(
            id=f"item-{len(self.items) + 1}",
            category=category,
            item=item,
            priority=priority,
            reason=reason,
        ))


def generate_checklist(conditions: ConditionSnapshot) -> list[ChecklistItem]:
    """Generate a packing checklist for the given conditions.

    Args:
        conditions: Conditions for the planned window

    Returns:
        Checklist items grouped by category in packing order
    """
    builder = ChecklistBuilder()
    uv_index = conditions.uv_index
    temp = conditions.temp

    # Beach essentials
    builder.add(ChecklistCategory.ESSENTIALS, "Beach towels", Priority.ESSENTIAL)
    builder.add(ChecklistCategory.ESSENTIALS, "Beach umbrella or tent", Priority.RECOMMENDED)
    builder.add(ChecklistCategory.ESSENTIALS, "Beach chairs", Priority.OPTIONAL)

    # Sun protection
    builder.add(
        ChecklistCategory.SUN_PROTECTION,
        f"Sunscreen ({sunscreen_spf(uv_index)})",
        Priority.ESSENTIAL,
        reason="UV index is very high" if uv_index >= 8 else "Protect from sun exposure",
    )
    builder.add(
        ChecklistCategory.SUN_PROTECTION,
        "Hat or visor",
        Priority.RECOMMENDED if uv_index >= 6 else Priority.OPTIONAL,
    )
    builder.add(ChecklistCategory.SUN_PROTECTION, "Sunglasses (UV protection)", Priority.RECOMMENDED)

    # Hydration
    bottles = "3+ bottles" if temp >= 85 else "2+ bottles"
    builder.add(
        ChecklistCategory.HYDRATION,
        f"Water ({bottles})",
        Priority.ESSENTIAL,
        reason="Very hot, stay hydrated" if temp >= 90 else "Stay hydrated",
    )
    builder.add(
        ChecklistCategory.HYDRATION,
        "Cooler with ice",
        Priority.RECOMMENDED if temp >= 85 else Priority.OPTIONAL,
    )

    # Comfort
    if conditions.wind_speed >= 15:
        builder.add(
            ChecklistCategory.COMFORT,
            "Windbreaker or light jacket",
            Priority.RECOMMENDED,
            reason="Windy conditions",
        )
    if temp < 75:
        builder.add(
            ChecklistCategory.COMFORT,
            "Extra layer or sweatshirt",
            Priority.RECOMMENDED,
            reason="Cooler temperatures",
        )

    # Safety
    builder.add(ChecklistCategory.SAFETY, "First aid kit", Priority.RECOMMENDED)
    builder.add(ChecklistCategory.SAFETY, "Phone in waterproof case", Priority.ESSENTIAL)

    # Fun
    for item in ("Beach toys or games", "Snorkel gear", "Camera or GoPro", "Book or magazine"):
        builder.add(ChecklistCategory.FUN, item, Priority.OPTIONAL)

    return builder.items

"""Trip plans, packing checklists and output formatting."""

from beachbuddy.plans.checklist import (
    ChecklistCategory,
    ChecklistItem,
    Priority,
    generate_checklist,
)
from beachbuddy.plans.formatter import PlanFormatter, format_sms, format_text
from beachbuddy.plans.loader import SnapshotLoadError, load_snapshots, snapshots_from_frame
from beachbuddy.plans.planner import Plan, build_plan

__all__ = [
    # Checklist
    "ChecklistCategory",
    "ChecklistItem",
    "Priority",
    "generate_checklist",
    # Formatter
    "PlanFormatter",
    "format_sms",
    "format_text",
    # Loader
    "SnapshotLoadError",
    "load_snapshots",
    "snapshots_from_frame",
    # Planner
    "Plan",
    "build_plan",
]

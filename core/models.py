from __future__ import annotations

from core.domain import (
    DEFAULT_MAX_STAFFING_PERCENTAGE,
    AllocationEntry,
    AllocationMap,
    Assignment,
    CalendarEvent,
    CalendarEventType,
    Period,
    Resource,
    UtilizationLevel,
    ViewMode,
    generate_id,
)

__all__ = [
    "generate_id",
    "CalendarEventType",
    "ViewMode",
    "UtilizationLevel",
    "Resource",
    "DEFAULT_MAX_STAFFING_PERCENTAGE",
    "Assignment",
    "AllocationEntry",
    "AllocationMap",
    "CalendarEvent",
    "Period",
]

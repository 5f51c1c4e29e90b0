from core.domain.assignment import AllocationEntry, AllocationMap, Assignment
from core.domain.calendar import CalendarEvent
from core.domain.enums import CalendarEventType, UtilizationLevel, ViewMode
from core.domain.identifiers import as_day, generate_id, iso_day
from core.domain.period import Period
from core.domain.resource import DEFAULT_MAX_STAFFING_PERCENTAGE, Resource

__all__ = [
    "generate_id",
    "as_day",
    "iso_day",
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

from .allocation import AllocationService
from .resource import ResourceService
from .staffing import StaffingService, StaffingSnapshot
from .work_calendar import WorkCalendarEngine, WorkCalendarService

__all__ = [
    "AllocationService",
    "ResourceService",
    "StaffingService",
    "StaffingSnapshot",
    "WorkCalendarEngine",
    "WorkCalendarService",
]

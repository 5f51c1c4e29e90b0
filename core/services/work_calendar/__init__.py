from core.services.work_calendar.engine import (
    CalendarIndex,
    WorkCalendarEngine,
    count_working_days,
    is_non_working_day,
)
from core.services.work_calendar.service import WorkCalendarService

__all__ = [
    "is_non_working_day",
    "count_working_days",
    "WorkCalendarEngine",
    "CalendarIndex",
    "WorkCalendarService",
]

from __future__ import annotations

from enum import Enum


class CalendarEventType(str, Enum):
    NATIONAL_HOLIDAY = "NATIONAL_HOLIDAY"
    COMPANY_CLOSURE = "COMPANY_CLOSURE"
    LOCAL_HOLIDAY = "LOCAL_HOLIDAY"


class ViewMode(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class UtilizationLevel(str, Enum):
    OVER = "OVER"
    AT_CAP = "AT_CAP"
    PARTIAL = "PARTIAL"
    EMPTY = "EMPTY"


__all__ = ["CalendarEventType", "ViewMode", "UtilizationLevel"]

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from core.domain.enums import CalendarEventType
from core.domain.identifiers import generate_id


@dataclass(frozen=True)
class CalendarEvent:
    """A non-working day: national holiday, company closure or local holiday.

    ``location`` is only meaningful for ``LOCAL_HOLIDAY``; the other types
    apply to every location whatever the field holds.
    """

    id: str
    name: str
    date: date
    type: CalendarEventType
    location: Optional[str] = None

    def applies_to(self, location: Optional[str]) -> bool:
        if self.type != CalendarEventType.LOCAL_HOLIDAY:
            return True
        return self.location is not None and self.location == location

    @staticmethod
    def create(
        name: str,
        date: date,
        type: CalendarEventType,
        location: Optional[str] = None,
    ) -> "CalendarEvent":
        return CalendarEvent(id=generate_id(), name=name, date=date, type=type, location=location)


__all__ = ["CalendarEvent"]

from __future__ import annotations

from core.models import CalendarEvent, CalendarEventType
from infra.db.models import CalendarEventORM


def event_to_orm(event: CalendarEvent) -> CalendarEventORM:
    return CalendarEventORM(
        id=event.id,
        name=event.name,
        event_date=event.date,
        type=event.type,
        location=event.location,
    )


def event_from_orm(obj: CalendarEventORM) -> CalendarEvent:
    return CalendarEvent(
        id=obj.id,
        name=obj.name,
        date=obj.event_date,
        type=CalendarEventType(obj.type),
        location=obj.location,
    )


__all__ = ["event_to_orm", "event_from_orm"]

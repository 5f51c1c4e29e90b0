# core/services/work_calendar/service.py
from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from core.domain.identifiers import as_day
from core.exceptions import NotFoundError, ValidationError
from core.interfaces import CalendarEventRepository
from core.models import CalendarEvent, CalendarEventType
from core.services.staffing.validation import validate_calendar_event

logger = logging.getLogger(__name__)


class WorkCalendarService:
    """
    High-level API for the company calendar.
    The engine is read-only; all writes go through this service, which
    rejects local holidays without a location.
    """

    def __init__(self, session: Session, event_repo: CalendarEventRepository):
        self._session: Session = session
        self._repo: CalendarEventRepository = event_repo

    def add_event(
        self,
        name: str,
        date_: date,
        type_: CalendarEventType | str,
        location: Optional[str] = None,
    ) -> CalendarEvent:
        if not name or not name.strip():
            raise ValidationError("Event name cannot be empty.", code="EVENT_NAME_EMPTY")
        try:
            event_type = CalendarEventType(type_)
        except ValueError:
            raise ValidationError(f"Unknown calendar event type: {type_!r}", code="EVENT_TYPE_INVALID") from None
        event = CalendarEvent.create(
            name=name.strip(),
            date=as_day(date_),
            type=event_type,
            location=location.strip() if location else None,
        )
        validate_calendar_event(event)
        try:
            self._repo.add(event)
            self._session.commit()
            logger.info(f"Added calendar event {event.id} - {event.name} on {event.date}")
        except Exception:
            self._session.rollback()
            raise
        return event

    def update_event(self, event: CalendarEvent) -> CalendarEvent:
        validate_calendar_event(event)
        if self._repo.get(event.id) is None:
            raise NotFoundError("Calendar event not found.", code="EVENT_NOT_FOUND")
        try:
            self._repo.update(event)
            self._session.commit()
        except Exception:
            self._session.rollback()
            raise
        return event

    def delete_event(self, event_id: str) -> None:
        if self._repo.get(event_id) is None:
            raise NotFoundError("Calendar event not found.", code="EVENT_NOT_FOUND")
        try:
            self._repo.delete(event_id)
            self._session.commit()
            logger.info(f"Deleted calendar event {event_id}")
        except Exception:
            self._session.rollback()
            raise

    def list_events(self, start: Optional[date] = None, end: Optional[date] = None) -> List[CalendarEvent]:
        if start is None or end is None:
            events = self._repo.list_all()
        else:
            events = self._repo.list_range(as_day(start), as_day(end))
        return sorted(events, key=lambda e: (e.date, e.name))

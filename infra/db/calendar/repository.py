from __future__ import annotations

from datetime import date
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.interfaces import CalendarEventRepository
from core.models import CalendarEvent
from infra.db.calendar.mapper import event_from_orm, event_to_orm
from infra.db.models import CalendarEventORM


class SqlAlchemyCalendarEventRepository(CalendarEventRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, event: CalendarEvent) -> None:
        self.session.add(event_to_orm(event))

    def update(self, event: CalendarEvent) -> None:
        self.session.merge(event_to_orm(event))

    def delete(self, event_id: str) -> None:
        self.session.query(CalendarEventORM).filter_by(id=event_id).delete()

    def get(self, event_id: str) -> Optional[CalendarEvent]:
        obj = self.session.get(CalendarEventORM, event_id)
        return event_from_orm(obj) if obj else None

    def list_all(self) -> List[CalendarEvent]:
        rows = self.session.execute(select(CalendarEventORM)).scalars().all()
        return [event_from_orm(row) for row in rows]

    def list_range(self, start_date: date, end_date: date) -> List[CalendarEvent]:
        stmt = select(CalendarEventORM).where(
            CalendarEventORM.event_date >= start_date,
            CalendarEventORM.event_date <= end_date,
        )
        rows = self.session.execute(stmt).scalars().all()
        return [event_from_orm(row) for row in rows]


__all__ = ["SqlAlchemyCalendarEventRepository"]

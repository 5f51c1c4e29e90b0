from infra.db.calendar.mapper import event_from_orm, event_to_orm
from infra.db.calendar.repository import SqlAlchemyCalendarEventRepository

__all__ = [
    "event_to_orm",
    "event_from_orm",
    "SqlAlchemyCalendarEventRepository",
]

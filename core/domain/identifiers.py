from __future__ import annotations

from datetime import date, datetime
from uuid import uuid4


def generate_id() -> str:
    return str(uuid4())


def as_day(value: date | datetime | str) -> date:
    """Normalize a date-like value to a plain day.

    ``datetime`` values lose their time component; ISO strings may carry a
    time suffix (``2024-03-01T10:00:00``), only the date part is read.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value).strip()[:10])


def iso_day(value: date | datetime | str) -> str:
    return as_day(value).isoformat()


__all__ = ["generate_id", "as_day", "iso_day"]

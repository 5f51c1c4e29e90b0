# core/services/work_calendar/engine.py
from __future__ import annotations

from collections.abc import Iterable, Iterator
from datetime import date, timedelta
from typing import Optional

from core.domain.identifiers import as_day
from core.models import CalendarEvent

# Monday=0 ... Sunday=6
WORKING_WEEKDAYS = frozenset({0, 1, 2, 3, 4})


def _event_matches(event: CalendarEvent, day: date, location: Optional[str]) -> bool:
    return as_day(event.date) == day and event.applies_to(location)


def is_non_working_day(day: date, location: Optional[str], events: Iterable[CalendarEvent]) -> bool:
    """Weekend, or any event on ``day`` that applies to ``location``."""
    day = as_day(day)
    if day.weekday() not in WORKING_WEEKDAYS:
        return True
    return any(_event_matches(e, day, location) for e in events)


def count_working_days(
    start: date,
    end: date,
    location: Optional[str],
    events: Iterable[CalendarEvent],
) -> int:
    return WorkCalendarEngine(events, location).working_days_between(start, end)


class WorkCalendarEngine:
    """
    Working-day calendar for one location.

    Events are indexed by day once, so per-day lookups stay cheap when a
    grid evaluates hundreds of cells against the same calendar.
    """

    def __init__(self, events: Iterable[CalendarEvent], location: Optional[str] = None):
        self._location: Optional[str] = location
        self._closed: set[date] = set()
        for event in events:
            if event.applies_to(location):
                self._closed.add(as_day(event.date))

    @property
    def location(self) -> Optional[str]:
        return self._location

    def is_non_working_day(self, d: date) -> bool:
        d = as_day(d)
        return d.weekday() not in WORKING_WEEKDAYS or d in self._closed

    def is_working_day(self, d: date) -> bool:
        return not self.is_non_working_day(d)

    def next_working_day(self, d: date, include_today: bool = True) -> date:
        current = as_day(d)
        if not include_today:
            current += timedelta(days=1)
        while not self.is_working_day(current):
            current += timedelta(days=1)
        return current

    def iter_working_days(self, start: date, end: date) -> Iterator[date]:
        current = as_day(start)
        end = as_day(end)
        while current <= end:
            if self.is_working_day(current):
                yield current
            current += timedelta(days=1)

    def working_days_between(self, start: date, end: date) -> int:
        if as_day(end) < as_day(start):
            return 0
        return sum(1 for _ in self.iter_working_days(start, end))


class CalendarIndex:
    """Caches one ``WorkCalendarEngine`` per location over a fixed event list."""

    def __init__(self, events: Iterable[CalendarEvent]):
        self._events: tuple[CalendarEvent, ...] = tuple(events)
        self._engines: dict[Optional[str], WorkCalendarEngine] = {}

    @property
    def events(self) -> tuple[CalendarEvent, ...]:
        return self._events

    def for_location(self, location: Optional[str]) -> WorkCalendarEngine:
        engine = self._engines.get(location)
        if engine is None:
            engine = WorkCalendarEngine(self._events, location)
            self._engines[location] = engine
        return engine


__all__ = [
    "WORKING_WEEKDAYS",
    "is_non_working_day",
    "count_working_days",
    "WorkCalendarEngine",
    "CalendarIndex",
]

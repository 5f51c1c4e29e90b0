from __future__ import annotations

from datetime import date
from typing import Optional

from core.domain.identifiers import as_day
from core.models import Resource


def effective_end(resource: Resource, requested_end: date) -> date:
    """Clip ``requested_end`` to the resource's last day of work, if any."""
    requested_end = as_day(requested_end)
    last_day = resource.last_day_of_work
    if last_day is not None and as_day(last_day) < requested_end:
        return as_day(last_day)
    return requested_end


def clamp_interval(resource: Resource, start: date, end: date) -> Optional[tuple[date, date]]:
    """
    Bound ``[start, end]`` by the employment window.

    Only the end is clamped; callers are not expected to ask for periods
    before the hire date. Returns ``None`` when nothing is left.
    """
    start = as_day(start)
    end = effective_end(resource, end)
    if start > end:
        return None
    return start, end


def is_employed_on(resource: Resource, day: date) -> bool:
    day = as_day(day)
    if day < as_day(resource.hire_date):
        return False
    return resource.last_day_of_work is None or day <= as_day(resource.last_day_of_work)


__all__ = ["effective_end", "clamp_interval", "is_employed_on"]

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import date, timedelta
from typing import Optional

from core.domain.identifiers import as_day
from core.models import Assignment, CalendarEvent, Resource
from core.services.staffing.employment import clamp_interval
from core.services.staffing.snapshot import StaffingSnapshot
from core.services.work_calendar.engine import WorkCalendarEngine


def _days_for(allocations: Mapping[str, Mapping[str, int]], assignment_id: str) -> Mapping[str, int]:
    return allocations.get(assignment_id) or {}


def _own_assignments(resource: Resource, assignments: Iterable[Assignment]) -> list[Assignment]:
    return [a for a in assignments if a.resource_id == resource.id]


def _accumulate_person_days(
    assignments: list[Assignment],
    allocations: Mapping[str, Mapping[str, int]],
    start: date,
    end: date,
    calendar: WorkCalendarEngine,
) -> float:
    total = 0.0
    for assignment in assignments:
        days = _days_for(allocations, assignment.id)
        if not days:
            continue
        current = start
        while current <= end:
            pct = days.get(current.isoformat(), 0)
            # entries on non-working days are stale data, never counted
            if pct and calendar.is_working_day(current):
                total += pct / 100
            current += timedelta(days=1)
    return total


def person_days(
    resource: Resource,
    assignments: Iterable[Assignment],
    allocations: Mapping[str, Mapping[str, int]],
    start: date,
    end: date,
    events: Iterable[CalendarEvent] = (),
    *,
    calendar: Optional[WorkCalendarEngine] = None,
) -> float:
    """Person-days committed by ``resource`` in ``[start, end]`` after the employment clamp."""
    window = clamp_interval(resource, start, end)
    if window is None:
        return 0.0
    calendar = calendar or WorkCalendarEngine(events, resource.location)
    return _accumulate_person_days(
        _own_assignments(resource, assignments), allocations, window[0], window[1], calendar
    )


def average_utilization(
    resource: Resource,
    assignments: Iterable[Assignment],
    allocations: Mapping[str, Mapping[str, int]],
    period_start: date,
    period_end: date,
    location: Optional[str] = None,
    events: Iterable[CalendarEvent] = (),
    *,
    calendar: Optional[WorkCalendarEngine] = None,
) -> float:
    """
    Average utilization of ``resource`` over a period, in percent.

    ``assignments`` may be every assignment of the resource (parent row) or
    a single one (child row); assignments of other resources are ignored.
    Working days are counted for ``location``, which defaults to the
    resource's own. The result is unrounded and may exceed 100 when the
    resource is over-committed. Empty windows and periods without working
    days give 0.
    """
    window = clamp_interval(resource, period_start, period_end)
    if window is None:
        return 0.0
    start, end = window

    if calendar is None:
        calendar = WorkCalendarEngine(events, location if location is not None else resource.location)
    working_days = calendar.working_days_between(start, end)
    if working_days == 0:
        return 0.0

    total = _accumulate_person_days(
        _own_assignments(resource, assignments), allocations, start, end, calendar
    )
    return (total / working_days) * 100


def daily_total(
    resource: Resource,
    assignments: Iterable[Assignment],
    allocations: Mapping[str, Mapping[str, int]],
    day: date,
) -> int:
    """Sum of the raw same-day percentages across the resource's assignments."""
    key = as_day(day).isoformat()
    return sum(_days_for(allocations, a.id).get(key, 0) for a in _own_assignments(resource, assignments))


def resource_utilization(snapshot: StaffingSnapshot, resource_id: str, start: date, end: date) -> float:
    resource = snapshot.get_resource(resource_id)
    return average_utilization(
        resource,
        snapshot.assignments_for(resource_id),
        snapshot.allocations,
        start,
        end,
        calendar=snapshot.calendar_for(resource),
    )


def assignment_utilization(snapshot: StaffingSnapshot, assignment_id: str, start: date, end: date) -> float:
    assignment = snapshot.get_assignment(assignment_id)
    resource = snapshot.get_resource(assignment.resource_id)
    return average_utilization(
        resource,
        (assignment,),
        snapshot.allocations,
        start,
        end,
        calendar=snapshot.calendar_for(resource),
    )


def resource_daily_total(snapshot: StaffingSnapshot, resource_id: str, day: date) -> int:
    resource = snapshot.get_resource(resource_id)
    return daily_total(resource, snapshot.assignments_for(resource_id), snapshot.allocations, day)


__all__ = [
    "person_days",
    "average_utilization",
    "daily_total",
    "resource_utilization",
    "assignment_utilization",
    "resource_daily_total",
]

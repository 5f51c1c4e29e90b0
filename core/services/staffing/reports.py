from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from typing import Optional

from core.domain.identifiers import as_day
from core.models import Assignment, Resource
from core.services.staffing.aggregation import average_utilization, person_days
from core.services.staffing.classification import classify, resource_cap, round_percent
from core.services.staffing.config import DEFAULT_CAP_PERCENT
from core.services.staffing.employment import clamp_interval
from core.services.staffing.models import ProjectFteRow, ResourceAllocationRow, ResourceUtilizationRow
from core.services.staffing.periods import month_end
from core.services.staffing.snapshot import StaffingSnapshot


def _month_bounds(year: int, month: int) -> tuple[date, date]:
    first = date(year, month, 1)
    return first, month_end(first)


def _by_name(resources: Iterable[Resource]) -> list[Resource]:
    return sorted(resources, key=lambda r: (r.name.lower(), r.id))


def employment_window(resource: Resource, start: date, end: date) -> Optional[tuple[date, date]]:
    """``[start, end]`` bounded on both sides by the employment window."""
    start = max(as_day(start), as_day(resource.hire_date))
    return clamp_interval(resource, start, end)


def resource_utilization_report(snapshot: StaffingSnapshot, year: int, month: int) -> list[ResourceUtilizationRow]:
    """
    Monthly utilization per resource against the capacity it can give.

    Available days are the working days inside the employment window scaled
    by the staffing cap, so a resource capped at 80% fully booked at 80%
    reads 100%. Resources that left before the month, or join after it,
    are not listed.
    """
    first, last = _month_bounds(year, month)
    rows: list[ResourceUtilizationRow] = []
    for resource in _by_name(snapshot.resources):
        window = employment_window(resource, first, last)
        if window is None:
            continue
        start, end = window
        calendar = snapshot.calendar_for(resource)
        working_days = calendar.working_days_between(start, end)
        available = working_days * resource_cap(resource) / 100
        allocated = person_days(
            resource,
            snapshot.assignments_for(resource.id),
            snapshot.allocations,
            start,
            end,
            calendar=calendar,
        )
        utilization = (allocated / available) * 100 if available > 0 else 0.0
        rows.append(
            ResourceUtilizationRow(
                resource_id=resource.id,
                resource_name=resource.name,
                role=resource.role,
                start_date=start,
                end_date=end,
                working_days=working_days,
                available_days=available,
                allocated_days=allocated,
                utilization=utilization,
                level=classify(utilization),
            )
        )
    return rows


def monthly_average_allocation(snapshot: StaffingSnapshot, year: int, month: int) -> list[ResourceAllocationRow]:
    """Rounded average allocation of each resource employed during the month."""
    first, last = _month_bounds(year, month)
    rows = []
    for resource in _by_name(snapshot.resources):
        window = employment_window(resource, first, last)
        if window is None:
            continue
        value = average_utilization(
            resource,
            snapshot.assignments_for(resource.id),
            snapshot.allocations,
            window[0],
            window[1],
            calendar=snapshot.calendar_for(resource),
        )
        rows.append(
            ResourceAllocationRow(
                resource_id=resource.id,
                resource_name=resource.name,
                role=resource.role,
                cap_percent=resource_cap(resource),
                avg_allocation=round_percent(value),
            )
        )
    return rows


def underutilized_resources(
    snapshot: StaffingSnapshot,
    year: int,
    month: int,
    threshold: int = DEFAULT_CAP_PERCENT,
) -> list[ResourceAllocationRow]:
    """Resources whose monthly average stays below ``threshold``, least allocated first."""
    rows = [r for r in monthly_average_allocation(snapshot, year, month) if r.avg_allocation < threshold]
    rows.sort(key=lambda r: (r.avg_allocation, r.resource_name.lower()))
    return rows


def project_fte(
    snapshot: StaffingSnapshot,
    start: date,
    end: date,
    project_ids: Optional[Iterable[str]] = None,
) -> list[ProjectFteRow]:
    """
    Full-time equivalents per project over ``[start, end]``.

    FTE is the person-days booked on the project divided by the company
    working days of the range. Person-days follow each resource's own
    calendar and employment window.
    """
    start, end = as_day(start), as_day(end)
    wanted = set(project_ids) if project_ids is not None else None
    working_days = snapshot.company_calendar().working_days_between(start, end)

    by_project: dict[str, list[tuple[Resource, Assignment]]] = {}
    for resource in snapshot.resources:
        for assignment in snapshot.assignments_for(resource.id):
            if wanted is not None and assignment.project_id not in wanted:
                continue
            by_project.setdefault(assignment.project_id, []).append((resource, assignment))

    rows = []
    for project_id in sorted(by_project):
        allocated = 0.0
        staffed = set()
        for resource, assignment in by_project[project_id]:
            window = employment_window(resource, start, end)
            if window is None:
                continue
            days = person_days(
                resource,
                (assignment,),
                snapshot.allocations,
                window[0],
                window[1],
                calendar=snapshot.calendar_for(resource),
            )
            if days > 0:
                staffed.add(resource.id)
            allocated += days
        rows.append(
            ProjectFteRow(
                project_id=project_id,
                working_days=working_days,
                allocated_days=allocated,
                fte=allocated / working_days if working_days > 0 else 0.0,
                resource_count=len(staffed),
            )
        )
    return rows


__all__ = [
    "employment_window",
    "resource_utilization_report",
    "monthly_average_allocation",
    "underutilized_resources",
    "project_fte",
]

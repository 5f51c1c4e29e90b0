from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import date
from typing import Optional

from core.models import Assignment, Period, Resource, UtilizationLevel, ViewMode
from core.services.staffing.aggregation import average_utilization, daily_total
from core.services.staffing.classification import (
    classify_assignment_row,
    classify_resource_row,
    format_percent,
    resource_cap,
)
from core.services.staffing.config import ASSIGNMENT_CAP_PERCENT
from core.services.staffing.employment import is_employed_on
from core.services.staffing.models import StaffingGrid, StaffingRow, UtilizationCell
from core.services.staffing.periods import PeriodNavigator
from core.services.staffing.snapshot import StaffingSnapshot
from core.services.work_calendar.engine import WorkCalendarEngine


def _blank_cell(period: Period) -> UtilizationCell:
    return UtilizationCell(period=period, value=None, level=UtilizationLevel.EMPTY, display="-")


def _cell(period: Period, value: float, level: UtilizationLevel) -> UtilizationCell:
    return UtilizationCell(period=period, value=value, level=level, display=format_percent(value))


def _is_closed_day(resource: Resource, calendar: WorkCalendarEngine, day: date) -> bool:
    return calendar.is_non_working_day(day) or not is_employed_on(resource, day)


def _resource_cells(
    snapshot: StaffingSnapshot,
    resource: Resource,
    assignments: tuple[Assignment, ...],
    periods: list[Period],
    calendar: WorkCalendarEngine,
) -> list[UtilizationCell]:
    cells = []
    for period in periods:
        if period.granularity == ViewMode.DAY:
            if _is_closed_day(resource, calendar, period.start_date):
                cells.append(_blank_cell(period))
                continue
            total = daily_total(resource, assignments, snapshot.allocations, period.start_date)
            cells.append(_cell(period, float(total), classify_resource_row(total, resource)))
        else:
            value = average_utilization(
                resource,
                assignments,
                snapshot.allocations,
                period.start_date,
                period.end_date,
                calendar=calendar,
            )
            cells.append(_cell(period, value, classify_resource_row(value, resource)))
    return cells


def _assignment_cells(
    snapshot: StaffingSnapshot,
    resource: Resource,
    assignment: Assignment,
    periods: list[Period],
    calendar: WorkCalendarEngine,
) -> list[UtilizationCell]:
    cells = []
    for period in periods:
        if period.granularity == ViewMode.DAY:
            if _is_closed_day(resource, calendar, period.start_date):
                cells.append(_blank_cell(period))
                continue
            pct = snapshot.allocations.percentage(assignment.id, period.start_date)
            cells.append(_cell(period, float(pct), classify_assignment_row(pct)))
        else:
            value = average_utilization(
                resource,
                (assignment,),
                snapshot.allocations,
                period.start_date,
                period.end_date,
                calendar=calendar,
            )
            cells.append(_cell(period, value, classify_assignment_row(value)))
    return cells


def build_staffing_grid(
    snapshot: StaffingSnapshot,
    anchor: date,
    view_mode: ViewMode | str = ViewMode.DAY,
    resource_ids: Optional[Iterable[str]] = None,
    project_labels: Optional[Mapping[str, str]] = None,
) -> StaffingGrid:
    """
    Parent row per resource, child row per assignment, one cell per period.

    Day cells show the raw same-day percentage (parent rows sum across
    assignments). Week and month cells show average utilization over the
    period. Parent rows are classified against the resource cap, child rows
    against a full day.
    """
    navigator = PeriodNavigator(anchor, view_mode)
    periods = navigator.periods
    wanted = set(resource_ids) if resource_ids is not None else None
    labels = project_labels or {}

    rows: list[StaffingRow] = []
    resources = sorted(snapshot.resources, key=lambda r: (r.name.lower(), r.id))
    for resource in resources:
        if wanted is not None and resource.id not in wanted:
            continue
        calendar = snapshot.calendar_for(resource)
        assignments = snapshot.assignments_for(resource.id)
        row = StaffingRow(
            resource_id=resource.id,
            label=resource.name,
            cap_percent=resource_cap(resource),
            cells=_resource_cells(snapshot, resource, assignments, periods, calendar),
        )
        for assignment in assignments:
            row.children.append(
                StaffingRow(
                    resource_id=resource.id,
                    label=labels.get(assignment.project_id, assignment.project_id),
                    cap_percent=ASSIGNMENT_CAP_PERCENT,
                    cells=_assignment_cells(snapshot, resource, assignment, periods, calendar),
                    assignment_id=assignment.id,
                    project_id=assignment.project_id,
                )
            )
        rows.append(row)

    return StaffingGrid(anchor=navigator.anchor, view_mode=navigator.view_mode, periods=periods, rows=rows)


__all__ = ["build_staffing_grid"]

# core/services/staffing/service.py
from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Mapping, Optional

from core.interfaces import (
    AllocationRepository,
    AssignmentRepository,
    CalendarEventRepository,
    ResourceRepository,
)
from core.models import AllocationMap, UtilizationLevel, ViewMode
from core.services.staffing.aggregation import (
    assignment_utilization,
    resource_daily_total,
    resource_utilization,
)
from core.services.staffing.classification import classify_assignment_row, classify_resource_row
from core.services.staffing.config import DEFAULT_CAP_PERCENT
from core.services.staffing.grid import build_staffing_grid
from core.services.staffing.models import (
    Overallocation,
    ProjectFteRow,
    ResourceAllocationRow,
    ResourceUtilizationRow,
    StaffingGrid,
)
from core.services.staffing.overload import find_overallocated_days
from core.services.staffing.reports import project_fte, resource_utilization_report, underutilized_resources
from core.services.staffing.snapshot import StaffingSnapshot

logger = logging.getLogger(__name__)


class StaffingService:
    """
    Read-side entry point: loads a snapshot from the repositories and runs
    the utilization engine over it. Holds no state between calls.
    """

    def __init__(
        self,
        resource_repo: ResourceRepository,
        assignment_repo: AssignmentRepository,
        allocation_repo: AllocationRepository,
        event_repo: CalendarEventRepository,
    ):
        self._resource_repo = resource_repo
        self._assignment_repo = assignment_repo
        self._allocation_repo = allocation_repo
        self._event_repo = event_repo

    def load_snapshot(self) -> StaffingSnapshot:
        resources = self._resource_repo.list_all()
        assignments = self._assignment_repo.list_all()
        allocations = AllocationMap.from_entries(self._allocation_repo.list_all())
        events = self._event_repo.list_all()
        snapshot = StaffingSnapshot.build(resources, assignments, allocations, events)
        logger.info(
            "Loaded staffing snapshot: %d resources, %d assignments, %d allocated assignments, %d events",
            len(snapshot.resources),
            len(snapshot.assignments),
            len(snapshot.allocations),
            len(snapshot.events),
        )
        return snapshot

    def get_grid(
        self,
        anchor: date,
        view_mode: ViewMode | str = ViewMode.DAY,
        resource_ids: Optional[Iterable[str]] = None,
        project_labels: Optional[Mapping[str, str]] = None,
        snapshot: Optional[StaffingSnapshot] = None,
    ) -> StaffingGrid:
        snapshot = snapshot or self.load_snapshot()
        return build_staffing_grid(snapshot, anchor, view_mode, resource_ids, project_labels)

    def get_resource_utilization(
        self, resource_id: str, start: date, end: date
    ) -> tuple[float, UtilizationLevel]:
        snapshot = self.load_snapshot()
        value = resource_utilization(snapshot, resource_id, start, end)
        return value, classify_resource_row(value, snapshot.get_resource(resource_id))

    def get_assignment_utilization(
        self, assignment_id: str, start: date, end: date
    ) -> tuple[float, UtilizationLevel]:
        value = assignment_utilization(self.load_snapshot(), assignment_id, start, end)
        return value, classify_assignment_row(value)

    def get_daily_total(self, resource_id: str, day: date) -> tuple[int, UtilizationLevel]:
        snapshot = self.load_snapshot()
        total = resource_daily_total(snapshot, resource_id, day)
        return total, classify_resource_row(total, snapshot.get_resource(resource_id))

    def list_overallocations(self, start: date, end: date) -> list[Overallocation]:
        return find_overallocated_days(self.load_snapshot(), start, end)

    def get_resource_utilization_report(self, year: int, month: int) -> list[ResourceUtilizationRow]:
        return resource_utilization_report(self.load_snapshot(), year, month)

    def list_underutilized_resources(
        self, year: int, month: int, threshold: int = DEFAULT_CAP_PERCENT
    ) -> list[ResourceAllocationRow]:
        return underutilized_resources(self.load_snapshot(), year, month, threshold)

    def get_project_fte(
        self, start: date, end: date, project_ids: Optional[Iterable[str]] = None
    ) -> list[ProjectFteRow]:
        return project_fte(self.load_snapshot(), start, end, project_ids)


__all__ = ["StaffingService"]

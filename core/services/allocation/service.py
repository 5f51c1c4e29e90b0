# core/services/allocation/service.py
from __future__ import annotations

import logging
from datetime import date
from typing import List

from sqlalchemy.orm import Session

from core.domain.identifiers import as_day
from core.exceptions import NotFoundError, ValidationError
from core.interfaces import (
    AllocationRepository,
    AssignmentRepository,
    CalendarEventRepository,
    ResourceRepository,
)
from core.models import AllocationEntry, Assignment, Resource
from core.services.staffing.validation import validate_percentage
from core.services.work_calendar.engine import WorkCalendarEngine

logger = logging.getLogger(__name__)


class AllocationService:
    """
    Write side of the sparse allocation table.

    Entries are keyed by (assignment, day). Writing 0 removes the entry, so
    a stored row always carries a positive percentage.
    """

    def __init__(
        self,
        session: Session,
        allocation_repo: AllocationRepository,
        assignment_repo: AssignmentRepository,
        resource_repo: ResourceRepository,
        event_repo: CalendarEventRepository,
    ):
        self._session = session
        self._allocation_repo = allocation_repo
        self._assignment_repo = assignment_repo
        self._resource_repo = resource_repo
        self._event_repo = event_repo

    def _get_assignment(self, assignment_id: str) -> Assignment:
        assignment = self._assignment_repo.get(assignment_id)
        if not assignment:
            raise NotFoundError("Assignment not found.", code="ASSIGNMENT_NOT_FOUND")
        return assignment

    def _get_resource(self, resource_id: str) -> Resource:
        resource = self._resource_repo.get(resource_id)
        if not resource:
            raise NotFoundError("Resource not found.", code="RESOURCE_NOT_FOUND")
        return resource

    def _write(self, assignment_id: str, day: date, percentage: int) -> None:
        if percentage == 0:
            self._allocation_repo.delete(assignment_id, day)
        else:
            self._allocation_repo.upsert(AllocationEntry(assignment_id, day, percentage))

    def update_allocation(self, assignment_id: str, day: date, percentage: int) -> None:
        percentage = validate_percentage(percentage)
        day = as_day(day)
        self._get_assignment(assignment_id)
        try:
            self._write(assignment_id, day, percentage)
            self._session.commit()
            logger.info("Set allocation %s on %s to %d%%", assignment_id, day, percentage)
        except Exception as e:
            self._session.rollback()
            logger.error(f"Error updating allocation {assignment_id} on {day}: {e}")
            raise

    def bulk_update_allocations(
        self, assignment_id: str, start: date, end: date, percentage: int
    ) -> List[date]:
        """
        Apply ``percentage`` to every working day in ``[start, end]``.

        Working days follow the assigned resource's location. Returns the
        days that were written.
        """
        percentage = validate_percentage(percentage)
        start, end = as_day(start), as_day(end)
        if end < start:
            raise ValidationError("End date cannot be before start date.", code="ALLOCATION_INVALID_RANGE")

        assignment = self._get_assignment(assignment_id)
        resource = self._get_resource(assignment.resource_id)
        calendar = WorkCalendarEngine(self._event_repo.list_range(start, end), resource.location)
        days = list(calendar.iter_working_days(start, end))

        try:
            for day in days:
                self._write(assignment_id, day, percentage)
            self._session.commit()
            logger.info(
                "Bulk set allocation %s to %d%% on %d working days (%s..%s)",
                assignment_id,
                percentage,
                len(days),
                start,
                end,
            )
        except Exception:
            self._session.rollback()
            raise
        return days

    def get_allocation(self, assignment_id: str, day: date) -> int:
        """Stored percentage for one cell; 0 when there is no entry."""
        self._get_assignment(assignment_id)
        entry = self._allocation_repo.get(assignment_id, as_day(day))
        return entry.percentage if entry else 0

    def list_allocations(self, assignment_id: str) -> List[AllocationEntry]:
        self._get_assignment(assignment_id)
        return self._allocation_repo.list_by_assignment(assignment_id)


__all__ = ["AllocationService"]

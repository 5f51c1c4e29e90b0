# infra/db/repositories.py
from __future__ import annotations

from sqlalchemy.orm import Session

from core.services.staffing.service import StaffingService
from core.services.staffing.snapshot import StaffingSnapshot
from infra.db.calendar import SqlAlchemyCalendarEventRepository
from infra.db.resource import SqlAlchemyResourceRepository
from infra.db.staffing import SqlAlchemyAllocationRepository, SqlAlchemyAssignmentRepository


def load_snapshot(session: Session) -> StaffingSnapshot:
    """Read every staffing table into a validated snapshot."""
    return StaffingService(
        SqlAlchemyResourceRepository(session),
        SqlAlchemyAssignmentRepository(session),
        SqlAlchemyAllocationRepository(session),
        SqlAlchemyCalendarEventRepository(session),
    ).load_snapshot()


__all__ = [
    "SqlAlchemyResourceRepository",
    "SqlAlchemyAssignmentRepository",
    "SqlAlchemyAllocationRepository",
    "SqlAlchemyCalendarEventRepository",
    "load_snapshot",
]

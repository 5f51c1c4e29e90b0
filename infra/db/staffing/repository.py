from __future__ import annotations

from datetime import date
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from core.interfaces import AllocationRepository, AssignmentRepository
from core.models import AllocationEntry, Assignment
from infra.db.models import AllocationORM, AssignmentORM
from infra.db.staffing.mapper import (
    allocation_from_orm,
    assignment_from_orm,
    assignment_to_orm,
)


class SqlAlchemyAssignmentRepository(AssignmentRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, assignment: Assignment) -> None:
        self.session.add(assignment_to_orm(assignment))

    def get(self, assignment_id: str) -> Optional[Assignment]:
        obj = self.session.get(AssignmentORM, assignment_id)
        return assignment_from_orm(obj) if obj else None

    def list_all(self) -> List[Assignment]:
        rows = self.session.execute(select(AssignmentORM)).scalars().all()
        return [assignment_from_orm(row) for row in rows]

    def list_by_resource(self, resource_id: str) -> List[Assignment]:
        stmt = select(AssignmentORM).where(AssignmentORM.resource_id == resource_id)
        rows = self.session.execute(stmt).scalars().all()
        return [assignment_from_orm(row) for row in rows]


class SqlAlchemyAllocationRepository(AllocationRepository):
    def __init__(self, session: Session):
        self.session = session

    def _find(self, assignment_id: str, day: date) -> Optional[AllocationORM]:
        stmt = select(AllocationORM).where(
            AllocationORM.assignment_id == assignment_id,
            AllocationORM.allocation_date == day,
        )
        return self.session.execute(stmt).scalars().first()

    def upsert(self, entry: AllocationEntry) -> None:
        obj = self._find(entry.assignment_id, entry.date)
        if obj is None:
            self.session.add(
                AllocationORM(
                    assignment_id=entry.assignment_id,
                    allocation_date=entry.date,
                    percentage=entry.percentage,
                )
            )
            # later lookups in the same transaction must see this row
            self.session.flush()
        else:
            obj.percentage = entry.percentage

    def delete(self, assignment_id: str, day: date) -> None:
        self.session.query(AllocationORM).filter_by(
            assignment_id=assignment_id, allocation_date=day
        ).delete()

    def get(self, assignment_id: str, day: date) -> Optional[AllocationEntry]:
        obj = self._find(assignment_id, day)
        return allocation_from_orm(obj) if obj else None

    def list_all(self) -> List[AllocationEntry]:
        rows = self.session.execute(select(AllocationORM)).scalars().all()
        return [allocation_from_orm(row) for row in rows]

    def list_by_assignment(self, assignment_id: str) -> List[AllocationEntry]:
        stmt = (
            select(AllocationORM)
            .where(AllocationORM.assignment_id == assignment_id)
            .order_by(AllocationORM.allocation_date)
        )
        rows = self.session.execute(stmt).scalars().all()
        return [allocation_from_orm(row) for row in rows]


__all__ = ["SqlAlchemyAssignmentRepository", "SqlAlchemyAllocationRepository"]

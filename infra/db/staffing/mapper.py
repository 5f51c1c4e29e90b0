from __future__ import annotations

from core.models import AllocationEntry, Assignment
from infra.db.models import AllocationORM, AssignmentORM


def assignment_to_orm(assignment: Assignment) -> AssignmentORM:
    return AssignmentORM(
        id=assignment.id,
        resource_id=assignment.resource_id,
        project_id=assignment.project_id,
    )


def assignment_from_orm(obj: AssignmentORM) -> Assignment:
    return Assignment(id=obj.id, resource_id=obj.resource_id, project_id=obj.project_id)


def allocation_from_orm(obj: AllocationORM) -> AllocationEntry:
    return AllocationEntry(
        assignment_id=obj.assignment_id,
        date=obj.allocation_date,
        percentage=obj.percentage,
    )


__all__ = ["assignment_to_orm", "assignment_from_orm", "allocation_from_orm"]

from infra.db.staffing.mapper import allocation_from_orm, assignment_from_orm, assignment_to_orm
from infra.db.staffing.repository import SqlAlchemyAllocationRepository, SqlAlchemyAssignmentRepository

__all__ = [
    "assignment_to_orm",
    "assignment_from_orm",
    "allocation_from_orm",
    "SqlAlchemyAssignmentRepository",
    "SqlAlchemyAllocationRepository",
]

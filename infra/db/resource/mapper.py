from __future__ import annotations

from core.models import Resource
from infra.db.models import ResourceORM


def resource_to_orm(resource: Resource) -> ResourceORM:
    return ResourceORM(
        id=resource.id,
        name=resource.name,
        role=resource.role,
        location=resource.location,
        hire_date=resource.hire_date,
        last_day_of_work=resource.last_day_of_work,
        max_staffing_percentage=resource.max_staffing_percentage,
    )


def resource_from_orm(obj: ResourceORM) -> Resource:
    return Resource(
        id=obj.id,
        name=obj.name,
        role=obj.role or "",
        location=obj.location,
        hire_date=obj.hire_date,
        last_day_of_work=obj.last_day_of_work,
        max_staffing_percentage=obj.max_staffing_percentage,
    )


__all__ = ["resource_to_orm", "resource_from_orm"]

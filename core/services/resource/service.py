# core/services/resource/service.py
from __future__ import annotations
from dataclasses import replace
from datetime import date
from typing import List, Optional
from sqlalchemy.orm import Session

from core.models import Assignment, Resource, DEFAULT_MAX_STAFFING_PERCENTAGE
from core.interfaces import ResourceRepository, AssignmentRepository
from core.exceptions import NotFoundError, ValidationError
from core.services.staffing.validation import validate_resource
import logging

logger = logging.getLogger(__name__)

class ResourceService:
    def __init__(self, session: Session,
                 resource_repo: ResourceRepository,
                 assignment_repo: AssignmentRepository,
        ):
        self._session = session
        self._resource_repo = resource_repo
        self._assignment_repo = assignment_repo

    def create_resource(
        self,
        name: str,
        location: str,
        hire_date: date,
        last_day_of_work: Optional[date] = None,
        max_staffing_percentage: int = DEFAULT_MAX_STAFFING_PERCENTAGE,
        role: str = "",
    ) -> Resource:
        if not name or not name.strip():
            raise ValidationError("Resource name cannot be empty.", code="RESOURCE_NAME_EMPTY")
        if not location or not location.strip():
            raise ValidationError("Resource location cannot be empty.", code="RESOURCE_LOCATION_EMPTY")
        resource = validate_resource(
            Resource.create(
                name=name.strip(),
                location=location.strip(),
                hire_date=hire_date,
                last_day_of_work=last_day_of_work,
                max_staffing_percentage=max_staffing_percentage,
                role=role.strip(),
            )
        )
        try:
            self._resource_repo.add(resource)
            self._session.commit()
            logger.info(f"Created resource {resource.id} - {resource.name}")
        except Exception as e:
            self._session.rollback()
            logger.error(f"Error creating resource: {e}")
            raise
        return resource

    def set_last_day_of_work(self, resource_id: str, last_day_of_work: Optional[date]) -> Resource:
        """Record a resignation (or clear it with ``None``)."""
        resource = validate_resource(
            replace(self.get_resource(resource_id), last_day_of_work=last_day_of_work)
        )
        try:
            self._resource_repo.update(resource)
            self._session.commit()
            logger.info(f"Resource {resource.id} last day of work set to {last_day_of_work}")
        except Exception as e:
            self._session.rollback()
            raise e
        return resource

    def list_resources(self) -> List[Resource]:
        return self._resource_repo.list_all()

    def get_resource(self, resource_id: str) -> Resource:
        resource = self._resource_repo.get(resource_id)
        if not resource:
            raise NotFoundError("Resource not found.", code="RESOURCE_NOT_FOUND")
        return resource

    def assign_to_project(self, resource_id: str, project_id: str) -> Assignment:
        self.get_resource(resource_id)
        if not project_id or not project_id.strip():
            raise ValidationError("Project id cannot be empty.", code="ASSIGNMENT_PROJECT_EMPTY")
        for existing in self._assignment_repo.list_by_resource(resource_id):
            if existing.project_id == project_id:
                return existing
        assignment = Assignment.create(resource_id=resource_id, project_id=project_id.strip())
        try:
            self._assignment_repo.add(assignment)
            self._session.commit()
        except Exception as e:
            self._session.rollback()
            raise e
        return assignment

    def list_assignments(self, resource_id: str) -> List[Assignment]:
        self.get_resource(resource_id)
        return self._assignment_repo.list_by_resource(resource_id)

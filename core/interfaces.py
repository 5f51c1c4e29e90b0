from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from core.models import AllocationEntry, Assignment, CalendarEvent, Resource


class ResourceRepository(ABC):
    @abstractmethod
    def add(self, resource: Resource) -> None: ...

    @abstractmethod
    def update(self, resource: Resource) -> None: ...

    @abstractmethod
    def get(self, resource_id: str) -> Optional[Resource]: ...

    @abstractmethod
    def list_all(self) -> List[Resource]: ...


class AssignmentRepository(ABC):
    @abstractmethod
    def add(self, assignment: Assignment) -> None: ...

    @abstractmethod
    def get(self, assignment_id: str) -> Optional[Assignment]: ...

    @abstractmethod
    def list_all(self) -> List[Assignment]: ...

    @abstractmethod
    def list_by_resource(self, resource_id: str) -> List[Assignment]: ...


class AllocationRepository(ABC):
    @abstractmethod
    def upsert(self, entry: AllocationEntry) -> None: ...

    @abstractmethod
    def delete(self, assignment_id: str, day: date) -> None: ...

    @abstractmethod
    def get(self, assignment_id: str, day: date) -> Optional[AllocationEntry]: ...

    @abstractmethod
    def list_all(self) -> List[AllocationEntry]: ...

    @abstractmethod
    def list_by_assignment(self, assignment_id: str) -> List[AllocationEntry]: ...


class CalendarEventRepository(ABC):
    @abstractmethod
    def add(self, event: CalendarEvent) -> None: ...

    @abstractmethod
    def update(self, event: CalendarEvent) -> None: ...

    @abstractmethod
    def delete(self, event_id: str) -> None: ...

    @abstractmethod
    def get(self, event_id: str) -> Optional[CalendarEvent]: ...

    @abstractmethod
    def list_all(self) -> List[CalendarEvent]: ...

    @abstractmethod
    def list_range(self, start_date: date, end_date: date) -> List[CalendarEvent]: ...


__all__ = [
    "ResourceRepository",
    "AssignmentRepository",
    "AllocationRepository",
    "CalendarEventRepository",
]

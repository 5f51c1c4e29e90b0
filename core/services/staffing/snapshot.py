from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from core.exceptions import NotFoundError
from core.models import AllocationMap, Assignment, CalendarEvent, Resource
from core.services.staffing.validation import (
    validate_calendar_event,
    validate_percentage,
    validate_resource,
)
from core.services.work_calendar.engine import CalendarIndex, WorkCalendarEngine


@dataclass(frozen=True)
class StaffingSnapshot:
    """
    Read-only bundle of everything one utilization query needs.

    Built once per query from the data layer; the engine only reads it.
    Use ``StaffingSnapshot.build`` at ingestion so invalid records are
    rejected before any aggregation runs.
    """

    resources: tuple[Resource, ...]
    assignments: tuple[Assignment, ...]
    allocations: AllocationMap
    events: tuple[CalendarEvent, ...]
    _resources_by_id: Mapping[str, Resource] = field(init=False, repr=False, compare=False)
    _assignments_by_id: Mapping[str, Assignment] = field(init=False, repr=False, compare=False)
    _assignments_by_resource: Mapping[str, tuple[Assignment, ...]] = field(
        init=False, repr=False, compare=False
    )
    _calendars: CalendarIndex = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        by_resource: dict[str, list[Assignment]] = {}
        for a in self.assignments:
            by_resource.setdefault(a.resource_id, []).append(a)
        object.__setattr__(self, "_resources_by_id", MappingProxyType({r.id: r for r in self.resources}))
        object.__setattr__(self, "_assignments_by_id", MappingProxyType({a.id: a for a in self.assignments}))
        object.__setattr__(
            self,
            "_assignments_by_resource",
            MappingProxyType({k: tuple(v) for k, v in by_resource.items()}),
        )
        object.__setattr__(self, "_calendars", CalendarIndex(self.events))

    @classmethod
    def build(
        cls,
        resources: Iterable[Resource],
        assignments: Iterable[Assignment],
        allocations: Mapping[str, Mapping[str, int]] | AllocationMap,
        events: Iterable[CalendarEvent],
    ) -> "StaffingSnapshot":
        resources = tuple(validate_resource(r) for r in resources)
        events = tuple(validate_calendar_event(e) for e in events)
        if not isinstance(allocations, AllocationMap):
            for days in allocations.values():
                for pct in days.values():
                    validate_percentage(pct)
            allocations = AllocationMap(allocations)
        else:
            for entry in allocations.entries():
                validate_percentage(entry.percentage)
        return cls(
            resources=resources,
            assignments=tuple(assignments),
            allocations=allocations,
            events=events,
        )

    def get_resource(self, resource_id: str) -> Resource:
        resource = self._resources_by_id.get(resource_id)
        if resource is None:
            raise NotFoundError("Resource not found.", code="RESOURCE_NOT_FOUND")
        return resource

    def get_assignment(self, assignment_id: str) -> Assignment:
        assignment = self._assignments_by_id.get(assignment_id)
        if assignment is None:
            raise NotFoundError("Assignment not found.", code="ASSIGNMENT_NOT_FOUND")
        return assignment

    def assignments_for(self, resource_id: str) -> tuple[Assignment, ...]:
        return self._assignments_by_resource.get(resource_id, ())

    def calendar_for(self, resource: Resource) -> WorkCalendarEngine:
        return self._calendars.for_location(resource.location)

    def company_calendar(self) -> WorkCalendarEngine:
        """Calendar without any local holiday: weekends, national holidays and closures."""
        return self._calendars.for_location(None)


__all__ = ["StaffingSnapshot"]

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from datetime import date
from types import MappingProxyType

from core.domain.identifiers import generate_id, iso_day
from core.exceptions import ValidationError


@dataclass(frozen=True)
class Assignment:
    """Links a resource to a project. Its time extent lives in the allocations."""

    id: str
    resource_id: str
    project_id: str

    @staticmethod
    def create(resource_id: str, project_id: str) -> "Assignment":
        return Assignment(id=generate_id(), resource_id=resource_id, project_id=project_id)


@dataclass(frozen=True)
class AllocationEntry:
    assignment_id: str
    date: date
    percentage: int


_EMPTY_DAYS: Mapping[str, int] = MappingProxyType({})


def _whole_percent(assignment_id: str, day, pct) -> int:
    if isinstance(pct, float) and pct.is_integer():
        pct = int(pct)
    if isinstance(pct, bool) or not isinstance(pct, int):
        raise ValidationError(
            f"Allocation {assignment_id} on {day}: percentage must be a whole number, got {pct!r}.",
            code="ALLOCATION_PERCENT_NOT_INTEGER",
        )
    return pct


class AllocationMap(Mapping[str, Mapping[str, int]]):
    """
    Read-only sparse map ``assignment_id -> {iso day -> percentage}``.

    A missing assignment or day means 0%. Zero values are dropped on
    construction so that "no allocation" has a single representation.
    Fractional percentages are rejected rather than truncated; range and
    step checks happen in ``StaffingSnapshot.build``.
    """

    def __init__(self, data: Mapping[str, Mapping[str, int]] | None = None):
        frozen: dict[str, Mapping[str, int]] = {}
        for assignment_id, days in (data or {}).items():
            cleaned = {}
            for day, pct in days.items():
                pct = _whole_percent(assignment_id, day, pct)
                if pct != 0:
                    cleaned[iso_day(day)] = pct
            if cleaned:
                frozen[assignment_id] = MappingProxyType(cleaned)
        self._data = MappingProxyType(frozen)

    @classmethod
    def from_entries(cls, entries: Iterable[AllocationEntry]) -> "AllocationMap":
        data: dict[str, dict[str, int]] = {}
        for entry in entries:
            data.setdefault(entry.assignment_id, {})[entry.date.isoformat()] = entry.percentage
        return cls(data)

    def __getitem__(self, assignment_id: str) -> Mapping[str, int]:
        return self._data[assignment_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def days_for(self, assignment_id: str) -> Mapping[str, int]:
        return self._data.get(assignment_id, _EMPTY_DAYS)

    def percentage(self, assignment_id: str, day: date) -> int:
        return self.days_for(assignment_id).get(day.isoformat(), 0)

    def entries(self) -> Iterator[AllocationEntry]:
        for assignment_id, days in self._data.items():
            for day, pct in sorted(days.items()):
                yield AllocationEntry(assignment_id, date.fromisoformat(day), pct)


__all__ = ["Assignment", "AllocationEntry", "AllocationMap"]

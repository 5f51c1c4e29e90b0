from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from core.models import Period, UtilizationLevel, ViewMode


@dataclass
class UtilizationCell:
    period: Period
    # None marks a cell with no capacity at all (weekend, holiday, after resignation)
    value: Optional[float]
    level: UtilizationLevel
    display: str


@dataclass
class StaffingRow:
    resource_id: str
    label: str
    cap_percent: int
    cells: list[UtilizationCell]
    assignment_id: Optional[str] = None
    project_id: Optional[str] = None
    children: list["StaffingRow"] = field(default_factory=list)

    @property
    def is_assignment_row(self) -> bool:
        return self.assignment_id is not None


@dataclass
class StaffingGrid:
    anchor: date
    view_mode: ViewMode
    periods: list[Period]
    rows: list[StaffingRow]


@dataclass
class OverallocationEntry:
    assignment_id: str
    project_id: str
    percentage: int


@dataclass
class Overallocation:
    resource_id: str
    resource_name: str
    day: date
    total_percent: int
    cap_percent: int
    entries: list[OverallocationEntry]


@dataclass
class ResourceUtilizationRow:
    resource_id: str
    resource_name: str
    role: str
    start_date: date
    end_date: date
    working_days: int
    # working days scaled by the staffing cap
    available_days: float
    allocated_days: float
    utilization: float
    level: UtilizationLevel


@dataclass
class ResourceAllocationRow:
    resource_id: str
    resource_name: str
    role: str
    cap_percent: int
    avg_allocation: int


@dataclass
class ProjectFteRow:
    project_id: str
    working_days: int
    allocated_days: float
    fte: float
    resource_count: int

__all__ = [
    "UtilizationCell",
    "StaffingRow",
    "StaffingGrid",
    "OverallocationEntry",
    "Overallocation",
    "ResourceUtilizationRow",
    "ResourceAllocationRow",
    "ProjectFteRow",
]

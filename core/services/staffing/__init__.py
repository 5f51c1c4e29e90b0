from core.services.staffing.aggregation import (
    assignment_utilization,
    average_utilization,
    daily_total,
    person_days,
    resource_daily_total,
    resource_utilization,
)
from core.services.staffing.classification import (
    classify,
    classify_assignment_row,
    classify_resource_row,
    format_percent,
    resource_cap,
    round_percent,
)
from core.services.staffing.employment import clamp_interval, effective_end, is_employed_on
from core.services.staffing.grid import build_staffing_grid
from core.services.staffing.models import (
    Overallocation,
    OverallocationEntry,
    ProjectFteRow,
    ResourceAllocationRow,
    ResourceUtilizationRow,
    StaffingGrid,
    StaffingRow,
    UtilizationCell,
)
from core.services.staffing.overload import find_overallocated_days
from core.services.staffing.periods import PeriodNavigator, build_periods, shift_anchor
from core.services.staffing.reports import (
    employment_window,
    monthly_average_allocation,
    project_fte,
    resource_utilization_report,
    underutilized_resources,
)
from core.services.staffing.service import StaffingService
from core.services.staffing.snapshot import StaffingSnapshot

__all__ = [
    "StaffingSnapshot",
    "StaffingService",
    "effective_end",
    "clamp_interval",
    "is_employed_on",
    "person_days",
    "average_utilization",
    "daily_total",
    "resource_utilization",
    "assignment_utilization",
    "resource_daily_total",
    "round_percent",
    "classify",
    "resource_cap",
    "classify_resource_row",
    "classify_assignment_row",
    "format_percent",
    "build_periods",
    "shift_anchor",
    "PeriodNavigator",
    "build_staffing_grid",
    "find_overallocated_days",
    "UtilizationCell",
    "StaffingRow",
    "StaffingGrid",
    "Overallocation",
    "OverallocationEntry",
    "employment_window",
    "resource_utilization_report",
    "monthly_average_allocation",
    "underutilized_resources",
    "project_fte",
    "ResourceUtilizationRow",
    "ResourceAllocationRow",
    "ProjectFteRow",
]

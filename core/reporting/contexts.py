from dataclasses import dataclass

from core.services.staffing.models import StaffingGrid


@dataclass
class StaffingExportContext:
    grid: StaffingGrid
    title: str = "Staffing"

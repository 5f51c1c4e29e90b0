"""Reporting API wrappers around renderer classes."""

from pathlib import Path

from core.exceptions import BusinessRuleError
from core.reporting.contexts import StaffingExportContext
from core.reporting.renderers.excel import ExcelStaffingRenderer
from core.services.staffing.models import StaffingGrid


def _ensure_parent(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def export_staffing_grid_excel(grid: StaffingGrid, output_path: str | Path, title: str = "Staffing") -> Path:
    if not grid.periods:
        raise BusinessRuleError("Staffing grid has no periods to export.", code="EMPTY_GRID")
    renderer = ExcelStaffingRenderer()
    return renderer.render(StaffingExportContext(grid=grid, title=title), _ensure_parent(Path(output_path)))

from pathlib import Path
from openpyxl import Workbook
from openpyxl.styles import Font, Alignment, PatternFill, Border, Side
from openpyxl.utils import get_column_letter

from core.models import UtilizationLevel
from core.reporting.contexts import StaffingExportContext

LEVEL_FILLS = {
    UtilizationLevel.OVER: "FECACA",
    UtilizationLevel.AT_CAP: "BBF7D0",
    UtilizationLevel.PARTIAL: "FEF08A",
}
CLOSED_FILL = "F3F4F6"


class ExcelStaffingRenderer:
    def render(self, ctx: StaffingExportContext, output_path: Path) -> Path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        wb = Workbook()
        grid = ctx.grid

        header_font = Font(bold=True)
        title_font = Font(bold=True, size=14)
        center = Alignment(horizontal="center")
        thin_border = Border(
            left=Side(style="thin"),
            right=Side(style="thin"),
            top=Side(style="thin"),
            bottom=Side(style="thin"),
        )
        header_fill = PatternFill("solid", fgColor="DDDDDD")

        ws = wb.active
        ws.title = "Staffing"

        ws["A1"] = f"{ctx.title} - {grid.view_mode.value} view from {grid.periods[0].start_date.isoformat()}"
        ws["A1"].font = title_font

        headers = ["Resource / Project", "Cap %"] + [p.label or p.start_date.isoformat() for p in grid.periods]
        header_row = 3
        for i, h in enumerate(headers, start=1):
            cell = ws.cell(row=header_row, column=i, value=h)
            cell.font = header_font
            cell.fill = header_fill
            cell.alignment = center
            cell.border = thin_border

        r_i = header_row + 1
        for row in grid.rows:
            for line, indent in [(row, 0)] + [(child, 1) for child in row.children]:
                label_cell = ws.cell(r_i, 1, ("    " * indent) + line.label)
                label_cell.border = thin_border
                if indent == 0:
                    label_cell.font = header_font
                ws.cell(r_i, 2, line.cap_percent).border = thin_border
                for c_i, cell_data in enumerate(line.cells, start=3):
                    cell = ws.cell(r_i, c_i, cell_data.display)
                    cell.alignment = center
                    cell.border = thin_border
                    if cell_data.value is None:
                        cell.fill = PatternFill("solid", fgColor=CLOSED_FILL)
                    elif cell_data.level in LEVEL_FILLS:
                        cell.fill = PatternFill("solid", fgColor=LEVEL_FILLS[cell_data.level])
                r_i += 1

        ws.column_dimensions["A"].width = 34
        ws.column_dimensions["B"].width = 8
        for c_i in range(3, len(headers) + 1):
            ws.column_dimensions[get_column_letter(c_i)].width = 16
        ws.freeze_panes = ws.cell(header_row + 1, 3)

        wb.save(output_path)
        return output_path

# main.py
"""Command-line entry point: export the staffing grid to Excel."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

from core.exceptions import DomainError
from core.models import ViewMode
from core.reporting.api import export_staffing_grid_excel
from infra.logging_config import setup_logging
from infra.services import build_service_graph, open_session

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Export resource utilization to an Excel workbook.")
    parser.add_argument(
        "--anchor",
        type=date.fromisoformat,
        default=date.today(),
        help="Anchor date (YYYY-MM-DD) of the first period (default: today).",
    )
    parser.add_argument(
        "--view",
        choices=[m.value for m in ViewMode],
        default=ViewMode.WEEK.value,
        help="Period granularity (default: week).",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("staffing.xlsx"),
        help="Destination path for the workbook (default: staffing.xlsx).",
    )
    parser.add_argument("--db", type=Path, default=None, help="SQLite database path.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()

    session = open_session(args.db)
    try:
        services = build_service_graph(session)
        grid = services.staffing_service.get_grid(args.anchor, args.view)
        path = export_staffing_grid_excel(grid, args.output)
        logger.info("Staffing grid exported to %s", path)
    except DomainError as exc:
        logger.error("Export failed: %s", exc)
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    finally:
        session.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())

from datetime import date

from openpyxl import load_workbook
from sqlalchemy import create_engine, inspect

import main
from infra.migrate import run_migrations
from infra.path import DB_PATH_ENV, default_db_path
from infra.services import build_service_graph, open_session


def test_migrations_create_staffing_tables(tmp_path):
    db_path = tmp_path / "staffing.db"
    run_migrations(f"sqlite:///{db_path.as_posix()}")

    inspector = inspect(create_engine(f"sqlite:///{db_path.as_posix()}"))
    tables = set(inspector.get_table_names())
    assert {"resources", "assignments", "allocations", "calendar_events"} <= tables

    columns = {c["name"] for c in inspector.get_columns("allocations")}
    assert {"assignment_id", "allocation_date", "percentage"} <= columns


def test_db_path_env_override(tmp_path, monkeypatch):
    monkeypatch.setenv(DB_PATH_ENV, str(tmp_path / "custom.db"))
    assert default_db_path() == tmp_path / "custom.db"


def test_cli_exports_workbook(tmp_path, monkeypatch):
    db_path = tmp_path / "staffing.db"
    session = open_session(db_path)
    try:
        graph = build_service_graph(session)
        resource = graph.resource_service.create_resource("Dev 1", "Rome", hire_date=date(2023, 1, 1))
        assignment = graph.resource_service.assign_to_project(resource.id, "proj-1")
        graph.allocation_service.bulk_update_allocations(
            assignment.id, date(2024, 3, 4), date(2024, 3, 8), 50
        )
    finally:
        session.close()

    monkeypatch.setattr(main, "setup_logging", lambda: tmp_path / "staffing.log")
    output = tmp_path / "export.xlsx"
    code = main.main(
        ["--anchor", "2024-03-04", "--view", "week", "--db", str(db_path), "--output", str(output)]
    )

    assert code == 0
    ws = load_workbook(output)["Staffing"]
    assert ws["A4"].value == "Dev 1"
    assert ws["C4"].value == "50%"

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from sqlalchemy.orm import Session, sessionmaker

from core.services.allocation import AllocationService
from core.services.resource import ResourceService
from core.services.staffing import StaffingService
from core.services.work_calendar import WorkCalendarService
from infra.db.base import build_engine
from infra.db.repositories import (
    SqlAlchemyAllocationRepository,
    SqlAlchemyAssignmentRepository,
    SqlAlchemyCalendarEventRepository,
    SqlAlchemyResourceRepository,
)
from infra.migrate import run_migrations
from infra.path import default_db_path


@dataclass(frozen=True)
class ServiceGraph:
    session: Session
    resource_service: ResourceService
    allocation_service: AllocationService
    work_calendar_service: WorkCalendarService
    staffing_service: StaffingService

    def as_dict(self) -> dict[str, Any]:
        return {
            "session": self.session,
            "resource_service": self.resource_service,
            "allocation_service": self.allocation_service,
            "work_calendar_service": self.work_calendar_service,
            "staffing_service": self.staffing_service,
        }


def build_service_graph(session: Session) -> ServiceGraph:
    resource_repo = SqlAlchemyResourceRepository(session)
    assignment_repo = SqlAlchemyAssignmentRepository(session)
    allocation_repo = SqlAlchemyAllocationRepository(session)
    event_repo = SqlAlchemyCalendarEventRepository(session)

    return ServiceGraph(
        session=session,
        resource_service=ResourceService(session, resource_repo, assignment_repo),
        allocation_service=AllocationService(
            session, allocation_repo, assignment_repo, resource_repo, event_repo
        ),
        work_calendar_service=WorkCalendarService(session, event_repo),
        staffing_service=StaffingService(resource_repo, assignment_repo, allocation_repo, event_repo),
    )


def build_service_dict(session: Session) -> dict[str, Any]:
    return build_service_graph(session).as_dict()


def open_session(db_path: Path | None = None) -> Session:
    """Migrate the database to head and open a session on it."""
    db_path = db_path or default_db_path()
    engine = build_engine(db_path)
    run_migrations(db_url=f"sqlite:///{db_path.as_posix()}")
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)()

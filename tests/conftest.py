# tests/conftest.py
from datetime import date

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from core.models import Assignment, CalendarEvent, CalendarEventType, Resource
from infra.db.base import Base
import infra.db.models  # noqa: F401
from infra.services import build_service_dict


@pytest.fixture
def session():
    # separate in-memory DB for tests
    engine = create_engine("sqlite:///:memory:", future=True)
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def services(session):
    return build_service_dict(session)


@pytest.fixture
def rome_resource():
    return Resource(
        id="res-rome",
        name="Giulia Rossi",
        location="Rome",
        hire_date=date(2023, 1, 1),
    )


@pytest.fixture
def milan_resource():
    return Resource(
        id="res-milan",
        name="Marco Bianchi",
        location="Milan",
        hire_date=date(2023, 1, 1),
        max_staffing_percentage=80,
    )


def weekday_allocations(start: date, end: date, percentage: int) -> dict[str, int]:
    """ISO day -> percentage for every Monday-Friday in [start, end]."""
    days = {}
    current = start
    while current <= end:
        if current.weekday() < 5:
            days[current.isoformat()] = percentage
        current = date.fromordinal(current.toordinal() + 1)
    return days


@pytest.fixture
def make_allocations():
    return weekday_allocations


@pytest.fixture
def italian_calendar():
    return [
        CalendarEvent("ev-1", "Festa della Liberazione", date(2024, 4, 25), CalendarEventType.NATIONAL_HOLIDAY),
        CalendarEvent("ev-2", "Sant'Ambrogio", date(2024, 12, 7), CalendarEventType.LOCAL_HOLIDAY, "Milan"),
        CalendarEvent("ev-3", "Santi Pietro e Paolo", date(2024, 6, 28), CalendarEventType.LOCAL_HOLIDAY, "Rome"),
        CalendarEvent("ev-4", "Summer closure", date(2024, 8, 14), CalendarEventType.COMPANY_CLOSURE),
    ]


@pytest.fixture
def two_project_assignments(rome_resource):
    return [
        Assignment("asg-alpha", rome_resource.id, "proj-alpha"),
        Assignment("asg-beta", rome_resource.id, "proj-beta"),
    ]

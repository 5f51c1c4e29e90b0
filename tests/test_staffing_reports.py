from dataclasses import replace
from datetime import date

import pytest

from core.models import Assignment, Resource, UtilizationLevel
from core.services.staffing import (
    StaffingSnapshot,
    employment_window,
    monthly_average_allocation,
    project_fte,
    resource_utilization_report,
    underutilized_resources,
)


def test_available_days_are_scaled_by_cap(milan_resource, make_allocations):
    assignment = Assignment("asg-m", milan_resource.id, "proj-alpha")
    allocations = {"asg-m": make_allocations(date(2024, 3, 1), date(2024, 3, 31), 80)}
    snapshot = StaffingSnapshot.build([milan_resource], [assignment], allocations, [])

    [row] = resource_utilization_report(snapshot, 2024, 3)
    assert row.working_days == 21
    assert row.available_days == pytest.approx(16.8)
    assert row.allocated_days == pytest.approx(16.8)
    # fully booked at the cap reads 100%, not 80%
    assert row.utilization == pytest.approx(100.0)
    assert row.level == UtilizationLevel.AT_CAP


def test_month_starts_at_hire_date(rome_resource, make_allocations):
    new_hire = replace(rome_resource, hire_date=date(2024, 3, 18))
    assignment = Assignment("asg-1", new_hire.id, "proj-alpha")
    days = make_allocations(date(2024, 3, 18), date(2024, 3, 31), 100)
    # entry before the hire date is ignored
    days["2024-03-15"] = 100
    snapshot = StaffingSnapshot.build([new_hire], [assignment], {"asg-1": days}, [])

    [row] = resource_utilization_report(snapshot, 2024, 3)
    assert (row.start_date, row.end_date) == (date(2024, 3, 18), date(2024, 3, 31))
    assert row.working_days == 10
    assert row.allocated_days == 10.0
    assert row.utilization == 100.0

    [avg] = monthly_average_allocation(snapshot, 2024, 3)
    assert avg.avg_allocation == 100


def test_report_skips_resources_outside_the_month(rome_resource, make_allocations):
    gone = replace(rome_resource, id="res-gone", name="Zeno Galli", last_day_of_work=date(2024, 2, 29))
    leaving = replace(rome_resource, id="res-leaving", name="Anna Verdi", last_day_of_work=date(2024, 3, 10))
    joining = replace(rome_resource, id="res-joining", name="Bruno Neri", hire_date=date(2024, 4, 2))
    snapshot = StaffingSnapshot.build([gone, leaving, joining], [], {}, [])

    rows = resource_utilization_report(snapshot, 2024, 3)
    assert [r.resource_id for r in rows] == ["res-leaving"]
    assert rows[0].end_date == date(2024, 3, 10)
    assert rows[0].working_days == 6
    assert rows[0].utilization == 0.0
    assert rows[0].level == UtilizationLevel.EMPTY


def test_report_uses_location_calendar(rome_resource, milan_resource, italian_calendar):
    snapshot = StaffingSnapshot.build([rome_resource, milan_resource], [], {}, italian_calendar)

    rows = {r.resource_id: r for r in resource_utilization_report(snapshot, 2024, 6)}
    # Santi Pietro e Paolo is a Rome holiday only
    assert rows["res-rome"].working_days == 19
    assert rows["res-milan"].working_days == 20


def test_zero_cap_has_no_available_days(rome_resource, make_allocations):
    benched = replace(rome_resource, max_staffing_percentage=0)
    assignment = Assignment("asg-1", benched.id, "proj-alpha")
    allocations = {"asg-1": make_allocations(date(2024, 3, 4), date(2024, 3, 8), 20)}
    snapshot = StaffingSnapshot.build([benched], [assignment], allocations, [])

    [row] = resource_utilization_report(snapshot, 2024, 3)
    assert row.available_days == 0
    assert row.allocated_days == pytest.approx(1.0)
    assert row.utilization == 0.0


def test_underutilized_resources_sorted_by_allocation(rome_resource, milan_resource, make_allocations):
    busy = Resource("res-busy", "Luca Neri", "Rome", date(2023, 1, 1))
    assignments = [
        Assignment("asg-rome", rome_resource.id, "proj-alpha"),
        Assignment("asg-milan", milan_resource.id, "proj-alpha"),
        Assignment("asg-busy", busy.id, "proj-beta"),
    ]
    march = date(2024, 3, 1), date(2024, 3, 31)
    allocations = {
        "asg-rome": make_allocations(*march, 50),
        "asg-milan": make_allocations(*march, 80),
        "asg-busy": make_allocations(*march, 100),
    }
    snapshot = StaffingSnapshot.build([busy, milan_resource, rome_resource], assignments, allocations, [])

    averages = monthly_average_allocation(snapshot, 2024, 3)
    assert [(r.resource_name, r.avg_allocation) for r in averages] == [
        ("Giulia Rossi", 50),
        ("Luca Neri", 100),
        ("Marco Bianchi", 80),
    ]

    rows = underutilized_resources(snapshot, 2024, 3)
    assert [(r.resource_id, r.avg_allocation, r.cap_percent) for r in rows] == [
        ("res-rome", 50, 100),
        ("res-milan", 80, 80),
    ]
    assert [r.resource_id for r in underutilized_resources(snapshot, 2024, 3, threshold=60)] == ["res-rome"]


def test_project_fte(rome_resource, milan_resource, two_project_assignments, make_allocations):
    assignments = two_project_assignments + [Assignment("asg-milan", milan_resource.id, "proj-alpha")]
    week = date(2024, 3, 4), date(2024, 3, 8)
    allocations = {
        "asg-alpha": make_allocations(*week, 50),
        "asg-milan": make_allocations(*week, 100),
    }
    snapshot = StaffingSnapshot.build([rome_resource, milan_resource], assignments, allocations, [])

    rows = project_fte(snapshot, date(2024, 3, 4), date(2024, 3, 10))
    assert [r.project_id for r in rows] == ["proj-alpha", "proj-beta"]

    alpha, beta = rows
    assert alpha.working_days == 5
    assert alpha.allocated_days == pytest.approx(7.5)
    assert alpha.fte == pytest.approx(1.5)
    assert alpha.resource_count == 2

    assert beta.allocated_days == 0.0
    assert beta.fte == 0.0
    assert beta.resource_count == 0

    [only_beta] = project_fte(snapshot, date(2024, 3, 4), date(2024, 3, 10), project_ids=["proj-beta"])
    assert only_beta.project_id == "proj-beta"


def test_project_fte_counts_only_employed_days(rome_resource, make_allocations):
    leaving = replace(rome_resource, last_day_of_work=date(2024, 3, 6))
    assignment = Assignment("asg-1", leaving.id, "proj-alpha")
    allocations = {"asg-1": make_allocations(date(2024, 3, 4), date(2024, 3, 8), 100)}
    snapshot = StaffingSnapshot.build([leaving], [assignment], allocations, [])

    [row] = project_fte(snapshot, date(2024, 3, 4), date(2024, 3, 8))
    assert row.working_days == 5
    assert row.allocated_days == 3.0
    assert row.fte == pytest.approx(0.6)


def test_employment_window(rome_resource):
    new_hire = replace(rome_resource, hire_date=date(2024, 3, 18), last_day_of_work=date(2024, 3, 25))
    assert employment_window(new_hire, date(2024, 3, 1), date(2024, 3, 31)) == (date(2024, 3, 18), date(2024, 3, 25))
    assert employment_window(new_hire, date(2024, 4, 1), date(2024, 4, 30)) is None
    assert employment_window(new_hire, date(2024, 2, 1), date(2024, 2, 29)) is None

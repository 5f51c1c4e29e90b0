from dataclasses import replace
from datetime import date

import pytest

from core.models import Assignment, UtilizationLevel, ViewMode
from core.services.staffing import StaffingSnapshot, build_staffing_grid, find_overallocated_days


def _snapshot(resources, assignments, allocations, events=()):
    return StaffingSnapshot.build(resources, assignments, allocations, events)


def test_day_grid_parent_and_child_cells(rome_resource, two_project_assignments):
    snapshot = _snapshot(
        [rome_resource],
        two_project_assignments,
        {"asg-alpha": {"2024-03-05": 60}, "asg-beta": {"2024-03-05": 60, "2024-03-06": 20}},
    )
    grid = build_staffing_grid(snapshot, date(2024, 3, 4), ViewMode.DAY)

    assert grid.view_mode == ViewMode.DAY
    assert len(grid.periods) == 14
    assert len(grid.rows) == 1

    parent = grid.rows[0]
    assert parent.label == "Giulia Rossi"
    assert parent.cap_percent == 100
    assert not parent.is_assignment_row

    tuesday = parent.cells[1]
    assert tuesday.value == 120
    assert tuesday.level == UtilizationLevel.OVER
    assert tuesday.display == "120%"

    wednesday = parent.cells[2]
    assert wednesday.value == 20
    assert wednesday.level == UtilizationLevel.PARTIAL

    monday = parent.cells[0]
    assert monday.value == 0
    assert monday.level == UtilizationLevel.EMPTY
    assert monday.display == "-"

    alpha, beta = parent.children
    assert alpha.is_assignment_row
    assert alpha.project_id == "proj-alpha"
    assert alpha.cells[1].value == 60
    assert alpha.cells[1].level == UtilizationLevel.PARTIAL
    assert beta.cells[1].level == UtilizationLevel.PARTIAL


def test_day_grid_blanks_closed_days(rome_resource, italian_calendar):
    assignment = Assignment("asg-1", rome_resource.id, "proj-1")
    # stale weekend entry
    snapshot = _snapshot([rome_resource], [assignment], {"asg-1": {"2024-04-27": 100}}, italian_calendar)
    grid = build_staffing_grid(snapshot, date(2024, 4, 22), ViewMode.DAY)

    parent = grid.rows[0]
    holiday = parent.cells[3]  # 2024-04-25
    saturday = parent.cells[5]
    assert holiday.period.start_date == date(2024, 4, 25)
    assert holiday.value is None
    assert saturday.value is None
    assert saturday.display == "-"
    assert parent.children[0].cells[5].value is None


def test_day_grid_blanks_days_after_resignation(rome_resource, make_allocations):
    resigned = replace(rome_resource, last_day_of_work=date(2024, 3, 6))
    assignment = Assignment("asg-1", resigned.id, "proj-1")
    snapshot = _snapshot(
        [resigned], [assignment], {"asg-1": make_allocations(date(2024, 3, 4), date(2024, 3, 8), 100)}
    )
    grid = build_staffing_grid(snapshot, date(2024, 3, 4), ViewMode.DAY)

    parent = grid.rows[0]
    assert parent.cells[2].value == 100
    assert parent.cells[3].value is None
    assert parent.children[0].cells[3].value is None


def test_week_grid_uses_average_utilization(rome_resource, two_project_assignments, make_allocations):
    snapshot = _snapshot(
        [rome_resource],
        two_project_assignments,
        {"asg-alpha": make_allocations(date(2024, 3, 4), date(2024, 3, 8), 50)},
    )
    grid = build_staffing_grid(snapshot, date(2024, 3, 6), ViewMode.WEEK)

    parent = grid.rows[0]
    assert parent.cells[0].value == 50.0
    assert parent.cells[0].display == "50%"
    assert parent.cells[1].value == 0.0
    assert parent.children[0].cells[0].value == 50.0
    assert parent.children[1].cells[0].level == UtilizationLevel.EMPTY


def test_month_grid_respects_resource_cap(milan_resource, make_allocations):
    assignment = Assignment("asg-1", milan_resource.id, "proj-1")
    snapshot = _snapshot(
        [milan_resource], [assignment], {"asg-1": make_allocations(date(2024, 3, 1), date(2024, 3, 31), 80)}
    )
    grid = build_staffing_grid(snapshot, date(2024, 3, 15), ViewMode.MONTH)

    parent = grid.rows[0]
    assert parent.cap_percent == 80
    assert parent.cells[0].value == pytest.approx(80.0)
    assert parent.cells[0].level == UtilizationLevel.AT_CAP
    # the assignment row is measured against a full day
    assert parent.children[0].cells[0].level == UtilizationLevel.PARTIAL
    assert parent.children[0].cap_percent == 100


def test_rows_are_sorted_and_filtered(rome_resource, milan_resource):
    snapshot = _snapshot([milan_resource, rome_resource], [], {})

    grid = build_staffing_grid(snapshot, date(2024, 3, 4), "week")
    assert [r.label for r in grid.rows] == ["Giulia Rossi", "Marco Bianchi"]
    assert all(r.children == [] for r in grid.rows)

    filtered = build_staffing_grid(snapshot, date(2024, 3, 4), "week", resource_ids=[milan_resource.id])
    assert [r.resource_id for r in filtered.rows] == [milan_resource.id]


def test_project_labels_replace_project_ids(rome_resource, two_project_assignments):
    snapshot = _snapshot([rome_resource], two_project_assignments, {})
    grid = build_staffing_grid(
        snapshot, date(2024, 3, 4), ViewMode.DAY, project_labels={"proj-alpha": "Alpha rollout"}
    )
    assert [c.label for c in grid.rows[0].children] == ["Alpha rollout", "proj-beta"]


def test_overallocated_days(rome_resource, milan_resource, two_project_assignments):
    milan_assignment = Assignment("asg-milan", milan_resource.id, "proj-gamma")
    snapshot = _snapshot(
        [rome_resource, milan_resource],
        [*two_project_assignments, milan_assignment],
        {
            "asg-alpha": {"2024-03-05": 40, "2024-03-06": 60, "2024-03-09": 100},
            "asg-beta": {"2024-03-05": 80, "2024-03-06": 40, "2024-03-09": 100},
            "asg-milan": {"2024-03-05": 85, "2024-03-07": 80},
        },
    )
    found = find_overallocated_days(snapshot, date(2024, 3, 4), date(2024, 3, 10))

    assert [(o.day, o.resource_id, o.total_percent) for o in found] == [
        (date(2024, 3, 5), "res-rome", 120),
        (date(2024, 3, 5), "res-milan", 85),
    ]
    rome = found[0]
    assert rome.cap_percent == 100
    assert [e.project_id for e in rome.entries] == ["proj-beta", "proj-alpha"]
    assert found[1].cap_percent == 80


def test_overallocation_ignores_days_after_resignation(rome_resource, two_project_assignments):
    resigned = replace(rome_resource, last_day_of_work=date(2024, 3, 5))
    snapshot = _snapshot(
        [resigned],
        two_project_assignments,
        {"asg-alpha": {"2024-03-06": 100}, "asg-beta": {"2024-03-06": 100}},
    )
    assert find_overallocated_days(snapshot, date(2024, 3, 4), date(2024, 3, 8)) == []

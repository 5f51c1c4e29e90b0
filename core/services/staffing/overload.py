from __future__ import annotations

from datetime import date

from core.services.staffing.classification import resource_cap
from core.services.staffing.employment import effective_end
from core.services.staffing.models import Overallocation, OverallocationEntry
from core.services.staffing.snapshot import StaffingSnapshot


def find_overallocated_days(
    snapshot: StaffingSnapshot,
    start: date,
    end: date,
) -> list[Overallocation]:
    """Working days where a resource's same-day total exceeds its cap."""
    found: list[Overallocation] = []
    for resource in snapshot.resources:
        calendar = snapshot.calendar_for(resource)
        cap = resource_cap(resource)
        last_day = effective_end(resource, end)
        assignments = snapshot.assignments_for(resource.id)
        if not assignments:
            continue
        for day in calendar.iter_working_days(start, last_day):
            entries = [
                OverallocationEntry(
                    assignment_id=a.id,
                    project_id=a.project_id,
                    percentage=snapshot.allocations.percentage(a.id, day),
                )
                for a in assignments
                if snapshot.allocations.percentage(a.id, day) > 0
            ]
            total = sum(e.percentage for e in entries)
            if total <= cap:
                continue
            entries.sort(key=lambda e: (-e.percentage, e.project_id))
            found.append(
                Overallocation(
                    resource_id=resource.id,
                    resource_name=resource.name,
                    day=day,
                    total_percent=total,
                    cap_percent=cap,
                    entries=entries,
                )
            )

    found.sort(key=lambda o: (o.day, o.resource_name.lower(), -o.total_percent))
    return found


__all__ = ["find_overallocated_days"]

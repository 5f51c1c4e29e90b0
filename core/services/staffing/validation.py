from __future__ import annotations

from dataclasses import replace

from core.domain.identifiers import as_day
from core.exceptions import ValidationError
from core.models import CalendarEvent, CalendarEventType, Resource
from core.services.staffing.config import DEFAULT_CAP_PERCENT, MAX_PERCENT, MIN_PERCENT, PERCENT_STEP


def validate_percentage(value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        else:
            raise ValidationError(
                f"Allocation percentage must be an integer, got {value!r}.",
                code="ALLOCATION_PERCENT_NOT_INTEGER",
            )
    if value < MIN_PERCENT or value > MAX_PERCENT:
        raise ValidationError(
            f"Allocation percentage {value} is outside [{MIN_PERCENT}, {MAX_PERCENT}].",
            code="ALLOCATION_PERCENT_OUT_OF_RANGE",
        )
    if value % PERCENT_STEP != 0:
        raise ValidationError(
            f"Allocation percentage {value} is not a multiple of {PERCENT_STEP}.",
            code="ALLOCATION_PERCENT_STEP",
        )
    return value


def validate_calendar_event(event: CalendarEvent) -> CalendarEvent:
    if event.type == CalendarEventType.LOCAL_HOLIDAY and not (event.location or "").strip():
        raise ValidationError(
            f"Local holiday '{event.name}' on {event.date} has no location.",
            code="LOCAL_HOLIDAY_LOCATION_REQUIRED",
        )
    return event


def validate_resource(resource: Resource) -> Resource:
    if resource.last_day_of_work is not None and as_day(resource.last_day_of_work) < as_day(resource.hire_date):
        raise ValidationError(
            f"Resource {resource.id}: last day of work {resource.last_day_of_work} "
            f"is before hire date {resource.hire_date}.",
            code="RESOURCE_INVALID_WINDOW",
        )
    cap = resource.max_staffing_percentage
    if cap is None:
        return replace(resource, max_staffing_percentage=DEFAULT_CAP_PERCENT)
    if isinstance(cap, bool) or not isinstance(cap, int) or cap < 0:
        raise ValidationError(
            f"Resource {resource.id}: max staffing percentage must be a non-negative integer, got {cap!r}.",
            code="RESOURCE_INVALID_CAP",
        )
    return resource


__all__ = ["validate_percentage", "validate_calendar_event", "validate_resource"]

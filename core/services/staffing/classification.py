from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from core.models import Resource, UtilizationLevel
from core.services.staffing.config import ASSIGNMENT_CAP_PERCENT, DEFAULT_CAP_PERCENT


def round_percent(value: float) -> int:
    """Presentation rounding, half away from zero (``12.5 -> 13``)."""
    return int(Decimal(repr(float(value))).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def classify(utilization_percent: float, cap_percent: int = DEFAULT_CAP_PERCENT) -> UtilizationLevel:
    rounded = round_percent(utilization_percent)
    if rounded <= 0:
        return UtilizationLevel.EMPTY
    if rounded > cap_percent:
        return UtilizationLevel.OVER
    if rounded == cap_percent:
        return UtilizationLevel.AT_CAP
    return UtilizationLevel.PARTIAL


def resource_cap(resource: Resource) -> int:
    cap = resource.max_staffing_percentage
    return DEFAULT_CAP_PERCENT if cap is None else cap


def classify_resource_row(utilization_percent: float, resource: Resource) -> UtilizationLevel:
    return classify(utilization_percent, resource_cap(resource))


def classify_assignment_row(utilization_percent: float) -> UtilizationLevel:
    return classify(utilization_percent, ASSIGNMENT_CAP_PERCENT)


def format_percent(value: float | None) -> str:
    if value is None:
        return "-"
    rounded = round_percent(value)
    return f"{rounded}%" if rounded > 0 else "-"


__all__ = [
    "round_percent",
    "classify",
    "resource_cap",
    "classify_resource_row",
    "classify_assignment_row",
    "format_percent",
]

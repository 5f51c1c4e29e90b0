from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from core.domain.identifiers import generate_id


DEFAULT_MAX_STAFFING_PERCENTAGE = 100


@dataclass(frozen=True)
class Resource:
    """A staff member whose time is allocated to project assignments."""

    id: str
    name: str
    location: str
    hire_date: date
    last_day_of_work: Optional[date] = None
    max_staffing_percentage: int = DEFAULT_MAX_STAFFING_PERCENTAGE
    role: str = ""

    @staticmethod
    def create(
        name: str,
        location: str,
        hire_date: date,
        last_day_of_work: Optional[date] = None,
        max_staffing_percentage: int = DEFAULT_MAX_STAFFING_PERCENTAGE,
        role: str = "",
    ) -> "Resource":
        return Resource(
            id=generate_id(),
            name=name,
            location=location,
            hire_date=hire_date,
            last_day_of_work=last_day_of_work,
            max_staffing_percentage=max_staffing_percentage,
            role=role,
        )


__all__ = ["Resource", "DEFAULT_MAX_STAFFING_PERCENTAGE"]

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from core.domain.enums import ViewMode


@dataclass(frozen=True)
class Period:
    start_date: date
    end_date: date  # inclusive
    granularity: ViewMode
    label: str = ""

    def __post_init__(self):
        if self.end_date < self.start_date:
            raise ValueError(f"Period end {self.end_date} is before start {self.start_date}.")


__all__ = ["Period"]

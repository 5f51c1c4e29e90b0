from __future__ import annotations

import calendar
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import List, Optional

from core.domain.identifiers import as_day
from core.models import Period, ViewMode
from core.services.staffing.config import DAY_VIEW_DAYS, MONTH_VIEW_MONTHS, WEEK_VIEW_WEEKS


def _view_mode(value: ViewMode | str) -> ViewMode:
    try:
        return ViewMode(value)
    except ValueError:
        raise ValueError(f"Unknown view mode: {value!r}") from None


def week_start(d: date) -> date:
    """Monday of the week containing ``d``; Sunday closes the previous week."""
    return d - timedelta(days=d.weekday())


def month_start(d: date) -> date:
    return d.replace(day=1)


def month_end(d: date) -> date:
    return d.replace(day=calendar.monthrange(d.year, d.month)[1])


def add_months(d: date, months: int) -> date:
    """Shift by whole months, clamping the day to the target month length."""
    index = d.year * 12 + (d.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    day = min(d.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def _day_periods(anchor: date) -> List[Period]:
    periods = []
    for offset in range(DAY_VIEW_DAYS):
        day = anchor + timedelta(days=offset)
        periods.append(Period(day, day, ViewMode.DAY, label=day.strftime("%d/%m %a")))
    return periods


def _week_periods(anchor: date) -> List[Period]:
    monday = week_start(anchor)
    periods = []
    for _ in range(WEEK_VIEW_WEEKS):
        sunday = monday + timedelta(days=6)
        label = f"{monday.strftime('%d/%m')} - {sunday.strftime('%d/%m')}"
        periods.append(Period(monday, sunday, ViewMode.WEEK, label=label))
        monday += timedelta(days=7)
    return periods


def _month_periods(anchor: date) -> List[Period]:
    first = month_start(anchor)
    periods = []
    for _ in range(MONTH_VIEW_MONTHS):
        periods.append(Period(first, month_end(first), ViewMode.MONTH, label=first.strftime("%B %Y")))
        first = add_months(first, 1)
    return periods


def build_periods(anchor_date: date, view_mode: ViewMode | str) -> List[Period]:
    """
    Display periods for a view, ordered by start date.

    day: 14 days starting at the anchor.
    week: 4 Monday-Sunday weeks, the first one containing the anchor.
    month: 3 calendar months, the first one containing the anchor.
    """
    anchor = as_day(anchor_date)
    mode = _view_mode(view_mode)
    if mode == ViewMode.DAY:
        return _day_periods(anchor)
    if mode == ViewMode.WEEK:
        return _week_periods(anchor)
    return _month_periods(anchor)


def shift_anchor(anchor_date: date, view_mode: ViewMode | str, pages: int) -> date:
    """Move the anchor by ``pages`` pages of the view (negative goes back)."""
    anchor = as_day(anchor_date)
    mode = _view_mode(view_mode)
    if mode == ViewMode.DAY:
        return anchor + timedelta(days=DAY_VIEW_DAYS * pages)
    if mode == ViewMode.WEEK:
        return anchor + timedelta(days=7 * WEEK_VIEW_WEEKS * pages)
    return add_months(anchor, pages)


@dataclass(frozen=True)
class PeriodNavigator:
    """Immutable anchor + view pair with next/previous/today paging."""

    anchor: date
    view_mode: ViewMode = ViewMode.DAY
    periods: List[Period] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "anchor", as_day(self.anchor))
        object.__setattr__(self, "view_mode", _view_mode(self.view_mode))
        object.__setattr__(self, "periods", build_periods(self.anchor, self.view_mode))

    @property
    def start_date(self) -> date:
        return self.periods[0].start_date

    @property
    def end_date(self) -> date:
        return self.periods[-1].end_date

    def next(self) -> "PeriodNavigator":
        return PeriodNavigator(shift_anchor(self.anchor, self.view_mode, 1), self.view_mode)

    def previous(self) -> "PeriodNavigator":
        return PeriodNavigator(shift_anchor(self.anchor, self.view_mode, -1), self.view_mode)

    def today(self, today: Optional[date] = None) -> "PeriodNavigator":
        return PeriodNavigator(today or date.today(), self.view_mode)

    def with_view_mode(self, view_mode: ViewMode | str) -> "PeriodNavigator":
        return PeriodNavigator(self.anchor, view_mode)


__all__ = [
    "week_start",
    "month_start",
    "month_end",
    "add_months",
    "build_periods",
    "shift_anchor",
    "PeriodNavigator",
]

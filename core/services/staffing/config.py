"""Tunable constants for staffing views and allocation input."""

from __future__ import annotations

from core.domain.resource import DEFAULT_MAX_STAFFING_PERCENTAGE

# Page sizes per view mode
DAY_VIEW_DAYS = 14
WEEK_VIEW_WEEKS = 4
MONTH_VIEW_MONTHS = 3

# Per-assignment rows are always measured against a full day
ASSIGNMENT_CAP_PERCENT = 100
DEFAULT_CAP_PERCENT = DEFAULT_MAX_STAFFING_PERCENTAGE

MIN_PERCENT = 0
MAX_PERCENT = 100
PERCENT_STEP = 5

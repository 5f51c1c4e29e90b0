from dataclasses import replace

import pytest

from core.models import UtilizationLevel
from core.services.staffing import (
    classify,
    classify_assignment_row,
    classify_resource_row,
    format_percent,
    round_percent,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, UtilizationLevel.EMPTY),
        (0.4, UtilizationLevel.EMPTY),
        (0.5, UtilizationLevel.PARTIAL),
        (50, UtilizationLevel.PARTIAL),
        (99.4, UtilizationLevel.PARTIAL),
        (99.6, UtilizationLevel.AT_CAP),
        (100, UtilizationLevel.AT_CAP),
        (100.4, UtilizationLevel.AT_CAP),
        (100.5, UtilizationLevel.OVER),
        (120, UtilizationLevel.OVER),
    ],
)
def test_classify_against_default_cap(value, expected):
    assert classify(value) == expected


def test_round_percent_is_half_up():
    assert round_percent(12.5) == 13
    assert round_percent(13.5) == 14
    assert round_percent(12.49) == 12
    assert round_percent(0.5) == 1


def test_resource_row_uses_resource_cap(milan_resource):
    assert classify_resource_row(80, milan_resource) == UtilizationLevel.AT_CAP
    assert classify_resource_row(85, milan_resource) == UtilizationLevel.OVER
    assert classify_resource_row(60, milan_resource) == UtilizationLevel.PARTIAL


def test_assignment_row_always_uses_full_day(milan_resource):
    # child rows ignore the resource cap
    assert classify_assignment_row(80) == UtilizationLevel.PARTIAL
    assert classify_assignment_row(100) == UtilizationLevel.AT_CAP
    assert classify_assignment_row(105) == UtilizationLevel.OVER


def test_zero_cap_resource(rome_resource):
    benched = replace(rome_resource, max_staffing_percentage=0)
    assert classify_resource_row(0, benched) == UtilizationLevel.EMPTY
    assert classify_resource_row(5, benched) == UtilizationLevel.OVER


def test_format_percent():
    assert format_percent(None) == "-"
    assert format_percent(0) == "-"
    assert format_percent(0.3) == "-"
    assert format_percent(49.5) == "50%"
    assert format_percent(120.0) == "120%"

from dataclasses import replace
from datetime import date

from core.services.staffing import clamp_interval, effective_end, is_employed_on


def test_active_resource_keeps_requested_end(rome_resource):
    assert effective_end(rome_resource, date(2024, 3, 31)) == date(2024, 3, 31)


def test_resigned_resource_end_is_clamped(rome_resource):
    resigned = replace(rome_resource, last_day_of_work=date(2024, 3, 10))
    assert effective_end(resigned, date(2024, 3, 31)) == date(2024, 3, 10)
    # an earlier requested end is kept
    assert effective_end(resigned, date(2024, 3, 5)) == date(2024, 3, 5)


def test_clamp_interval_empty_after_resignation(rome_resource):
    resigned = replace(rome_resource, last_day_of_work=date(2024, 2, 15))
    assert clamp_interval(resigned, date(2024, 3, 1), date(2024, 3, 31)) is None
    assert clamp_interval(resigned, date(2024, 2, 1), date(2024, 2, 29)) == (
        date(2024, 2, 1),
        date(2024, 2, 15),
    )


def test_start_is_not_clamped_to_hire_date(rome_resource):
    window = clamp_interval(rome_resource, date(2022, 12, 1), date(2023, 1, 31))
    assert window == (date(2022, 12, 1), date(2023, 1, 31))


def test_is_employed_on_covers_inclusive_window(rome_resource):
    resigned = replace(rome_resource, last_day_of_work=date(2024, 3, 10))
    assert not is_employed_on(resigned, date(2022, 12, 31))
    assert is_employed_on(resigned, date(2023, 1, 1))
    assert is_employed_on(resigned, date(2024, 3, 10))
    assert not is_employed_on(resigned, date(2024, 3, 11))
    assert is_employed_on(rome_resource, date(2030, 1, 1))

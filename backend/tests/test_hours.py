from datetime import datetime

import pytest

from citydir.domain.hours import is_open_now


def at(hour, minute):
    return datetime(2024, 5, 17, hour, minute)


@pytest.mark.parametrize(
    "now, expected",
    [
        (at(8, 59), False),
        (at(9, 0), True),
        (at(12, 30), True),
        (at(17, 0), True),
        (at(17, 1), False),
    ],
)
def test_boundaries_are_inclusive(now, expected):
    assert is_open_now("09:00-17:00", now) is expected


@pytest.mark.parametrize(
    "hours",
    [None, "", "closed", "9-17", "09:00", "25:00-26:00", "09:00-17:60", "ab:cd-ef:gh"],
)
def test_missing_or_malformed_hours_are_closed(hours):
    assert is_open_now(hours, at(12, 0)) is False


def test_tolerates_whitespace():
    assert is_open_now(" 08:00 - 22:00 ", at(21, 59)) is True

from datetime import datetime, timezone

import pytest

from citydir.domain.invariants.dates import parse_timestamp, resolve_date_range
from citydir.errors import ValidationError
from citydir.normalizers.event import normalize_date_range

START = datetime(2024, 7, 1, 18, 0, tzinfo=timezone.utc)
END = datetime(2024, 7, 3, 23, 0, tzinfo=timezone.utc)


def test_closed_interval():
    assert resolve_date_range(START, END) == (START, END)
    assert normalize_date_range(START, END)["bounds"] == "[]"


def test_open_ended_interval():
    assert resolve_date_range(START, None) == (START, None)
    assert normalize_date_range(START, None)["bounds"] == "[)"


def test_end_without_start_is_dropped():
    assert resolve_date_range(None, END) == (None, None)
    assert normalize_date_range(None, None) is None


def test_end_before_start_is_rejected():
    with pytest.raises(ValidationError):
        resolve_date_range(END, START)


def test_naive_and_aware_bounds_compare_on_wall_clock():
    naive_end = datetime(2024, 7, 3, 23, 0)
    assert resolve_date_range(START, naive_end) == (START, naive_end)


def test_parse_timestamp():
    assert parse_timestamp("2024-07-01T18:00:00+00:00", "start_date") == START
    assert parse_timestamp("", "start_date") is None
    with pytest.raises(ValidationError):
        parse_timestamp("next friday", "start_date")

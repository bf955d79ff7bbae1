"""Tests for shared date utilities."""
from datetime import date, datetime

import pytest

from flowcast.services.utils import (
    to_date,
    parse_date,
    format_date,
    add_days,
    days_between,
    round_half_up
)

def test_to_date():
    """Test normalisation of supported inputs."""
    assert to_date("2024-02-29") == date(2024, 2, 29)
    assert to_date(datetime(2024, 3, 10, 23, 59)) == date(2024, 3, 10)
    assert to_date(date(2024, 3, 10)) == date(2024, 3, 10)
    assert to_date(None) is None
    assert to_date("") is None

@pytest.mark.parametrize("value", ["2024-13-01", "2024-01-01junk", "next tuesday"])
def test_to_date_rejects_invalid_string(value):
    """Test malformed strings raise ValueError."""
    with pytest.raises(ValueError):
        to_date(value)

def test_parse_date_is_lenient():
    """Test unparseable input becomes None instead of raising."""
    assert parse_date("2024-02-29") == date(2024, 2, 29)
    assert parse_date("2024-13-01") is None
    assert parse_date("2024-01-01junk") is None
    assert parse_date(20240101) is None
    assert parse_date(None) is None

def test_format_date():
    """Test ISO formatting."""
    assert format_date(date(2024, 1, 5)) == "2024-01-05"
    assert format_date(None) is None

def test_add_days_returns_new_value():
    """Test shifting a date leaves the original untouched."""
    original = date(2024, 3, 30)
    shifted = add_days(original, 3)

    assert shifted == date(2024, 4, 2)
    assert original == date(2024, 3, 30)

def test_days_between_across_dst_change():
    """Test day differences are exact across a daylight saving change."""
    assert days_between(date(2024, 3, 9), date(2024, 3, 11)) == 2
    assert days_between(date(2024, 11, 4), date(2024, 11, 2)) == -2

@pytest.mark.parametrize("value,expected", [
    (27.5, 28),
    (26.5, 27),
    (27.49, 27),
    (5.0, 5),
])
def test_round_half_up(value, expected):
    """Test halves round up."""
    assert round_half_up(value) == expected

"""
Tests for cycle projection.
"""
import pytest
from datetime import date, timedelta

from flowcast.services.cycle import (
    calculate_cycle_data,
    get_cycle_day_for_date,
    get_days_until_next_period
)

def test_calculate_cycle_data_new_user():
    """Test a missing anchor yields no projected dates."""
    data = calculate_cycle_data(None, 28, 5)

    assert data.is_new_user is True
    assert data.last_period_start is None
    assert data.next_period_start is None
    assert data.predicted_ovulation is None
    assert data.fertile_window_start is None
    assert data.fertile_window_end is None
    assert data.cycle_length == 28
    assert data.period_length == 5

def test_calculate_cycle_data_empty_string_anchor():
    """Test an empty anchor string is treated as missing."""
    assert calculate_cycle_data("", 28, 5).is_new_user is True

@pytest.mark.parametrize("anchor", ["2024-13-01", "not-a-date", "2024-01-01junk"])
def test_calculate_cycle_data_malformed_anchor(anchor):
    """Test an unparseable anchor degrades to the new-user projection."""
    data = calculate_cycle_data(anchor, 28, 5)

    assert data.is_new_user is True
    assert data.next_period_start is None
    assert data.fertile_window_end is None

def test_calculate_cycle_data_from_iso_string():
    """Test projection for a 28-day cycle."""
    data = calculate_cycle_data("2024-01-01", 28, 5)

    assert data.is_new_user is False
    assert data.last_period_start == date(2024, 1, 1)
    assert data.next_period_start == date(2024, 1, 29)
    assert data.predicted_ovulation == date(2024, 1, 15)
    assert data.fertile_window_start == date(2024, 1, 10)
    assert data.fertile_window_end == date(2024, 1, 15)

def test_calculate_cycle_data_defaults():
    """Test default lengths are applied when omitted."""
    assert calculate_cycle_data(date(2024, 1, 1)) == calculate_cycle_data("2024-01-01", 28, 5)

def test_calculate_cycle_data_fixed_luteal_phase():
    """Test ovulation stays 14 days before the next period for long cycles."""
    data = calculate_cycle_data(date(2024, 3, 1), 35, 5)

    assert data.next_period_start == date(2024, 4, 5)
    assert data.predicted_ovulation == date(2024, 3, 22)
    assert (data.fertile_window_end - data.fertile_window_start).days == 5

def test_calculate_cycle_data_does_not_mutate_anchor():
    """Test the anchor passed in is returned unchanged."""
    anchor = date(2024, 1, 1)
    calculate_cycle_data(anchor, 28, 5)
    calculate_cycle_data(anchor, 30, 5)

    assert anchor == date(2024, 1, 1)

def test_get_cycle_day_for_date():
    """Test cycle days within the first cycle."""
    anchor = date(2024, 1, 1)

    assert get_cycle_day_for_date(date(2024, 1, 1), anchor, 28) == 1
    assert get_cycle_day_for_date(date(2024, 1, 28), anchor, 28) == 28
    assert get_cycle_day_for_date(date(2024, 1, 29), anchor, 28) == 1

def test_get_cycle_day_before_anchor_wraps():
    """Test dates before the anchor wrap into the previous cycle."""
    anchor = date(2024, 1, 1)

    assert get_cycle_day_for_date(date(2023, 12, 31), anchor, 28) == 28
    assert get_cycle_day_for_date(date(2023, 12, 4), anchor, 28) == 1

def test_get_cycle_day_without_anchor():
    """Test new users are always on day 1."""
    assert get_cycle_day_for_date(date(2024, 6, 1), None, 28) == 1

def test_get_cycle_day_malformed_dates():
    """Test unparseable dates fall back to day 1."""
    assert get_cycle_day_for_date(date(2024, 6, 1), "garbage", 28) == 1
    assert get_cycle_day_for_date("2024-02-30", date(2024, 1, 1), 28) == 1

@pytest.mark.parametrize("offset", [-40, -1, 0, 3, 13, 27, 100])
def test_get_cycle_day_is_periodic(offset):
    """Test cycle day repeats every cycle length."""
    anchor = date(2024, 1, 1)
    target = anchor + timedelta(days=offset)

    assert get_cycle_day_for_date(target, anchor, 28) == \
        get_cycle_day_for_date(target + timedelta(days=28), anchor, 28)

def test_get_days_until_next_period():
    """Test days remaining count the current day."""
    assert get_days_until_next_period(1, 28) == 28
    assert get_days_until_next_period(28, 28) == 1
    assert get_days_until_next_period(10, 28) == 19

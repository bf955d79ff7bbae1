"""
Tests for calendar month projections.
"""
from datetime import date

from flowcast.models.cycle import CycleParameters
from flowcast.services.calendar import (
    get_predicted_period_days_for_month,
    get_fertile_days_for_month,
    get_ovulation_day_for_month,
    get_period_days_for_month,
    build_month_view
)

def test_predicted_period_days_across_month_boundary():
    """Test a period starting Jan 30 is split between January and February."""
    assert get_predicted_period_days_for_month(1, 2024, date(2024, 1, 30), 5) == [30, 31]
    assert get_predicted_period_days_for_month(2, 2024, date(2024, 1, 30), 5) == [1, 2, 3]

def test_predicted_period_days_other_month_is_empty():
    """Test months outside the period return nothing."""
    assert get_predicted_period_days_for_month(3, 2024, date(2024, 1, 30), 5) == []
    assert get_predicted_period_days_for_month(1, 2025, date(2024, 1, 30), 5) == []

def test_predicted_period_days_without_start():
    """Test a missing start returns an empty list."""
    assert get_predicted_period_days_for_month(1, 2024, None, 5) == []

def test_fertile_days_across_year_boundary():
    """Test a fertile window spanning new year."""
    start, end = date(2023, 12, 29), date(2024, 1, 3)

    assert get_fertile_days_for_month(12, 2023, start, end) == [29, 30, 31]
    assert get_fertile_days_for_month(1, 2024, start, end) == [1, 2, 3]

def test_fertile_days_accept_iso_strings():
    """Test ISO strings are accepted for the window bounds."""
    assert get_fertile_days_for_month(1, 2024, "2024-01-10", "2024-01-15") == [10, 11, 12, 13, 14, 15]

def test_fertile_days_missing_bound():
    """Test a missing bound returns an empty list."""
    assert get_fertile_days_for_month(1, 2024, date(2024, 1, 10), None) == []
    assert get_fertile_days_for_month(1, 2024, None, date(2024, 1, 15)) == []

def test_ovulation_day_for_month():
    """Test ovulation is reported only in its own month."""
    ovulation = date(2024, 1, 15)

    assert get_ovulation_day_for_month(1, 2024, ovulation) == 15
    assert get_ovulation_day_for_month(2, 2024, ovulation) is None
    assert get_ovulation_day_for_month(1, 2023, ovulation) is None
    assert get_ovulation_day_for_month(1, 2024, None) is None

def test_period_days_only_include_past_cycles():
    """Test later cycles only contribute days up to today."""
    anchor = date(2024, 1, 1)
    today = date(2024, 2, 1)

    assert get_period_days_for_month(1, 2024, anchor, 5, 28, today=today) == [1, 2, 3, 4, 5, 29, 30, 31]
    assert get_period_days_for_month(2, 2024, anchor, 5, 28, today=today) == [1]
    assert get_period_days_for_month(3, 2024, anchor, 5, 28, today=today) == []

def test_period_days_always_include_anchor_period():
    """Test the anchor's own period is shown even when it is in the future."""
    days = get_period_days_for_month(3, 2024, date(2024, 3, 1), 5, 28, today=date(2024, 2, 1))

    assert days == [1, 2, 3, 4, 5]

def test_period_days_walk_at_most_ten_cycles():
    """Test cycles beyond the tenth are not reconstructed."""
    anchor = date(2024, 1, 1)
    today = date(2025, 1, 1)

    assert get_period_days_for_month(10, 2024, anchor, 5, 28, today=today) == [7, 8, 9, 10, 11]
    assert get_period_days_for_month(11, 2024, anchor, 5, 28, today=today) == []

def test_period_days_without_anchor():
    """Test new users have no past period days."""
    assert get_period_days_for_month(1, 2024, None, 5, 28, today=date(2024, 1, 10)) == []

def test_month_functions_ignore_malformed_dates():
    """Test unparseable dates produce empty day sets."""
    today = date(2024, 1, 10)

    assert get_period_days_for_month(1, 2024, "garbage", 5, 28, today=today) == []
    assert get_predicted_period_days_for_month(1, 2024, "2024-01-32", 5) == []
    assert get_fertile_days_for_month(1, 2024, "2024-01-10", "soon") == []
    assert get_ovulation_day_for_month(1, 2024, "2024-1-15x") is None

def test_build_month_view_existing_user(configured_params):
    """Test the month view for a user with an anchor date."""
    view = build_month_view(1, 2024, configured_params, today=date(2024, 1, 10))

    assert view.month == 1
    assert view.year == 2024
    assert view.period_days == [1, 2, 3, 4, 5]
    assert view.predicted_period_days == [29, 30, 31]
    assert view.fertile_days == [10, 11, 12, 13, 14, 15]
    assert view.ovulation_day == 15

def test_build_month_view_new_user_estimates_from_today():
    """Test new users see an estimate anchored at today."""
    params = CycleParameters()
    today = date(2024, 1, 10)

    january = build_month_view(1, 2024, params, today=today)
    february = build_month_view(2, 2024, params, today=today)

    assert january.period_days == []
    assert january.predicted_period_days == []
    assert january.fertile_days == [19, 20, 21, 22, 23, 24]
    assert january.ovulation_day == 24
    assert february.predicted_period_days == [7, 8, 9, 10, 11]

"""
Service module for projecting upcoming cycle dates.

Projections use a fixed luteal phase: ovulation is placed 14 days before the
next period regardless of cycle length, and the fertile window is the six
days ending on ovulation day.

Typical usage:
    cycle_data = calculate_cycle_data("2024-01-01", 28, 5)
    print(cycle_data.next_period_start)   # 2024-01-29
    print(cycle_data.predicted_ovulation)  # 2024-01-15
"""
from typing import Optional
from datetime import date

from flowcast.models.cycle import CycleData
from flowcast.services.constants import (
    DEFAULT_CYCLE_LENGTH,
    DEFAULT_PERIOD_LENGTH,
    LUTEAL_PHASE_LENGTH,
    FERTILE_WINDOW_LEAD_DAYS
)
from flowcast.services.utils import DateLike, parse_date, add_days, days_between

def calculate_cycle_data(
    last_period_start: Optional[DateLike],
    cycle_length: int = DEFAULT_CYCLE_LENGTH,
    period_length: int = DEFAULT_PERIOD_LENGTH
) -> CycleData:
    """
    Calculate next period, ovulation and fertile window from the anchor date.

    Args:
        last_period_start: First day of the most recent period, or None
        cycle_length: Cycle length in days
        period_length: Period length in days

    Returns:
        CycleData with projected dates. Without an anchor every projected
        date is None and ``is_new_user`` is True.

    Example:
        >>> data = calculate_cycle_data("2024-01-01", 28, 5)
        >>> data.fertile_window_start, data.fertile_window_end
        (datetime.date(2024, 1, 10), datetime.date(2024, 1, 15))
    """
    anchor = parse_date(last_period_start)

    if anchor is None:
        return CycleData(
            cycle_length=cycle_length,
            period_length=period_length,
            is_new_user=True
        )

    next_period_start = add_days(anchor, cycle_length)
    predicted_ovulation = add_days(next_period_start, -LUTEAL_PHASE_LENGTH)

    return CycleData(
        cycle_length=cycle_length,
        period_length=period_length,
        last_period_start=anchor,
        next_period_start=next_period_start,
        predicted_ovulation=predicted_ovulation,
        fertile_window_start=add_days(predicted_ovulation, -FERTILE_WINDOW_LEAD_DAYS),
        fertile_window_end=predicted_ovulation,
        is_new_user=False
    )

def get_cycle_day_for_date(
    target_date: DateLike,
    last_period_start: Optional[DateLike],
    cycle_length: int
) -> int:
    """
    Calculate the 1-based cycle day of a date relative to the anchor.

    Dates before the anchor wrap into the previous cycles, so the result is
    always in [1, cycle_length] and repeats every ``cycle_length`` days.

    Args:
        target_date: Date to locate in the cycle
        last_period_start: Anchor date, or None for new users
        cycle_length: Cycle length in days

    Returns:
        Cycle day; 1 when either date is missing or unparseable
    """
    anchor = parse_date(last_period_start)
    target = parse_date(target_date)
    if anchor is None or target is None:
        return 1
    return (days_between(anchor, target) % cycle_length) + 1

def get_days_until_next_period(cycle_day: int, cycle_length: int) -> int:
    """Days left until the next period starts, counting the current day."""
    return cycle_length - cycle_day + 1

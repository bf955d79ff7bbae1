"""
Month viewport projections for calendar rendering.

Each function maps a calendar month (1-12) and year plus already computed
dates to the day-of-month numbers that should be highlighted. Windows that
cross a month or year boundary only contribute the days that fall inside the
requested month.

Typical usage:
    cycle_data = calculate_cycle_data(anchor, 28, 5)
    days = get_predicted_period_days_for_month(1, 2024, cycle_data.next_period_start, 5)
    view = build_month_view(1, 2024, params)
"""
from typing import Iterable, List, Optional
from datetime import date

from flowcast.models.cycle import CycleParameters, MonthView, DEFAULT_CYCLE_PARAMETERS
from flowcast.services.constants import MAX_HISTORY_CYCLES
from flowcast.services.cycle import calculate_cycle_data
from flowcast.services.utils import DateLike, parse_date, add_days, in_month

def _days_in_month(dates: Iterable[date], month: int, year: int) -> List[int]:
    return sorted({d.day for d in dates if in_month(d, month, year)})

def get_predicted_period_days_for_month(
    month: int,
    year: int,
    next_period_start: Optional[DateLike],
    period_length: int
) -> List[int]:
    """
    Get the predicted period days of the next period that fall in a month.

    Args:
        month: Calendar month (1-12)
        year: Calendar year
        next_period_start: Projected first day of the next period
        period_length: Period length in days

    Returns:
        Sorted, unique days of the month

    Example:
        >>> get_predicted_period_days_for_month(1, 2024, "2024-01-30", 5)
        [30, 31]
        >>> get_predicted_period_days_for_month(2, 2024, "2024-01-30", 5)
        [1, 2, 3]
    """
    start = parse_date(next_period_start)
    if start is None:
        return []
    return _days_in_month(
        (add_days(start, i) for i in range(period_length)), month, year
    )

def get_fertile_days_for_month(
    month: int,
    year: int,
    fertile_window_start: Optional[DateLike],
    fertile_window_end: Optional[DateLike]
) -> List[int]:
    """
    Get every fertile window day, bounds inclusive, that falls in a month.

    Returns an empty list when either bound is missing.
    """
    start = parse_date(fertile_window_start)
    end = parse_date(fertile_window_end)
    if start is None or end is None:
        return []
    span = (end - start).days
    return _days_in_month(
        (add_days(start, i) for i in range(span + 1)), month, year
    )

def get_ovulation_day_for_month(
    month: int,
    year: int,
    predicted_ovulation: Optional[DateLike]
) -> Optional[int]:
    """Get the day of month of predicted ovulation, or None if outside the month."""
    ovulation = parse_date(predicted_ovulation)
    if ovulation is None or not in_month(ovulation, month, year):
        return None
    return ovulation.day

def get_period_days_for_month(
    month: int,
    year: int,
    last_period_start: Optional[DateLike],
    period_length: int,
    cycle_length: int,
    today: Optional[date] = None
) -> List[int]:
    """
    Reconstruct past period days for a month from the anchor date.

    The anchor's own period is always included. The periods of the following
    cycles are walked forward (up to ten cycles) and only their days that are
    not after ``today`` are kept, so this never shows predictions.

    Args:
        month: Calendar month (1-12)
        year: Calendar year
        last_period_start: Anchor date, or None
        period_length: Period length in days
        cycle_length: Cycle length in days
        today: Reference date, defaults to the current date

    Returns:
        Sorted, unique days of the month
    """
    anchor = parse_date(last_period_start)
    if anchor is None:
        return []
    if today is None:
        today = date.today()

    period_dates = [add_days(anchor, i) for i in range(period_length)]
    for cycle_number in range(1, MAX_HISTORY_CYCLES + 1):
        cycle_start = add_days(anchor, cycle_number * cycle_length)
        period_dates.extend(
            day for day in (add_days(cycle_start, i) for i in range(period_length))
            if day <= today
        )

    return _days_in_month(period_dates, month, year)

def build_month_view(
    month: int,
    year: int,
    params: CycleParameters,
    today: Optional[date] = None
) -> MonthView:
    """
    Build all highlighted day sets for a calendar month.

    Users without an anchor date see an estimate that treats ``today`` as the
    start of a default-length cycle, so the calendar is never empty.

    Args:
        month: Calendar month (1-12)
        year: Calendar year
        params: Resolved cycle parameters
        today: Reference date, defaults to the current date

    Returns:
        MonthView for the requested month
    """
    if today is None:
        today = date.today()

    if params.is_new_user:
        estimate = DEFAULT_CYCLE_PARAMETERS
        cycle_data = calculate_cycle_data(today, estimate.cycle_length, estimate.period_length)
        period_length = estimate.period_length
    else:
        cycle_data = calculate_cycle_data(
            params.last_period_start, params.cycle_length, params.period_length
        )
        period_length = params.period_length

    return MonthView(
        month=month,
        year=year,
        period_days=get_period_days_for_month(
            month,
            year,
            params.last_period_start,
            params.period_length,
            params.cycle_length,
            today=today
        ),
        predicted_period_days=get_predicted_period_days_for_month(
            month, year, cycle_data.next_period_start, period_length
        ),
        fertile_days=get_fertile_days_for_month(
            month, year, cycle_data.fertile_window_start, cycle_data.fertile_window_end
        ),
        ovulation_day=get_ovulation_day_for_month(month, year, cycle_data.predicted_ovulation)
    )

"""
Shared utility functions for cycle-related services.

Dates are handled as immutable ``datetime.date`` values: every helper returns
a new value and never touches its arguments. ISO strings are accepted at the
edges so callers can pass through what they read from storage.
"""
import math
from typing import Any, Iterable, List, Optional, Union
from datetime import date, datetime, timedelta

from aws_lambda_powertools import Logger

from flowcast.models.log import DailyLog

logger = Logger()

DateLike = Union[date, str]

def to_date(value: Optional[DateLike]) -> Optional[date]:
    """
    Normalize an ISO date string or date/datetime to a calendar date.

    Args:
        value: ``YYYY-MM-DD`` string, date, datetime or None

    Returns:
        Calendar date, or None for empty input

    Raises:
        ValueError: If a string is not a valid ISO calendar date

    Example:
        >>> to_date("2024-01-29")
        datetime.date(2024, 1, 29)
    """
    if not value:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)

def parse_date(value: Any) -> Optional[date]:
    """
    Lenient version of ``to_date`` for the prediction engine.

    Anything that is not a valid calendar date is treated like a missing
    date, so callers fall back to their documented defaults.

    Example:
        >>> parse_date("2024-13-01") is None
        True
    """
    try:
        return to_date(value)
    except (TypeError, ValueError):
        logger.warning("Ignoring unparseable date", extra={"value": repr(value)})
        return None

def format_date(value: Optional[date]) -> Optional[str]:
    """Format a date as ``YYYY-MM-DD``."""
    return value.isoformat() if value else None

def add_days(value: date, days: int) -> date:
    """Return a new date shifted by the given number of days."""
    return value + timedelta(days=days)

def days_between(start: date, end: date) -> int:
    """
    Count calendar days from start to end.

    Negative when end precedes start. Time of day never matters because
    both arguments are calendar dates.
    """
    return (end - start).days

def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.floor(abs(value) + 0.5)) * (1 if value >= 0 else -1)

def get_bleeding_logs(logs: Iterable[DailyLog]) -> List[DailyLog]:
    """
    Filter bleeding days and sort them by date.

    Args:
        logs: Daily logs in any order

    Returns:
        Bleeding-day logs sorted ascending by date
    """
    bleeding_logs = [log for log in logs if log.is_bleeding_day]
    return sorted(bleeding_logs, key=lambda x: x.date)

def in_month(value: date, month: int, year: int) -> bool:
    """Check if a date falls in the given calendar month (1-12) and year."""
    return value.month == month and value.year == year

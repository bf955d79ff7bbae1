"""
Analyzer for deriving personal cycle averages from daily logs.

Bleeding days are grouped into period streaks (runs of date-consecutive
bleeding days). Streak lengths give the period length and the gaps between
streak starts give the cycle length. Only the most recent streaks are used,
and gaps outside the plausible cycle range are treated as logging noise.

Typical usage:
    logs = repository.get_daily_logs(user_id)
    analysis = analyze_cycles(logs)
    print(analysis.avg_cycle_length, analysis.avg_period_length)
"""
from typing import Iterable, List, Optional
from datetime import date
from statistics import mean

from aws_lambda_powertools import Logger

from flowcast.models.cycle import CycleAnalysis, PeriodStreak, clamp
from flowcast.models.log import DailyLog
from flowcast.services.constants import (
    DEFAULT_CYCLE_LENGTH,
    DEFAULT_PERIOD_LENGTH,
    MIN_CYCLE_LENGTH,
    MAX_CYCLE_LENGTH,
    MIN_PERIOD_LENGTH,
    MAX_PERIOD_LENGTH,
    MAX_RECENT_STREAKS
)
from flowcast.services.utils import get_bleeding_logs, days_between, round_half_up

logger = Logger()

DEFAULT_ANALYSIS = CycleAnalysis(
    avg_cycle_length=DEFAULT_CYCLE_LENGTH,
    avg_period_length=DEFAULT_PERIOD_LENGTH,
    cycle_count=0
)

def find_period_streaks(logs: Iterable[DailyLog]) -> List[PeriodStreak]:
    """
    Group bleeding days into period streaks.

    A log extends the current streak only when its date is exactly one day
    after the previous bleeding log. Any other difference, including a
    duplicated date, closes the streak and opens a new one.

    Args:
        logs: Daily logs in any order

    Returns:
        Streaks in chronological order

    Example:
        >>> streaks = find_period_streaks(logs)
        >>> [(s.start.isoformat(), s.length) for s in streaks]
        [('2024-01-01', 5), ('2024-01-29', 5)]
    """
    return group_streaks(get_bleeding_logs(logs))

def group_streaks(bleeding_logs: List[DailyLog]) -> List[PeriodStreak]:
    """Group bleeding logs already sorted by date into streaks."""
    if not bleeding_logs:
        return []

    streaks = []
    current_start = bleeding_logs[0].date
    current_length = 1

    for previous, current in zip(bleeding_logs, bleeding_logs[1:]):
        if days_between(previous.date, current.date) == 1:
            current_length += 1
        else:
            streaks.append(PeriodStreak(start=current_start, length=current_length))
            current_start = current.date
            current_length = 1

    streaks.append(PeriodStreak(start=current_start, length=current_length))
    return streaks

def latest_period_start(logs: Iterable[DailyLog]) -> Optional[date]:
    """Get the first day of the most recent period streak, if any."""
    streaks = find_period_streaks(logs)
    return streaks[-1].start if streaks else None

def get_cycle_lengths(streaks: List[PeriodStreak]) -> List[int]:
    """
    Calculate plausible cycle lengths between consecutive streak starts.

    Gaps shorter or longer than the plausible cycle range usually come from
    missed or spurious entries and are dropped.
    """
    cycle_lengths = []
    for previous, current in zip(streaks, streaks[1:]):
        gap = days_between(previous.start, current.start)
        if MIN_CYCLE_LENGTH <= gap <= MAX_CYCLE_LENGTH:
            cycle_lengths.append(gap)
        else:
            logger.debug("Discarding implausible cycle gap", extra={
                "previous_start": str(previous.start),
                "current_start": str(current.start),
                "gap": gap
            })
    return cycle_lengths

def analyze_cycles(logs: Optional[Iterable[DailyLog]]) -> CycleAnalysis:
    """
    Derive average cycle and period lengths from historical logs.

    Args:
        logs: Daily logs in any order; may be empty or None

    Returns:
        CycleAnalysis with lengths clamped to plausible bounds. Falls back
        to the 28/5 defaults with a cycle count of 0 when fewer than two
        bleeding days were logged.

    Example:
        >>> analysis = analyze_cycles(logs)
        >>> analysis.avg_cycle_length
        28
    """
    bleeding_logs = get_bleeding_logs(logs or [])
    if len(bleeding_logs) < 2:
        return DEFAULT_ANALYSIS

    recent_streaks = group_streaks(bleeding_logs)[-MAX_RECENT_STREAKS:]
    period_lengths = [streak.length for streak in recent_streaks]
    cycle_lengths = get_cycle_lengths(recent_streaks)

    avg_cycle_length = (
        round_half_up(mean(cycle_lengths)) if cycle_lengths else DEFAULT_CYCLE_LENGTH
    )
    avg_period_length = (
        round_half_up(mean(period_lengths)) if period_lengths else DEFAULT_PERIOD_LENGTH
    )

    analysis = CycleAnalysis(
        avg_cycle_length=clamp(avg_cycle_length, MIN_CYCLE_LENGTH, MAX_CYCLE_LENGTH),
        avg_period_length=clamp(avg_period_length, MIN_PERIOD_LENGTH, MAX_PERIOD_LENGTH),
        cycle_count=len(cycle_lengths),
        streak_count=len(recent_streaks)
    )
    logger.debug("Cycle analysis complete", extra={
        "avg_cycle_length": analysis.avg_cycle_length,
        "avg_period_length": analysis.avg_period_length,
        "cycle_count": analysis.cycle_count,
        "streak_count": analysis.streak_count
    })
    return analysis

"""
Service module for classifying dates into cycle phases.

Two classifications exist side by side. Phase keys drive insights and use a
narrow three-day ovulation bucket centred on the ovulation day. Phase labels
are shown on the calendar and use a six-day fertile window ending on the
ovulation day. The two are intentionally kept separate.

Typical usage:
    >>> phase = get_cycle_phase_key(date.today(), anchor, 28, 5)
    >>> label = get_cycle_phase(date.today(), anchor, 28, 5)
    >>> insight = get_phase_insight(phase)
"""
from typing import Optional

from flowcast.models.phase import CyclePhase, CyclePhaseLabel, PhaseInsight
from flowcast.services.constants import (
    PHASE_INSIGHTS,
    MIN_OVULATION_DAY,
    OVULATION_KEY_MARGIN,
    FERTILE_WINDOW_LEAD_DAYS
)
from flowcast.services.cycle import get_cycle_day_for_date
from flowcast.services.utils import DateLike, parse_date

def get_ovulation_day(cycle_length: int) -> int:
    """
    Estimate the cycle day of ovulation for phase classification.

    Example:
        >>> get_ovulation_day(28)
        14
        >>> get_ovulation_day(20)
        12
    """
    return max(MIN_OVULATION_DAY, cycle_length // 2)

def get_cycle_phase_key(
    target_date: DateLike,
    last_period_start: Optional[DateLike],
    cycle_length: int,
    period_length: int
) -> CyclePhase:
    """
    Determine the phase key for a date.

    Args:
        target_date: Date to classify
        last_period_start: Anchor date, or None for new users
        cycle_length: Cycle length in days
        period_length: Period length in days

    Returns:
        CyclePhase. New users without an anchor get MENSTRUAL.

    Example:
        >>> get_cycle_phase_key("2024-01-14", "2024-01-01", 28, 5)
        <CyclePhase.OVULATION: 'ovulation'>
    """
    if parse_date(last_period_start) is None:
        return CyclePhase.MENSTRUAL

    cycle_day = get_cycle_day_for_date(target_date, last_period_start, cycle_length)
    if cycle_day <= period_length:
        return CyclePhase.MENSTRUAL

    ovulation_day = get_ovulation_day(cycle_length)
    if ovulation_day - OVULATION_KEY_MARGIN <= cycle_day <= ovulation_day + OVULATION_KEY_MARGIN:
        return CyclePhase.OVULATION
    if cycle_day < ovulation_day:
        return CyclePhase.FOLLICULAR
    return CyclePhase.LUTEAL

def get_cycle_phase(
    target_date: DateLike,
    last_period_start: Optional[DateLike],
    cycle_length: int,
    period_length: int
) -> CyclePhaseLabel:
    """
    Determine the display label for a date.

    Same inputs as ``get_cycle_phase_key`` but the fertile bucket spans the
    five days before ovulation through ovulation day.
    """
    if parse_date(last_period_start) is None:
        return CyclePhaseLabel.MENSTRUAL

    cycle_day = get_cycle_day_for_date(target_date, last_period_start, cycle_length)
    if cycle_day <= period_length:
        return CyclePhaseLabel.MENSTRUAL

    ovulation_day = get_ovulation_day(cycle_length)
    fertile_start = ovulation_day - FERTILE_WINDOW_LEAD_DAYS

    if fertile_start <= cycle_day <= ovulation_day:
        return CyclePhaseLabel.FERTILE
    if cycle_day < fertile_start:
        return CyclePhaseLabel.FOLLICULAR
    return CyclePhaseLabel.LUTEAL

def get_phase_insight(phase: CyclePhase) -> PhaseInsight:
    """Get the guidance text shown for a phase."""
    return PhaseInsight(phase=phase, **PHASE_INSIGHTS[phase])

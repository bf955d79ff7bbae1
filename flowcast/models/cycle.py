"""
Cycle model definitions for parameters, analysis results and projections.
"""
from datetime import date
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator

from flowcast.models.phase import CyclePhase, CyclePhaseLabel
from flowcast.services.constants import (
    DEFAULT_CYCLE_LENGTH,
    DEFAULT_PERIOD_LENGTH,
    MIN_CYCLE_LENGTH,
    MAX_CYCLE_LENGTH,
    MIN_PERIOD_LENGTH,
    MAX_PERIOD_LENGTH
)

def clamp(value: int, lower: int, upper: int) -> int:
    """Clamp value into the inclusive range [lower, upper]."""
    return max(lower, min(upper, value))

class CycleParameters(BaseModel):
    """
    Cycle settings, either configured by the user or derived from logs.

    Lengths outside the physiologically plausible range are clamped rather
    than rejected. A missing ``last_period_start`` marks a new user.
    """
    model_config = ConfigDict(frozen=True)

    cycle_length: int = DEFAULT_CYCLE_LENGTH
    period_length: int = DEFAULT_PERIOD_LENGTH
    last_period_start: Optional[date] = None

    @field_validator("cycle_length")
    @classmethod
    def _clamp_cycle_length(cls, value: int) -> int:
        return clamp(value, MIN_CYCLE_LENGTH, MAX_CYCLE_LENGTH)

    @field_validator("period_length")
    @classmethod
    def _clamp_period_length(cls, value: int) -> int:
        return clamp(value, MIN_PERIOD_LENGTH, MAX_PERIOD_LENGTH)

    @property
    def is_new_user(self) -> bool:
        """Check if no anchor date is known yet."""
        return self.last_period_start is None

DEFAULT_CYCLE_PARAMETERS = CycleParameters()

class PeriodStreak(BaseModel):
    """
    A maximal run of date-consecutive bleeding days.
    """
    model_config = ConfigDict(frozen=True)

    start: date
    length: int

class CycleAnalysis(BaseModel):
    """
    Averages derived from historical logs.
    """
    model_config = ConfigDict(frozen=True)

    avg_cycle_length: int
    avg_period_length: int
    cycle_count: int
    streak_count: int = 0

class CycleData(BaseModel):
    """
    Projected dates for the upcoming cycle.

    All projected dates are None when no anchor date is known.
    """
    model_config = ConfigDict(frozen=True)

    cycle_length: int
    period_length: int
    last_period_start: Optional[date] = None
    next_period_start: Optional[date] = None
    predicted_ovulation: Optional[date] = None
    fertile_window_start: Optional[date] = None
    fertile_window_end: Optional[date] = None
    is_new_user: bool

class CycleSummary(BaseModel):
    """
    Display-ready snapshot of the user's cycle for a given day.
    """
    model_config = ConfigDict(frozen=True)

    cycle_day: int
    phase: CyclePhase
    phase_label: CyclePhaseLabel
    days_until_next_period: int
    next_period_start: Optional[date] = None
    predicted_ovulation: Optional[date] = None
    fertile_window_start: Optional[date] = None
    fertile_window_end: Optional[date] = None
    avg_cycle_length: int
    avg_period_length: int
    cycle_count: int = 0
    is_new_user: bool

class MonthView(BaseModel):
    """
    Day-of-month sets for rendering a single calendar month.
    """
    model_config = ConfigDict(frozen=True)

    month: int
    year: int
    period_days: list[int]
    predicted_period_days: list[int]
    fertile_days: list[int]
    ovulation_day: Optional[int] = None

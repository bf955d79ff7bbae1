"""
Service module assembling the cycle summary shown to the user.

Configured cycle settings and the averages derived from daily logs are merged
here into a single set of resolved parameters, which then feed the projector
and phase classifier.

Typical usage:
    params = repository.get_cycle_parameters(user_id)
    logs = repository.get_daily_logs(user_id)
    summary = build_cycle_summary(params, logs)
"""
from typing import Iterable, Optional, Tuple
from datetime import date

from aws_lambda_powertools import Logger

from flowcast.models.cycle import CycleAnalysis, CycleParameters, CycleSummary
from flowcast.models.log import DailyLog
from flowcast.services.analyzer import analyze_cycles, latest_period_start
from flowcast.services.cycle import (
    calculate_cycle_data,
    get_cycle_day_for_date,
    get_days_until_next_period
)
from flowcast.services.phase import get_cycle_phase_key, get_cycle_phase

logger = Logger()

def resolve_cycle_parameters(
    configured: CycleParameters,
    logs: Optional[Iterable[DailyLog]]
) -> Tuple[CycleParameters, CycleAnalysis]:
    """
    Merge configured settings with what the logs show.

    The derived period length replaces the configured one as soon as the
    logs contain a period streak, while the derived cycle length is only
    used once at least one valid cycle has been observed. The anchor moves
    forward to the most recent logged period start when that is later than
    the configured one.

    Args:
        configured: Settings stored for the user
        logs: Daily logs in any order

    Returns:
        Tuple of (resolved parameters, analysis)
    """
    logs = list(logs or [])
    analysis = analyze_cycles(logs)

    cycle_length = configured.cycle_length
    period_length = configured.period_length
    if analysis.cycle_count > 0:
        cycle_length = analysis.avg_cycle_length
    if analysis.streak_count > 0:
        period_length = analysis.avg_period_length

    anchor = configured.last_period_start
    detected_start = latest_period_start(logs)
    if detected_start and (anchor is None or detected_start > anchor):
        anchor = detected_start

    resolved = CycleParameters(
        cycle_length=cycle_length,
        period_length=period_length,
        last_period_start=anchor
    )
    logger.debug("Resolved cycle parameters", extra={
        "configured": configured.model_dump(mode="json"),
        "resolved": resolved.model_dump(mode="json"),
        "cycle_count": analysis.cycle_count
    })
    return resolved, analysis

def build_cycle_summary(
    configured: CycleParameters,
    logs: Optional[Iterable[DailyLog]] = None,
    today: Optional[date] = None
) -> CycleSummary:
    """
    Build the display-ready cycle summary for a day.

    Args:
        configured: Settings stored for the user
        logs: Daily logs in any order
        today: Day to summarise, defaults to the current date

    Returns:
        CycleSummary

    Example:
        >>> summary = build_cycle_summary(CycleParameters(last_period_start=date(2024, 1, 1)),
        ...                               today=date(2024, 1, 10))
        >>> summary.cycle_day, summary.days_until_next_period
        (10, 19)
    """
    if today is None:
        today = date.today()

    params, analysis = resolve_cycle_parameters(configured, logs)
    cycle_data = calculate_cycle_data(
        params.last_period_start, params.cycle_length, params.period_length
    )
    cycle_day = get_cycle_day_for_date(today, params.last_period_start, params.cycle_length)

    return CycleSummary(
        cycle_day=cycle_day,
        phase=get_cycle_phase_key(
            today, params.last_period_start, params.cycle_length, params.period_length
        ),
        phase_label=get_cycle_phase(
            today, params.last_period_start, params.cycle_length, params.period_length
        ),
        days_until_next_period=get_days_until_next_period(cycle_day, params.cycle_length),
        next_period_start=cycle_data.next_period_start,
        predicted_ovulation=cycle_data.predicted_ovulation,
        fertile_window_start=cycle_data.fertile_window_start,
        fertile_window_end=cycle_data.fertile_window_end,
        avg_cycle_length=params.cycle_length,
        avg_period_length=params.period_length,
        cycle_count=analysis.cycle_count,
        is_new_user=cycle_data.is_new_user
    )

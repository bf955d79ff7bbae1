"""
Statistics calculation service for daily log data.

This module provides the figures shown on the insights screen: averages,
log counts and the most frequently logged symptom.
"""
from typing import Dict, Iterable, List, Optional
from collections import Counter

from flowcast.models.log import DailyLog

def get_most_common_symptom(logs: Iterable[DailyLog]) -> Optional[Dict]:
    """
    Find the symptom logged on the most days.

    Ties go to the symptom that was seen first.

    Args:
        logs: Daily logs to analyze

    Returns:
        Dictionary with ``symptom`` and ``count``, or None without symptoms
    """
    counts = Counter(symptom.value for log in logs for symptom in log.symptoms)
    if not counts:
        return None
    symptom, count = counts.most_common(1)[0]
    return {"symptom": symptom, "count": count}

def calculate_log_statistics(
    logs: List[DailyLog],
    cycle_length: int,
    period_length: int
) -> Dict:
    """
    Calculate summary statistics over a user's daily logs.

    Args:
        logs: Daily logs in any order
        cycle_length: Resolved cycle length in days
        period_length: Resolved period length in days

    Returns:
        Dictionary containing:
        - average_cycle: Cycle length in days
        - average_period: Period length in days
        - total_logs: Number of logged days
        - last_log_date: Most recent logged date or None
        - most_common_symptom: Most frequent symptom with its count, or None
    """
    last_log_date = max((log.date for log in logs), default=None)
    return {
        "average_cycle": cycle_length,
        "average_period": period_length,
        "total_logs": len(logs),
        "last_log_date": last_log_date,
        "most_common_symptom": get_most_common_symptom(logs)
    }

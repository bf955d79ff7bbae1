"""
Pytest configuration and shared fixtures.
"""
import pytest
from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Optional

from flowcast.models.cycle import CycleParameters
from flowcast.models.log import BleedingIntensity, DailyLog, Symptom

def bleeding_days(start: date, length: int, intensity=BleedingIntensity.MEDIUM) -> List[DailyLog]:
    """Create consecutive bleeding-day logs."""
    return [
        DailyLog(date=start + timedelta(days=i), bleeding_intensity=intensity)
        for i in range(length)
    ]

@pytest.fixture
def two_period_logs() -> List[DailyLog]:
    """Two five-day periods 28 days apart, with a non-bleeding day between."""
    return [
        *bleeding_days(date(2024, 1, 1), 5),
        DailyLog(
            date=date(2024, 1, 12),
            bleeding_intensity=BleedingIntensity.NONE,
            symptoms=[Symptom.BLOATING]
        ),
        *bleeding_days(date(2024, 1, 29), 5),
    ]

@pytest.fixture
def regular_logs() -> List[DailyLog]:
    """Six four-day periods on a regular 30 day cycle."""
    logs = []
    for i in range(6):
        logs.extend(bleeding_days(date(2024, 1, 1) + timedelta(days=i * 30), 4))
    return logs

@pytest.fixture
def configured_params() -> CycleParameters:
    """Settings for an existing user."""
    return CycleParameters(
        cycle_length=28,
        period_length=5,
        last_period_start=date(2024, 1, 1)
    )

@dataclass
class LambdaContext:
    function_name: str = "flowcast-test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:us-east-1:123456789012:function:flowcast-test"
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"
    tenant_id: Optional[str] = None

@pytest.fixture
def lambda_context() -> LambdaContext:
    """Minimal Lambda context accepted by the powertools logger."""
    return LambdaContext()

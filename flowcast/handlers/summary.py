"""
Lambda handler for the current cycle summary.
"""
from typing import Dict
from datetime import date

from aws_lambda_powertools.utilities.typing import LambdaContext

from flowcast.services.phase import get_phase_insight
from flowcast.services.statistics import calculate_log_statistics
from flowcast.services.summary import build_cycle_summary
from flowcast.utils.clients import get_repository
from flowcast.utils.logging import logger
from flowcast.utils.middleware import (
    handle_errors,
    json_response,
    get_query_params,
    get_date_param,
    require_param
)

@logger.inject_lambda_context
@handle_errors
def handler(event: Dict, context: LambdaContext) -> Dict:
    """
    Handle cycle summary request.

    Query parameters:
        user_id: Required user identifier
        date: Optional ``YYYY-MM-DD`` day to summarise, defaults to today

    Args:
        event: API Gateway Lambda proxy event
        context: Lambda context

    Returns:
        API Gateway Lambda proxy response with summary, phase insight and
        log statistics
    """
    params = get_query_params(event)
    user_id = require_param(params, "user_id")
    today = get_date_param(params, "date") or date.today()

    repository = get_repository()
    configured = repository.get_cycle_parameters(user_id)
    logs = repository.get_daily_logs(user_id)

    summary = build_cycle_summary(configured, logs, today=today)
    logger.info("Cycle summary built", extra={
        "user_id": user_id,
        "cycle_day": summary.cycle_day,
        "phase": summary.phase.value,
        "is_new_user": summary.is_new_user
    })

    return json_response(200, {
        "user_id": user_id,
        "date": today.isoformat(),
        "summary": summary.model_dump(mode="json"),
        "insight": get_phase_insight(summary.phase).model_dump(mode="json"),
        "statistics": calculate_log_statistics(
            logs, summary.avg_cycle_length, summary.avg_period_length
        )
    })

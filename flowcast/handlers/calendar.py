"""
Lambda handler for calendar month views.
"""
from typing import Dict
from datetime import date

from aws_lambda_powertools.utilities.typing import LambdaContext

from flowcast.services.calendar import build_month_view
from flowcast.services.summary import resolve_cycle_parameters
from flowcast.utils.clients import get_repository
from flowcast.utils.logging import logger
from flowcast.utils.middleware import (
    handle_errors,
    json_response,
    get_query_params,
    get_date_param,
    get_int_param,
    require_param
)

@logger.inject_lambda_context
@handle_errors
def handler(event: Dict, context: LambdaContext) -> Dict:
    """
    Handle calendar month request.

    Query parameters:
        user_id: Required user identifier
        month: Calendar month, 1-12
        year: Calendar year
        today: Optional reference date for past period days

    Args:
        event: API Gateway Lambda proxy event
        context: Lambda context

    Returns:
        API Gateway Lambda proxy response with the month view
    """
    params = get_query_params(event)
    user_id = require_param(params, "user_id")
    month = get_int_param(params, "month", 1, 12)
    year = get_int_param(params, "year", 1900, 2999)
    today = get_date_param(params, "today") or date.today()

    repository = get_repository()
    cycle_params, _ = resolve_cycle_parameters(
        repository.get_cycle_parameters(user_id),
        repository.get_daily_logs(user_id)
    )
    view = build_month_view(month, year, cycle_params, today=today)

    return json_response(200, {
        "user_id": user_id,
        **view.model_dump(mode="json")
    })

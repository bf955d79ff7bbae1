"""
Lambda handler for daily log CRUD.
"""
from typing import Dict

from aws_lambda_powertools.utilities.typing import LambdaContext

from flowcast.models.log import DailyLog
from flowcast.services.exceptions import InvalidRequestError
from flowcast.utils.clients import get_repository
from flowcast.utils.logging import logger
from flowcast.utils.middleware import (
    handle_errors,
    json_response,
    get_query_params,
    get_json_body,
    get_date_param,
    require_param
)

@logger.inject_lambda_context
@handle_errors
def handler(event: Dict, context: LambdaContext) -> Dict:
    """
    Handle daily log request.

    GET lists the user's logs newest first, POST stores the log for its
    date (replacing any existing one) and DELETE removes the log for the
    ``date`` query parameter.

    Args:
        event: API Gateway Lambda proxy event
        context: Lambda context

    Returns:
        API Gateway Lambda proxy response
    """
    method = event.get("httpMethod", "GET")
    params = get_query_params(event)
    user_id = require_param(params, "user_id")
    repository = get_repository()

    if method == "GET":
        logs = sorted(repository.get_daily_logs(user_id), key=lambda x: x.date, reverse=True)
        return json_response(200, {
            "user_id": user_id,
            "logs": [log.model_dump(mode="json") for log in logs]
        })

    if method == "POST":
        log = repository.save_daily_log(user_id, DailyLog(**get_json_body(event)))
        logger.info("Daily log saved", extra={"user_id": user_id, "date": str(log.date)})
        return json_response(201, log.model_dump(mode="json"))

    if method == "DELETE":
        log_date = get_date_param(params, "date")
        if log_date is None:
            raise InvalidRequestError("date is required")
        repository.delete_daily_log(user_id, log_date)
        logger.info("Daily log deleted", extra={"user_id": user_id, "date": str(log_date)})
        return json_response(200, {"user_id": user_id, "deleted": log_date.isoformat()})

    raise InvalidRequestError(f"Unsupported method {method}")

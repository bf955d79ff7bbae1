"""
Lambda handler for reading and updating cycle settings.
"""
from typing import Dict

from aws_lambda_powertools.utilities.typing import LambdaContext

from flowcast.models.cycle import CycleParameters
from flowcast.services.exceptions import InvalidRequestError
from flowcast.utils.clients import get_repository
from flowcast.utils.logging import logger
from flowcast.utils.middleware import (
    handle_errors,
    json_response,
    get_query_params,
    get_json_body,
    require_param
)

@logger.inject_lambda_context
@handle_errors
def handler(event: Dict, context: LambdaContext) -> Dict:
    """
    Handle cycle settings request.

    GET returns the stored settings (defaults for unknown users). PUT
    replaces them; lengths outside the supported range are clamped.

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
        settings = repository.get_cycle_parameters(user_id)
    elif method == "PUT":
        settings = repository.update_cycle_parameters(
            user_id, CycleParameters(**get_json_body(event))
        )
    else:
        raise InvalidRequestError(f"Unsupported method {method}")

    return json_response(200, {
        "user_id": user_id,
        **settings.model_dump(mode="json")
    })

"""
Middleware functions for request processing.
"""
import json
from datetime import date
from functools import wraps
from typing import Any, Callable, Dict, Optional

from pydantic import ValidationError

from flowcast.services.exceptions import InvalidRequestError, RepositoryError
from flowcast.utils.logging import logger

JSON_HEADERS = {"Content-Type": "application/json"}

def json_response(status_code: int, body: Dict[str, Any]) -> Dict[str, Any]:
    """Build an API Gateway proxy response with a JSON body."""
    return {
        "statusCode": status_code,
        "headers": JSON_HEADERS,
        "body": json.dumps(body, default=str),
        "isBase64Encoded": False
    }

def get_query_params(event: Dict[str, Any]) -> Dict[str, str]:
    """Get query string parameters, which API Gateway sends as null when empty."""
    return event.get("queryStringParameters") or {}

def get_json_body(event: Dict[str, Any]) -> Dict[str, Any]:
    """
    Parse the JSON request body.

    Raises:
        InvalidRequestError: If the body is missing or not a JSON object
    """
    body = event.get("body")
    if isinstance(body, dict):
        return body
    if not body:
        raise InvalidRequestError("Request body is required")
    try:
        parsed = json.loads(body)
    except json.JSONDecodeError:
        raise InvalidRequestError("Request body must be valid JSON")
    if not isinstance(parsed, dict):
        raise InvalidRequestError("Request body must be a JSON object")
    return parsed

def require_param(params: Dict[str, Any], name: str) -> str:
    """
    Get a required parameter.

    Raises:
        InvalidRequestError: If the parameter is missing or empty
    """
    value: Optional[str] = params.get(name)
    if not value:
        raise InvalidRequestError(f"{name} is required")
    return value

def get_date_param(params: Dict[str, Any], name: str) -> Optional[date]:
    """
    Get an optional ``YYYY-MM-DD`` parameter as a date.

    Raises:
        InvalidRequestError: If the value is not a valid ISO date
    """
    value = params.get(name)
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise InvalidRequestError(f"{name} must be a date in YYYY-MM-DD format")

def get_int_param(params: Dict[str, Any], name: str, lower: int, upper: int) -> int:
    """
    Get a required integer parameter within an inclusive range.

    Raises:
        InvalidRequestError: If the value is missing, not an integer or out of range
    """
    value = require_param(params, name)
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise InvalidRequestError(f"{name} must be an integer")
    if not lower <= number <= upper:
        raise InvalidRequestError(f"{name} must be between {lower} and {upper}")
    return number

def handle_errors(f: Callable) -> Callable:
    """
    Decorator mapping exceptions to API Gateway error responses.

    Invalid input becomes a 400 with a readable message, storage failures a
    502, and anything unexpected is logged and returned as a 500.

    Args:
        f: Handler function to wrap

    Returns:
        Wrapped handler function
    """
    @wraps(f)
    def wrapped(event: Dict[str, Any], *args: Any, **kwargs: Any) -> Dict[str, Any]:
        try:
            return f(event, *args, **kwargs)
        except InvalidRequestError as e:
            logger.warning("Invalid request", extra={"error": str(e)})
            return json_response(400, {"error": str(e)})
        except ValidationError as e:
            message = "; ".join(
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in e.errors()
            )
            logger.warning("Request validation failed", extra={"error": message})
            return json_response(400, {"error": message})
        except RepositoryError as e:
            logger.exception("Storage error while handling request")
            return json_response(502, {"error": str(e)})
        except Exception as e:
            logger.exception("Unhandled error while handling request", extra={
                "error_type": e.__class__.__name__
            })
            return json_response(500, {"error": "Internal server error"})

    return wrapped

"""Shared logging configuration."""
import os
import sys
import json
import traceback
from functools import partial
from aws_lambda_powertools import Logger

def format_exception(exc_info):
    """Format exception info into a single line."""
    if exc_info is True:  # When exc_info=True is passed to logger.exception
        exc_info = sys.exc_info()

    if exc_info and isinstance(exc_info, tuple) and len(exc_info) == 3:
        try:
            trace = ''.join(traceback.format_exception(*exc_info))
            return trace.replace('\n', ' | ').strip()
        except Exception as e:
            return f"Error formatting exception: {str(e)}"
    return None

class SingleLineLogger(Logger):
    """Logger that writes exception tracebacks on a single line."""

    def exception(self, message, *args, **kwargs):
        """Log an error with the current traceback flattened into ``extra``."""
        exc_info = kwargs.pop('exc_info', True)
        extra = kwargs.pop('extra', {})
        extra['exception'] = format_exception(exc_info)
        kwargs['exc_info'] = False
        kwargs['extra'] = extra
        super().error(message, *args, **kwargs)

logger = SingleLineLogger(
    service="flowcast",
    level=os.environ.get('LOG_LEVEL', 'INFO'),
    log_uncaught_exceptions=True,
    json_serializer=partial(json.dumps, default=str),
    use_rfc3339=True
)

logger.append_keys(
    region=os.environ.get('AWS_REGION'),
    function=os.environ.get('AWS_LAMBDA_FUNCTION_NAME'),
    version=os.environ.get('AWS_LAMBDA_FUNCTION_VERSION')
)

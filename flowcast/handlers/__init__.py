"""
Lambda handlers package for AWS Lambda functions.
"""
from .summary import handler as summary_handler
from .calendar import handler as calendar_handler
from .settings import handler as settings_handler
from .logs import handler as logs_handler

__all__ = ["summary_handler", "calendar_handler", "settings_handler", "logs_handler"]

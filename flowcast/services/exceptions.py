"""
Service-level exceptions.

This module contains exceptions that can be raised by the persistence layer
and request handling. The prediction engine itself never raises for missing
or sparse data.
"""

class FlowcastError(Exception):
    """Base exception for application errors."""
    pass

class RepositoryError(FlowcastError):
    """Raised when reading from or writing to storage fails."""
    pass

class InvalidRequestError(FlowcastError):
    """Raised when a request is missing or has malformed parameters."""
    pass

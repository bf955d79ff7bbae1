"""
Centralized client initialization module.

This module provides lazy-loaded shared clients for the handlers.
"""
from flowcast.services.repository import CycleRepository

# Initialize shared clients (lazy loading)
_repository = None

def get_repository() -> CycleRepository:
    """Get or create the cycle repository."""
    global _repository
    if _repository is None:
        _repository = CycleRepository()
    return _repository

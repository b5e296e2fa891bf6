"""
Facade-level errors. Database failures are never wrapped: SQLAlchemy and driver
exceptions reach the caller unchanged.
"""

from .errors import ConnectionTargetError, DataAccessError, UnknownBackendError

__all__ = ["DataAccessError", "ConnectionTargetError", "UnknownBackendError"]

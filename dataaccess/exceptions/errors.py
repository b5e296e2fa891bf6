from typing import Optional


class DataAccessError(Exception):
    """Base class for facade configuration errors."""
    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


class ConnectionTargetError(DataAccessError, ValueError):
    """Connection target is empty or cannot be parsed."""


class UnknownBackendError(DataAccessError, LookupError):
    """No adapter is registered under the requested backend name."""
    def __init__(self, backend: str, available=()):
        super().__init__(
            f"Unknown database backend: {backend!r}",
            detail=", ".join(sorted(available)) or None,
        )
        self.backend = backend

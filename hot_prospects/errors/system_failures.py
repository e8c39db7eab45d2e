"""
System failure error classifications.

These exceptions represent storage and platform failures. The store reports
them instead of crashing, but they are not recoverable by retrying the same
input.
"""

from typing import Any, Optional


class SystemFailureError(Exception):
    """Base class for system-level failures."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class PersistenceError(SystemFailureError):
    """File system persistence failures."""

    def __init__(self, message: str, operation: Optional[str] = None,
                 target: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation
        self.target = target


class StorageNotFoundError(PersistenceError):
    """No persisted file exists yet."""


class NotificationError(SystemFailureError):
    """Local notification center failures."""

    def __init__(self, message: str, request_id: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.request_id = request_id

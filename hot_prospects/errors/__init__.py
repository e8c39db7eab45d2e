"""
Error classification for the prospect tracker.

Data quality errors cover input that can be dropped or replaced with a safe
default (scan payloads, persisted files). System failures cover storage and
notification problems the caller may want to surface.
"""

from .data_quality import (
    DataQualityError,
    MalformedScanPayloadError,
    CorruptStoreDataError,
    UnsupportedSchemaVersionError,
)
from .system_failures import (
    SystemFailureError,
    PersistenceError,
    StorageNotFoundError,
    NotificationError,
)


class ProspectNotFoundError(LookupError):
    """No prospect with the requested id is held by the store."""

    def __init__(self, prospect_id: str):
        super().__init__(f"Unknown prospect: {prospect_id}")
        self.prospect_id = prospect_id


__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MalformedScanPayloadError",
    "CorruptStoreDataError",
    "UnsupportedSchemaVersionError",
    # System Failures
    "SystemFailureError",
    "PersistenceError",
    "StorageNotFoundError",
    "NotificationError",
    # Lookups
    "ProspectNotFoundError",
]

"""
Data quality error classifications.

These exceptions describe input that the application recovers from: a scan
payload that is dropped, or a persisted file that is replaced by an empty
collection.
"""

from typing import Any, Optional


class DataQualityError(Exception):
    """Base class for data quality issues that can be handled gracefully."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class MalformedScanPayloadError(DataQualityError):
    """Scanned text does not split into a name and an email address."""

    def __init__(self, message: str, raw_payload: Optional[str] = None,
                 field_count: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_payload = raw_payload
        self.field_count = field_count


class CorruptStoreDataError(DataQualityError):
    """Persisted prospect data exists but cannot be decoded."""

    def __init__(self, message: str, record_index: Optional[int] = None,
                 field: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.record_index = record_index
        self.field = field


class UnsupportedSchemaVersionError(CorruptStoreDataError):
    """Persisted data was written by a newer schema than this build reads."""

    def __init__(self, message: str, found_version: Optional[int] = None,
                 supported_version: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.found_version = found_version
        self.supported_version = supported_version

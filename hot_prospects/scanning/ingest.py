"""
QR scan ingestion.

A scanner hands over either decoded text or an error. Text must carry a name
and an email address on two lines; anything else is dropped without changing
the store.
"""

from dataclasses import dataclass
from typing import Optional

import structlog

from ..errors import MalformedScanPayloadError
from ..models import Prospect
from ..store import ProspectStore

logger = structlog.get_logger(__name__)

EXPECTED_FIELDS = 2


@dataclass(frozen=True)
class ScanResult:
    """Outcome reported by a scanner: a payload on success, an error otherwise."""
    payload: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, payload: str) -> "ScanResult":
        return cls(payload=payload)

    @classmethod
    def failure(cls, error: str) -> "ScanResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None and self.payload is not None


def parse_scan_payload(payload: str, separator: str = "\n") -> Prospect:
    """
    Turn a scanned payload into a new, uncontacted Prospect.

    Args:
        payload: Decoded QR text, ``"<name>\\n<email>"``
        separator: Field separator

    Returns:
        A Prospect with a fresh id

    Raises:
        MalformedScanPayloadError: Unless the payload splits into exactly two
            non-empty fields
    """
    details = payload.split(separator)

    if len(details) != EXPECTED_FIELDS:
        raise MalformedScanPayloadError(
            f"Expected {EXPECTED_FIELDS} fields, got {len(details)}",
            raw_payload=payload,
            field_count=len(details)
        )

    name, email_address = details
    if not name or not email_address:
        raise MalformedScanPayloadError(
            "Scan payload has an empty field",
            raw_payload=payload,
            field_count=len(details)
        )

    return Prospect(name=name, email_address=email_address)


class ScanIngestor:
    """Feeds completed scans into the store."""

    def __init__(self, store: ProspectStore, separator: str = "\n"):
        self.store = store
        self.separator = separator
        self.logger = logger

    def handle_scan(self, result: ScanResult) -> Optional[Prospect]:
        """
        Add the scanned prospect to the store.

        Returns:
            The added Prospect, or None if the scan failed or was malformed
        """
        if not result.ok:
            self.logger.warning("Scanning failed", error=result.error)
            return None

        try:
            prospect = parse_scan_payload(result.payload, self.separator)
        except MalformedScanPayloadError as e:
            self.logger.debug(
                "Discarded malformed scan payload",
                field_count=e.field_count,
                error=str(e)
            )
            return None

        self.store.add(prospect)
        return prospect

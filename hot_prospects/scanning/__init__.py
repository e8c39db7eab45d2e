"""
Scanning module.

Parses two-line QR payloads into prospects and adds them to the store.
"""

from .ingest import ScanIngestor, ScanResult, parse_scan_payload

__all__ = ["ScanIngestor", "ScanResult", "parse_scan_payload"]

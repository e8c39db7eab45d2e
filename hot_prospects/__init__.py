"""
Hot Prospects - Scanned contact tracking

Keeps a durable, ordered list of prospects captured from QR codes, lets the
user mark them contacted or uncontacted, and schedules local reminders to
follow up.
"""

__version__ = "0.1.0"
__author__ = "Hot Prospects Team"

"""
Notifications module.

Builds one-shot local reminders and hands them to a notification center
after checking permission.
"""

from .base import AuthorizationStatus, CalendarTrigger, NotificationCenter, ReminderRequest
from .memory import InMemoryNotificationCenter
from .scheduler import ReminderScheduler

__all__ = [
    "AuthorizationStatus",
    "CalendarTrigger",
    "NotificationCenter",
    "ReminderRequest",
    "InMemoryNotificationCenter",
    "ReminderScheduler",
]

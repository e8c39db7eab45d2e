"""Base types for local reminder notifications."""

import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, time, timedelta
from enum import Enum
from typing import Optional


class AuthorizationStatus(str, Enum):
    """Notification permission state reported by a notification center."""
    NOT_DETERMINED = "not_determined"
    DENIED = "denied"
    AUTHORIZED = "authorized"


@dataclass(frozen=True)
class CalendarTrigger:
    """Fires when the local wall clock next matches ``hour:minute``."""
    hour: int = 9
    minute: int = 0
    repeats: bool = False

    def next_fire_time(self, now: Optional[datetime] = None) -> datetime:
        """
        Next local time strictly after ``now`` matching the trigger.

        Args:
            now: Reference time; defaults to the current local time

        Returns:
            Today at ``hour:minute`` if still ahead, otherwise tomorrow
        """
        system_local = now is None
        if now is None:
            now = datetime.now().astimezone()

        fire_date = now.date()
        if now.replace(hour=self.hour, minute=self.minute, second=0, microsecond=0) <= now:
            fire_date += timedelta(days=1)

        # UTC offset is resolved for the fire date, not copied from now
        wall_clock = datetime.combine(fire_date, time(self.hour, self.minute))
        if system_local:
            return wall_clock.astimezone()
        return wall_clock.replace(tzinfo=now.tzinfo)


@dataclass(frozen=True)
class ReminderRequest:
    """A one-shot local reminder to contact a prospect."""
    title: str
    subtitle: str
    trigger: CalendarTrigger
    prospect_id: str
    sound: str = "default"
    identifier: str = field(default_factory=lambda: str(uuid.uuid4()))


class NotificationCenter(ABC):
    """Platform boundary for local notifications."""

    @abstractmethod
    def authorization_status(self) -> AuthorizationStatus:
        """Current permission state."""
        pass

    @abstractmethod
    def request_authorization(self, options: tuple[str, ...]) -> bool:
        """
        Ask the user for notification permission.

        Args:
            options: Requested capabilities, e.g. ("alert", "badge", "sound")

        Returns:
            True if permission was granted
        """
        pass

    @abstractmethod
    def add(self, request: ReminderRequest) -> None:
        """Schedule a reminder request."""
        pass

    @abstractmethod
    def pending_requests(self) -> list[ReminderRequest]:
        """Requests scheduled but not yet delivered."""
        pass

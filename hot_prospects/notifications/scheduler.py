"""Reminder scheduling for prospects."""

from typing import Optional

import structlog

from ..config.defaults import ReminderParams
from ..errors import NotificationError
from ..models import Prospect
from .base import AuthorizationStatus, CalendarTrigger, NotificationCenter, ReminderRequest

logger = structlog.get_logger(__name__)


class ReminderScheduler:
    """
    Schedules a one-shot local reminder to contact a prospect.

    Authorization is checked first and requested when missing. Which
    prospects already have a pending reminder is not tracked, so scheduling
    twice produces two reminders.
    """

    def __init__(self, center: NotificationCenter, params: Optional[ReminderParams] = None):
        self.center = center
        self.params = params or ReminderParams()
        self.logger = logger

    def build_request(self, prospect: Prospect) -> ReminderRequest:
        """Create the reminder request for a prospect without scheduling it."""
        return ReminderRequest(
            title=self.params.title_template.format(name=prospect.name),
            subtitle=prospect.email_address,
            trigger=CalendarTrigger(
                hour=self.params.hour,
                minute=self.params.minute,
                repeats=False
            ),
            prospect_id=prospect.id,
            sound=self.params.sound,
        )

    def schedule(self, prospect: Prospect) -> Optional[ReminderRequest]:
        """
        Schedule a reminder, asking for permission first if needed.

        Args:
            prospect: Prospect to be reminded about

        Returns:
            The scheduled request, or None if permission was refused or the
            center rejected the request
        """
        if self.center.authorization_status() != AuthorizationStatus.AUTHORIZED:
            granted = self.center.request_authorization(self.params.authorization_options)
            if not granted:
                self.logger.warning(
                    "Notification permission not allowed",
                    prospect_id=prospect.id
                )
                return None

        request = self.build_request(prospect)

        try:
            self.center.add(request)
        except NotificationError as e:
            self.logger.error(
                "Failed to schedule reminder",
                prospect_id=prospect.id,
                request_id=request.identifier,
                error=str(e)
            )
            return None

        self.logger.info(
            "Reminder scheduled",
            prospect_id=prospect.id,
            request_id=request.identifier,
            fire_at=request.trigger.next_fire_time().isoformat()
        )
        return request

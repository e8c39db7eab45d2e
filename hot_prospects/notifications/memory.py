"""In-process notification center used for headless runs and tests."""

from typing import Optional

import structlog

from ..errors import NotificationError
from .base import AuthorizationStatus, NotificationCenter, ReminderRequest

logger = structlog.get_logger(__name__)


class InMemoryNotificationCenter(NotificationCenter):
    """Records reminder requests instead of handing them to a platform."""

    def __init__(
        self,
        grant_authorization: bool = True,
        status: AuthorizationStatus = AuthorizationStatus.NOT_DETERMINED
    ):
        self.grant_authorization = grant_authorization
        self._status = status
        self._pending: list[ReminderRequest] = []
        self.authorization_requests = 0

    def authorization_status(self) -> AuthorizationStatus:
        return self._status

    def request_authorization(self, options: tuple[str, ...]) -> bool:
        self.authorization_requests += 1

        # Once answered, the user is not prompted again.
        if self._status != AuthorizationStatus.NOT_DETERMINED:
            return self._status == AuthorizationStatus.AUTHORIZED

        self._status = (
            AuthorizationStatus.AUTHORIZED if self.grant_authorization
            else AuthorizationStatus.DENIED
        )
        logger.info(
            "Notification authorization answered",
            options=list(options),
            status=self._status.value
        )
        return self._status == AuthorizationStatus.AUTHORIZED

    def add(self, request: ReminderRequest) -> None:
        if self._status != AuthorizationStatus.AUTHORIZED:
            raise NotificationError(
                "Notifications are not authorized",
                request_id=request.identifier
            )
        self._pending.append(request)

    def pending_requests(self) -> list[ReminderRequest]:
        return list(self._pending)

    def remove_pending(self, identifier: Optional[str] = None) -> int:
        """Drop one pending request by identifier, or all of them."""
        before = len(self._pending)
        if identifier is None:
            self._pending.clear()
        else:
            self._pending = [r for r in self._pending if r.identifier != identifier]
        return before - len(self._pending)

"""Mark notification read use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from stackit.application.usecase.base import BaseUseCase
from stackit.domain.error import NotAuthorizedError, NotFoundError
from stackit.domain.service import NotificationService
from stackit.domain.value import NotificationId, UserId

from .list_notifications import NotificationItem


class MarkNotificationReadRequest(BaseModel):
    """Mark notification read request."""

    notification_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class MarkNotificationReadUseCase(BaseUseCase):
    """Use case for marking one of the user's notifications read."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize mark notification read use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(self, request: MarkNotificationReadRequest) -> NotificationItem:
        """Execute mark read flow.

        Marking an already read notification is not an error.

        Args:
            request: Mark notification read request

        Returns:
            The notification, now read

        Raises:
            NotFoundError: If the notification doesn't exist
            NotAuthorizedError: If it belongs to another user
        """
        notification_id = NotificationId(UUID(request.notification_id))
        user_id = UserId(UUID(request.user_id))

        notification = await self.notification_service.get(notification_id)
        if not notification:
            raise NotFoundError("Notification", str(notification_id))

        if notification.user_id != user_id:
            logfire.warn(
                "Mark read on another user's notification",
                notification_id=str(notification_id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError("notification", str(notification_id), str(user_id))

        updated = await self.notification_service.mark_read(notification_id)
        return NotificationItem.from_notification(updated)

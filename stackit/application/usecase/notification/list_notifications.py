"""List notifications use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from stackit.application.usecase.base import BaseUseCase
from stackit.domain.model import Notification
from stackit.domain.service import NotificationService
from stackit.domain.value import NotificationType, UserId


class NotificationItem(BaseModel):
    """Notification as sent to clients."""

    id: str
    user_id: str
    type: NotificationType
    title: str
    message: str
    question_id: str | None
    answer_id: str | None
    read: bool
    created_at: datetime

    @classmethod
    def from_notification(cls, notification: Notification) -> "NotificationItem":
        return cls(
            id=str(notification.id),
            user_id=str(notification.user_id),
            type=notification.type,
            title=notification.title,
            message=notification.message,
            question_id=str(notification.question_id)
            if notification.question_id
            else None,
            answer_id=str(notification.answer_id) if notification.answer_id else None,
            read=notification.read,
            created_at=notification.created_at,
        )


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    user_id: str  # User ID from authenticated user
    limit: int | None = None  # Defaults to the configured page size


class ListNotificationsResponse(BaseModel):
    """A user's recent notifications and unread count."""

    notifications: list[NotificationItem]
    unread_count: int


class ListNotificationsUseCase(BaseUseCase):
    """Use case for the notification bell: recent items plus unread count.

    Side-effect free, so clients may poll it freely.
    """

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        user_id = UserId(UUID(request.user_id))

        notifications = await self.notification_service.list_for_user(
            user_id, request.limit
        )
        unread_count = await self.notification_service.unread_count(user_id)

        return ListNotificationsResponse(
            notifications=[NotificationItem.from_notification(n) for n in notifications],
            unread_count=unread_count,
        )

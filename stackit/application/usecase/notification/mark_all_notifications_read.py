"""Mark all notifications read use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.application.usecase.base import BaseUseCase
from stackit.domain.service import NotificationService
from stackit.domain.value import UserId


class MarkAllNotificationsReadRequest(BaseModel):
    """Mark all notifications read request."""

    user_id: str  # User ID from authenticated user


class MarkAllNotificationsReadResponse(BaseModel):
    """Mark all notifications read response."""

    updated: int
    unread_count: int


class MarkAllNotificationsReadUseCase(BaseUseCase):
    """Use case for clearing the unread badge."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: MarkAllNotificationsReadRequest
    ) -> MarkAllNotificationsReadResponse:
        user_id = UserId(UUID(request.user_id))

        updated = await self.notification_service.mark_all_read(user_id)
        unread_count = await self.notification_service.unread_count(user_id)

        return MarkAllNotificationsReadResponse(
            updated=updated, unread_count=unread_count
        )

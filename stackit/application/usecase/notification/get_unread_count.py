"""Get unread count use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.application.usecase.base import BaseUseCase
from stackit.domain.service import NotificationService
from stackit.domain.value import UserId


class GetUnreadCountRequest(BaseModel):
    """Unread count request."""

    user_id: str  # User ID from authenticated user


class GetUnreadCountResponse(BaseModel):
    """Unread count response."""

    unread_count: int


class GetUnreadCountUseCase(BaseUseCase):
    """Use case for the unread badge."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: GetUnreadCountRequest) -> GetUnreadCountResponse:
        count = await self.notification_service.unread_count(
            UserId(UUID(request.user_id))
        )
        return GetUnreadCountResponse(unread_count=count)

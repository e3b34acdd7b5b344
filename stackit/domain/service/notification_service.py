"""Notification store domain service."""

from datetime import datetime
from typing import List, Optional
from uuid import uuid4

import logfire

from stackit.config import NotificationSettings
from stackit.domain.error import NotFoundError, ValidationError
from stackit.domain.model.notification import NewNotification, Notification
from stackit.domain.repository import NotificationRepository
from stackit.domain.value import NotificationId, UserId

from .base import Service


class NotificationService(Service):
    """Domain service for the notification store.

    Notifications are appended by NotificationRules and otherwise only move
    from unread to read.
    """

    def __init__(
        self,
        notification_repository: NotificationRepository,
        notification_settings: NotificationSettings,
    ) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
            notification_settings: List limits
        """
        self.notification_repository = notification_repository
        self.notification_settings = notification_settings

    async def append(self, new_notification: NewNotification) -> Notification:
        """Validate and store a new, unread notification.

        Args:
            new_notification: Notification payload

        Returns:
            The stored notification

        Raises:
            ValidationError: If the recipient is missing, or a comment
                notification does not reference exactly one target
        """
        if new_notification.user_id is None:
            raise ValidationError("Notification has no recipient")

        if new_notification.type.is_comment and (
            (new_notification.question_id is None)
            == (new_notification.answer_id is None)
        ):
            raise ValidationError(
                "Comment notification must reference exactly one of "
                "question_id or answer_id"
            )

        with logfire.span(
            "notification_service.append",
            user_id=str(new_notification.user_id),
            type=new_notification.type.value,
        ):
            notification = Notification(
                id=NotificationId(uuid4()),
                user_id=new_notification.user_id,
                type=new_notification.type,
                title=new_notification.title,
                message=new_notification.message,
                question_id=new_notification.question_id,
                answer_id=new_notification.answer_id,
                read=False,
                created_at=datetime.now(),
            )
            saved = await self.notification_repository.save(notification)
            logfire.info(
                "Notification appended",
                notification_id=str(saved.id),
                user_id=str(saved.user_id),
                type=saved.type.value,
            )
            return saved

    async def get(self, notification_id: NotificationId) -> Optional[Notification]:
        """Look up a single notification."""
        return await self.notification_repository.find_by_id(notification_id)

    async def list_for_user(
        self, user_id: UserId, limit: Optional[int] = None
    ) -> List[Notification]:
        """List a user's most recent notifications, newest first.

        Args:
            user_id: Recipient user ID
            limit: Page size, capped at the configured maximum

        Returns:
            List of notifications

        Raises:
            ValidationError: If limit is below 1
        """
        if limit is None:
            limit = self.notification_settings.default_list_limit
        if limit < 1:
            raise ValidationError(f"limit must be at least 1, got {limit}")
        limit = min(limit, self.notification_settings.max_list_limit)

        with logfire.span(
            "notification_service.list_for_user", user_id=str(user_id), limit=limit
        ):
            return await self.notification_repository.find_by_user(user_id, limit)

    async def mark_read(self, notification_id: NotificationId) -> Notification:
        """Mark one notification as read.

        Marking an already read notification succeeds and changes nothing.

        Args:
            notification_id: Notification ID

        Returns:
            The notification, now read

        Raises:
            NotFoundError: If the notification doesn't exist
        """
        with logfire.span(
            "notification_service.mark_read", notification_id=str(notification_id)
        ):
            notification = await self.notification_repository.mark_read(
                notification_id
            )
            if not notification:
                logfire.warn(
                    "Mark read on missing notification",
                    notification_id=str(notification_id),
                )
                raise NotFoundError("Notification", str(notification_id))
            return notification

    async def mark_all_read(self, user_id: UserId) -> int:
        """Mark all of a user's unread notifications as read.

        Returns:
            Number of notifications that changed state
        """
        with logfire.span("notification_service.mark_all_read", user_id=str(user_id)):
            updated = await self.notification_repository.mark_all_read(user_id)
            logfire.info(
                "Notifications marked read", user_id=str(user_id), count=updated
            )
            return updated

    async def unread_count(self, user_id: UserId) -> int:
        """Count a user's unread notifications."""
        return await self.notification_repository.count_unread(user_id)

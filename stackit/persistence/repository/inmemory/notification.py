"""In-memory notification repository for testing."""

from typing import Optional

from stackit.domain.model.notification import Notification
from stackit.domain.repository.notification import NotificationRepository
from stackit.domain.value import NotificationId, UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing.

    Rows are kept in insertion order; the list index plays the part of the
    seq column.
    """

    def __init__(self) -> None:
        self._notifications: list[Notification] = []

    async def save(self, notification: Notification) -> Notification:
        """Append a notification."""
        self._notifications.append(notification)
        return notification

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        for notification in self._notifications:
            if notification.id == notification_id:
                return notification
        return None

    async def find_by_user(self, user_id: UserId, limit: int) -> list[Notification]:
        """Newest first, later inserts first on equal timestamps."""
        indexed = [
            (i, n) for i, n in enumerate(self._notifications) if n.user_id == user_id
        ]
        indexed.sort(key=lambda pair: (pair[1].created_at, pair[0]), reverse=True)
        return [n for _, n in indexed[:limit]]

    async def mark_read(self, notification_id: NotificationId) -> Optional[Notification]:
        """Set read=true."""
        for i, notification in enumerate(self._notifications):
            if notification.id == notification_id:
                if not notification.read:
                    notification = notification.model_copy(update={"read": True})
                    self._notifications[i] = notification
                return notification
        return None

    async def mark_all_read(self, user_id: UserId) -> int:
        """Set read=true on all of a user's unread notifications."""
        updated = 0
        for i, notification in enumerate(self._notifications):
            if notification.user_id == user_id and not notification.read:
                self._notifications[i] = notification.model_copy(update={"read": True})
                updated += 1
        return updated

    async def count_unread(self, user_id: UserId) -> int:
        """Count unread notifications."""
        return sum(
            1 for n in self._notifications if n.user_id == user_id and not n.read
        )

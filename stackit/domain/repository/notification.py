"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from stackit.domain.model.notification import Notification
from stackit.domain.value import NotificationId, UserId


class NotificationRepository(ABC):
    """Repository for Notification entity.

    The store is append-mostly: rows are inserted once and afterwards only
    the read flag changes.
    """

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Insert a new notification.

        Args:
            notification: The notification to insert

        Returns:
            The stored notification
        """
        pass

    @abstractmethod
    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID.

        Args:
            notification_id: The notification's unique identifier

        Returns:
            The notification if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId, limit: int) -> List[Notification]:
        """Find a user's most recent notifications.

        Ordered by created_at descending; rows with equal timestamps are
        returned latest insert first.

        Args:
            user_id: The recipient's ID
            limit: Maximum number of notifications to return

        Returns:
            List of notifications
        """
        pass

    @abstractmethod
    async def mark_read(self, notification_id: NotificationId) -> Optional[Notification]:
        """Set the read flag of one notification.

        Args:
            notification_id: The notification ID

        Returns:
            The notification after the update, None if it doesn't exist
        """
        pass

    @abstractmethod
    async def mark_all_read(self, user_id: UserId) -> int:
        """Set the read flag on all of a user's unread notifications.

        Args:
            user_id: The recipient's ID

        Returns:
            Number of notifications that changed state
        """
        pass

    @abstractmethod
    async def count_unread(self, user_id: UserId) -> int:
        """Count a user's unread notifications.

        Args:
            user_id: The recipient's ID

        Returns:
            Number of unread notifications
        """
        pass

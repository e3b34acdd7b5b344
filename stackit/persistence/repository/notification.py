"""PostgreSQL implementation of Notification repository."""

from typing import List, Optional

from sqlalchemy import and_, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model import Notification
from stackit.domain.repository import NotificationRepository
from stackit.domain.value import NotificationId, UserId
from stackit.persistence.mappers import notification_to_dict, row_to_notification
from stackit.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, notification: Notification) -> Notification:
        """Insert a new notification; seq is assigned by the database."""
        stmt = insert(notifications_table).values(
            **notification_to_dict(notification)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return notification

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        stmt = select(notifications_table).where(
            notifications_table.c.id == notification_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_notification(row._asdict()) if row else None

    async def find_by_user(self, user_id: UserId, limit: int) -> List[Notification]:
        """Find a user's newest notifications, later inserts first on ties."""
        stmt = (
            select(notifications_table)
            .where(notifications_table.c.user_id == user_id)
            .order_by(
                desc(notifications_table.c.created_at),
                desc(notifications_table.c.seq),
            )
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(row._asdict()) for row in result.fetchall()]

    async def mark_read(self, notification_id: NotificationId) -> Optional[Notification]:
        """Set read=true. Already read rows are returned unchanged."""
        stmt = (
            update(notifications_table)
            .where(notifications_table.c.id == notification_id)
            .values(read=True)
            .returning(notifications_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_notification(row._asdict()) if row else None

    async def mark_all_read(self, user_id: UserId) -> int:
        """Set read=true on every unread notification of a user."""
        stmt = (
            update(notifications_table)
            .where(
                and_(
                    notifications_table.c.user_id == user_id,
                    notifications_table.c.read.is_(False),
                )
            )
            .values(read=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def count_unread(self, user_id: UserId) -> int:
        """Count unread notifications with an aggregate query."""
        stmt = (
            select(func.count())
            .select_from(notifications_table)
            .where(
                and_(
                    notifications_table.c.user_id == user_id,
                    notifications_table.c.read.is_(False),
                )
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

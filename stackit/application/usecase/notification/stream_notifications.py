"""Live notification feed for one client session.

The feed opens a broker subscription, sends an initial snapshot of the user's
notifications, and after each push sends the pushed notification together
with a fresh snapshot. Pushes are only hints; the snapshot is re-read from
the store every time so out-of-order or dropped pushes self-correct.
"""

from typing import AsyncIterator, Awaitable, Callable, Literal

import logfire
from pydantic import BaseModel

from stackit.domain.service import NotificationBroker
from stackit.domain.value import UserId

from .list_notifications import ListNotificationsResponse, NotificationItem

# Loads the current list and unread count, each call in its own transaction
SnapshotLoader = Callable[[UserId], Awaitable[ListNotificationsResponse]]


class NotificationFeedEvent(BaseModel):
    """Message sent to a subscribed client."""

    event: Literal["snapshot", "notification"]
    notification: NotificationItem | None = None
    snapshot: ListNotificationsResponse


class NotificationFeed:
    """Turns a broker subscription into a stream of feed events."""

    def __init__(self, broker: NotificationBroker, load_snapshot: SnapshotLoader) -> None:
        """Initialize the feed.

        Args:
            broker: Notification broker to subscribe to
            load_snapshot: Reads the user's notifications and unread count
        """
        self.broker = broker
        self.load_snapshot = load_snapshot

    async def stream(self, user_id: UserId) -> AsyncIterator[NotificationFeedEvent]:
        """Yield feed events until the subscription closes.

        The subscription is released when the generator is closed, including
        when the consumer is cancelled.
        """
        async with self.broker.subscribe(user_id) as subscription:
            with logfire.span("notification_feed.snapshot", user_id=str(user_id)):
                snapshot = await self.load_snapshot(user_id)
            yield NotificationFeedEvent(event="snapshot", snapshot=snapshot)

            async for notification in subscription:
                snapshot = await self.load_snapshot(user_id)
                yield NotificationFeedEvent(
                    event="notification",
                    notification=NotificationItem.from_notification(notification),
                    snapshot=snapshot,
                )

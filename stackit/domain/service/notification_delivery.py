"""Live delivery of notifications to connected clients.

A broker fans each stored notification out to every live subscription of its
recipient. Pushes are hints: a client that misses one catches up on its next
fetch, so delivery failures are logged and never raised to the writer.
"""

import asyncio
from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from enum import Enum
from typing import AsyncIterator, List, Optional
from uuid import uuid4

import logfire

from stackit.domain.error import TransientDeliveryFailure
from stackit.domain.model.notification import Notification
from stackit.domain.value import UserId


class SubscriptionState(str, Enum):
    """Lifecycle of a client subscription."""

    DISCONNECTED = "disconnected"
    SUBSCRIBING = "subscribing"
    SUBSCRIBED = "subscribed"


class Subscription:
    """One client session listening for a user's notifications.

    Holds a bounded queue of pending pushes. Once closed it never reopens.
    """

    def __init__(self, user_id: UserId, max_pending: int) -> None:
        self.id = str(uuid4())
        self.user_id = user_id
        self.state = SubscriptionState.DISCONNECTED
        self._queue: asyncio.Queue[Optional[Notification]] = asyncio.Queue(
            maxsize=max_pending
        )
        self._closed = False

    @property
    def is_active(self) -> bool:
        return self.state == SubscriptionState.SUBSCRIBED

    def begin(self) -> None:
        """Move from DISCONNECTED to SUBSCRIBING."""
        if self._closed or self.state != SubscriptionState.DISCONNECTED:
            raise RuntimeError(f"Subscription {self.id} cannot be reopened")
        self.state = SubscriptionState.SUBSCRIBING

    def activate(self) -> None:
        """Move from SUBSCRIBING to SUBSCRIBED."""
        if self.state != SubscriptionState.SUBSCRIBING:
            raise RuntimeError(
                f"Subscription {self.id} is {self.state.value}, not subscribing"
            )
        self.state = SubscriptionState.SUBSCRIBED

    def offer(self, notification: Notification) -> None:
        """Queue a push without waiting.

        Raises:
            TransientDeliveryFailure: If the subscription is not active or
                its queue is full
        """
        if not self.is_active:
            raise TransientDeliveryFailure(self.id, f"subscription {self.state.value}")
        try:
            self._queue.put_nowait(notification)
        except asyncio.QueueFull:
            raise TransientDeliveryFailure(self.id, "queue full")

    async def receive(self) -> Optional[Notification]:
        """Wait for the next push, or None once the subscription is closed."""
        if self._closed and self._queue.empty():
            return None
        return await self._queue.get()

    def close(self) -> None:
        """Release the subscription. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self.state = SubscriptionState.DISCONNECTED

        # Pending pushes are dropped; wake any receiver with the end marker
        while not self._queue.empty():
            self._queue.get_nowait()
        self._queue.put_nowait(None)

    async def __aiter__(self) -> AsyncIterator[Notification]:
        while True:
            notification = await self.receive()
            if notification is None:
                return
            yield notification


class NotificationBroker(ABC):
    """Fan-out of stored notifications to live subscriptions."""

    @abstractmethod
    async def publish(self, notification: Notification) -> int:
        """Push a notification to every live subscription of its recipient.

        Args:
            notification: A committed notification

        Returns:
            Number of subscriptions that accepted the push
        """
        pass

    @abstractmethod
    def subscribe(self, user_id: UserId) -> AbstractAsyncContextManager[Subscription]:
        """Open a subscription for a user.

        The subscription is active inside the context and always released
        when the context exits.
        """
        pass

    @abstractmethod
    def subscriber_count(self, user_id: UserId) -> int:
        """Number of live subscriptions for a user."""
        pass


class NotificationOutbox:
    """Notifications appended during one request, awaiting commit.

    Pushes go out only after the request's transaction commits, so clients
    never see a notification that was rolled back.
    """

    def __init__(self, broker: NotificationBroker) -> None:
        self.broker = broker
        self._pending: List[Notification] = []

    @property
    def pending(self) -> List[Notification]:
        return list(self._pending)

    def add(self, notification: Notification) -> None:
        self._pending.append(notification)

    def discard(self) -> None:
        """Drop pending notifications after a rollback."""
        if self._pending:
            logfire.info("Outbox discarded", count=len(self._pending))
        self._pending.clear()

    async def flush(self) -> None:
        """Publish pending notifications. Call only after commit."""
        pending, self._pending = self._pending, []
        for notification in pending:
            await self.broker.publish(notification)

"""In-process notification broker.

Keeps the live subscriptions of every connected user in this process and
pushes into their queues. Suitable for a single API worker; several workers
would need a shared channel such as PostgreSQL LISTEN/NOTIFY.
"""

from collections import defaultdict
from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire

from stackit.config import NotificationSettings
from stackit.domain.error import TransientDeliveryFailure
from stackit.domain.model.notification import Notification
from stackit.domain.service.notification_delivery import (
    NotificationBroker,
    Subscription,
)
from stackit.domain.value import UserId


class InProcessNotificationBroker(NotificationBroker):
    """Fan-out to subscriptions held in memory."""

    def __init__(self, notification_settings: NotificationSettings) -> None:
        self.max_pending = notification_settings.subscriber_queue_size
        self._subscriptions: dict[UserId, set[Subscription]] = defaultdict(set)

    async def publish(self, notification: Notification) -> int:
        """Push to every live subscription of the recipient.

        Full or closed subscriptions are skipped; the client reconciles on
        its next fetch.
        """
        delivered = 0
        for subscription in list(self._subscriptions.get(notification.user_id, ())):
            try:
                subscription.offer(notification)
                delivered += 1
            except TransientDeliveryFailure as e:
                logfire.warn(
                    "Notification push dropped",
                    subscription_id=e.subscription_id,
                    notification_id=str(notification.id),
                    reason=e.reason,
                )

        logfire.debug(
            "Notification published",
            notification_id=str(notification.id),
            user_id=str(notification.user_id),
            delivered=delivered,
        )
        return delivered

    @asynccontextmanager
    async def subscribe(self, user_id: UserId) -> AsyncIterator[Subscription]:
        subscription = Subscription(user_id, self.max_pending)
        subscription.begin()
        self._subscriptions[user_id].add(subscription)
        subscription.activate()
        logfire.info(
            "Subscription opened",
            subscription_id=subscription.id,
            user_id=str(user_id),
            active=len(self._subscriptions[user_id]),
        )
        try:
            yield subscription
        finally:
            self._release(subscription)

    def subscriber_count(self, user_id: UserId) -> int:
        return len(self._subscriptions.get(user_id, ()))

    def _release(self, subscription: Subscription) -> None:
        subscriptions = self._subscriptions.get(subscription.user_id)
        if subscriptions is not None:
            subscriptions.discard(subscription)
            if not subscriptions:
                del self._subscriptions[subscription.user_id]
        subscription.close()
        logfire.info(
            "Subscription closed",
            subscription_id=subscription.id,
            user_id=str(subscription.user_id),
        )

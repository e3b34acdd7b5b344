"""Real-time delivery providers (non-mockable).

The in-process broker works the same in tests and production, so there is
no mock variant.
"""

from collections.abc import AsyncIterator

from dishka import Scope, provide

from stackit.adapter.realtime import InProcessNotificationBroker
from stackit.config import NotificationSettings
from stackit.domain.service import NotificationBroker, NotificationOutbox
from stackit.util.di.base import ProviderBase


class RealtimeProvider(ProviderBase):
    """Notification broker and per-request outbox."""

    @provide(scope=Scope.APP)
    def get_broker(
        self, notification_settings: NotificationSettings
    ) -> NotificationBroker:
        """Provide the process-wide broker."""
        return InProcessNotificationBroker(notification_settings)

    @provide(scope=Scope.REQUEST)
    async def get_outbox(
        self, broker: NotificationBroker
    ) -> AsyncIterator[NotificationOutbox]:
        """Provide the request outbox, flushed when the request ends cleanly."""
        outbox = NotificationOutbox(broker)
        try:
            yield outbox
        except Exception:
            outbox.discard()
            raise
        await outbox.flush()

"""Unit tests for subscriptions and the notification outbox."""

import asyncio
from datetime import datetime
from uuid import uuid4

import pytest

from stackit.domain.error import TransientDeliveryFailure
from stackit.domain.model import Notification
from stackit.domain.service import (
    NotificationBroker,
    NotificationOutbox,
    Subscription,
    SubscriptionState,
)
from stackit.domain.value import NotificationId, NotificationType, QuestionId
from tests.conftest import new_user_id
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


def _notification(user_id) -> Notification:
    return Notification(
        id=NotificationId(uuid4()),
        user_id=user_id,
        type=NotificationType.ANSWER,
        title="New Answer",
        message='Someone answered your question: "Q"',
        question_id=QuestionId(uuid4()),
        created_at=datetime.now(),
    )


class TestSubscription:
    """Tests for the subscription lifecycle."""

    def test_lifecycle_moves_through_states(self):
        """DISCONNECTED -> SUBSCRIBING -> SUBSCRIBED -> DISCONNECTED."""
        subscription = Subscription(new_user_id(), max_pending=5)
        assert subscription.state == SubscriptionState.DISCONNECTED

        subscription.begin()
        assert subscription.state == SubscriptionState.SUBSCRIBING
        assert subscription.is_active is False

        subscription.activate()
        assert subscription.is_active is True

        subscription.close()
        assert subscription.state == SubscriptionState.DISCONNECTED

    def test_closed_subscription_cannot_reopen(self):
        """Once released, a subscription stays closed."""
        subscription = Subscription(new_user_id(), max_pending=5)
        subscription.begin()
        subscription.activate()
        subscription.close()

        with pytest.raises(RuntimeError):
            subscription.begin()

    def test_close_is_idempotent(self):
        """Closing twice is harmless."""
        subscription = Subscription(new_user_id(), max_pending=5)
        subscription.begin()
        subscription.activate()

        subscription.close()
        subscription.close()

        assert subscription.state == SubscriptionState.DISCONNECTED

    def test_offer_before_activation_fails(self):
        """Pushes only reach subscribed sessions."""
        user_id = new_user_id()
        subscription = Subscription(user_id, max_pending=5)
        subscription.begin()

        with pytest.raises(TransientDeliveryFailure):
            subscription.offer(_notification(user_id))

    def test_offer_to_full_queue_fails(self):
        """A slow consumer drops pushes instead of blocking the writer."""
        user_id = new_user_id()
        subscription = Subscription(user_id, max_pending=1)
        subscription.begin()
        subscription.activate()
        subscription.offer(_notification(user_id))

        with pytest.raises(TransientDeliveryFailure, match="queue full"):
            subscription.offer(_notification(user_id))

    @pytest.mark.asyncio
    async def test_close_wakes_waiting_receiver(self):
        """A receiver blocked on an empty queue ends when the session closes."""
        # Arrange
        subscription = Subscription(new_user_id(), max_pending=5)
        subscription.begin()
        subscription.activate()
        received = []

        async def consume():
            async for notification in subscription:
                received.append(notification)

        consumer = asyncio.create_task(consume())
        await asyncio.sleep(0)

        # Act
        subscription.close()
        await asyncio.wait_for(consumer, timeout=1)

        # Assert
        assert received == []

    @pytest.mark.asyncio
    async def test_receive_returns_pushes_in_order(self):
        """Pushes come out in the order they were offered."""
        # Arrange
        user_id = new_user_id()
        subscription = Subscription(user_id, max_pending=5)
        subscription.begin()
        subscription.activate()
        first = _notification(user_id)
        second = _notification(user_id)

        # Act
        subscription.offer(first)
        subscription.offer(second)

        # Assert
        assert await subscription.receive() == first
        assert await subscription.receive() == second


class TestNotificationOutbox:
    """Tests for post-commit publishing."""

    @pytest.mark.asyncio
    async def test_flush_publishes_pending_notifications(self, unit_env):
        """Flushing pushes every queued notification once."""
        # Arrange
        broker = await unit_env.get(NotificationBroker)
        outbox = NotificationOutbox(broker)
        user_id = new_user_id()
        notification = _notification(user_id)

        async with broker.subscribe(user_id) as subscription:
            outbox.add(notification)

            # Act
            await outbox.flush()
            await outbox.flush()

            # Assert
            assert await subscription.receive() == notification
            assert outbox.pending == []

    @pytest.mark.asyncio
    async def test_discard_drops_pending_notifications(self, unit_env):
        """Rolled back notifications are never pushed."""
        # Arrange
        broker = await unit_env.get(NotificationBroker)
        outbox = NotificationOutbox(broker)
        user_id = new_user_id()

        async with broker.subscribe(user_id) as subscription:
            outbox.add(_notification(user_id))

            # Act
            outbox.discard()
            await outbox.flush()

            # Assert
            assert outbox.pending == []
            later = _notification(user_id)
            await broker.publish(later)
            assert await subscription.receive() == later

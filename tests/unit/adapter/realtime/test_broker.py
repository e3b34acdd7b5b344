"""Unit tests for InProcessNotificationBroker."""

from datetime import datetime
from uuid import uuid4

import pytest

from stackit.adapter.realtime import InProcessNotificationBroker
from stackit.config import NotificationSettings
from stackit.domain.model import Notification
from stackit.domain.value import NotificationId, NotificationType, QuestionId
from tests.conftest import new_user_id


def _notification(user_id) -> Notification:
    return Notification(
        id=NotificationId(uuid4()),
        user_id=user_id,
        type=NotificationType.VOTE,
        title="Upvoted",
        message='Someone upvoted your question on: "Q"',
        question_id=QuestionId(uuid4()),
        created_at=datetime.now(),
    )


@pytest.fixture
def broker():
    """Broker with a small per-subscription queue."""
    return InProcessNotificationBroker(NotificationSettings(subscriber_queue_size=2))


class TestPublish:
    """Tests for fan-out."""

    @pytest.mark.asyncio
    async def test_publish_reaches_every_session_of_recipient(self, broker):
        """Each open session of the recipient gets the push."""
        # Arrange
        user_id = new_user_id()
        notification = _notification(user_id)

        async with broker.subscribe(user_id) as laptop:
            async with broker.subscribe(user_id) as phone:
                # Act
                delivered = await broker.publish(notification)

                # Assert
                assert delivered == 2
                assert await laptop.receive() == notification
                assert await phone.receive() == notification

    @pytest.mark.asyncio
    async def test_publish_skips_other_users(self, broker):
        """Sessions only see their own user's notifications."""
        # Arrange
        recipient_id = new_user_id()

        async with broker.subscribe(new_user_id()):
            # Act
            delivered = await broker.publish(_notification(recipient_id))

        # Assert
        assert delivered == 0

    @pytest.mark.asyncio
    async def test_publish_without_subscribers_is_noop(self, broker):
        """Nobody connected means nothing delivered and no error."""
        assert await broker.publish(_notification(new_user_id())) == 0

    @pytest.mark.asyncio
    async def test_full_session_is_skipped_not_raised(self, broker):
        """A backed-up session drops the push; others still get it."""
        # Arrange
        user_id = new_user_id()

        async with broker.subscribe(user_id) as slow:
            await broker.publish(_notification(user_id))
            await broker.publish(_notification(user_id))

            async with broker.subscribe(user_id) as fresh:
                # Act
                delivered = await broker.publish(_notification(user_id))

                # Assert
                assert delivered == 1
                assert fresh.is_active
                assert slow.is_active


class TestSubscribe:
    """Tests for subscription bookkeeping."""

    @pytest.mark.asyncio
    async def test_subscription_is_active_inside_context(self, broker):
        """Subscriptions are live for exactly the context's duration."""
        user_id = new_user_id()

        async with broker.subscribe(user_id) as subscription:
            assert subscription.is_active
            assert broker.subscriber_count(user_id) == 1

        assert not subscription.is_active
        assert broker.subscriber_count(user_id) == 0

    @pytest.mark.asyncio
    async def test_subscription_released_on_error(self, broker):
        """An exception inside the context still releases the session."""
        user_id = new_user_id()

        with pytest.raises(RuntimeError):
            async with broker.subscribe(user_id):
                raise RuntimeError("socket dropped")

        assert broker.subscriber_count(user_id) == 0

    @pytest.mark.asyncio
    async def test_publish_after_release_is_not_delivered(self, broker):
        """Released sessions no longer receive pushes."""
        user_id = new_user_id()
        async with broker.subscribe(user_id):
            pass

        assert await broker.publish(_notification(user_id)) == 0

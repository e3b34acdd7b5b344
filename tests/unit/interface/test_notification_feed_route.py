"""Tests for the WebSocket notification feed handler."""

import asyncio
from datetime import datetime
from types import SimpleNamespace
from uuid import uuid4

import pytest
import pytest_asyncio

from stackit.config import Settings
from stackit.domain.model import Notification
from stackit.domain.service import NotificationBroker
from stackit.domain.value import NotificationId, NotificationType, QuestionId, UserId
from stackit.interface.api.routes.notifications import notification_feed
from stackit.util.jwt import create_token
from tests.di import build_test_container


class IdleWebSocket:
    """Socket whose client stays silent until told to disconnect."""

    def __init__(self, container):
        self.app = SimpleNamespace(state=SimpleNamespace(dishka_container=container))
        self.accepted = False
        self.closed_with = None
        self.sent: asyncio.Queue = asyncio.Queue()
        self._disconnected = asyncio.Event()

    async def accept(self):
        self.accepted = True

    async def send_json(self, data):
        await self.sent.put(data)

    async def receive(self):
        await self._disconnected.wait()
        return {"type": "websocket.disconnect", "code": 1000}

    async def close(self, code: int = 1000):
        self.closed_with = code

    def disconnect(self):
        self._disconnected.set()

    async def next_event(self) -> dict:
        return await asyncio.wait_for(self.sent.get(), timeout=1)


@pytest_asyncio.fixture
async def container():
    container = build_test_container()
    yield container
    await container.close()


def _token_for(subject: str) -> str:
    return create_token(subject, "alice", Settings().auth)


def _vote_notification(user_id: UserId) -> Notification:
    return Notification(
        id=NotificationId(uuid4()),
        user_id=user_id,
        type=NotificationType.VOTE,
        title="Upvoted",
        message='Someone upvoted your question on: "Q"',
        question_id=QuestionId(uuid4()),
        created_at=datetime.now(),
    )


async def _open_feed(container, user_id: UserId):
    websocket = IdleWebSocket(container)
    task = asyncio.create_task(
        notification_feed(websocket, limit=None, auth_token=_token_for(str(user_id)))
    )
    snapshot = await websocket.next_event()
    assert snapshot["event"] == "snapshot"
    return websocket, task


class TestNotificationFeedRoute:
    """notification_feed subscription lifecycle."""

    @pytest.mark.asyncio
    async def test_open_feed_receives_published_notification(self, container):
        """The subscription is keyed by the user's UUID, so publish finds it."""
        # Arrange
        broker = await container.get(NotificationBroker)
        user_id = UserId(uuid4())
        websocket, task = await _open_feed(container, user_id)
        notification = _vote_notification(user_id)

        # Act
        delivered = await broker.publish(notification)
        pushed = await websocket.next_event()

        # Assert
        assert broker.subscriber_count(user_id) == 1
        assert delivered == 1
        assert pushed["event"] == "notification"
        assert pushed["notification"]["id"] == str(notification.id)
        assert pushed["notification"]["user_id"] == str(user_id)

        websocket.disconnect()
        await task

    @pytest.mark.asyncio
    async def test_client_disconnect_releases_subscription(self, container):
        """A disconnect ends the handler without closing the socket again."""
        # Arrange
        broker = await container.get(NotificationBroker)
        user_id = UserId(uuid4())
        websocket, task = await _open_feed(container, user_id)

        # Act
        websocket.disconnect()
        await task

        # Assert
        assert broker.subscriber_count(user_id) == 0
        assert websocket.closed_with is None

    @pytest.mark.asyncio
    async def test_cancelled_handler_releases_subscription(self, container):
        """Cancelling the handler, e.g. on shutdown, leaves no subscription behind."""
        # Arrange
        broker = await container.get(NotificationBroker)
        user_id = UserId(uuid4())
        _, task = await _open_feed(container, user_id)
        assert broker.subscriber_count(user_id) == 1

        # Act
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

        # Assert
        assert broker.subscriber_count(user_id) == 0

    @pytest.mark.asyncio
    async def test_subject_that_is_not_a_uuid_is_rejected(self, container):
        """A verified token whose subject is not a user ID gets 1008."""
        # Arrange
        websocket = IdleWebSocket(container)

        # Act
        await notification_feed(
            websocket, limit=None, auth_token=_token_for("not-a-uuid")
        )

        # Assert
        assert websocket.accepted is False
        assert websocket.closed_with == 1008

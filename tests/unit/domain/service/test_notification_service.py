"""Unit tests for NotificationService."""

from datetime import datetime
from uuid import uuid4

import pytest

from stackit.domain.error import NotFoundError, ValidationError
from stackit.domain.model import NewNotification, Notification
from stackit.domain.repository import NotificationRepository
from stackit.domain.service import NotificationService
from stackit.domain.value import (
    AnswerId,
    NotificationId,
    NotificationType,
    QuestionId,
)
from tests.conftest import new_user_id
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


def _answer_notification(user_id) -> NewNotification:
    return NewNotification(
        user_id=user_id,
        type=NotificationType.ANSWER,
        title="New Answer",
        message='Someone answered your question: "Q"',
        question_id=QuestionId(uuid4()),
        answer_id=AnswerId(uuid4()),
    )


class TestAppend:
    """Tests for append method."""

    @pytest.mark.asyncio
    async def test_append_stores_unread_notification(self, unit_env):
        """Appended notifications start unread with a fresh ID."""
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        user_id = new_user_id()

        # Act
        notification = await notification_service.append(_answer_notification(user_id))

        # Assert
        assert notification.read is False
        assert notification.user_id == user_id
        assert await notification_service.get(notification.id) == notification
        assert await notification_service.unread_count(user_id) == 1

    @pytest.mark.asyncio
    async def test_append_without_recipient_raises_validation_error(self, unit_env):
        """A missing recipient is rejected and nothing is stored."""
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        payload = _answer_notification(None)

        # Act & Assert
        with pytest.raises(ValidationError):
            await notification_service.append(payload)

    @pytest.mark.asyncio
    async def test_comment_notification_needs_exactly_one_target(self, unit_env):
        """Comment notifications reference a question or an answer, not both."""
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        user_id = new_user_id()
        both = NewNotification(
            user_id=user_id,
            type=NotificationType.COMMENT_QUESTION,
            title="New Comment",
            message="Someone commented",
            question_id=QuestionId(uuid4()),
            answer_id=AnswerId(uuid4()),
        )
        neither = NewNotification(
            user_id=user_id,
            type=NotificationType.COMMENT_ANSWER,
            title="New Comment",
            message="Someone commented",
        )

        # Act & Assert
        with pytest.raises(ValidationError):
            await notification_service.append(both)
        with pytest.raises(ValidationError):
            await notification_service.append(neither)
        assert await notification_service.unread_count(user_id) == 0


class TestListForUser:
    """Tests for list_for_user method."""

    @pytest.mark.asyncio
    async def test_list_is_newest_first_and_scoped_to_user(self, unit_env):
        """Only the recipient's notifications are listed, newest first."""
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        user_id = new_user_id()
        first = await notification_service.append(_answer_notification(user_id))
        second = await notification_service.append(_answer_notification(user_id))
        await notification_service.append(_answer_notification(new_user_id()))

        # Act
        notifications = await notification_service.list_for_user(user_id)

        # Assert
        assert [n.id for n in notifications] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_equal_timestamps_list_later_insert_first(self, unit_env):
        """Ties on created_at are broken by insertion order."""
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        notification_repo = await unit_env.get(NotificationRepository)
        user_id = new_user_id()
        created_at = datetime(2024, 5, 1, 12, 0, 0)

        saved = []
        for title in ("first", "second", "third"):
            saved.append(
                await notification_repo.save(
                    Notification(
                        id=NotificationId(uuid4()),
                        user_id=user_id,
                        type=NotificationType.VOTE,
                        title=title,
                        message="Someone upvoted your question",
                        question_id=QuestionId(uuid4()),
                        created_at=created_at,
                    )
                )
            )

        # Act
        notifications = await notification_service.list_for_user(user_id)

        # Assert
        assert [n.title for n in notifications] == ["third", "second", "first"]

    @pytest.mark.asyncio
    async def test_default_limit_applies_when_none_given(self, unit_env):
        """Without a limit the configured page size is used."""
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        user_id = new_user_id()
        for _ in range(12):
            await notification_service.append(_answer_notification(user_id))

        # Act
        notifications = await notification_service.list_for_user(user_id)

        # Assert
        assert len(notifications) == 10

    @pytest.mark.asyncio
    async def test_large_limit_is_capped(self, unit_env):
        """Limits above the configured maximum are capped, not rejected."""
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        user_id = new_user_id()
        for _ in range(3):
            await notification_service.append(_answer_notification(user_id))

        # Act
        largest = await notification_service.list_for_user(user_id, limit=10_000)

        # Assert
        assert len(largest) == 3

    @pytest.mark.asyncio
    @pytest.mark.parametrize("limit", [0, -5])
    async def test_limit_below_one_is_rejected(self, unit_env, limit):
        """Zero and negative limits raise instead of returning a page."""
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        user_id = new_user_id()
        await notification_service.append(_answer_notification(user_id))

        # Act & Assert
        with pytest.raises(ValidationError, match="at least 1"):
            await notification_service.list_for_user(user_id, limit=limit)


class TestMarkRead:
    """Tests for mark_read and mark_all_read methods."""

    @pytest.mark.asyncio
    async def test_mark_read_is_idempotent(self, unit_env):
        """Marking twice succeeds and leaves the notification read."""
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        user_id = new_user_id()
        notification = await notification_service.append(_answer_notification(user_id))

        # Act
        once = await notification_service.mark_read(notification.id)
        twice = await notification_service.mark_read(notification.id)

        # Assert
        assert once.read is True
        assert twice.read is True
        assert await notification_service.unread_count(user_id) == 0

    @pytest.mark.asyncio
    async def test_mark_read_missing_raises_not_found(self, unit_env):
        """Unknown notification IDs raise NotFoundError."""
        # Arrange
        notification_service = await unit_env.get(NotificationService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await notification_service.mark_read(NotificationId(uuid4()))

    @pytest.mark.asyncio
    async def test_mark_all_read_clears_unread_count(self, unit_env):
        """After mark_all_read the user has nothing unread; others are untouched."""
        # Arrange
        notification_service = await unit_env.get(NotificationService)
        user_id = new_user_id()
        other_id = new_user_id()
        for _ in range(3):
            await notification_service.append(_answer_notification(user_id))
        await notification_service.append(_answer_notification(other_id))

        # Act
        updated = await notification_service.mark_all_read(user_id)
        updated_again = await notification_service.mark_all_read(user_id)

        # Assert
        assert updated == 3
        assert updated_again == 0
        assert await notification_service.unread_count(user_id) == 0
        assert await notification_service.unread_count(other_id) == 1

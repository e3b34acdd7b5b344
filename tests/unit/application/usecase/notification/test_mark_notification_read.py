"""Unit tests for the mark-read use cases."""

from uuid import uuid4

import pytest

from stackit.application.usecase.notification import (
    MarkAllNotificationsReadRequest,
    MarkAllNotificationsReadUseCase,
    MarkNotificationReadRequest,
    MarkNotificationReadUseCase,
)
from stackit.domain.error import NotAuthorizedError, NotFoundError
from stackit.domain.model import NewNotification
from stackit.domain.service import NotificationService
from stackit.domain.value import NotificationType, QuestionId
from tests.conftest import new_user_id
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _append(notification_service, user_id):
    return await notification_service.append(
        NewNotification(
            user_id=user_id,
            type=NotificationType.COMMENT_QUESTION,
            title="New Comment",
            message='Someone commented on your question: "Q"',
            question_id=QuestionId(uuid4()),
        )
    )


class TestMarkNotificationReadUseCase:
    """Tests for MarkNotificationReadUseCase."""

    @pytest.mark.asyncio
    async def test_owner_marks_read_twice(self, unit_env):
        """Marking read is idempotent for the recipient."""
        # Arrange
        use_case = await unit_env.get(MarkNotificationReadUseCase)
        notification_service = await unit_env.get(NotificationService)
        user_id = new_user_id()
        notification = await _append(notification_service, user_id)
        request = MarkNotificationReadRequest(
            notification_id=str(notification.id), user_id=str(user_id)
        )

        # Act
        first = await use_case.execute(request)
        second = await use_case.execute(request)

        # Assert
        assert first.read is True
        assert second.read is True
        assert second.id == str(notification.id)

    @pytest.mark.asyncio
    async def test_other_user_cannot_mark_read(self, unit_env):
        """Notifications can only be marked read by their recipient."""
        # Arrange
        use_case = await unit_env.get(MarkNotificationReadUseCase)
        notification_service = await unit_env.get(NotificationService)
        user_id = new_user_id()
        notification = await _append(notification_service, user_id)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                MarkNotificationReadRequest(
                    notification_id=str(notification.id),
                    user_id=str(new_user_id()),
                )
            )
        assert await notification_service.unread_count(user_id) == 1

    @pytest.mark.asyncio
    async def test_missing_notification_raises_not_found(self, unit_env):
        """Unknown IDs are reported as not found."""
        # Arrange
        use_case = await unit_env.get(MarkNotificationReadUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                MarkNotificationReadRequest(
                    notification_id=str(uuid4()), user_id=str(new_user_id())
                )
            )


class TestMarkAllNotificationsReadUseCase:
    """Tests for MarkAllNotificationsReadUseCase."""

    @pytest.mark.asyncio
    async def test_mark_all_read_reports_zero_unread(self, unit_env):
        """The response carries the unread count after the update."""
        # Arrange
        use_case = await unit_env.get(MarkAllNotificationsReadUseCase)
        notification_service = await unit_env.get(NotificationService)
        user_id = new_user_id()
        await _append(notification_service, user_id)
        await _append(notification_service, user_id)

        # Act
        response = await use_case.execute(
            MarkAllNotificationsReadRequest(user_id=str(user_id))
        )

        # Assert
        assert response.updated == 2
        assert response.unread_count == 0

"""Unit tests for CreateCommentUseCase."""

from uuid import uuid4

import pytest

from stackit.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from stackit.domain.error import NotFoundError
from stackit.domain.repository import AnswerRepository, QuestionRepository
from stackit.domain.service import NotificationOutbox, NotificationService
from stackit.domain.value import NotificationType, TargetKind
from tests.conftest import make_answer, make_question, new_user_id
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_comment_on_question(self, unit_env):
        """Commenting on a question stores it and notifies the asker."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        notification_service = await unit_env.get(NotificationService)
        outbox = await unit_env.get(NotificationOutbox)
        question = await question_repo.save(make_question(new_user_id()))

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                target_kind=TargetKind.QUESTION,
                target_id=str(question.id),
                content="Which Python version?",
                user_id=str(new_user_id()),
            )
        )

        # Assert
        assert response.question_id == str(question.id)
        assert response.answer_id is None
        notifications = await notification_service.list_for_user(question.user_id)
        assert [n.type for n in notifications] == [NotificationType.COMMENT_QUESTION]
        assert len(outbox.pending) == 1

    @pytest.mark.asyncio
    async def test_comment_on_answer(self, unit_env):
        """Commenting on an answer records the answer as target."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)
        notification_service = await unit_env.get(NotificationService)
        question = await question_repo.save(make_question(new_user_id()))
        answer = await answer_repo.save(make_answer(question.id, new_user_id()))

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                target_kind=TargetKind.ANSWER,
                target_id=str(answer.id),
                content="This fails on empty input.",
                user_id=str(question.user_id),
            )
        )

        # Assert
        assert response.question_id is None
        assert response.answer_id == str(answer.id)
        assert await notification_service.unread_count(answer.user_id) == 1
        assert await notification_service.unread_count(question.user_id) == 0

    @pytest.mark.asyncio
    async def test_comment_on_missing_question_raises_not_found(self, unit_env):
        """Comments need an existing target."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    target_kind=TargetKind.QUESTION,
                    target_id=str(uuid4()),
                    content="Hello?",
                    user_id=str(new_user_id()),
                )
            )

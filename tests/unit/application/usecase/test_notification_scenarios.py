"""Answer, accept and upvote flows and the notifications they leave behind."""

import pytest

from stackit.application.usecase.answer import (
    CreateAnswerRequest,
    CreateAnswerUseCase,
)
from stackit.application.usecase.notification import (
    GetUnreadCountRequest,
    GetUnreadCountUseCase,
    ListNotificationsRequest,
    ListNotificationsUseCase,
)
from stackit.application.usecase.question import (
    AcceptAnswerRequest,
    AcceptAnswerUseCase,
    CreateQuestionRequest,
    CreateQuestionUseCase,
)
from stackit.application.usecase.vote import CastVoteRequest, CastVoteUseCase
from stackit.domain.value import NotificationType, TargetKind, VoteType
from tests.conftest import new_user_id
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


async def _unread(unit_env, user_id) -> int:
    use_case = await unit_env.get(GetUnreadCountUseCase)
    response = await use_case.execute(GetUnreadCountRequest(user_id=str(user_id)))
    return response.unread_count


async def _notifications(unit_env, user_id):
    use_case = await unit_env.get(ListNotificationsUseCase)
    response = await use_case.execute(ListNotificationsRequest(user_id=str(user_id)))
    return response.notifications


class TestQuestionLifecycleNotifications:
    """User A asks, user B answers, A accepts and both upvote B's answer."""

    @pytest.mark.asyncio
    async def test_answer_accept_and_upvote(self, unit_env):
        """Each step notifies the right owner exactly once."""
        # Arrange
        create_question = await unit_env.get(CreateQuestionUseCase)
        create_answer = await unit_env.get(CreateAnswerUseCase)
        accept_answer = await unit_env.get(AcceptAnswerUseCase)
        cast_vote = await unit_env.get(CastVoteUseCase)
        user_a = new_user_id()
        user_b = new_user_id()

        question = await create_question.execute(
            CreateQuestionRequest(
                title="How to sort a list?",
                description="Ascending, without a loop.",
                user_id=str(user_a),
            )
        )

        # Act - B answers A's question
        answer = await create_answer.execute(
            CreateAnswerRequest(
                question_id=question.question_id,
                content="Call sorted() on it.",
                user_id=str(user_b),
            )
        )

        # Assert - A is told about the answer
        notifications = await _notifications(unit_env, user_a)
        assert len(notifications) == 1
        assert notifications[0].user_id == str(user_a)
        assert notifications[0].type == NotificationType.ANSWER
        assert notifications[0].question_id == question.question_id
        assert notifications[0].answer_id == answer.answer_id
        assert notifications[0].read is False
        assert await _unread(unit_env, user_a) == 1

        # Act - A accepts B's answer, twice
        first = await accept_answer.execute(
            AcceptAnswerRequest(
                question_id=question.question_id,
                answer_id=answer.answer_id,
                user_id=str(user_a),
            )
        )
        second = await accept_answer.execute(
            AcceptAnswerRequest(
                question_id=question.question_id,
                answer_id=answer.answer_id,
                user_id=str(user_a),
            )
        )

        # Assert - B is told once
        assert first.changed is True
        assert second.changed is False
        notifications = await _notifications(unit_env, user_b)
        assert [n.type for n in notifications] == [NotificationType.ACCEPTED]
        assert await _unread(unit_env, user_b) == 1

        # Act - A upvotes B's answer, then B upvotes it too
        await cast_vote.execute(
            CastVoteRequest(
                target_kind=TargetKind.ANSWER,
                target_id=answer.answer_id,
                vote_type=VoteType.UP,
                user_id=str(user_a),
            )
        )
        await cast_vote.execute(
            CastVoteRequest(
                target_kind=TargetKind.ANSWER,
                target_id=answer.answer_id,
                vote_type=VoteType.UP,
                user_id=str(user_b),
            )
        )

        # Assert - only A's upvote notifies B
        notifications = await _notifications(unit_env, user_b)
        assert [n.type for n in notifications] == [
            NotificationType.VOTE,
            NotificationType.ACCEPTED,
        ]
        assert await _unread(unit_env, user_b) == 2
        assert await _unread(unit_env, user_a) == 1

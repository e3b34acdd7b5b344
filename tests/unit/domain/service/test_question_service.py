"""Unit tests for QuestionService."""

import pytest

from stackit.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
)
from stackit.domain.repository import AnswerRepository, QuestionRepository
from stackit.domain.service import QuestionService
from tests.conftest import make_answer, make_question, new_user_id
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreateQuestion:
    """Tests for create_question method."""

    @pytest.mark.asyncio
    async def test_create_question_starts_unanswered(self, unit_env):
        """New questions have zeroed counters and no accepted answer."""
        # Arrange
        question_service = await unit_env.get(QuestionService)
        user_id = new_user_id()

        # Act
        question = await question_service.create_question(
            user_id, "Why is my loop slow?", "It iterates a million times."
        )

        # Assert
        assert question.user_id == user_id
        assert question.accepted_answer_id is None
        assert question.is_answered is False
        assert question.answers_count == 0
        assert await question_service.get_question_by_id(question.id) == question


class TestAcceptAnswer:
    """Tests for accept_answer method."""

    async def _seed(self, unit_env):
        question_repo = await unit_env.get(QuestionRepository)
        answer_repo = await unit_env.get(AnswerRepository)

        owner_id = new_user_id()
        question = await question_repo.save(make_question(owner_id))
        first = await answer_repo.save(make_answer(question.id, new_user_id()))
        second = await answer_repo.save(make_answer(question.id, new_user_id()))
        return owner_id, question, first, second

    @pytest.mark.asyncio
    async def test_accept_marks_question_answered(self, unit_env):
        """Accepting sets the pointer, the flag and the answer's is_accepted."""
        # Arrange
        question_service = await unit_env.get(QuestionService)
        answer_repo = await unit_env.get(AnswerRepository)
        owner_id, question, first, _ = await self._seed(unit_env)

        # Act
        result = await question_service.accept_answer(question.id, first.id, owner_id)

        # Assert
        assert result.changed is True
        assert result.previous_answer_id is None
        assert result.question.accepted_answer_id == first.id
        assert result.question.is_answered is True
        assert (await answer_repo.find_by_id(first.id)).is_accepted is True

    @pytest.mark.asyncio
    async def test_accept_other_answer_moves_acceptance(self, unit_env):
        """Only one answer per question is accepted at a time."""
        # Arrange
        question_service = await unit_env.get(QuestionService)
        answer_repo = await unit_env.get(AnswerRepository)
        owner_id, question, first, second = await self._seed(unit_env)
        await question_service.accept_answer(question.id, first.id, owner_id)

        # Act
        result = await question_service.accept_answer(question.id, second.id, owner_id)

        # Assert
        assert result.changed is True
        assert result.previous_answer_id == first.id
        assert result.question.accepted_answer_id == second.id
        assert (await answer_repo.find_by_id(first.id)).is_accepted is False
        assert (await answer_repo.find_by_id(second.id)).is_accepted is True

    @pytest.mark.asyncio
    async def test_accept_same_answer_again_is_noop(self, unit_env):
        """Re-accepting the accepted answer reports no change."""
        # Arrange
        question_service = await unit_env.get(QuestionService)
        owner_id, question, first, _ = await self._seed(unit_env)
        await question_service.accept_answer(question.id, first.id, owner_id)

        # Act
        result = await question_service.accept_answer(question.id, first.id, owner_id)

        # Assert
        assert result.changed is False
        assert result.previous_answer_id == first.id
        assert result.question.accepted_answer_id == first.id

    @pytest.mark.asyncio
    async def test_accept_by_non_owner_raises_not_authorized(self, unit_env):
        """Only the question owner may accept."""
        # Arrange
        question_service = await unit_env.get(QuestionService)
        _, question, first, _ = await self._seed(unit_env)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await question_service.accept_answer(question.id, first.id, new_user_id())

    @pytest.mark.asyncio
    async def test_accept_answer_of_other_question_is_rejected(self, unit_env):
        """An answer can only be accepted on its own question."""
        # Arrange
        question_service = await unit_env.get(QuestionService)
        question_repo = await unit_env.get(QuestionRepository)
        owner_id, _, first, _ = await self._seed(unit_env)
        other = await question_repo.save(make_question(owner_id, "Another question"))

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError):
            await question_service.accept_answer(other.id, first.id, owner_id)

    @pytest.mark.asyncio
    async def test_accept_on_missing_question_raises_not_found(self, unit_env):
        """Unknown question IDs raise NotFoundError."""
        # Arrange
        question_service = await unit_env.get(QuestionService)
        owner_id, _, first, _ = await self._seed(unit_env)
        missing = make_question(owner_id)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await question_service.accept_answer(missing.id, first.id, owner_id)

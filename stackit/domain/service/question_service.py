"""Question domain service."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from stackit.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
)
from stackit.domain.model.question import Question
from stackit.domain.repository import AnswerRepository, QuestionRepository
from stackit.domain.value import AnswerId, QuestionId, UserId

from .base import Service


@dataclass
class AcceptAnswerResult:
    """Outcome of accepting an answer.

    changed is False when the answer was already the accepted one, in which
    case nothing was written.
    """

    question: Question
    previous_answer_id: Optional[AnswerId]
    changed: bool


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository

    async def create_question(
        self, user_id: UserId, title: str, description: str
    ) -> Question:
        """Create a new question.

        Args:
            user_id: Author user ID
            title: Question title
            description: Question body

        Returns:
            Created question
        """
        with logfire.span("question_service.create_question", user_id=str(user_id)):
            question = Question(
                id=QuestionId(uuid4()),
                title=title,
                description=description,
                user_id=user_id,
                created_at=datetime.now(),
            )
            saved = await self.question_repository.save(question)
            logfire.info(
                "Question created", question_id=str(saved.id), user_id=str(user_id)
            )
            return saved

    async def get_question_by_id(self, question_id: QuestionId) -> Question | None:
        """Get a question by ID.

        Args:
            question_id: Question ID

        Returns:
            Question if found, None otherwise
        """
        with logfire.span(
            "question_service.get_question_by_id", question_id=str(question_id)
        ):
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                logfire.warn("Question not found", question_id=str(question_id))
            return question

    async def record_view(self, question_id: QuestionId) -> None:
        """Count one view of a question."""
        await self.question_repository.increment_views_count(question_id)

    async def increment_answers_count(self, question_id: QuestionId) -> None:
        """Atomically increment the question's answer counter."""
        await self.question_repository.increment_answers_count(question_id)

    async def adjust_votes(self, question_id: QuestionId, delta: int) -> None:
        """Atomically change the question's score by delta."""
        if delta:
            await self.question_repository.adjust_votes_count(question_id, delta)

    async def accept_answer(
        self, question_id: QuestionId, answer_id: AnswerId, user_id: UserId
    ) -> AcceptAnswerResult:
        """Accept an answer on behalf of the question owner.

        Accepting the answer that is already accepted is a no-op. Accepting a
        different answer moves the acceptance: the previous answer loses its
        flag.

        Args:
            question_id: Question ID
            answer_id: Answer to accept
            user_id: Acting user, must own the question

        Returns:
            Accept result with the updated question

        Raises:
            NotFoundError: If the question or answer doesn't exist
            NotAuthorizedError: If the user doesn't own the question
            BusinessRuleViolationError: If the answer belongs to another question
        """
        with logfire.span(
            "question_service.accept_answer",
            question_id=str(question_id),
            answer_id=str(answer_id),
            user_id=str(user_id),
        ):
            question = await self.question_repository.find_by_id(question_id)
            if not question:
                raise NotFoundError("Question", str(question_id))

            if question.user_id != user_id:
                logfire.warn(
                    "Accept attempted by non-owner",
                    question_id=str(question_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError("question", str(question_id), str(user_id))

            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer:
                raise NotFoundError("Answer", str(answer_id))
            if answer.question_id != question_id:
                raise BusinessRuleViolationError(
                    "Answer does not belong to this question"
                )

            previous_answer_id = question.accepted_answer_id
            if previous_answer_id == answer_id:
                logfire.info(
                    "Answer already accepted",
                    question_id=str(question_id),
                    answer_id=str(answer_id),
                )
                return AcceptAnswerResult(
                    question=question,
                    previous_answer_id=previous_answer_id,
                    changed=False,
                )

            if previous_answer_id is not None:
                await self.answer_repository.set_accepted(previous_answer_id, False)
            await self.answer_repository.set_accepted(answer_id, True)

            updated = await self.question_repository.set_accepted_answer(
                question_id, answer_id
            )
            if not updated:
                raise NotFoundError("Question", str(question_id))

            logfire.info(
                "Answer accepted",
                question_id=str(question_id),
                answer_id=str(answer_id),
                previous_answer_id=str(previous_answer_id)
                if previous_answer_id
                else None,
            )
            return AcceptAnswerResult(
                question=updated,
                previous_answer_id=previous_answer_id,
                changed=True,
            )

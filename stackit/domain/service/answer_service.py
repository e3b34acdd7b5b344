"""Answer domain service."""

from datetime import datetime
from typing import List
from uuid import uuid4

import logfire

from stackit.domain.error import NotFoundError
from stackit.domain.model.answer import Answer
from stackit.domain.repository import AnswerRepository
from stackit.domain.value import AnswerId, QuestionId, UserId

from .base import Service
from .question_service import QuestionService


class AnswerService(Service):
    """Domain service for answer operations."""

    def __init__(
        self,
        answer_repository: AnswerRepository,
        question_service: QuestionService,
    ) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
            question_service: Question domain service
        """
        self.answer_repository = answer_repository
        self.question_service = question_service

    async def create_answer(
        self, question_id: QuestionId, user_id: UserId, content: str
    ) -> Answer:
        """Post an answer to a question.

        Bumps the question's answer counter in the same transaction.

        Args:
            question_id: Question being answered
            user_id: Author user ID
            content: Answer body

        Returns:
            Created answer

        Raises:
            NotFoundError: If the question doesn't exist
        """
        with logfire.span(
            "answer_service.create_answer",
            question_id=str(question_id),
            user_id=str(user_id),
        ):
            question = await self.question_service.get_question_by_id(question_id)
            if not question:
                raise NotFoundError("Question", str(question_id))

            answer = Answer(
                id=AnswerId(uuid4()),
                question_id=question_id,
                user_id=user_id,
                content=content,
                created_at=datetime.now(),
            )
            saved = await self.answer_repository.save(answer)
            await self.question_service.increment_answers_count(question_id)

            logfire.info(
                "Answer created",
                answer_id=str(saved.id),
                question_id=str(question_id),
                user_id=str(user_id),
            )
            return saved

    async def get_answer_by_id(self, answer_id: AnswerId) -> Answer | None:
        """Get an answer by ID.

        Args:
            answer_id: Answer ID

        Returns:
            Answer if found, None otherwise
        """
        with logfire.span("answer_service.get_answer_by_id", answer_id=str(answer_id)):
            answer = await self.answer_repository.find_by_id(answer_id)
            if not answer:
                logfire.warn("Answer not found", answer_id=str(answer_id))
            return answer

    async def get_answers_for_question(self, question_id: QuestionId) -> List[Answer]:
        """List a question's answers, accepted first then by score."""
        return await self.answer_repository.find_by_question(question_id)

    async def adjust_votes(self, answer_id: AnswerId, delta: int) -> None:
        """Atomically change the answer's score by delta."""
        if delta:
            await self.answer_repository.adjust_votes_count(answer_id, delta)

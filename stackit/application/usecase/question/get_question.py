"""Get question use case."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from stackit.domain.model import Answer
from stackit.domain.service import AnswerService, QuestionService
from stackit.domain.value import QuestionId


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str  # UUID string


class AnswerItem(BaseModel):
    """Answer as shown under its question."""

    answer_id: str
    user_id: str
    content: str
    is_accepted: bool
    votes_count: int
    created_at: datetime

    @classmethod
    def from_answer(cls, answer: Answer) -> "AnswerItem":
        return cls(
            answer_id=str(answer.id),
            user_id=str(answer.user_id),
            content=answer.content,
            is_accepted=answer.is_accepted,
            votes_count=answer.votes_count,
            created_at=answer.created_at,
        )


class GetQuestionResponse(BaseModel):
    """Get question response."""

    question_id: str
    title: str
    description: str
    user_id: str
    accepted_answer_id: str | None
    is_answered: bool
    votes_count: int
    answers_count: int
    views_count: int
    created_at: datetime
    answers: list[AnswerItem]


class GetQuestionUseCase:
    """Use case for viewing a question with its answers.

    Every successful view counts towards views_count.
    """

    def __init__(
        self, question_service: QuestionService, answer_service: AnswerService
    ) -> None:
        """Initialize get question use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
        """
        self.question_service = question_service
        self.answer_service = answer_service

    async def execute(self, request: GetQuestionRequest) -> Optional[GetQuestionResponse]:
        """Execute get question flow.

        Args:
            request: Get question request

        Returns:
            Question details if found, None otherwise
        """
        question_id = QuestionId(UUID(request.question_id))

        question = await self.question_service.get_question_by_id(question_id)
        if not question:
            return None

        await self.question_service.record_view(question_id)
        answers = await self.answer_service.get_answers_for_question(question_id)

        return GetQuestionResponse(
            question_id=str(question.id),
            title=question.title,
            description=question.description,
            user_id=str(question.user_id),
            accepted_answer_id=str(question.accepted_answer_id)
            if question.accepted_answer_id
            else None,
            is_answered=question.is_answered,
            votes_count=question.votes_count,
            answers_count=question.answers_count,
            views_count=question.views_count + 1,
            created_at=question.created_at,
            answers=[AnswerItem.from_answer(a) for a in answers],
        )

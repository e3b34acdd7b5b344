"""Create question use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import QuestionService
from stackit.domain.value import UserId


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    title: str
    description: str
    user_id: str  # User ID from authenticated user


class CreateQuestionResponse(BaseModel):
    """Create question response."""

    question_id: str
    title: str
    description: str
    user_id: str
    created_at: datetime


class CreateQuestionUseCase:
    """Use case for asking a question."""

    def __init__(self, question_service: QuestionService) -> None:
        self.question_service = question_service

    async def execute(self, request: CreateQuestionRequest) -> CreateQuestionResponse:
        """Execute create question flow.

        Args:
            request: Create question request

        Returns:
            Created question details
        """
        question = await self.question_service.create_question(
            user_id=UserId(UUID(request.user_id)),
            title=request.title,
            description=request.description,
        )

        return CreateQuestionResponse(
            question_id=str(question.id),
            title=question.title,
            description=question.description,
            user_id=str(question.user_id),
            created_at=question.created_at,
        )

"""Create answer use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import AnswerService, NotificationRules
from stackit.domain.value import QuestionId, UserId


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    question_id: str  # UUID string
    content: str
    user_id: str  # User ID from authenticated user


class CreateAnswerResponse(BaseModel):
    """Create answer response."""

    answer_id: str
    question_id: str
    user_id: str
    content: str
    created_at: datetime


class CreateAnswerUseCase:
    """Use case for answering a question."""

    def __init__(
        self,
        answer_service: AnswerService,
        notification_rules: NotificationRules,
    ) -> None:
        """Initialize create answer use case.

        Args:
            answer_service: Answer domain service
            notification_rules: Notification rules
        """
        self.answer_service = answer_service
        self.notification_rules = notification_rules

    async def execute(self, request: CreateAnswerRequest) -> CreateAnswerResponse:
        """Execute create answer flow.

        Steps:
        1. Create the answer and bump the question's answer count
        2. Notify the question owner

        Raises:
            NotFoundError: If the question doesn't exist
        """
        answer = await self.answer_service.create_answer(
            question_id=QuestionId(UUID(request.question_id)),
            user_id=UserId(UUID(request.user_id)),
            content=request.content,
        )

        await self.notification_rules.on_answer_created(answer)

        return CreateAnswerResponse(
            answer_id=str(answer.id),
            question_id=str(answer.question_id),
            user_id=str(answer.user_id),
            content=answer.content,
            created_at=answer.created_at,
        )

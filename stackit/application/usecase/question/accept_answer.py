"""Accept answer use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import NotificationRules, QuestionService
from stackit.domain.value import AnswerId, QuestionId, UserId


class AcceptAnswerRequest(BaseModel):
    """Accept answer request."""

    question_id: str  # UUID string
    answer_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class AcceptAnswerResponse(BaseModel):
    """Accept answer response."""

    question_id: str
    accepted_answer_id: str
    is_answered: bool
    changed: bool


class AcceptAnswerUseCase:
    """Use case for the question owner accepting an answer."""

    def __init__(
        self,
        question_service: QuestionService,
        notification_rules: NotificationRules,
    ) -> None:
        """Initialize accept answer use case.

        Args:
            question_service: Question domain service
            notification_rules: Notification rules
        """
        self.question_service = question_service
        self.notification_rules = notification_rules

    async def execute(self, request: AcceptAnswerRequest) -> AcceptAnswerResponse:
        """Execute accept answer flow.

        Steps:
        1. Move the acceptance to the answer (owner only)
        2. Notify the answer's owner if the accepted answer changed

        Raises:
            NotFoundError: If the question or answer doesn't exist
            NotAuthorizedError: If the user doesn't own the question
            BusinessRuleViolationError: If the answer belongs to another question
        """
        result = await self.question_service.accept_answer(
            question_id=QuestionId(UUID(request.question_id)),
            answer_id=AnswerId(UUID(request.answer_id)),
            user_id=UserId(UUID(request.user_id)),
        )

        if result.changed:
            await self.notification_rules.on_answer_accepted(
                result.question, result.previous_answer_id
            )

        return AcceptAnswerResponse(
            question_id=str(result.question.id),
            accepted_answer_id=str(result.question.accepted_answer_id),
            is_answered=result.question.is_answered,
            changed=result.changed,
        )

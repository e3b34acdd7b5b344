"""Create comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import CommentService, NotificationRules
from stackit.domain.value import (
    AnswerId,
    AnswerTarget,
    QuestionId,
    QuestionTarget,
    TargetKind,
    UserId,
    target_to_ids,
)


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    target_kind: TargetKind
    target_id: str  # UUID string of the question or answer
    content: str
    user_id: str  # User ID from authenticated user


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment_id: str
    user_id: str
    content: str
    question_id: str | None
    answer_id: str | None
    created_at: datetime


class CreateCommentUseCase:
    """Use case for commenting on a question or an answer."""

    def __init__(
        self,
        comment_service: CommentService,
        notification_rules: NotificationRules,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            notification_rules: Notification rules
        """
        self.comment_service = comment_service
        self.notification_rules = notification_rules

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Create the comment on its target
        2. Notify the owner of the target

        Raises:
            NotFoundError: If the question or answer doesn't exist
        """
        target_uuid = UUID(request.target_id)
        if request.target_kind == TargetKind.QUESTION:
            target = QuestionTarget(question_id=QuestionId(target_uuid))
        else:
            target = AnswerTarget(answer_id=AnswerId(target_uuid))

        comment = await self.comment_service.create_comment(
            target=target,
            user_id=UserId(UUID(request.user_id)),
            content=request.content,
        )

        await self.notification_rules.on_comment_created(comment)

        question_id, answer_id = target_to_ids(comment.target)
        return CreateCommentResponse(
            comment_id=str(comment.id),
            user_id=str(comment.user_id),
            content=comment.content,
            question_id=str(question_id) if question_id else None,
            answer_id=str(answer_id) if answer_id else None,
            created_at=comment.created_at,
        )

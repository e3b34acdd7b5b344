"""Comment domain service."""

from datetime import datetime
from typing import List
from uuid import uuid4

import logfire

from stackit.domain.error import NotFoundError
from stackit.domain.model.comment import Comment
from stackit.domain.repository import CommentRepository
from stackit.domain.value import (
    AnswerTarget,
    CommentId,
    ContentTarget,
    QuestionTarget,
    UserId,
)

from .answer_service import AnswerService
from .base import Service
from .question_service import QuestionService


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            question_service: Question domain service
            answer_service: Answer domain service
        """
        self.comment_repository = comment_repository
        self.question_service = question_service
        self.answer_service = answer_service

    async def create_comment(
        self, target: ContentTarget, user_id: UserId, content: str
    ) -> Comment:
        """Comment on a question or an answer.

        Args:
            target: The commented question or answer
            user_id: Author user ID
            content: Comment text

        Returns:
            Created comment

        Raises:
            NotFoundError: If the target doesn't exist
        """
        with logfire.span(
            "comment_service.create_comment",
            target_kind=target.kind,
            user_id=str(user_id),
        ):
            await self._ensure_target_exists(target)

            comment = Comment(
                id=CommentId(uuid4()),
                user_id=user_id,
                content=content,
                target=target,
                created_at=datetime.now(),
            )
            saved = await self.comment_repository.save(comment)

            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                target_kind=target.kind,
                user_id=str(user_id),
            )
            return saved

    async def get_comments(self, target: ContentTarget) -> List[Comment]:
        """List comments on a question or answer, oldest first."""
        return await self.comment_repository.find_by_target(target)

    async def _ensure_target_exists(self, target: ContentTarget) -> None:
        if isinstance(target, QuestionTarget):
            if not await self.question_service.get_question_by_id(target.question_id):
                raise NotFoundError("Question", str(target.question_id))
        elif isinstance(target, AnswerTarget):
            if not await self.answer_service.get_answer_by_id(target.answer_id):
                raise NotFoundError("Answer", str(target.answer_id))

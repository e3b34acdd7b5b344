"""Notification rules.

Each rule reacts to one content mutation, resolves who owns the affected
content and, unless the owner is the actor, appends one notification. Rules
are the only writers of notifications.

A rule never fails the mutation that triggered it: it runs in a savepoint of
the mutation's transaction and any error is logged and rolled back to that
savepoint.
"""

from typing import Awaitable, Callable, Optional

import logfire

from stackit.config import NotificationSettings
from stackit.domain.model.answer import Answer
from stackit.domain.model.comment import Comment
from stackit.domain.model.notification import NewNotification, Notification
from stackit.domain.model.question import Question
from stackit.domain.model.vote import Vote
from stackit.domain.repository import TransactionManager
from stackit.domain.value import (
    AnswerId,
    AnswerTarget,
    ContentTarget,
    NotificationType,
    QuestionId,
    QuestionTarget,
    UserId,
    VoteType,
)

from .answer_service import AnswerService
from .base import Service
from .notification_delivery import NotificationOutbox
from .notification_service import NotificationService
from .question_service import QuestionService


class NotificationRules(Service):
    """Derives notifications from content mutations."""

    def __init__(
        self,
        notification_service: NotificationService,
        question_service: QuestionService,
        answer_service: AnswerService,
        transaction_manager: TransactionManager,
        outbox: NotificationOutbox,
        notification_settings: NotificationSettings,
    ) -> None:
        """Initialize notification rules.

        Args:
            notification_service: Notification store
            question_service: Question lookups for owner and title
            answer_service: Answer lookups for owner and parent question
            transaction_manager: Savepoints around each rule
            outbox: Post-commit push queue
            notification_settings: Feature switches
        """
        self.notification_service = notification_service
        self.question_service = question_service
        self.answer_service = answer_service
        self.transaction_manager = transaction_manager
        self.outbox = outbox
        self.notification_settings = notification_settings

    async def on_answer_created(self, answer: Answer) -> Optional[Notification]:
        """Tell the question owner about a new answer."""

        async def derive() -> Optional[NewNotification]:
            question = await self._find_question(answer.question_id)
            if not question or self._suppressed(question.user_id, answer.user_id):
                return None
            return NewNotification(
                user_id=question.user_id,
                type=NotificationType.ANSWER,
                title="New Answer",
                message=f'Someone answered your question: "{question.title}"',
                question_id=question.id,
                answer_id=answer.id,
            )

        return await self._run("answer_created", derive)

    async def on_answer_accepted(
        self, question: Question, previous_answer_id: Optional[AnswerId]
    ) -> Optional[Notification]:
        """Tell the owner of a newly accepted answer.

        Only a change to a new, non-empty accepted answer notifies. The owner
        of a previously accepted answer is not told about losing it.

        Args:
            question: The question after the update
            previous_answer_id: Accepted answer before the update
        """
        accepted_id = question.accepted_answer_id

        async def derive() -> Optional[NewNotification]:
            if accepted_id is None or accepted_id == previous_answer_id:
                return None
            answer = await self._find_answer(accepted_id)
            if not answer or self._suppressed(answer.user_id, question.user_id):
                return None
            return NewNotification(
                user_id=answer.user_id,
                type=NotificationType.ACCEPTED,
                title="Answer Accepted",
                message=f'Your answer was accepted for: "{question.title}"',
                question_id=question.id,
                answer_id=answer.id,
            )

        return await self._run("answer_accepted", derive)

    async def on_vote_cast(
        self, vote: Vote, previous_vote_type: Optional[VoteType] = None
    ) -> Optional[Notification]:
        """Tell the content owner about an upvote.

        A flip from downvote to upvote counts as an upvote. Downvotes never
        notify.

        Args:
            vote: The vote as stored after the cast
            previous_vote_type: Direction before the cast, if the user had voted
        """

        async def derive() -> Optional[NewNotification]:
            if not self.notification_settings.vote_notifications_enabled:
                return None
            if vote.vote_type != VoteType.UP or previous_vote_type == VoteType.UP:
                return None

            resolved = await self._resolve_target(vote.target)
            if not resolved:
                return None
            owner_id, title = resolved
            if self._suppressed(owner_id, vote.user_id):
                return None

            if isinstance(vote.target, QuestionTarget):
                return NewNotification(
                    user_id=owner_id,
                    type=NotificationType.VOTE,
                    title="Upvoted",
                    message=f'Someone upvoted your question on: "{title}"',
                    question_id=vote.target.question_id,
                )
            return NewNotification(
                user_id=owner_id,
                type=NotificationType.VOTE,
                title="Upvoted",
                message=f'Someone upvoted your answer on: "{title}"',
                answer_id=vote.target.answer_id,
            )

        return await self._run("vote_cast", derive)

    async def on_comment_created(self, comment: Comment) -> Optional[Notification]:
        """Tell the owner of the commented question or answer."""

        async def derive() -> Optional[NewNotification]:
            resolved = await self._resolve_target(comment.target)
            if not resolved:
                return None
            owner_id, title = resolved
            if self._suppressed(owner_id, comment.user_id):
                return None

            if isinstance(comment.target, QuestionTarget):
                return NewNotification(
                    user_id=owner_id,
                    type=NotificationType.COMMENT_QUESTION,
                    title="New Comment",
                    message=f'Someone commented on your question: "{title}"',
                    question_id=comment.target.question_id,
                )
            return NewNotification(
                user_id=owner_id,
                type=NotificationType.COMMENT_ANSWER,
                title="New Comment",
                message=f'Someone commented on your answer: "{title}"',
                answer_id=comment.target.answer_id,
            )

        return await self._run("comment_created", derive)

    async def _run(
        self,
        rule: str,
        derive: Callable[[], Awaitable[Optional[NewNotification]]],
    ) -> Optional[Notification]:
        with logfire.span("notification_rules.{rule}", rule=rule):
            try:
                async with self.transaction_manager.savepoint():
                    new_notification = await derive()
                    if new_notification is None:
                        return None
                    notification = await self.notification_service.append(
                        new_notification
                    )
            except Exception:
                logfire.exception("Notification rule failed", rule=rule)
                return None

            self.outbox.add(notification)
            return notification

    async def _resolve_target(
        self, target: ContentTarget
    ) -> Optional[tuple[UserId, str]]:
        """Owner of the target and the title of the question it belongs to."""
        if isinstance(target, QuestionTarget):
            question = await self._find_question(target.question_id)
            if not question:
                return None
            return question.user_id, question.title

        if isinstance(target, AnswerTarget):
            answer = await self._find_answer(target.answer_id)
            if not answer:
                return None
            question = await self._find_question(answer.question_id)
            if not question:
                return None
            return answer.user_id, question.title

        return None

    async def _find_question(self, question_id: QuestionId) -> Optional[Question]:
        question = await self.question_service.get_question_by_id(question_id)
        if not question:
            logfire.warn(
                "Notification target question missing", question_id=str(question_id)
            )
        return question

    async def _find_answer(self, answer_id: AnswerId) -> Optional[Answer]:
        answer = await self.answer_service.get_answer_by_id(answer_id)
        if not answer:
            logfire.warn("Notification target answer missing", answer_id=str(answer_id))
        return answer

    @staticmethod
    def _suppressed(owner_id: Optional[UserId], actor_id: UserId) -> bool:
        if owner_id is None:
            logfire.warn("Notification target has no owner")
            return True
        if owner_id == actor_id:
            logfire.info("Self notification suppressed", user_id=str(actor_id))
            return True
        return False

"""Vote domain service."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from stackit.domain.error import NotFoundError
from stackit.domain.model.vote import Vote
from stackit.domain.repository import VoteRepository
from stackit.domain.value import (
    AnswerTarget,
    ContentTarget,
    QuestionTarget,
    UserId,
    VoteId,
    VoteType,
)

from .answer_service import AnswerService
from .base import Service
from .question_service import QuestionService


@dataclass
class VoteOutcome:
    """Result of casting a vote.

    vote is None when the cast cancelled an existing vote. previous_vote_type
    is the direction before the cast, None if the user had not voted.
    """

    vote: Optional[Vote]
    previous_vote_type: Optional[VoteType]
    delta: int


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        question_service: QuestionService,
        answer_service: AnswerService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            question_service: Question domain service
            answer_service: Answer domain service
        """
        self.vote_repository = vote_repository
        self.question_service = question_service
        self.answer_service = answer_service

    async def cast_vote(
        self, target: ContentTarget, user_id: UserId, vote_type: VoteType
    ) -> VoteOutcome:
        """Cast, flip or cancel a vote.

        Voting the same direction twice cancels the vote, voting the other
        direction flips it. The target's score is adjusted atomically by the
        resulting delta.

        Args:
            target: The voted question or answer
            user_id: Voter user ID
            vote_type: Direction of the vote

        Returns:
            Vote outcome

        Raises:
            NotFoundError: If the target doesn't exist
            ValueError: If a concurrent vote by the same user won the insert
        """
        with logfire.span(
            "vote_service.cast_vote",
            target_kind=target.kind,
            user_id=str(user_id),
            vote_type=int(vote_type),
        ):
            await self._ensure_target_exists(target)

            existing = await self.vote_repository.find_by_user_and_target(
                user_id, target
            )

            if existing and existing.vote_type == vote_type:
                await self.vote_repository.delete(existing.id)
                outcome = VoteOutcome(
                    vote=None,
                    previous_vote_type=existing.vote_type,
                    delta=-int(vote_type),
                )
                logfire.info("Vote cancelled", vote_id=str(existing.id))
            elif existing:
                flipped = await self.vote_repository.update_vote_type(
                    existing.id, vote_type
                )
                outcome = VoteOutcome(
                    vote=flipped,
                    previous_vote_type=existing.vote_type,
                    delta=2 * int(vote_type),
                )
                logfire.info("Vote flipped", vote_id=str(existing.id))
            else:
                vote = Vote(
                    id=VoteId(uuid4()),
                    user_id=user_id,
                    target=target,
                    vote_type=vote_type,
                    created_at=datetime.now(),
                )
                try:
                    saved = await self.vote_repository.save(vote)
                except IntegrityError:
                    logfire.warn(
                        "Duplicate vote attempt",
                        user_id=str(user_id),
                        target_kind=target.kind,
                    )
                    raise ValueError("Already voted on this content")
                outcome = VoteOutcome(
                    vote=saved, previous_vote_type=None, delta=int(vote_type)
                )
                logfire.info("Vote created", vote_id=str(saved.id))

            await self._adjust_score(target, outcome.delta)
            return outcome

    async def _ensure_target_exists(self, target: ContentTarget) -> None:
        if isinstance(target, QuestionTarget):
            if not await self.question_service.get_question_by_id(target.question_id):
                logfire.warn("Vote on non-existent question")
                raise NotFoundError("Question", str(target.question_id))
        elif isinstance(target, AnswerTarget):
            if not await self.answer_service.get_answer_by_id(target.answer_id):
                logfire.warn("Vote on non-existent answer")
                raise NotFoundError("Answer", str(target.answer_id))

    async def _adjust_score(self, target: ContentTarget, delta: int) -> None:
        if isinstance(target, QuestionTarget):
            await self.question_service.adjust_votes(target.question_id, delta)
        else:
            await self.answer_service.adjust_votes(target.answer_id, delta)

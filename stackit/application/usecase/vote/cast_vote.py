"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from stackit.domain.service import NotificationRules, VoteService
from stackit.domain.value import (
    AnswerId,
    AnswerTarget,
    QuestionId,
    QuestionTarget,
    TargetKind,
    UserId,
    VoteType,
)


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    target_kind: TargetKind
    target_id: str  # UUID string of the question or answer
    vote_type: VoteType
    user_id: str  # User ID from authenticated user


class CastVoteResponse(BaseModel):
    """Cast vote response.

    vote_id and vote_type are None when the cast cancelled the user's vote.
    """

    vote_id: str | None
    vote_type: VoteType | None
    votes_delta: int


class CastVoteUseCase:
    """Use case for voting on a question or an answer."""

    def __init__(
        self,
        vote_service: VoteService,
        notification_rules: NotificationRules,
    ) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            notification_rules: Notification rules
        """
        self.vote_service = vote_service
        self.notification_rules = notification_rules

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Steps:
        1. Insert, flip or cancel the user's vote and adjust the score
        2. Notify the content owner when the result is a new upvote

        Raises:
            NotFoundError: If the question or answer doesn't exist
            ValueError: If a concurrent duplicate vote was rejected
        """
        target_uuid = UUID(request.target_id)
        if request.target_kind == TargetKind.QUESTION:
            target = QuestionTarget(question_id=QuestionId(target_uuid))
        else:
            target = AnswerTarget(answer_id=AnswerId(target_uuid))

        outcome = await self.vote_service.cast_vote(
            target=target,
            user_id=UserId(UUID(request.user_id)),
            vote_type=request.vote_type,
        )

        if outcome.vote is not None:
            await self.notification_rules.on_vote_cast(
                outcome.vote, outcome.previous_vote_type
            )

        return CastVoteResponse(
            vote_id=str(outcome.vote.id) if outcome.vote else None,
            vote_type=outcome.vote.vote_type if outcome.vote else None,
            votes_delta=outcome.delta,
        )

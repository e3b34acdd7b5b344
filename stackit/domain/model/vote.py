"""Vote entity.

Votes are up or down votes on questions and answers.
"""

from datetime import datetime

from pydantic import Field

from stackit.domain.model.common import DomainModel
from stackit.domain.value import ContentTarget, UserId, VoteId, VoteType


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per target (enforced by database unique constraints)
    - Voting the same direction again cancels the vote
    - Voting the opposite direction flips the existing vote
    """

    id: VoteId
    user_id: UserId
    target: ContentTarget
    vote_type: VoteType
    created_at: datetime = Field(default_factory=datetime.now)

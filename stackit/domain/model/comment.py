"""Comment entity.

Comments are short remarks attached to either a question or an answer.
"""

from datetime import datetime

from pydantic import Field

from stackit.domain.model.common import DomainModel
from stackit.domain.value import CommentId, ContentTarget, UserId


class Comment(DomainModel):
    """Comment on a question or an answer.

    The target is a tagged union, so a comment can never point at both
    kinds of content, or at neither.
    """

    id: CommentId
    user_id: UserId
    content: str = Field(min_length=1, max_length=10000)
    target: ContentTarget
    created_at: datetime = Field(default_factory=datetime.now)

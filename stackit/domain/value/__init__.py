"""Domain value objects for StackIt."""

from stackit.domain.value.identifiers import (
    AnswerId,
    CommentId,
    NotificationId,
    QuestionId,
    UserId,
    VoteId,
)
from stackit.domain.value.types import (
    AnswerTarget,
    ContentTarget,
    NotificationType,
    QuestionTarget,
    TargetKind,
    VoteType,
    target_from_ids,
    target_to_ids,
)

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "CommentId",
    "VoteId",
    "NotificationId",
    # Types
    "VoteType",
    "TargetKind",
    "QuestionTarget",
    "AnswerTarget",
    "ContentTarget",
    "NotificationType",
    "target_from_ids",
    "target_to_ids",
]

"""Domain model entities for StackIt."""

from stackit.domain.model.answer import Answer
from stackit.domain.model.comment import Comment
from stackit.domain.model.notification import NewNotification, Notification
from stackit.domain.model.question import Question
from stackit.domain.model.vote import Vote

__all__ = [
    "Question",
    "Answer",
    "Comment",
    "Vote",
    "Notification",
    "NewNotification",
]

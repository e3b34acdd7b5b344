"""Domain services."""

from .answer_service import AnswerService
from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .notification_delivery import (
    NotificationBroker,
    NotificationOutbox,
    Subscription,
    SubscriptionState,
)
from .notification_rules import NotificationRules
from .notification_service import NotificationService
from .question_service import AcceptAnswerResult, QuestionService
from .vote_service import VoteOutcome, VoteService

__all__ = [
    "AcceptAnswerResult",
    "AnswerService",
    "CommentService",
    "JWTService",
    "NotificationBroker",
    "NotificationOutbox",
    "NotificationRules",
    "NotificationService",
    "QuestionService",
    "Service",
    "Subscription",
    "SubscriptionState",
    "VoteOutcome",
    "VoteService",
]

"""Notification entity.

Notifications tell a user about activity on content they own. They are
written only by the notification rules; recipients may only mark them read.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from stackit.domain.model.common import DomainModel
from stackit.domain.value import (
    AnswerId,
    NotificationId,
    NotificationType,
    QuestionId,
    UserId,
)


class NewNotification(DomainModel):
    """Notification payload before it is validated and stored.

    user_id is optional here so that an unresolved recipient reaches the
    store and is rejected there with a domain ValidationError.
    """

    user_id: Optional[UserId] = None
    type: NotificationType
    title: str
    message: str
    question_id: Optional[QuestionId] = None
    answer_id: Optional[AnswerId] = None


class Notification(DomainModel):
    """Stored notification."""

    id: NotificationId
    user_id: UserId
    type: NotificationType
    title: str
    message: str
    question_id: Optional[QuestionId] = None
    answer_id: Optional[AnswerId] = None
    read: bool = False
    created_at: datetime = Field(default_factory=datetime.now)

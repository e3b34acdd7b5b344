"""Answer entity."""

from datetime import datetime

from pydantic import Field

from stackit.domain.model.common import DomainModel
from stackit.domain.value import AnswerId, QuestionId, UserId


class Answer(DomainModel):
    """Answer to a question.

    Belongs to exactly one question. is_accepted mirrors the parent
    question's accepted_answer_id.
    """

    id: AnswerId
    question_id: QuestionId
    user_id: UserId
    content: str = Field(min_length=1, max_length=30000)
    is_accepted: bool = False
    votes_count: int = 0
    created_at: datetime = Field(default_factory=datetime.now)

"""Question aggregate root.

Questions are owned by their author. The author may accept one of the
question's answers, which marks the question as answered.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from stackit.domain.model.common import DomainModel
from stackit.domain.value import AnswerId, QuestionId, UserId


class Question(DomainModel):
    """Question aggregate root.

    Business rules:
    - is_answered is true iff accepted_answer_id is set
    - Counters are maintained with atomic increments, never read-modify-write
    """

    id: QuestionId
    title: str = Field(min_length=1, max_length=300)
    description: str = Field(min_length=1, max_length=30000)
    user_id: UserId
    accepted_answer_id: Optional[AnswerId] = None
    is_answered: bool = False
    votes_count: int = 0
    answers_count: int = Field(default=0, ge=0)
    views_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_answered_flag(self) -> "Question":
        """Keep is_answered consistent with the accepted answer."""
        if self.is_answered != (self.accepted_answer_id is not None):
            raise ValueError("is_answered must be set iff an answer is accepted")
        return self

"""Domain value objects for StackIt.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum, IntEnum
from typing import Annotated, Literal, Optional, Union

from pydantic import Field

from stackit.domain.value.common import ValueObject
from stackit.domain.value.identifiers import AnswerId, QuestionId


class VoteType(IntEnum):
    """Direction of a vote.

    Stored as the signed integer so it can be added straight onto a
    content item's votes_count.
    """

    UP = 1
    DOWN = -1


class TargetKind(str, Enum):
    """Kind of content a comment or vote points at."""

    QUESTION = "question"
    ANSWER = "answer"


class QuestionTarget(ValueObject):
    """A comment or vote on a question."""

    kind: Literal["question"] = "question"
    question_id: QuestionId


class AnswerTarget(ValueObject):
    """A comment or vote on an answer."""

    kind: Literal["answer"] = "answer"
    answer_id: AnswerId


# A comment or vote references exactly one question or one answer
ContentTarget = Annotated[
    Union[QuestionTarget, AnswerTarget], Field(discriminator="kind")
]


def target_from_ids(
    question_id: Optional[QuestionId], answer_id: Optional[AnswerId]
) -> QuestionTarget | AnswerTarget:
    """Build a content target from a pair of nullable foreign keys.

    Args:
        question_id: Question ID column value
        answer_id: Answer ID column value

    Returns:
        The matching target variant

    Raises:
        ValueError: If both or neither IDs are set
    """
    if question_id is not None and answer_id is None:
        return QuestionTarget(question_id=question_id)
    if answer_id is not None and question_id is None:
        return AnswerTarget(answer_id=answer_id)
    raise ValueError("Exactly one of question_id or answer_id must be set")


def target_to_ids(
    target: QuestionTarget | AnswerTarget,
) -> tuple[Optional[QuestionId], Optional[AnswerId]]:
    """Split a content target into its (question_id, answer_id) columns."""
    if isinstance(target, QuestionTarget):
        return target.question_id, None
    return None, target.answer_id


class NotificationType(str, Enum):
    """Kind of activity a notification reports."""

    ANSWER = "answer"
    ACCEPTED = "accepted"
    VOTE = "vote"
    COMMENT_QUESTION = "comment_question"
    COMMENT_ANSWER = "comment_answer"

    @property
    def is_comment(self) -> bool:
        """Whether this notification reports a comment."""
        return self in (NotificationType.COMMENT_QUESTION, NotificationType.COMMENT_ANSWER)

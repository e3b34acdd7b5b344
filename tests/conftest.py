"""Test configuration and fixtures."""

from datetime import datetime
from uuid import uuid4

from stackit.domain.model import Answer, Question
from stackit.domain.value import AnswerId, QuestionId, UserId


def new_user_id() -> UserId:
    """Fresh user ID; users live in the identity provider, not here."""
    return UserId(uuid4())


def make_question(
    user_id: UserId, title: str = "How do I sort a dict by value?"
) -> Question:
    """Helper to build an unanswered question owned by user_id."""
    return Question(
        id=QuestionId(uuid4()),
        title=title,
        description="I have a dict and want its items ordered by value.",
        user_id=user_id,
        created_at=datetime.now(),
    )


def make_answer(
    question_id: QuestionId, user_id: UserId, content: str = "Use sorted()."
) -> Answer:
    """Helper to build an answer to question_id by user_id."""
    return Answer(
        id=AnswerId(uuid4()),
        question_id=question_id,
        user_id=user_id,
        content=content,
        created_at=datetime.now(),
    )

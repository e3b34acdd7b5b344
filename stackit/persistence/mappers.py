"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from stackit.domain.model import Answer, Comment, Notification, Question, Vote
from stackit.domain.value import (
    AnswerId,
    CommentId,
    NotificationId,
    NotificationType,
    QuestionId,
    UserId,
    VoteId,
    VoteType,
    target_from_ids,
    target_to_ids,
)


def _uuid(value: Any) -> Optional[UUID]:
    """asyncpg returns UUIDs, but raw SQL paths can hand back strings."""
    if value is None:
        return None
    return UUID(value) if isinstance(value, str) else value


def row_to_question(row: Dict[str, Any]) -> Question:
    """Convert database row to Question domain model.

    Args:
        row: Database row as dict

    Returns:
        Question domain model
    """
    accepted = _uuid(row.get("accepted_answer_id"))
    return Question(
        id=QuestionId(_uuid(row["id"])),
        title=row["title"],
        description=row["description"],
        user_id=UserId(_uuid(row["user_id"])),
        accepted_answer_id=AnswerId(accepted) if accepted else None,
        is_answered=row["is_answered"],
        votes_count=row["votes_count"],
        answers_count=row["answers_count"],
        views_count=row["views_count"],
        created_at=row["created_at"],
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict."""
    return question.model_dump()


def row_to_answer(row: Dict[str, Any]) -> Answer:
    """Convert database row to Answer domain model."""
    return Answer(
        id=AnswerId(_uuid(row["id"])),
        question_id=QuestionId(_uuid(row["question_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        content=row["content"],
        is_accepted=row["is_accepted"],
        votes_count=row["votes_count"],
        created_at=row["created_at"],
    )


def answer_to_dict(answer: Answer) -> Dict[str, Any]:
    """Convert Answer domain model to database dict."""
    return answer.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    The two nullable target columns become a single ContentTarget.
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        content=row["content"],
        target=target_from_ids(_uuid(row["question_id"]), _uuid(row["answer_id"])),
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict with the target split into question_id and answer_id
    """
    question_id, answer_id = target_to_ids(comment.target)
    return {
        "id": comment.id,
        "user_id": comment.user_id,
        "content": comment.content,
        "question_id": question_id,
        "answer_id": answer_id,
        "created_at": comment.created_at,
    }


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        target=target_from_ids(_uuid(row["question_id"]), _uuid(row["answer_id"])),
        vote_type=VoteType(row["vote_type"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    question_id, answer_id = target_to_ids(vote.target)
    return {
        "id": vote.id,
        "user_id": vote.user_id,
        "question_id": question_id,
        "answer_id": answer_id,
        "vote_type": int(vote.vote_type),
        "created_at": vote.created_at,
    }


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model.

    The seq column is storage-only and is not carried over.
    """
    question_id = _uuid(row.get("question_id"))
    answer_id = _uuid(row.get("answer_id"))
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        type=NotificationType(row["type"]),
        title=row["title"],
        message=row["message"],
        question_id=QuestionId(question_id) if question_id else None,
        answer_id=AnswerId(answer_id) if answer_id else None,
        read=row["read"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    data = notification.model_dump()
    data["type"] = notification.type.value
    return data

"""In-memory comment repository for testing."""

from typing import Optional

from stackit.domain.model.comment import Comment
from stackit.domain.repository.comment import CommentRepository
from stackit.domain.value import CommentId, ContentTarget


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_target(self, target: ContentTarget) -> list[Comment]:
        """Find comments on a question or answer, oldest first."""
        comments = [c for c in self._comments.values() if c.target == target]
        comments.sort(key=lambda c: c.created_at)
        return comments

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment

"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from stackit.domain.model.comment import Comment
from stackit.domain.value import CommentId, ContentTarget


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_target(self, target: ContentTarget) -> List[Comment]:
        """Find comments on a question or an answer, oldest first.

        Args:
            target: The commented content

        Returns:
            List of comments
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

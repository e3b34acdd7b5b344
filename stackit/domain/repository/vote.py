"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from stackit.domain.model.vote import Vote
from stackit.domain.value import ContentTarget, UserId, VoteId, VoteType


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_user_and_target(
        self, user_id: UserId, target: ContentTarget
    ) -> Optional[Vote]:
        """Find a user's vote on a specific question or answer.

        Args:
            user_id: The voter's ID
            target: The voted content

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a new vote.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If the user already voted on this target
        """
        pass

    @abstractmethod
    async def update_vote_type(
        self, vote_id: VoteId, vote_type: VoteType
    ) -> Optional[Vote]:
        """Flip the direction of an existing vote.

        Args:
            vote_id: The vote ID
            vote_type: New direction

        Returns:
            The updated vote, None if it doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote.

        Used when a user repeats the same vote to cancel it.

        Args:
            vote_id: The vote ID to delete
        """
        pass

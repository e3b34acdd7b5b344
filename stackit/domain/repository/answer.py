"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from stackit.domain.model.answer import Answer
from stackit.domain.value import AnswerId, QuestionId


class AnswerRepository(ABC):
    """Repository for Answer entity."""

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Find all answers to a question.

        Accepted answer first, then by score, then oldest first.

        Args:
            question_id: The question ID

        Returns:
            List of answers
        """
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save a new answer.

        Args:
            answer: The answer to save

        Returns:
            The saved answer
        """
        pass

    @abstractmethod
    async def set_accepted(self, answer_id: AnswerId, is_accepted: bool) -> None:
        """Set or clear the accepted flag of an answer.

        Args:
            answer_id: The answer ID
            is_accepted: New flag value
        """
        pass

    @abstractmethod
    async def adjust_votes_count(self, answer_id: AnswerId, delta: int) -> None:
        """Atomically add delta (may be negative) to the vote score.

        Args:
            answer_id: The answer ID
            delta: Signed change in score
        """
        pass

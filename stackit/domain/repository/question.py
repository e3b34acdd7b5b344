"""Question repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from stackit.domain.model.question import Question
from stackit.domain.value import AnswerId, QuestionId


class QuestionRepository(ABC):
    """Repository for Question aggregate.

    Defines the contract for question persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a new question.

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass

    @abstractmethod
    async def set_accepted_answer(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> Optional[Question]:
        """Point the question at its accepted answer and mark it answered.

        Args:
            question_id: The question ID
            answer_id: The newly accepted answer

        Returns:
            The updated question, None if the question doesn't exist
        """
        pass

    @abstractmethod
    async def increment_answers_count(self, question_id: QuestionId) -> None:
        """Atomically increment the answer counter.

        Args:
            question_id: The question ID
        """
        pass

    @abstractmethod
    async def increment_views_count(self, question_id: QuestionId) -> None:
        """Atomically increment the view counter.

        Args:
            question_id: The question ID
        """
        pass

    @abstractmethod
    async def adjust_votes_count(self, question_id: QuestionId, delta: int) -> None:
        """Atomically add delta (may be negative) to the vote score.

        Args:
            question_id: The question ID
            delta: Signed change in score
        """
        pass

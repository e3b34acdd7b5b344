"""In-memory question repository for testing."""

from typing import Optional

from stackit.domain.model.question import Question
from stackit.domain.repository.question import QuestionRepository
from stackit.domain.value import AnswerId, QuestionId


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self) -> None:
        self._questions: dict[QuestionId, Question] = {}

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._questions.get(question_id)

    async def save(self, question: Question) -> Question:
        """Save a question."""
        self._questions[question.id] = question
        return question

    async def set_accepted_answer(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> Optional[Question]:
        """Point the question at its accepted answer."""
        question = self._questions.get(question_id)
        if not question:
            return None
        updated = question.model_copy(
            update={"accepted_answer_id": answer_id, "is_answered": True}
        )
        self._questions[question_id] = updated
        return updated

    async def increment_answers_count(self, question_id: QuestionId) -> None:
        """Increment answers_count."""
        self._bump(question_id, "answers_count", 1)

    async def increment_views_count(self, question_id: QuestionId) -> None:
        """Increment views_count."""
        self._bump(question_id, "views_count", 1)

    async def adjust_votes_count(self, question_id: QuestionId, delta: int) -> None:
        """Add delta to votes_count."""
        self._bump(question_id, "votes_count", delta)

    def _bump(self, question_id: QuestionId, field: str, delta: int) -> None:
        question = self._questions.get(question_id)
        if question:
            self._questions[question_id] = question.model_copy(
                update={field: getattr(question, field) + delta}
            )

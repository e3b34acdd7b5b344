"""In-memory answer repository for testing."""

from typing import Optional

from stackit.domain.model.answer import Answer
from stackit.domain.repository.answer import AnswerRepository
from stackit.domain.value import AnswerId, QuestionId


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self) -> None:
        self._answers: dict[AnswerId, Answer] = {}

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        return self._answers.get(answer_id)

    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find a question's answers, accepted first, then by score."""
        answers = [a for a in self._answers.values() if a.question_id == question_id]
        answers.sort(key=lambda a: a.created_at)
        answers.sort(key=lambda a: (a.is_accepted, a.votes_count), reverse=True)
        return answers

    async def save(self, answer: Answer) -> Answer:
        """Save an answer."""
        self._answers[answer.id] = answer
        return answer

    async def set_accepted(self, answer_id: AnswerId, is_accepted: bool) -> None:
        """Set the is_accepted flag."""
        answer = self._answers.get(answer_id)
        if answer:
            self._answers[answer_id] = answer.model_copy(
                update={"is_accepted": is_accepted}
            )

    async def adjust_votes_count(self, answer_id: AnswerId, delta: int) -> None:
        """Add delta to votes_count."""
        answer = self._answers.get(answer_id)
        if answer:
            self._answers[answer_id] = answer.model_copy(
                update={"votes_count": answer.votes_count + delta}
            )

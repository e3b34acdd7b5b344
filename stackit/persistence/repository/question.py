"""PostgreSQL implementation of Question repository."""

from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model import Question
from stackit.domain.repository import QuestionRepository
from stackit.domain.value import AnswerId, QuestionId
from stackit.persistence.mappers import question_to_dict, row_to_question
from stackit.persistence.tables import questions_table


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        stmt = select(questions_table).where(questions_table.c.id == question_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_question(row._asdict()) if row else None

    async def save(self, question: Question) -> Question:
        """Insert a new question."""
        stmt = insert(questions_table).values(**question_to_dict(question))
        await self.session.execute(stmt)
        await self.session.flush()
        return question

    async def set_accepted_answer(
        self, question_id: QuestionId, answer_id: AnswerId
    ) -> Optional[Question]:
        """Point the question at its accepted answer and mark it answered."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(
                accepted_answer_id=answer_id,
                is_answered=True,
            )
            .returning(questions_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_question(row._asdict()) if row else None

    async def increment_answers_count(self, question_id: QuestionId) -> None:
        """Atomically increment answers_count."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(answers_count=questions_table.c.answers_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def increment_views_count(self, question_id: QuestionId) -> None:
        """Atomically increment views_count."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(views_count=questions_table.c.views_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def adjust_votes_count(self, question_id: QuestionId, delta: int) -> None:
        """Atomically add delta to votes_count."""
        stmt = (
            update(questions_table)
            .where(questions_table.c.id == question_id)
            .values(votes_count=questions_table.c.votes_count + delta)
        )
        await self.session.execute(stmt)
        await self.session.flush()

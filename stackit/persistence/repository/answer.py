"""PostgreSQL implementation of Answer repository."""

from typing import List, Optional

from sqlalchemy import asc, desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model import Answer
from stackit.domain.repository import AnswerRepository
from stackit.domain.value import AnswerId, QuestionId
from stackit.persistence.mappers import answer_to_dict, row_to_answer
from stackit.persistence.tables import answers_table


class PostgresAnswerRepository(AnswerRepository):
    """PostgreSQL implementation of AnswerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        stmt = select(answers_table).where(answers_table.c.id == answer_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_answer(row._asdict()) if row else None

    async def find_by_question(self, question_id: QuestionId) -> List[Answer]:
        """Find a question's answers, accepted first, then by score."""
        stmt = (
            select(answers_table)
            .where(answers_table.c.question_id == question_id)
            .order_by(
                desc(answers_table.c.is_accepted),
                desc(answers_table.c.votes_count),
                asc(answers_table.c.created_at),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_answer(row._asdict()) for row in result.fetchall()]

    async def save(self, answer: Answer) -> Answer:
        """Insert a new answer."""
        stmt = insert(answers_table).values(**answer_to_dict(answer))
        await self.session.execute(stmt)
        await self.session.flush()
        return answer

    async def set_accepted(self, answer_id: AnswerId, is_accepted: bool) -> None:
        """Set the is_accepted flag."""
        stmt = (
            update(answers_table)
            .where(answers_table.c.id == answer_id)
            .values(is_accepted=is_accepted)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def adjust_votes_count(self, answer_id: AnswerId, delta: int) -> None:
        """Atomically add delta to votes_count."""
        stmt = (
            update(answers_table)
            .where(answers_table.c.id == answer_id)
            .values(votes_count=answers_table.c.votes_count + delta)
        )
        await self.session.execute(stmt)
        await self.session.flush()

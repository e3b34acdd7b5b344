"""PostgreSQL implementation of Vote repository."""

from typing import Optional

from sqlalchemy import and_, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model import Vote
from stackit.domain.repository import VoteRepository
from stackit.domain.value import ContentTarget, QuestionTarget, UserId, VoteId, VoteType
from stackit.persistence.mappers import row_to_vote, vote_to_dict
from stackit.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_target(
        self, user_id: UserId, target: ContentTarget
    ) -> Optional[Vote]:
        """Find a user's vote on a specific question or answer."""
        if isinstance(target, QuestionTarget):
            condition = votes_table.c.question_id == target.question_id
        else:
            condition = votes_table.c.answer_id == target.answer_id

        stmt = select(votes_table).where(
            and_(votes_table.c.user_id == user_id, condition)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def save(self, vote: Vote) -> Vote:
        """Insert a new vote. Duplicates fail on the unique constraints."""
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def update_vote_type(
        self, vote_id: VoteId, vote_type: VoteType
    ) -> Optional[Vote]:
        """Flip a vote's direction."""
        stmt = (
            update(votes_table)
            .where(votes_table.c.id == vote_id)
            .values(vote_type=int(vote_type))
            .returning(votes_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_vote(row._asdict()) if row else None

    async def delete(self, vote_id: VoteId) -> None:
        """Delete a vote."""
        stmt = delete(votes_table).where(votes_table.c.id == vote_id)
        await self.session.execute(stmt)
        await self.session.flush()

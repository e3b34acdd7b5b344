"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import asc, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.model import Comment
from stackit.domain.repository import CommentRepository
from stackit.domain.value import CommentId, ContentTarget, QuestionTarget
from stackit.persistence.mappers import comment_to_dict, row_to_comment
from stackit.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_target(self, target: ContentTarget) -> List[Comment]:
        """Find comments on a question or answer, oldest first."""
        if isinstance(target, QuestionTarget):
            condition = comments_table.c.question_id == target.question_id
        else:
            condition = comments_table.c.answer_id == target.answer_id

        stmt = (
            select(comments_table)
            .where(condition)
            .order_by(asc(comments_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = insert(comments_table).values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

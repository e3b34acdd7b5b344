"""PostgreSQL transaction manager."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession

from stackit.domain.repository import TransactionManager


class PostgresTransactionManager(TransactionManager):
    """Savepoints on the request's session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def savepoint(self) -> AsyncIterator[None]:
        """SAVEPOINT / RELEASE, or ROLLBACK TO SAVEPOINT if the block raises."""
        async with self.session.begin_nested():
            yield

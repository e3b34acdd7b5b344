"""In-memory transaction manager for testing."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from stackit.domain.repository.transaction import TransactionManager


class InMemoryTransactionManager(TransactionManager):
    """Savepoints are no-ops; exceptions pass straight through."""

    def __init__(self) -> None:
        self.savepoints_opened = 0

    @asynccontextmanager
    async def savepoint(self) -> AsyncIterator[None]:
        self.savepoints_opened += 1
        yield

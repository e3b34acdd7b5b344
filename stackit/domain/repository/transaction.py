"""Transaction boundary interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionManager(ABC):
    """Access to the request's transaction from the domain layer."""

    @abstractmethod
    def savepoint(self) -> AbstractAsyncContextManager[None]:
        """Open a nested transaction inside the current one.

        If the block raises, only the work done inside it is rolled back and
        the exception propagates; the outer transaction stays usable.
        """
        pass

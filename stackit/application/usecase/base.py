"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """A single request-scoped operation exposed to the interface layer."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass

"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are immutable; changes go through model_copy(update=...) in the
    in-memory repositories or SQL updates in the PostgreSQL ones. Surrounding
    whitespace in user-entered text is dropped before length checks.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
        str_strip_whitespace=True,
    )

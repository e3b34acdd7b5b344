"""Mapping of domain errors to HTTP errors."""

import logfire
from fastapi import HTTPException, status

from stackit.domain.error import (
    BusinessRuleViolationError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)


def to_http_exception(error: Exception) -> HTTPException:
    """Translate a domain or validation error into an HTTPException.

    Args:
        error: Error raised by a use case

    Returns:
        HTTPException with the matching status code
    """
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))

    if isinstance(error, NotAuthorizedError):
        logfire.warn("Forbidden request", error=str(error))
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(error))

    if isinstance(error, (ValidationError, BusinessRuleViolationError, ValueError)):
        logfire.warn("Rejected request", error=str(error))
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(error)
        )

    if isinstance(error, DomainError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(error)
        )

    logfire.error("Unexpected error", error=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error",
    )

"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Raised for malformed payloads, e.g. a notification without a recipient or
    a comment notification that does not reference exactly one target.
    """

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user acts on content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class TransientDeliveryFailure(DomainError):
    """A push to a live subscriber could not be delivered.

    Never surfaced to end users: clients reconcile by re-fetching.
    """

    def __init__(self, subscription_id: str, reason: str):
        self.subscription_id = subscription_id
        self.reason = reason
        super().__init__(f"Push to subscription {subscription_id} failed: {reason}")

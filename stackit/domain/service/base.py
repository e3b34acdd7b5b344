"""Base class for domain services."""


class Service:
    """Base class for all domain services.

    A domain service holds the rules that span more than one aggregate, such
    as moving an accepted answer or deriving a notification from a vote.
    """

    pass

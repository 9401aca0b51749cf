"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold behaviour that does not belong to a single entity:
    threading comments, throttling resends, validating addresses.
    """

    pass

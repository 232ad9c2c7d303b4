"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold logic that spans several entities or stores, such
    as toggling edges or cascading deletes.
    """

    pass

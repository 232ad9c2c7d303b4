"""Domain layer errors.

Every error carries a ``kind`` that the interface layer maps to a status
code and echoes in the error body.
"""


class DomainError(Exception):
    """Base domain error."""

    kind = "domain_error"


class ValidationError(DomainError):
    """Malformed target kind or missing required identifiers."""

    kind = "invalid"


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    kind = "not_found"

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when a user acts on content they don't own."""

    kind = "forbidden"

    def __init__(self, resource: str, resource_id: str, user_id: str, action: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class ConflictError(DomainError):
    """Raised when an edge with the same natural key already exists."""

    kind = "conflict"

    def __init__(self, resource: str, key: str):
        self.resource = resource
        self.key = key
        super().__init__(f"{resource} already exists: {key}")


class CascadeIncompleteError(DomainError):
    """Raised when dependent cleanup after a parent delete did not finish.

    ``rolled_back`` tells whether the store undoes the parent delete along
    with the partial cleanup. When it does not, orphans remain until a repair
    sweep runs. The original failure is available as ``__cause__``.
    """

    kind = "cascade_incomplete"

    def __init__(self, resource: str, resource_id: str, rolled_back: bool = False):
        self.resource = resource
        self.resource_id = resource_id
        self.rolled_back = rolled_back
        if rolled_back:
            message = (
                f"Cleanup after deleting {resource} {resource_id} failed;"
                " the delete was rolled back"
            )
        else:
            message = (
                f"Cleanup after deleting {resource} {resource_id} did not finish;"
                " run the orphan sweep"
            )
        super().__init__(message)

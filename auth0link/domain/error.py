"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class PreconditionError(DomainError):
    """Raised when an input violates a precondition of the operation.

    Not recoverable by retrying: the caller passed something malformed.
    """

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")

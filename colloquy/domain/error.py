"""Domain layer errors."""

from colloquy.domain.value import FieldError


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationFailedError(DomainError):
    """Raised when a comment payload fails field-level validation.

    Carries every offending field so callers can report all of them.
    """

    def __init__(self, errors: list[FieldError]):
        self.errors = errors
        summary = "; ".join(f"{e.field}: {e.reason}" for e in errors)
        super().__init__(f"Validation failed: {summary}")


class ForbiddenError(DomainError):
    """Raised when the access control matrix denies an operation."""

    def __init__(self, operation: str, resource_id: str | None = None):
        self.operation = operation
        self.resource_id = resource_id
        target = f" on comment {resource_id}" if resource_id else ""
        super().__init__(f"Not allowed to {operation}{target}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidTransitionError(DomainError):
    """Raised when a moderation request names an unknown status."""

    def __init__(self, requested: str):
        self.requested = requested
        super().__init__(f"Unrecognized comment status: {requested!r}")


class StoreUnavailableError(DomainError):
    """Raised when the persistence layer fails.

    Retryable infrastructure failure, never reported as one of the
    request errors above.
    """

    def __init__(self, operation: str, cause: str):
        self.operation = operation
        super().__init__(f"Comment store unavailable during {operation}: {cause}")

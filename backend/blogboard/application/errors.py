class ApplicationError(Exception):
    """Base application-layer error, independent from transport concerns."""


class NotFoundError(ApplicationError):
    """Raised when an expected entity does not exist."""


class ConflictError(ApplicationError):
    """Raised when a uniqueness or state conflict occurs."""


class ForbiddenError(ApplicationError):
    """Raised when the current user may not act on an entity."""


class ValidationError(ApplicationError):
    """Raised when application-level validation fails."""


class InvalidFieldError(ValidationError):
    """Raised when a query references a field or alias the entity does not expose."""

from enum import Enum


class ErrorKind(str, Enum):
    URL = "url"
    BODY = "body"
    NOT_FOUND = "not_found"
    DATABASE = "database"
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"
    UNKNOWN_CAPABILITY = "unknown_capability"
    INSUFFICIENT_LEVEL = "insufficient_level"


class ServiceError(Exception):
    """Base exception for every failure surfaced to API callers."""

    kind: ErrorKind = ErrorKind.DATABASE
    status_code: int = 500
    default_message: str = "Unexpected error"

    def __init__(self, message: str | None = None, status_code: int | None = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class UrlError(ServiceError):
    """Malformed or unrecognized search query."""
    kind = ErrorKind.URL
    status_code = 400
    default_message = "Malformed query"


class BodyError(ServiceError):
    kind = ErrorKind.BODY
    status_code = 422
    default_message = "Malformed request body"


class NotFoundError(ServiceError):
    kind = ErrorKind.NOT_FOUND
    status_code = 404
    default_message = "Item not found"


class DatabaseError(ServiceError):
    """Constraint violation or unexpected datastore failure."""
    kind = ErrorKind.DATABASE
    status_code = 409
    default_message = "Database conflict"


class AuthError(ServiceError):
    """Authorization outcome. Terminal for the current request."""
    kind = ErrorKind.FORBIDDEN
    status_code = 403
    default_message = "Not enough permissions"


class UnauthenticatedError(AuthError):
    kind = ErrorKind.UNAUTHENTICATED
    status_code = 401
    default_message = "Not authenticated"


class ForbiddenError(AuthError):
    kind = ErrorKind.FORBIDDEN
    status_code = 403
    default_message = "Not enough permissions"


class UnknownCapabilityError(AuthError):
    """The requested access name was never registered. A server defect, not a client error."""
    kind = ErrorKind.UNKNOWN_CAPABILITY
    status_code = 500
    default_message = "Server authorization is misconfigured"


class InsufficientLevelError(AuthError):
    kind = ErrorKind.INSUFFICIENT_LEVEL
    status_code = 403
    default_message = "Permission level too low"

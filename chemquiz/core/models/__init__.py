from .base import Base, BigId
from .exceptions import (
    AuthError,
    BodyError,
    DatabaseError,
    ErrorKind,
    ForbiddenError,
    InsufficientLevelError,
    NotFoundError,
    ServiceError,
    UnauthenticatedError,
    UnknownCapabilityError,
    UrlError,
)

__all__ = [
    "AuthError",
    "Base",
    "BigId",
    "BodyError",
    "DatabaseError",
    "ErrorKind",
    "ForbiddenError",
    "InsufficientLevelError",
    "NotFoundError",
    "ServiceError",
    "UnauthenticatedError",
    "UnknownCapabilityError",
    "UrlError",
]

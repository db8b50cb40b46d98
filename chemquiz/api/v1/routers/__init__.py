from . import (
    access,
    questions,
    user_access,
    users,
)

__all__ = [
    "access",
    "questions",
    "user_access",
    "users",
]

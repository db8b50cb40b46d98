from .users import User
from .access import Access, UserAccess
from .questions import Question, QuestionCategory


__all__ = [
    "Access",
    "Question",
    "QuestionCategory",
    "User",
    "UserAccess",
]

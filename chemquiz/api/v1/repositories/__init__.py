from .access_repository import AccessRepository, get_access_repository
from .question_repository import (
    QuestionCategoryRepository,
    QuestionRepository,
    get_question_category_repository,
    get_question_repository,
)
from .user_access_repository import UserAccessRepository, get_user_access_repository
from .user_repository import UserRepository, get_user_repository

__all__ = [
    "AccessRepository",
    "QuestionCategoryRepository",
    "QuestionRepository",
    "UserAccessRepository",
    "UserRepository",
    "get_access_repository",
    "get_question_category_repository",
    "get_question_repository",
    "get_user_access_repository",
    "get_user_repository",
]

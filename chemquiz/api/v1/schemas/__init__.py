from .users import UserCreate, UserUpdate, User, UserSearch
from .access import (
    AccessCreate,
    AccessUpdate,
    Access,
    AccessState,
    UserAccessCreate,
    UserAccessUpdate,
    UserAccess,
    JoinedUserAccess,
    JoinedUserAccessList,
    UserAccessSearch,
)
from .questions import (
    QuestionCategoryCreate,
    QuestionCategory,
    QuestionCategorySearch,
    QuestionCreate,
    Question,
    QuestionSearch,
)

__all__ = [
    "Access",
    "AccessCreate",
    "AccessState",
    "AccessUpdate",
    "JoinedUserAccess",
    "JoinedUserAccessList",
    "Question",
    "QuestionCategory",
    "QuestionCategoryCreate",
    "QuestionCategorySearch",
    "QuestionCreate",
    "QuestionSearch",
    "User",
    "UserAccess",
    "UserAccessCreate",
    "UserAccessSearch",
    "UserAccessUpdate",
    "UserCreate",
    "UserSearch",
    "UserUpdate",
]

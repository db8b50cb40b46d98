from functools import lru_cache

from chemquiz.api.v1.models import User
from chemquiz.core.repositories import BaseRepository


class UserRepository(BaseRepository[User]):
    search_columns = {
        "first_name": User.first_name,
        "last_name": User.last_name,
        "banner_id": User.banner_id,
        "email": User.email,
    }

    def __init__(self):
        super().__init__(User)


@lru_cache()
def get_user_repository() -> UserRepository:
    return UserRepository()

from functools import lru_cache
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from chemquiz.api.v1.models import Access, User, UserAccess
from chemquiz.api.v1.schemas import JoinedUserAccess, UserAccessCreate, UserAccessSearch, UserAccessUpdate
from chemquiz.core.helpers import apply_search
from chemquiz.core.repositories import BaseRepository


class UserAccessRepository(BaseRepository[UserAccess]):
    """Grants linking users to named accesses."""

    search_columns = {
        "access_id": UserAccess.access_id,
        "user_id": UserAccess.user_id,
        "permission_level": UserAccess.permission_level,
        "first_name": User.first_name,
        "last_name": User.last_name,
        "banner_id": User.banner_id,
    }

    def __init__(self):
        super().__init__(UserAccess)

    async def create_grant(self, db: AsyncSession, grant: UserAccessCreate) -> UserAccess:
        """
        Insert a new grant.

        The (user_id, access_id) unique constraint makes the duplicate check
        atomic: a second grant for the same pair raises DatabaseError and leaves
        the existing one untouched.
        """
        return await self.create(db, grant)

    async def get_grant(self, db: AsyncSession, permission_id: int) -> UserAccess:
        return await self.get_by_id(db, permission_id)

    async def update_grant(self, db: AsyncSession, permission_id: int, grant: UserAccessUpdate) -> UserAccess:
        return await self.update(db, grant, permission_id)

    async def delete_grant(self, db: AsyncSession, permission_id: int) -> None:
        await self.delete(db, permission_id)

    async def find_grant(self, db: AsyncSession, user_id: int, access_id: int) -> Optional[UserAccess]:
        result = await db.execute(
            select(UserAccess).where(UserAccess.user_id == user_id, UserAccess.access_id == access_id)
        )
        return result.scalars().first()

    async def check_user_access(self, db: AsyncSession, user_id: int, access_id: int) -> bool:
        return await self.find_grant(db, user_id, access_id) is not None

    def get_search_query(self):
        return (
            select(
                UserAccess.permission_id,
                User.id.label("user_id"),
                Access.id.label("access_id"),
                User.first_name,
                User.last_name,
                User.banner_id,
            )
            .join(Access, Access.id == UserAccess.access_id)
            .join(User, User.id == UserAccess.user_id)
        )

    async def search_grants(self, db: AsyncSession, criteria: Optional[UserAccessSearch] = None) -> List[JoinedUserAccess]:
        """Grants joined with their holder, filtered by ``criteria``."""
        query = self.get_search_query()
        if criteria is not None:
            query = apply_search(query, criteria, self.search_columns)
        result = await db.execute(query)
        return [JoinedUserAccess.model_validate(dict(row._mapping)) for row in result.all()]

    async def search(self, db: AsyncSession, criteria: Optional[UserAccessSearch], schema=None):
        return await self.search_grants(db, criteria)


@lru_cache()
def get_user_access_repository() -> UserAccessRepository:
    return UserAccessRepository()

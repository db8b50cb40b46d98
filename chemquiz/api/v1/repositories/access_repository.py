from functools import lru_cache
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from chemquiz.api.v1.models import Access
from chemquiz.core.repositories import BaseRepository


class AccessRepository(BaseRepository[Access]):
    def __init__(self):
        super().__init__(Access)

    async def get_by_name(self, db: AsyncSession, name: str) -> Optional[Access]:
        result = await db.execute(select(Access).where(Access.name == name))
        return result.scalars().first()


@lru_cache()
def get_access_repository() -> AccessRepository:
    return AccessRepository()

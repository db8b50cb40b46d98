from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from chemquiz.api.v1.models import Access, User, UserAccess
from chemquiz.core.security import create_access_token


def auth_headers(user_id: int) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


async def add_user(
    db: AsyncSession,
    first_name: str = "Anna",
    last_name: str = "Lee",
    banner_id: int = 1001,
    email: Optional[str] = None,
    user_id: Optional[int] = None,
) -> User:
    user = User(id=user_id, first_name=first_name, last_name=last_name, banner_id=banner_id, email=email)
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user


async def add_access(db: AsyncSession, name: str, permission_level: Optional[str] = None) -> Access:
    access = Access(name=name, permission_level=permission_level)
    db.add(access)
    await db.commit()
    await db.refresh(access)
    return access


async def add_grant(
    db: AsyncSession, user_id: int, access_id: int, permission_level: Optional[str] = None
) -> UserAccess:
    grant = UserAccess(user_id=user_id, access_id=access_id, permission_level=permission_level)
    db.add(grant)
    await db.commit()
    await db.refresh(grant)
    return grant

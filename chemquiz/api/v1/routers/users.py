from typing import Annotated

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from chemquiz.api.v1.repositories import UserRepository, get_user_repository
from chemquiz.api.v1.schemas import User, UserCreate, UserSearch, UserUpdate
from chemquiz.core.routers import PathId, create, delete, filter, parse_criteria, read_item, update
from chemquiz.core.schemas import ApiResponse
from chemquiz.core.security import require_access
from chemquiz.db.session import get_session

prefix = "/users"
router = APIRouter(prefix=prefix)


@router.get("", response_model=ApiResponse, dependencies=[Depends(require_access("GetUsers"))])
async def search_users(
        request: Request,
        db: Annotated[AsyncSession, Depends(get_session)],
        user_repository: Annotated[UserRepository, Depends(get_user_repository)]
):
    """Search users, e.g. ``?first_name=partial:an&email=notnull``."""
    criteria = parse_criteria(request, UserSearch)
    return await filter(criteria, db, user_repository, User)


@router.get("/{user_id}", response_model=ApiResponse, dependencies=[Depends(require_access("GetUsers"))])
async def read_user(
        user_id: PathId,
        db: Annotated[AsyncSession, Depends(get_session)],
        user_repository: Annotated[UserRepository, Depends(get_user_repository)]
):
    return await read_item(user_id, db, user_repository, User)


@router.post("", response_model=ApiResponse, status_code=201, dependencies=[Depends(require_access("CreateUsers"))])
async def create_user(
        user: UserCreate,
        db: Annotated[AsyncSession, Depends(get_session)],
        user_repository: Annotated[UserRepository, Depends(get_user_repository)]
):
    return await create(db, user, user_repository, User)


@router.put("/{user_id}", response_model=ApiResponse, dependencies=[Depends(require_access("UpdateUsers"))])
async def update_user(
        user_id: PathId,
        user: UserUpdate,
        db: Annotated[AsyncSession, Depends(get_session)],
        user_repository: Annotated[UserRepository, Depends(get_user_repository)]
):
    return await update(user_id, user, db, user_repository, User)


@router.delete("/{user_id}", response_model=ApiResponse, dependencies=[Depends(require_access("DeleteUsers"))])
async def delete_user(
        user_id: PathId,
        db: Annotated[AsyncSession, Depends(get_session)],
        user_repository: Annotated[UserRepository, Depends(get_user_repository)]
):
    return await delete(user_id, db, user_repository)

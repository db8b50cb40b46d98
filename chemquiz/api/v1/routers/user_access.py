from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from chemquiz.api.v1.repositories import UserAccessRepository, get_user_access_repository
from chemquiz.api.v1.schemas import (
    AccessState,
    JoinedUserAccessList,
    UserAccess,
    UserAccessCreate,
    UserAccessSearch,
    UserAccessUpdate,
)
from chemquiz.core.routers import PathId, parse_criteria
from chemquiz.core.schemas import ApiResponse
from chemquiz.core.security import require_access
from chemquiz.db.session import get_session

prefix = "/user-access"
router = APIRouter(prefix=prefix)


@router.get("", response_model=ApiResponse, dependencies=[Depends(require_access("GetAccess"))])
async def search_user_access(
        request: Request,
        db: Annotated[AsyncSession, Depends(get_session)],
        user_access_repository: Annotated[UserAccessRepository, Depends(get_user_access_repository)]
):
    """List grants with their holder, e.g. ``?first_name=partial:an&banner_id=exact:1001``."""
    criteria = parse_criteria(request, UserAccessSearch)
    entries = await user_access_repository.search_grants(db, criteria)
    return ApiResponse(status_code=status.HTTP_200_OK, data=JoinedUserAccessList(entries=entries))


@router.get(
    "/check/{user_id}/{access_id}",
    response_model=ApiResponse,
    dependencies=[Depends(require_access("GetAccess"))],
)
async def check_user_access(
        user_id: PathId,
        access_id: PathId,
        db: Annotated[AsyncSession, Depends(get_session)],
        user_access_repository: Annotated[UserAccessRepository, Depends(get_user_access_repository)]
):
    has_access = await user_access_repository.check_user_access(db, user_id, access_id)
    return ApiResponse(status_code=status.HTTP_200_OK, data=AccessState(has_access=has_access))


@router.get("/{permission_id}", response_model=ApiResponse, dependencies=[Depends(require_access("GetAccess"))])
async def read_user_access(
        permission_id: PathId,
        db: Annotated[AsyncSession, Depends(get_session)],
        user_access_repository: Annotated[UserAccessRepository, Depends(get_user_access_repository)]
):
    grant = await user_access_repository.get_grant(db, permission_id)
    return ApiResponse(status_code=status.HTTP_200_OK, data=UserAccess.model_validate(grant))


@router.post(
    "",
    response_model=ApiResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_access("CreateAccess"))],
)
async def create_user_access(
        grant: UserAccessCreate,
        db: Annotated[AsyncSession, Depends(get_session)],
        user_access_repository: Annotated[UserAccessRepository, Depends(get_user_access_repository)]
):
    created = await user_access_repository.create_grant(db, grant)
    return ApiResponse(
        status_code=status.HTTP_201_CREATED,
        detail="Access granted",
        data=UserAccess.model_validate(created),
    )


@router.put("/{permission_id}", response_model=ApiResponse, dependencies=[Depends(require_access("UpdateAccess"))])
async def update_user_access(
        permission_id: PathId,
        grant: UserAccessUpdate,
        db: Annotated[AsyncSession, Depends(get_session)],
        user_access_repository: Annotated[UserAccessRepository, Depends(get_user_access_repository)]
):
    updated = await user_access_repository.update_grant(db, permission_id, grant)
    return ApiResponse(status_code=status.HTTP_200_OK, data=UserAccess.model_validate(updated))


@router.delete("/{permission_id}", response_model=ApiResponse, dependencies=[Depends(require_access("DeleteAccess"))])
async def delete_user_access(
        permission_id: PathId,
        db: Annotated[AsyncSession, Depends(get_session)],
        user_access_repository: Annotated[UserAccessRepository, Depends(get_user_access_repository)]
):
    await user_access_repository.delete_grant(db, permission_id)
    return ApiResponse(status_code=status.HTTP_200_OK, detail="Access revoked")

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from chemquiz.api.v1.repositories import AccessRepository, get_access_repository
from chemquiz.api.v1.schemas import Access, AccessCreate, AccessUpdate
from chemquiz.core.routers import PathId, create, delete, read, read_item, update
from chemquiz.core.schemas import ApiResponse
from chemquiz.core.security import require_access
from chemquiz.db.session import get_session

prefix = "/access"
router = APIRouter(prefix=prefix)


@router.get("", response_model=ApiResponse, dependencies=[Depends(require_access("GetAccess"))])
async def read_all_access(
        db: Annotated[AsyncSession, Depends(get_session)],
        access_repository: Annotated[AccessRepository, Depends(get_access_repository)]
):
    return await read(db, access_repository, Access)


@router.get("/{access_id}", response_model=ApiResponse, dependencies=[Depends(require_access("GetAccess"))])
async def read_access(
        access_id: PathId,
        db: Annotated[AsyncSession, Depends(get_session)],
        access_repository: Annotated[AccessRepository, Depends(get_access_repository)]
):
    return await read_item(access_id, db, access_repository, Access)


@router.post("", response_model=ApiResponse, status_code=201, dependencies=[Depends(require_access("CreateAccess"))])
async def create_access(
        access: AccessCreate,
        db: Annotated[AsyncSession, Depends(get_session)],
        access_repository: Annotated[AccessRepository, Depends(get_access_repository)]
):
    return await create(db, access, access_repository, Access)


@router.put("/{access_id}", response_model=ApiResponse, dependencies=[Depends(require_access("UpdateAccess"))])
async def update_access(
        access_id: PathId,
        access: AccessUpdate,
        db: Annotated[AsyncSession, Depends(get_session)],
        access_repository: Annotated[AccessRepository, Depends(get_access_repository)]
):
    return await update(access_id, access, db, access_repository, Access)


@router.delete("/{access_id}", response_model=ApiResponse, dependencies=[Depends(require_access("DeleteAccess"))])
async def delete_access(
        access_id: PathId,
        db: Annotated[AsyncSession, Depends(get_session)],
        access_repository: Annotated[AccessRepository, Depends(get_access_repository)]
):
    return await delete(access_id, db, access_repository)

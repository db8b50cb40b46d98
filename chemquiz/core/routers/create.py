from fastapi import status
from sqlalchemy.ext.asyncio import AsyncSession

from chemquiz.core.schemas import ApiResponse
from chemquiz.core.repositories import BaseRepository


async def create_item(db: AsyncSession, item, item_repository: BaseRepository, schema) -> ApiResponse:
    created = await item_repository.create(db, item, schema)

    return ApiResponse(
        status_code=status.HTTP_201_CREATED,
        detail="Item created",
        data=created
    )

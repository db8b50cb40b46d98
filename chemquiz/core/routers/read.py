from fastapi import status
from sqlalchemy.ext.asyncio import AsyncSession

from chemquiz.core.schemas import ApiResponse
from chemquiz.core.repositories import BaseRepository


async def read_items(db: AsyncSession, item_repository: BaseRepository, schema) -> ApiResponse:
    items = await item_repository.get_all(db, schema)

    return ApiResponse(
        status_code=status.HTTP_200_OK,
        detail="Items retrieved",
        data=items
    )


async def read_item(item_id, db: AsyncSession, item_repository: BaseRepository, schema) -> ApiResponse:
    item = await item_repository.get_by_id(db, item_id, schema)

    return ApiResponse(
        status_code=status.HTTP_200_OK,
        detail="Item retrieved",
        data=item
    )

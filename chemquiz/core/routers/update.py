from fastapi import status
from sqlalchemy.ext.asyncio import AsyncSession

from chemquiz.core.schemas import ApiResponse
from chemquiz.core.repositories import BaseRepository


async def update_item(item_id, item, db: AsyncSession, item_repository: BaseRepository, schema) -> ApiResponse:
    updated = await item_repository.update(db, item, item_id, schema)

    return ApiResponse(
        status_code=status.HTTP_200_OK,
        detail="Item updated",
        data=updated
    )

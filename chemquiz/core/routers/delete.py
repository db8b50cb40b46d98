from fastapi import status
from sqlalchemy.ext.asyncio import AsyncSession

from chemquiz.core.schemas import ApiResponse
from chemquiz.core.repositories import BaseRepository


async def delete_item(item_id, db: AsyncSession, item_repository: BaseRepository) -> ApiResponse:
    await item_repository.delete(db, item_id)

    return ApiResponse(
        status_code=status.HTTP_200_OK,
        detail="Item deleted"
    )

from fastapi import Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from chemquiz.core.helpers import SearchCriteria
from chemquiz.core.schemas import ApiResponse
from chemquiz.core.repositories import BaseRepository


def parse_criteria(request: Request, criteria_class: type[SearchCriteria]) -> SearchCriteria:
    """Criteria from the raw query string; unknown fields raise UrlError."""
    return criteria_class.from_query(request.query_params.multi_items())


async def filter_items(criteria: SearchCriteria, db: AsyncSession, item_repository: BaseRepository, schema) -> ApiResponse:
    items = await item_repository.search(db, criteria, schema)

    return ApiResponse(
        status_code=status.HTTP_200_OK,
        detail="Items filtered",
        data=items
    )

from typing import Annotated, Optional

from pydantic import Field

from chemquiz.core.helpers import NO_SEARCH, NullableSearch, Search, SearchCriteria
from chemquiz.core.schemas import MAX_INT, BaseSchema

BannerId = Annotated[int, Field(ge=0, le=MAX_INT)]


class UserBase(BaseSchema):
    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    banner_id: BannerId
    email: Optional[str] = Field(None, max_length=255)


class UserCreate(UserBase):
    pass


class UserUpdate(BaseSchema):
    """Partial update; only the fields that were sent are applied."""
    first_name: Optional[str] = Field(None, min_length=1, max_length=255)
    last_name: Optional[str] = Field(None, min_length=1, max_length=255)
    banner_id: Optional[BannerId] = None
    email: Optional[str] = Field(None, max_length=255)


class User(UserBase):
    id: int


class UserSearch(SearchCriteria):
    first_name: Search[str] = NO_SEARCH
    last_name: Search[str] = NO_SEARCH
    banner_id: Search[BannerId] = NO_SEARCH
    email: NullableSearch[str] = NO_SEARCH

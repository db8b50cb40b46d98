from typing import List, Optional

from pydantic import Field

from chemquiz.api.v1.schemas.users import BannerId
from chemquiz.core.helpers import NO_SEARCH, NullableSearch, Search, SearchCriteria
from chemquiz.core.schemas import BaseSchema, RecordId


class AccessBase(BaseSchema):
    name: str = Field(..., min_length=1, max_length=100)
    permission_level: Optional[str] = Field(None, max_length=100)


class AccessCreate(AccessBase):
    pass


class AccessUpdate(BaseSchema):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    permission_level: Optional[str] = Field(None, max_length=100)


class Access(AccessBase):
    id: int


class UserAccessCreate(BaseSchema):
    user_id: RecordId
    access_id: RecordId
    permission_level: Optional[str] = Field(None, max_length=100)


class UserAccessUpdate(BaseSchema):
    """Grants are only ever updated to change their level."""
    permission_level: Optional[str] = Field(None, max_length=100)


class UserAccess(BaseSchema):
    permission_id: int
    user_id: int
    access_id: int
    permission_level: Optional[str] = None


class JoinedUserAccess(BaseSchema):
    permission_id: int
    user_id: int
    access_id: int
    first_name: str
    last_name: str
    banner_id: int


class JoinedUserAccessList(BaseSchema):
    entries: List[JoinedUserAccess]


class AccessState(BaseSchema):
    has_access: bool


class UserAccessSearch(SearchCriteria):
    access_id: Search[RecordId] = NO_SEARCH
    user_id: Search[RecordId] = NO_SEARCH
    permission_level: NullableSearch[str] = NO_SEARCH
    first_name: Search[str] = NO_SEARCH
    last_name: Search[str] = NO_SEARCH
    banner_id: Search[BannerId] = NO_SEARCH

from chemquiz.core.schemas.base import MAX_BIGINT, MAX_INT, BaseSchema, RecordId
from chemquiz.core.schemas.api_response import ApiResponse

__all__ = ["MAX_BIGINT", "MAX_INT", "ApiResponse", "BaseSchema", "RecordId"]

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

# Largest value a BIGINT column holds
MAX_BIGINT = 2**63 - 1
# Largest value an INTEGER column holds
MAX_INT = 2**31 - 1

RecordId = Annotated[int, Field(ge=0, le=MAX_BIGINT)]


class BaseSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

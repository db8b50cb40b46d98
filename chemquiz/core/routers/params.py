from typing import Annotated

from fastapi import Path

from chemquiz.core.schemas import MAX_BIGINT

# Primary key taken from the URL path
PathId = Annotated[int, Path(ge=0, le=MAX_BIGINT)]

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, Request
from jose import JWTError, jwt
from sqlalchemy.ext.asyncio import AsyncSession
from typing_extensions import Annotated

from chemquiz.api.v1.services import PermissionGate, get_permission_gate
from chemquiz.core.config import settings
from chemquiz.core.models import UnauthenticatedError
from chemquiz.db.session import get_session

logger = logging.getLogger(__name__)


def create_access_token(user_id: int, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=60))
    to_encode = {"sub": str(user_id), "exp": expire}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_token(token: str) -> dict:
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        logger.info("Rejected bearer token: %s", e)
        raise UnauthenticatedError("Invalid or expired token")


def get_requesting_user_id(request: Request) -> Optional[int]:
    """
    Identity of the caller, taken from an ``Authorization: Bearer <jwt>`` header.

    No header means an anonymous caller (None). A header that is present but
    cannot be validated raises UnauthenticatedError.
    """
    auth_header = request.headers.get("Authorization")
    if not auth_header:
        return None

    scheme, _, token = auth_header.partition(" ")
    if scheme.lower() != "bearer" or not token:
        raise UnauthenticatedError("Invalid authorization header")

    payload = decode_token(token)
    subject = payload.get("sub")
    try:
        return int(subject)
    except (TypeError, ValueError):
        raise UnauthenticatedError("Invalid token subject")


def require_access(access_name: str):
    """
    Route dependency running the permission gate for ``access_name``
    before the handler body executes.

    Example:
        @router.delete("/{id}", dependencies=[Depends(require_access("DeleteQuestions"))])
    """

    async def dependency(
        db: Annotated[AsyncSession, Depends(get_session)],
        user_id: Annotated[Optional[int], Depends(get_requesting_user_id)],
        gate: Annotated[PermissionGate, Depends(get_permission_gate)],
    ):
        return await gate.authorize(db, user_id, access_name)

    return dependency

import logging
from functools import lru_cache
from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from chemquiz.api.v1.models import Access, UserAccess
from chemquiz.api.v1.repositories import (
    AccessRepository,
    UserAccessRepository,
    get_access_repository,
    get_user_access_repository,
)
from chemquiz.core.config import settings
from chemquiz.core.models import (
    ForbiddenError,
    InsufficientLevelError,
    UnauthenticatedError,
    UnknownCapabilityError,
)

logger = logging.getLogger(__name__)

# Every access name requested by a router. Seeded at startup.
KNOWN_ACCESS_NAMES = (
    "GetUsers",
    "CreateUsers",
    "UpdateUsers",
    "DeleteUsers",
    "GetAccess",
    "CreateAccess",
    "UpdateAccess",
    "DeleteAccess",
    "GetQuestions",
    "CreateQuestions",
    "DeleteQuestions",
)


class PermissionGate:
    """
    Decides whether a requesting user may run an operation class.

    The check is advisory: it says whether the operation is permitted at all,
    not which rows the caller can see. Every call reads the datastore; nothing
    is cached.
    """

    def __init__(
        self,
        access_repository: AccessRepository,
        user_access_repository: UserAccessRepository,
        permission_levels: Sequence[str] = (),
    ):
        self.access_repository = access_repository
        self.user_access_repository = user_access_repository
        self.permission_levels = list(permission_levels)

    async def authorize(self, db: AsyncSession, requesting_user: Optional[int], access_name: str) -> UserAccess:
        """
        Authorize ``requesting_user`` for ``access_name``.

        Checks run in this order, the first failure wins:
        1. no user              -> UnauthenticatedError
        2. unregistered name    -> UnknownCapabilityError
        3. no grant             -> ForbiddenError
        4. grant level too low  -> InsufficientLevelError

        Returns the grant that allowed the call.
        """
        if requesting_user is None:
            logger.info("Denied '%s': no authenticated user", access_name)
            raise UnauthenticatedError()

        access = await self.access_repository.get_by_name(db, access_name)
        if access is None:
            logger.error("Access '%s' is not registered", access_name)
            raise UnknownCapabilityError()

        grant = await self.user_access_repository.find_grant(db, requesting_user, access.id)
        if grant is None:
            logger.info("Denied '%s' to user %s: no grant", access_name, requesting_user)
            raise ForbiddenError()

        if not self.meets_level(access, grant):
            logger.info(
                "Denied '%s' to user %s: level %r below %r",
                access_name, requesting_user, grant.permission_level, access.permission_level,
            )
            raise InsufficientLevelError()

        return grant

    async def check_user_access(self, db: AsyncSession, user_id: int, access_id: int) -> bool:
        """Whether a grant exists for the pair, ignoring levels."""
        return await self.user_access_repository.check_user_access(db, user_id, access_id)

    def level_rank(self, level: Optional[str]) -> Optional[int]:
        if level is None or level not in self.permission_levels:
            return None
        return self.permission_levels.index(level)

    def meets_level(self, access: Access, grant: UserAccess) -> bool:
        required = access.permission_level
        if required is None:
            return True
        if grant.permission_level is None:
            return False

        required_rank = self.level_rank(required)
        if required_rank is None:
            # Not on the ladder: only an identical level satisfies it
            return grant.permission_level == required

        granted_rank = self.level_rank(grant.permission_level)
        return granted_rank is not None and granted_rank >= required_rank


async def seed_access(db: AsyncSession, names: Sequence[str] = KNOWN_ACCESS_NAMES) -> list[str]:
    """
    Insert the access names that do not exist yet. Returns the names inserted.

    Each name commits on its own, so a worker that loses the race for a name to
    another worker skips it and keeps seeding the rest.
    """
    repository = get_access_repository()
    created = []
    for name in names:
        if await repository.get_by_name(db, name) is not None:
            continue
        db.add(Access(name=name))
        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            logger.info("Access %s was registered concurrently", name)
            continue
        created.append(name)
    if created:
        logger.info("Registered accesses: %s", ", ".join(created))
    return created


@lru_cache()
def get_permission_gate() -> PermissionGate:
    """Dependency injector for PermissionGate."""
    return PermissionGate(
        access_repository=get_access_repository(),
        user_access_repository=get_user_access_repository(),
        permission_levels=settings.PERMISSION_LEVELS,
    )

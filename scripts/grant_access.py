import argparse
import asyncio
import sys
from pathlib import Path

# Allow running from the repository root without installing the package
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from chemquiz.api.v1.repositories import (  # noqa: E402
    get_access_repository,
    get_user_access_repository,
    get_user_repository,
)
from chemquiz.api.v1.schemas import UserAccessCreate  # noqa: E402
from chemquiz.api.v1.services import seed_access  # noqa: E402
from chemquiz.core.models import DatabaseError, NotFoundError  # noqa: E402
from chemquiz.db import db_manager  # noqa: E402


async def grant(user_id: int, access_names: list[str], level: str | None) -> int:
    """Grant each access to the user; used to bootstrap the first administrator."""
    await db_manager.create_all()
    access_repository = get_access_repository()
    user_access_repository = get_user_access_repository()
    status = 0
    try:
        async with db_manager.session() as session:
            await seed_access(session)
            try:
                await get_user_repository().get_by_id(session, user_id)
            except NotFoundError as e:
                print(e.message)
                return 1
            for name in access_names:
                access = await access_repository.get_by_name(session, name)
                if access is None:
                    print(f"Unknown access: {name}")
                    status = 1
                    continue
                if await user_access_repository.find_grant(session, user_id, access.id) is not None:
                    print(f"User {user_id} already holds {name}")
                    continue
                try:
                    created = await user_access_repository.create_grant(
                        session,
                        UserAccessCreate(user_id=user_id, access_id=access.id, permission_level=level),
                    )
                except DatabaseError as e:
                    print(f"Granting {name} failed: {e.message}")
                    status = 1
                    continue
                print(f"Granted {name} to user {user_id} (permission_id={created.permission_id})")
    finally:
        await db_manager.disconnect()
    return status


def main() -> int:
    parser = argparse.ArgumentParser(description="Grant named accesses to a user directly in the database")
    parser.add_argument("--user-id", type=int, required=True, help="Target user id")
    parser.add_argument("--access", action="append", required=True, help="Access name; repeat for several")
    parser.add_argument("--level", help="Permission level stored on the grant")
    args = parser.parse_args()
    return asyncio.run(grant(args.user_id, args.access, args.level))


if __name__ == "__main__":
    sys.exit(main())

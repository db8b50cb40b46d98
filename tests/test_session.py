import pytest
import pytest_asyncio
from sqlalchemy import select
from sqlalchemy.pool import StaticPool

from chemquiz.api.v1.models import QuestionCategory
from chemquiz.api.v1.services import get_permission_gate
from chemquiz.core.models import ForbiddenError
from chemquiz.db.session import DatabaseManager
from tests.utils import add_access, add_grant, add_user


@pytest_asyncio.fixture()
async def manager():
    db_manager = DatabaseManager(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await db_manager.create_all()
    try:
        yield db_manager
    finally:
        await db_manager.disconnect()


async def category_titles(manager: DatabaseManager) -> list[str]:
    async with manager.session() as session:
        result = await session.execute(select(QuestionCategory.title))
        return list(result.scalars().all())


@pytest.mark.asyncio
async def test_transaction_commits_guarded_write(manager: DatabaseManager) -> None:
    async with manager.session() as session:
        user = await add_user(session, user_id=5)
        access = await add_access(session, "CreateQuestions")
        await add_grant(session, user.id, access.id)

    async with manager.transaction() as session:
        await get_permission_gate().authorize(session, 5, "CreateQuestions")
        session.add(QuestionCategory(title="Gas laws"))

    assert await category_titles(manager) == ["Gas laws"]


@pytest.mark.asyncio
async def test_transaction_rolls_back_when_gate_denies(manager: DatabaseManager) -> None:
    async with manager.session() as session:
        await add_user(session, user_id=6)
        await add_access(session, "CreateQuestions")

    with pytest.raises(ForbiddenError):
        async with manager.transaction() as session:
            session.add(QuestionCategory(title="Gas laws"))
            await session.flush()
            await get_permission_gate().authorize(session, 6, "CreateQuestions")

    assert await category_titles(manager) == []

import logging

import pytest
from sqlalchemy import select

from chemquiz.api.v1.models import User
from chemquiz.api.v1.repositories import UserRepository
from chemquiz.api.v1.schemas import UserSearch
from chemquiz.core.helpers import (
    NO_SEARCH,
    Exact,
    IsNotNull,
    IsNull,
    Partial,
    apply_search,
    compile_search,
    term_predicate,
)
from tests.utils import add_user

COLUMNS = UserRepository.search_columns


def render(predicate) -> str:
    return str(predicate.compile(compile_kwargs={"literal_binds": True}))


def test_no_search_yields_no_predicate() -> None:
    assert term_predicate(NO_SEARCH, User.first_name, "first_name") is None


def test_exact_is_equality() -> None:
    assert render(term_predicate(Exact(1001), User.banner_id, "banner_id")) == "users.banner_id = 1001"


def test_partial_on_text_is_case_insensitive_substring_match() -> None:
    sql = render(term_predicate(Partial("an"), User.first_name, "first_name"))

    assert "lower(users.first_name) LIKE" in sql
    assert "an" in sql


def test_partial_escapes_wildcards() -> None:
    sql = render(term_predicate(Partial("50%"), User.first_name, "first_name"))

    assert "ESCAPE" in sql


def test_partial_on_numeric_falls_back_to_equality(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="chemquiz.core.helpers.filter_helper"):
        predicate = term_predicate(Partial(10), User.banner_id, "banner_id")

    assert render(predicate) == "users.banner_id = 10"
    assert any("banner_id" in record.getMessage() for record in caplog.records)


def test_null_checks() -> None:
    assert render(term_predicate(IsNull(), User.email, "email")) == "users.email IS NULL"
    assert render(term_predicate(IsNotNull(), User.email, "email")) == "users.email IS NOT NULL"


def test_empty_criteria_leaves_query_untouched() -> None:
    criteria = UserSearch()
    query = select(User)

    assert compile_search(criteria, COLUMNS) == []
    assert apply_search(query, criteria, COLUMNS).whereclause is None


def test_predicates_follow_field_order() -> None:
    criteria = UserSearch(email=IsNull(), first_name=Exact("Bob"))

    rendered = [render(p) for p in compile_search(criteria, COLUMNS)]

    assert rendered == ["users.first_name = 'Bob'", "users.email IS NULL"]


@pytest.mark.asyncio
async def test_search_conjoins_terms(db) -> None:
    await add_user(db, first_name="Anna", last_name="Lee", banner_id=1001)
    await add_user(db, first_name="Anna", last_name="Moss", banner_id=1002)
    await add_user(db, first_name="Bob", last_name="Stone", banner_id=1001, email="bob@example.com")

    criteria = UserSearch.from_query([("first_name", "partial:an"), ("banner_id", "exact:1001")])
    users = await UserRepository().search(db, criteria)

    assert [(u.first_name, u.last_name) for u in users] == [("Anna", "Lee")]


@pytest.mark.asyncio
async def test_search_without_terms_returns_everything(db) -> None:
    await add_user(db, first_name="Daniel", banner_id=1001)
    await add_user(db, first_name="Bob", banner_id=1002, email="bob@example.com")

    users = await UserRepository().search(db, UserSearch())

    assert sorted(u.first_name for u in users) == ["Bob", "Daniel"]


@pytest.mark.asyncio
async def test_search_on_nullable_field(db) -> None:
    await add_user(db, first_name="Daniel", banner_id=1001)
    await add_user(db, first_name="Bob", banner_id=1002, email="bob@example.com")
    repository = UserRepository()

    missing = await repository.search(db, UserSearch(email=IsNull()))
    present = await repository.search(db, UserSearch(email=IsNotNull()))

    assert [u.first_name for u in missing] == ["Daniel"]
    assert [u.first_name for u in present] == ["Bob"]

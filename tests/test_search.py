from typing import Annotated

import pytest
from pydantic import Field

from chemquiz.api.v1.schemas import UserAccessSearch, UserSearch
from chemquiz.core.helpers import (
    NO_SEARCH,
    Exact,
    IsNotNull,
    IsNull,
    NoSearch,
    Partial,
    parse_nullable_search,
    parse_search,
)
from chemquiz.core.models import ErrorKind, UrlError


def test_parse_exact_and_partial_text() -> None:
    assert parse_search("exact:Anna") == Exact("Anna")
    assert parse_search("partial:an") == Partial("an")


def test_payload_keeps_everything_after_the_first_colon() -> None:
    assert parse_search("exact:a:b") == Exact("a:b")


def test_parse_converts_payload_to_value_type() -> None:
    assert parse_search("exact:1001", int) == Exact(1001)
    # numeric partial terms parse fine; compilation degrades them to equality
    assert parse_search("partial:10", int) == Partial(10)


@pytest.mark.parametrize("raw", ["1001", "contains:x", "EXACT:x", "", "null", "notnull"])
def test_parse_search_rejects_unknown_syntax(raw: str) -> None:
    with pytest.raises(UrlError) as exc_info:
        parse_search(raw)
    assert exc_info.value.kind is ErrorKind.URL


@pytest.mark.parametrize("raw", ["exact:", "partial:"])
def test_parse_search_requires_payload(raw: str) -> None:
    with pytest.raises(UrlError):
        parse_search(raw)


def test_parse_search_rejects_payload_of_wrong_type() -> None:
    with pytest.raises(UrlError):
        parse_search("exact:abc", int)


def test_parse_nullable_tags() -> None:
    assert parse_nullable_search("null") == IsNull()
    assert parse_nullable_search("notnull") == IsNotNull()
    assert parse_nullable_search("partial:@example.com") == Partial("@example.com")


def test_parsing_never_produces_no_search() -> None:
    for raw in ("exact:x", "partial:x", "null", "notnull"):
        assert not isinstance(parse_nullable_search(raw), NoSearch)


def test_criteria_defaults_to_no_search_for_every_field() -> None:
    criteria = UserSearch.from_query([])

    assert criteria.is_empty()
    assert [name for name, _ in criteria.terms()] == ["first_name", "last_name", "banner_id", "email"]
    assert all(term == NO_SEARCH for _, term in criteria.terms())


def test_criteria_fields_are_independent() -> None:
    criteria = UserSearch.from_query([("first_name", "partial:an"), ("banner_id", "exact:1001")])

    assert criteria.first_name == Partial("an")
    assert criteria.banner_id == Exact(1001)
    assert criteria.last_name == NO_SEARCH
    assert criteria.email == NO_SEARCH


def test_criteria_repeated_field_keeps_last_value() -> None:
    criteria = UserSearch.from_query([("last_name", "exact:Lee"), ("last_name", "partial:e")])

    assert criteria.last_name == Partial("e")


def test_criteria_rejects_unknown_field() -> None:
    with pytest.raises(UrlError):
        UserSearch.from_query([("nickname", "exact:x")])


def test_null_tags_only_allowed_on_nullable_fields() -> None:
    assert UserSearch.from_query([("email", "null")]).email == IsNull()

    with pytest.raises(UrlError):
        UserSearch.from_query([("first_name", "null")])


def test_grant_criteria_parses_nullable_level() -> None:
    criteria = UserAccessSearch.from_query([("permission_level", "notnull"), ("user_id", "exact:7")])

    assert criteria.permission_level == IsNotNull()
    assert criteria.user_id == Exact(7)
    assert criteria.access_id == NO_SEARCH


def test_parse_search_enforces_value_bounds() -> None:
    small = Annotated[int, Field(ge=0, le=100)]

    assert parse_search("exact:100", small) == Exact(100)
    with pytest.raises(UrlError):
        parse_search("exact:101", small)
    with pytest.raises(UrlError):
        parse_search("exact:-1", small)


@pytest.mark.parametrize("raw", ["exact:99999999999999999999999", "exact:2147483648", "exact:-1"])
def test_criteria_rejects_out_of_range_banner_id(raw: str) -> None:
    with pytest.raises(UrlError) as exc_info:
        UserSearch.from_query([("banner_id", raw)])
    assert raw[len("exact:"):] in exc_info.value.message


@pytest.mark.parametrize("raw", ["exact:99999999999999999999999", "exact:-5"])
def test_criteria_rejects_out_of_range_record_id(raw: str) -> None:
    with pytest.raises(UrlError):
        UserAccessSearch.from_query([("user_id", raw)])


def test_criteria_accepts_largest_record_id() -> None:
    criteria = UserAccessSearch.from_query([("access_id", f"exact:{2**63 - 1}")])

    assert criteria.access_id == Exact(2**63 - 1)

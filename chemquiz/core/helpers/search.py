"""
Per-field search terms parsed from query-string values.

A query value is a prefix tag followed by an optional payload:

    exact:<value>     field equals value
    partial:<value>   field contains value
    null              field is null       (nullable fields only)
    notnull           field is not null   (nullable fields only)

A field that is not present in the query is never filtered (``NO_SEARCH``).
Payloads are validated by pydantic against the field's value type, so
``Search[Annotated[int, Field(ge=0)]]`` rejects ``exact:-1``.

Usage:

    class UserSearch(SearchCriteria):
        first_name: Search[str] = NO_SEARCH
        email: NullableSearch[str] = NO_SEARCH

    criteria = UserSearch.from_query([("first_name", "partial:an")])
"""

from typing import Annotated, Any, Iterable, Tuple, Union

from pydantic import ConfigDict, TypeAdapter, ValidationError, ValidationInfo, field_validator
from pydantic.dataclasses import dataclass

from chemquiz.core.models.exceptions import UrlError
from chemquiz.core.schemas.base import BaseSchema

EXACT_PREFIX = "exact:"
PARTIAL_PREFIX = "partial:"
NULL_TAG = "null"
NOT_NULL_TAG = "notnull"


@dataclass(frozen=True)
class NoSearch:
    """Field unconstrained."""


@dataclass(frozen=True)
class Exact:
    value: Any


@dataclass(frozen=True)
class Partial:
    value: Any


@dataclass(frozen=True)
class IsNull:
    pass


@dataclass(frozen=True)
class IsNotNull:
    pass


SearchTerm = Union[NoSearch, Exact, Partial]
NullableSearchTerm = Union[NoSearch, Exact, Partial, IsNull, IsNotNull]

NO_SEARCH = NoSearch()


class SearchPayload:
    """Annotation marker: how a field's raw query value is parsed."""

    def __init__(self, value_type: Any = str, nullable: bool = False):
        self.adapter = TypeAdapter(value_type)
        self.nullable = nullable

    def parse(self, raw: str):
        if self.nullable:
            if raw == NULL_TAG:
                return IsNull()
            if raw == NOT_NULL_TAG:
                return IsNotNull()
        if raw.startswith(EXACT_PREFIX):
            return Exact(self._value(raw, raw[len(EXACT_PREFIX):]))
        if raw.startswith(PARTIAL_PREFIX):
            return Partial(self._value(raw, raw[len(PARTIAL_PREFIX):]))
        raise UrlError(f"Unrecognized search '{raw}'")

    def _value(self, raw: str, payload: str):
        if payload == "":
            raise UrlError(f"Search '{raw}' is missing a value")
        try:
            return self.adapter.validate_python(payload)
        except ValidationError as e:
            raise UrlError(f"Search value '{payload}' is invalid: {e.errors()[0]['msg']}")


class Search:
    """``Search[T]``: exact or partial search on a field whose payload validates as ``T``."""

    nullable = False
    terms = SearchTerm

    def __class_getitem__(cls, value_type):
        return Annotated[cls.terms, SearchPayload(value_type, cls.nullable)]


class NullableSearch(Search):
    """``NullableSearch[T]``: ``Search[T]`` plus the ``null`` and ``notnull`` tags."""

    nullable = True
    terms = NullableSearchTerm


def parse_search(raw: str, value_type: Any = str) -> SearchTerm:
    """Parse ``exact:`` / ``partial:`` terms. Raises UrlError on anything else."""
    return SearchPayload(value_type).parse(raw)


def parse_nullable_search(raw: str, value_type: Any = str) -> NullableSearchTerm:
    """Same as parse_search, plus the bare ``null`` and ``notnull`` tags."""
    return SearchPayload(value_type, nullable=True).parse(raw)


class SearchCriteria(BaseSchema):
    """Base class for a record of per-field search terms."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("*", mode="before")
    @classmethod
    def parse_raw_term(cls, value, info: ValidationInfo):
        if not isinstance(value, str):
            return value
        payload = next(
            (m for m in cls.model_fields[info.field_name].metadata if isinstance(m, SearchPayload)),
            SearchPayload(),
        )
        return payload.parse(value)

    @classmethod
    def from_query(cls, params: Iterable[Tuple[str, str]]):
        """
        Build the criteria from (field, raw value) pairs, in query-string order.

        A repeated field keeps its last value. Unknown field names raise UrlError.
        """
        try:
            return cls.model_validate(dict(params))
        except ValidationError as e:
            error = e.errors()[0]
            field_name = ".".join(str(p) for p in error["loc"])
            if error["type"] == "extra_forbidden":
                raise UrlError(f"Unrecognized search field '{field_name}'")
            raise UrlError(f"Invalid search on '{field_name}': {error['msg']}")

    def terms(self):
        """Yield (field name, term) in declaration order."""
        for name in type(self).model_fields:
            yield name, getattr(self, name)

    def is_empty(self) -> bool:
        return all(isinstance(term, NoSearch) for _, term in self.terms())

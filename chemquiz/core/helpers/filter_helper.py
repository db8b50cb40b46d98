import logging
from typing import Any, Mapping, Optional

from sqlalchemy import String, and_
from sqlalchemy.sql.elements import ColumnElement

from chemquiz.core.helpers.search import (
    Exact,
    IsNotNull,
    IsNull,
    NoSearch,
    Partial,
    SearchCriteria,
)

logger = logging.getLogger(__name__)


def is_text_column(column) -> bool:
    return isinstance(column.type, String)


def term_predicate(term, column, field_name: str = "") -> Optional[ColumnElement]:
    """Translate one search term into zero or one predicate on ``column``."""
    if isinstance(term, NoSearch):
        return None

    if isinstance(term, Exact):
        return column == term.value

    if isinstance(term, Partial):
        if is_text_column(column):
            return column.icontains(term.value, autoescape=True)
        logger.warning(
            "Partial search on non-text field '%s' is not supported, performing exact search instead",
            field_name,
        )
        return column == term.value

    if isinstance(term, IsNull):
        return column.is_(None)

    if isinstance(term, IsNotNull):
        return column.isnot(None)

    raise TypeError(f"Unsupported search term for '{field_name}': {term!r}")


def compile_search(criteria: SearchCriteria, columns: Mapping[str, Any]) -> list:
    """Predicates for every constrained field, in field declaration order."""
    conditions = []
    for name, term in criteria.terms():
        predicate = term_predicate(term, columns[name], name)
        if predicate is not None:
            conditions.append(predicate)
    return conditions


def apply_search(query, criteria: SearchCriteria, columns: Mapping[str, Any]):
    conditions = compile_search(criteria, columns)
    if conditions:
        query = query.where(and_(*conditions))
    return query

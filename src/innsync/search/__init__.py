"""Person search predicates."""

from innsync.search.predicate import (
    PersonPredicate,
    SearchError,
    SearchErrorCode,
    SearchType,
    build_predicate,
)

__all__ = [
    "PersonPredicate",
    "SearchError",
    "SearchErrorCode",
    "SearchType",
    "build_predicate",
]

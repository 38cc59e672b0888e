# tasktracker/crud/filters.py
"""
Filters are collected as a list of SQL predicates and combined exactly once,
so adding a filter can never replace one added earlier.
"""
from typing import List, Optional

from sqlalchemy import and_, true
from sqlalchemy.sql.elements import ColumnElement

from tasktracker.core.exceptions import ValidationError
from tasktracker.core.settings import settings


class Predicates:
    def __init__(self) -> None:
        self._clauses: List[ColumnElement] = []

    def add(self, clause: ColumnElement) -> "Predicates":
        self._clauses.append(clause)
        return self

    def add_eq(self, column, value) -> "Predicates":
        """Equality filter, skipped when value is None."""
        if value is not None:
            self._clauses.append(column == value)
        return self

    def __len__(self) -> int:
        return len(self._clauses)

    def combined(self) -> ColumnElement:
        if not self._clauses:
            return true()
        return and_(*self._clauses)


def apply(query, predicates: Optional[Predicates]):
    if predicates is None or not len(predicates):
        return query
    return query.filter(predicates.combined())


def resolve_limit(limit: Optional[int]) -> int:
    """Row cap for a listing: default when unset, clamped to the maximum."""
    if limit is None:
        return settings.DEFAULT_LIST_LIMIT
    if limit < 1:
        raise ValidationError("Limit must be a positive integer")
    return min(limit, settings.MAX_LIST_LIMIT)

"""Translate a SearchFilter into SQLAlchemy clauses over the batteries table.

Each filter field maps to exactly one clause builder. Absent fields add
nothing, so an empty filter yields no clauses and the query returns the whole
catalog. Bounds are composed literally: an inverted range is not an error, it
simply matches nothing.
"""
from __future__ import annotations

from typing import Any, Callable, List, Tuple

from sqlalchemy import or_
from sqlalchemy.sql.elements import ColumnElement

from battery_market.models.battery import Battery
from battery_market.schemas.search import SearchFilter

ClauseBuilder = Callable[[Any], ColumnElement]

FREE_TEXT_COLUMNS = (
    Battery.title,
    Battery.description,
    Battery.manufacturer,
    Battery.technology_type,
)


def contains(*columns) -> ClauseBuilder:
    """Case-insensitive substring test, OR-ed across ``columns``."""

    def build(value: str) -> ColumnElement:
        tests = [column.icontains(value, autoescape=True) for column in columns]
        return tests[0] if len(tests) == 1 else or_(*tests)

    return build


def equals(column) -> ClauseBuilder:
    return lambda value: column == value


def at_least(column) -> ClauseBuilder:
    return lambda value: column >= value


def at_most(column) -> ClauseBuilder:
    return lambda value: column <= value


PREDICATES: Tuple[Tuple[str, ClauseBuilder], ...] = (
    ("query", contains(*FREE_TEXT_COLUMNS)),
    ("battery_type", equals(Battery.battery_type)),
    ("category", equals(Battery.category)),
    ("listing_type", equals(Battery.listing_type)),
    ("manufacturer", contains(Battery.manufacturer)),
    ("location", contains(Battery.location)),
    ("country", equals(Battery.country)),
    ("min_capacity", at_least(Battery.capacity)),
    ("max_capacity", at_most(Battery.capacity)),
    ("min_price", at_least(Battery.price)),
    ("max_price", at_most(Battery.price)),
)


def build_search_clauses(filters: SearchFilter) -> List[ColumnElement]:
    clauses = []
    for field_name, build in PREDICATES:
        value = getattr(filters, field_name)
        if value is not None:
            clauses.append(build(value))
    return clauses

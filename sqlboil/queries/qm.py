"""Query mods: small callables that modify a query."""

from __future__ import annotations

from typing import Any, Callable

from sqlboil.queries.query import Query

QueryMod = Callable[[Query], None]


def apply(q: Query, *args: QueryMod) -> None:
    """Apply the query mods to the query, in order."""
    for mod in args:
        mod(q)


def sql(statement: str, *args: Any) -> QueryMod:
    """Execute a plain SQL statement."""
    return lambda q: q.set_sql(statement, *args)


def load(*args: str) -> QueryMod:
    """Name relationships to eager load, e.g. ``"MyThing"`` or ``"MyThings.Other"``."""
    return lambda q: q.append_load(*args)


def inner_join(clause: str, *args: Any) -> QueryMod:
    return lambda q: q.append_inner_join(clause, *args)


def select(*args: str) -> QueryMod:
    return lambda q: q.append_select(*args)


def where(clause: str, *args: Any) -> QueryMod:
    return lambda q: q.append_where(clause, *args)


def and_(clause: str, *args: Any) -> QueryMod:
    """Same as where; reads naturally in chains such as where, and_, or_."""
    return lambda q: q.append_where(clause, *args)


def or_(clause: str, *args: Any) -> QueryMod:
    def mod(q: Query) -> None:
        q.append_where(clause, *args)
        q.set_last_where_as_or()

    return mod


def where_in(clause: str, *args: Any) -> QueryMod:
    """An "x IN (set)" clause, e.g. ``"column in ?"`` or ``"(c1,c2) in ?"``."""
    return lambda q: q.append_in(clause, *args)


def and_in(clause: str, *args: Any) -> QueryMod:
    return lambda q: q.append_in(clause, *args)


def or_in(clause: str, *args: Any) -> QueryMod:
    def mod(q: Query) -> None:
        q.append_in(clause, *args)
        q.set_last_in_as_or()

    return mod


def group_by(clause: str) -> QueryMod:
    return lambda q: q.append_group_by(clause)


def order_by(clause: str) -> QueryMod:
    return lambda q: q.append_order_by(clause)


def having(clause: str, *args: Any) -> QueryMod:
    return lambda q: q.append_having(clause, *args)


def from_(table: str) -> QueryMod:
    return lambda q: q.append_from(table)


def limit(value: int) -> QueryMod:
    return lambda q: q.set_limit(value)


def offset(value: int) -> QueryMod:
    return lambda q: q.set_offset(value)


def for_(clause: str) -> QueryMod:
    """Add a locking clause at the end of the statement."""
    return lambda q: q.set_for(clause)
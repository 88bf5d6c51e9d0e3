"""The query object and the operations that build it up."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any


class JoinKind(enum.Enum):
    """The kind of a join clause."""

    INNER = 0
    OUTER_LEFT = 1
    OUTER_RIGHT = 2
    NATURAL = 3


@dataclass
class Dialect:
    """Settings that tell the query builder how to write SQL for a database."""

    lq: str = '"'
    rq: str = '"'
    index_placeholders: bool = False
    use_top_clause: bool = False


@dataclass
class Where:
    clause: str
    args: list[Any] = field(default_factory=list)
    or_separator: bool = False


@dataclass
class InClause:
    clause: str
    args: list[Any] = field(default_factory=list)
    or_separator: bool = False


@dataclass
class Having:
    clause: str
    args: list[Any] = field(default_factory=list)


@dataclass
class Join:
    clause: str
    args: list[Any] = field(default_factory=list)
    kind: JoinKind = JoinKind.INNER


@dataclass
class RawSQL:
    sql: str = ""
    args: list[Any] = field(default_factory=list)


@dataclass
class Query:
    """The state of a query being built up."""

    executor: Any = None
    dialect: Dialect = field(default_factory=Dialect)
    raw_sql: RawSQL = field(default_factory=RawSQL)
    load: list[str] = field(default_factory=list)
    delete: bool = False
    update: dict[str, Any] = field(default_factory=dict)
    select_cols: list[str] = field(default_factory=list)
    count: bool = False
    from_: list[str] = field(default_factory=list)
    joins: list[Join] = field(default_factory=list)
    where: list[Where] = field(default_factory=list)
    in_: list[InClause] = field(default_factory=list)
    group_by: list[str] = field(default_factory=list)
    order_by: list[str] = field(default_factory=list)
    having: list[Having] = field(default_factory=list)
    limit: int = 0
    offset: int = 0
    for_lock: str = ""

    def set_sql(self, sql: str, *args: Any) -> None:
        self.raw_sql = RawSQL(sql, list(args))

    def set_load(self, *args: str) -> None:
        self.load = list(args)

    def append_load(self, *args: str) -> None:
        self.load.extend(args)

    def set_select(self, columns) -> None:
        self.select_cols = list(columns or [])

    def set_count(self) -> None:
        self.count = True

    def set_delete(self) -> None:
        self.delete = True

    def set_limit(self, limit: int) -> None:
        self.limit = limit

    def set_offset(self, offset: int) -> None:
        self.offset = offset

    def set_for(self, clause: str) -> None:
        self.for_lock = clause

    def set_update(self, cols) -> None:
        self.update = dict(cols)

    def append_select(self, *args: str) -> None:
        self.select_cols.extend(args)

    def append_from(self, *args: str) -> None:
        self.from_.extend(args)

    def set_from(self, *args: str) -> None:
        self.from_ = list(args)

    def append_inner_join(self, clause: str, *args: Any) -> None:
        self.joins.append(Join(clause, list(args), JoinKind.INNER))

    def append_having(self, clause: str, *args: Any) -> None:
        self.having.append(Having(clause, list(args)))

    def append_where(self, clause: str, *args: Any) -> None:
        self.where.append(Where(clause, list(args)))

    def append_in(self, clause: str, *args: Any) -> None:
        self.in_.append(InClause(clause, list(args)))

    def set_last_where_as_or(self) -> None:
        """Mark the most recent where clause as joined with OR."""
        if self.where:
            self.where[-1].or_separator = True

    def set_last_in_as_or(self) -> None:
        """Mark the most recent IN clause as joined with OR."""
        if self.in_:
            self.in_[-1].or_separator = True

    def append_group_by(self, clause: str) -> None:
        self.group_by.append(clause)

    def append_order_by(self, clause: str) -> None:
        self.order_by.append(clause)


def raw(executor: Any, query: str, *args: Any) -> Query:
    """Make a raw query, usually for use with bind."""
    return Query(executor=executor, raw_sql=RawSQL(query, list(args)))
"""Turn a Query into SQL text and its list of arguments."""

from __future__ import annotations

import re
from typing import Any

from sqlboil.queries.query import Dialect, JoinKind, Query

_RGX_IDENTIFIER = re.compile(
    r'"?[a-z_][_a-z0-9]*"?(?:\."?[_a-z][_a-z0-9]*"?)*\Z', re.IGNORECASE
)
_RGX_IN_CLAUSE = re.compile(r"(.*[\s|\)|\?])IN([\s|\(|\?].*)\Z", re.IGNORECASE)
_RGX_QUOTABLE = re.compile(
    r'"?[a-z_][_a-z0-9]*"?(\."?[_a-z][_a-z0-9]*"?)*(\.\*)?\Z', re.IGNORECASE
)
_RGX_QUESTION = re.compile(r"\\\?|\?")


def ident_quote(lq: str, rq: str, name: str) -> str:
    """Quote a simple (optionally dotted) identifier; leave anything else alone."""
    if name.lower() == "null" or name == "?":
        return name
    if not _RGX_QUOTABLE.match(name):
        return name

    parts = []
    for part in name.split("."):
        if part.startswith(lq) or part.endswith(rq) or part == "*":
            parts.append(part)
        else:
            parts.append(f"{lq}{part}{rq}")
    return ".".join(parts)


def _ident_quote_all(dialect: Dialect, names) -> list[str]:
    return [ident_quote(dialect.lq, dialect.rq, n) for n in names]


def placeholders(index_placeholders: bool, count: int, start: int, group: int) -> str:
    """Write count placeholders, numbered from start, in groups of group."""
    if start == 0 or group == 0:
        raise ValueError("invalid start or group numbers supplied")

    pieces = []
    for i in range(count):
        if i:
            pieces.append("),(" if group > 1 and i % group == 0 else ",")
        pieces.append(f"${start + i}" if index_placeholders else "?")
    body = "".join(pieces)
    return f"({body})" if group > 1 else body


def _set_param_names(lq: str, rq: str, start: int, columns) -> str:
    if start:
        return ",".join(f"{lq}{c}{rq}=${i + start}" for i, c in enumerate(columns))
    return ",".join(f"{lq}{c}{rq}=?" for c in columns)


def build_query(q: Query) -> tuple[str, list[Any]]:
    """Build the SQL and arguments for q, caching the result on q as raw SQL."""
    if q.raw_sql.sql:
        return q.raw_sql.sql, q.raw_sql.args
    if q.delete:
        sql, args = _build_delete_query(q)
    elif q.update:
        sql, args = _build_update_query(q)
    else:
        sql, args = _build_select_query(q)

    q.raw_sql.sql = sql
    q.raw_sql.args = args
    return sql, args


def _build_select_query(q: Query) -> tuple[str, list[Any]]:
    dialect = q.dialect
    parts = ["SELECT "]
    args: list[Any] = []

    if dialect.use_top_clause and q.limit != 0 and q.offset == 0:
        parts.append(f" TOP ({q.limit}) ")

    if q.count:
        parts.append("COUNT(")

    has_select = bool(q.select_cols)
    has_joins = bool(q.joins)
    if has_joins and has_select and not q.count:
        parts.append(", ".join(write_as_statements(q)))
    elif has_select:
        parts.append(", ".join(_ident_quote_all(dialect, q.select_cols)))
    elif has_joins and not q.count:
        parts.append(", ".join(write_stars(q)))
    else:
        parts.append("*")

    if q.count:
        parts.append(")")

    parts.append(f" FROM {', '.join(_ident_quote_all(dialect, q.from_))}")

    if q.joins:
        first_arg = len(args) + 1
        join_sql = []
        for j in q.joins:
            if j.kind is not JoinKind.INNER:
                raise ValueError("only inner joins are supported")
            join_sql.append(f" INNER JOIN {j.clause}")
            args.extend(j.args)
        text = "".join(join_sql)
        if dialect.index_placeholders:
            text, _ = convert_question_marks(text, first_arg)
        parts.append(text)

    where_sql, where_args = where_clause(q, len(args) + 1)
    parts.append(where_sql)
    args.extend(where_args)

    in_sql, in_args = in_clause(q, len(args) + 1)
    parts.append(in_sql)
    args.extend(in_args)

    parts.append(_modifiers(q, args))
    parts.append(";")
    return "".join(parts), args


def _build_delete_query(q: Query) -> tuple[str, list[Any]]:
    args: list[Any] = []
    parts = ["DELETE FROM ", ", ".join(_ident_quote_all(q.dialect, q.from_))]

    where_sql, where_args = where_clause(q, 1)
    args.extend(where_args)
    parts.append(where_sql)

    in_sql, in_args = in_clause(q, len(args) + 1)
    args.extend(in_args)
    parts.append(in_sql)

    parts.append(_modifiers(q, args))
    parts.append(";")
    return "".join(parts), args


def _build_update_query(q: Query) -> tuple[str, list[Any]]:
    dialect = q.dialect
    parts = ["UPDATE ", ", ".join(_ident_quote_all(dialect, q.from_))]

    names = sorted(q.update)
    args: list[Any] = [q.update[name] for name in names]
    cols = _ident_quote_all(dialect, names)

    parts.append(
        f" SET ({', '.join(cols)}) = "
        f"({placeholders(dialect.index_placeholders, len(cols), 1, 1)})"
    )

    where_sql, where_args = where_clause(q, len(args) + 1)
    args.extend(where_args)
    parts.append(where_sql)

    in_sql, in_args = in_clause(q, len(args) + 1)
    args.extend(in_args)
    parts.append(in_sql)

    parts.append(_modifiers(q, args))
    parts.append(";")
    return "".join(parts), args


def build_upsert_query_mysql(dialect: Dialect, table_name: str, update, whitelist) -> str:
    """Build a MySQL upsert statement."""
    quoted = _ident_quote_all(dialect, whitelist)
    columns = ", ".join(quoted)
    values = placeholders(dialect.index_placeholders, len(quoted), 1, 1)

    if not update:
        return f"INSERT IGNORE INTO {table_name} ({columns}) VALUES ({values})"

    sets = ",".join(
        f"{q} = VALUES({q})"
        for q in (ident_quote(dialect.lq, dialect.rq, v) for v in update)
    )
    return (
        f"INSERT INTO {table_name} ({columns}) VALUES ({values}) "
        f"ON DUPLICATE KEY UPDATE {sets}"
    )


def build_upsert_query_postgres(
    dialect: Dialect, table_name: str, update_on_conflict: bool,
    ret, update, conflict, whitelist,
) -> str:
    """Build a PostgreSQL upsert statement."""
    conflict = _ident_quote_all(dialect, conflict)
    whitelist = _ident_quote_all(dialect, whitelist)
    ret = _ident_quote_all(dialect, ret)

    columns = "DEFAULT VALUES"
    if whitelist:
        columns = "({}) VALUES ({})".format(
            ", ".join(whitelist),
            placeholders(dialect.index_placeholders, len(whitelist), 1, 1),
        )

    parts = [f"INSERT INTO {table_name} {columns} ON CONFLICT "]
    if not update_on_conflict or not update:
        parts.append("DO NOTHING")
    else:
        parts.append(f"({', '.join(conflict)}) DO UPDATE SET ")
        parts.append(",".join(
            f"{q} = EXCLUDED.{q}"
            for q in (ident_quote(dialect.lq, dialect.rq, v) for v in update)
        ))

    if ret:
        parts.append(f" RETURNING {', '.join(ret)}")
    return "".join(parts)


def build_upsert_query_mssql(
    dialect: Dialect, table_name: str, primary, update, insert, output,
) -> str:
    """Build an MS SQL MERGE statement acting as an upsert."""
    insert = _ident_quote_all(dialect, insert)
    start = 1

    parts = [f"MERGE INTO {table_name} as [t]\n"]
    parts.append("USING (SELECT {}) as [s] ([{}])\n".format(
        placeholders(dialect.index_placeholders, len(primary), start, 1),
        (dialect.rq + "," + dialect.lq).join(primary),
    ))
    parts.append("ON (")
    parts.append(" AND ".join(f"[s].[{v}] = [t].[{v}]" for v in primary))
    parts.append(")\n")

    start += len(primary)
    parts.append("WHEN MATCHED THEN ")
    parts.append(
        f"UPDATE SET {_set_param_names(dialect.lq, dialect.rq, start, update)}\n"
    )

    start += len(update)
    parts.append("WHEN NOT MATCHED THEN ")
    parts.append("INSERT ({}) VALUES ({})".format(
        ", ".join(insert),
        placeholders(dialect.index_placeholders, len(insert), start, 1),
    ))

    if output:
        parts.append("\nOUTPUT INSERTED.[{}];".format("],INSERTED.[".join(output)))
    else:
        parts.append(";")
    return "".join(parts)


def _modifiers(q: Query, args: list[Any]) -> str:
    """Render GROUP BY, HAVING, ORDER BY, limits and locking; extends args."""
    dialect = q.dialect
    parts = []

    if q.group_by:
        parts.append(f" GROUP BY {', '.join(q.group_by)}")

    if q.having:
        first_arg = len(args) + 1
        clauses = []
        for h in q.having:
            clauses.append(h.clause)
            args.extend(h.args)
        text = " HAVING " + ", ".join(clauses)
        if dialect.index_placeholders:
            text, _ = convert_question_marks(text, first_arg)
        parts.append(text)

    if q.order_by:
        parts.append(f" ORDER BY {', '.join(q.order_by)}")

    if not dialect.use_top_clause:
        if q.limit != 0:
            parts.append(f" LIMIT {q.limit}")
        if q.offset != 0:
            parts.append(f" OFFSET {q.offset}")
    elif q.offset != 0:
        # OFFSET/FETCH needs an ORDER BY; ordering by (SELECT NULL) keeps it arbitrary.
        if not q.order_by:
            parts.append(" ORDER BY (SELECT NULL)")
        parts.append(f" OFFSET {q.offset}")
        if q.limit != 0:
            parts.append(f" FETCH NEXT {q.limit} ROWS ONLY")

    if q.for_lock:
        parts.append(f" FOR {q.for_lock}")
    return "".join(parts)


def write_stars(q: Query) -> list[str]:
    """Select every column of each table (or alias) in the FROM list."""
    dialect = q.dialect
    cols = []
    for source in q.from_:
        tokens = source.split(" ")
        if len(tokens) == 1:
            cols.append(f"{ident_quote(dialect.lq, dialect.rq, tokens[0])}.*")
            continue

        alias, name, ok = parse_from_clause(tokens)
        if not ok:
            return []
        cols.append(f"{ident_quote(dialect.lq, dialect.rq, alias or name)}.*")
    return cols


def write_as_statements(q: Query) -> list[str]:
    """Quote selected columns, aliasing dotted ones to their dotted name."""
    dialect = q.dialect
    cols = []
    for col in q.select_cols:
        if not _RGX_IDENTIFIER.match(col):
            cols.append(col)
            continue

        tokens = col.split(".")
        quoted = ident_quote(dialect.lq, dialect.rq, col)
        if len(tokens) == 1:
            cols.append(quoted)
            continue

        alias = ".".join(tok.strip('"') for tok in tokens)
        cols.append(f'{quoted} as "{alias}"')
    return cols


def where_clause(q: Query, start_at: int) -> tuple[str, list[Any]]:
    """Join the where clauses into one WHERE, e.g. `` WHERE (a=$1) AND (b=$2)``."""
    if not q.where:
        return "", []

    args: list[Any] = []
    parts = [" WHERE "]
    for i, w in enumerate(q.where):
        if i:
            parts.append(" OR " if w.or_separator else " AND ")
        parts.append(f"({w.clause})")
        args.extend(w.args)

    text = "".join(parts)
    if q.dialect.index_placeholders:
        text, _ = convert_question_marks(text, start_at)
    return text, args


def in_clause(q: Query, start_at: int) -> tuple[str, list[Any]]:
    """Render the IN clauses, e.g. `` WHERE ("a", "b") IN (($1,$2),($3,$4))``."""
    if not q.in_:
        return "", []

    dialect = q.dialect
    args: list[Any] = []
    parts = [] if q.where else [" WHERE "]

    for i, clause in enumerate(q.in_):
        count = len(clause.args)
        # Separators come after the first clause, or straight away when
        # there is a where clause to add on to.
        if i or q.where:
            parts.append(" OR " if clause.or_separator else " AND ")

        match = _RGX_IN_CLAUSE.match(clause.clause)
        if match is None:
            text, used = convert_in_question_marks(
                dialect.index_placeholders, clause.clause, start_at, 1, count
            )
            parts.append(text)
            start_at += used
        else:
            left = match.group(1).strip()
            right = match.group(2).strip()
            cols = _ident_quote_all(dialect, left.split(","))
            group_at = len(cols)

            if dialect.index_placeholders:
                left_clause, left_count = convert_question_marks(",".join(cols), start_at)
            else:
                left_count = sum(1 for c in cols if c == "?")
                left_clause = ",".join(cols)

            right_clause, right_count = convert_in_question_marks(
                dialect.index_placeholders, right, start_at + left_count,
                group_at, count - left_count,
            )
            parts.append(f"{left_clause} IN {right_clause}")
            start_at += left_count + right_count

        args.extend(clause.args)

    return "".join(parts), args


def convert_in_question_marks(
    index_placeholders: bool, clause: str, start_at: int, group_at: int, total: int
) -> tuple[str, int]:
    """Swap the first unescaped ``?`` for a list of total grouped placeholders."""
    if start_at == 0 or not clause:
        raise ValueError("not a valid start number")

    found_at = next(
        (i for i, ch in enumerate(clause) if ch == "?" and (i == 0 or clause[i - 1] != "\\")),
        -1,
    )
    if found_at == -1:
        return clause.replace("\\?", "?"), 0

    text = "{}({}){}".format(
        clause[:found_at],
        placeholders(index_placeholders, total, start_at, group_at),
        clause[found_at + 1:],
    )
    return text.replace("\\?", "?"), total


def convert_question_marks(clause: str, start_at: int) -> tuple[str, int]:
    """Replace each unescaped ``?`` with ``$n``, counting from start_at.

    Escaped marks (``\\?``) become plain ``?``.
    """
    if start_at == 0:
        raise ValueError("not a valid start number")

    counter = start_at

    def swap(match: re.Match) -> str:
        nonlocal counter
        if match.group(0) != "?":
            return "?"
        counter += 1
        return f"${counter - 1}"

    text = _RGX_QUESTION.sub(swap, clause)
    return text, counter - start_at


def parse_from_clause(tokens) -> tuple[str, str, bool]:
    """Parse ``a``, ``a b`` or ``a as b`` into (alias, name, ok)."""
    alias = name = ""
    ok = saw_ident = saw_as = False

    for tok in list(tokens)[:3]:
        lowered = tok.lower()
        if saw_ident and lowered == "as":
            saw_as = True
            continue
        if saw_ident and lowered == "on":
            break
        if not _RGX_IDENTIFIER.match(tok):
            break
        if saw_ident or saw_as:
            alias = tok.strip('"')
            break
        name = tok.strip('"')
        saw_ident = True
        ok = True

    return alias, name, ok
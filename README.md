# sqlboil

Helpers for building SQL statements from query objects, writing upsert
statements, eager loading relationships over already loaded objects, and
producing pseudo-random values for test data.

## Install

```
pip install sqlboil
```

For running the test suite:

```
pip install "sqlboil[test]"
```

## Building queries

`sqlboil.queries.query.Query` gathers the parts of a statement: FROM
sources, selected columns, inner joins, WHERE and IN clauses, GROUP BY,
HAVING, ORDER BY, limit, offset and a locking clause. Its methods
(`append_where`, `append_in`, `set_last_where_as_or`, `set_limit`, ...)
change it directly; the query mods in `sqlboil.queries.qm` wrap the same
changes as callables that `qm.apply` runs in order.

`sqlboil.queries.builders.build_query` turns a query into SQL text and a
list of arguments, and caches the result on the query as raw SQL.

```python
from sqlboil.queries.query import Query, Dialect
from sqlboil.queries import qm
from sqlboil.queries.builders import build_query

q = Query(dialect=Dialect(lq='"', rq='"', index_placeholders=True))
qm.apply(
    q,
    qm.from_("videos"),
    qm.where("deleted = ?", False),
    qm.or_in("user_id in ?", 1, 2, 3),
    qm.order_by("created_at DESC"),
    qm.limit(10),
)
sql, args = build_query(q)
# SELECT * FROM "videos" WHERE (deleted = $1) OR "user_id" IN ($2,$3,$4)
#   ORDER BY created_at DESC LIMIT 10;
# args == [False, 1, 2, 3]
```

A query marked with `set_delete` builds a `DELETE`, one with columns given
to `set_update` builds an `UPDATE ... SET (...) = (...)`, and a query made
with `raw` (or given `set_sql`) returns its SQL unchanged.

With `index_placeholders=False` the `?` placeholders stay as they are; an
escaped `\?` always becomes a literal `?`. A dialect with
`use_top_clause=True` writes `TOP (n)` and
`OFFSET ... FETCH NEXT ... ROWS ONLY` instead of `LIMIT`/`OFFSET`.

Upsert statements are built by `build_upsert_query_postgres`
(`INSERT ... ON CONFLICT`), `build_upsert_query_mysql`
(`INSERT IGNORE` or `ON DUPLICATE KEY UPDATE`) and
`build_upsert_query_mssql` (`MERGE INTO`).

## Eager loading

`sqlboil.queries.eager_load.eager_load(executor, to_load, obj, kind)` walks
dotted relationship paths such as `"ChildMany.NestedOne"`. Each model object
has an `R` attribute holding loaded relationships and an `L` loader with
`Load<Name>(executor, singular, obj)` methods. At each level the loader is
called once for every object gathered so far, and each distinct path prefix
is loaded only once. `kind` is a `BindKind`: `STRUCT` for a single object,
`PTR_SLICE_STRUCT` for a list. Failures raise `EagerLoadError`.

## Other helpers

`sqlboil.queries.helpers.non_zero_default_set(defaults, obj)` returns the
column names from `defaults` whose attributes on `obj` are not zero values;
`title_case` turns `snake_case` names into `TitleCase`.

`sqlboil.randomize.random` has `Seed`, a thread-safe counter whose
`next_int` values avoid collisions, and value helpers built on it or on
`random`: `rand_str`, `rand_byte_slice`, `rand_money`, `rand_point`,
`rand_box`, `rand_circle`, `rand_net_addr`, `rand_mac_addr`, `rand_lsn` and
`rand_tx_id`. `stable_db_name` derives a repeatable 40-letter lower-case
name from any string.

```python
from sqlboil.randomize.random import stable_db_name

stable_db_name("awesomedb")  # same 40 lowercase letters every time
```

## What it does not do

The package only writes SQL text and arguments. It does not connect to a
database, run statements or map result rows onto objects; pass the output
of `build_query` to your own driver. It also does not fill whole objects
with random data by column type; it offers the single-value helpers above.
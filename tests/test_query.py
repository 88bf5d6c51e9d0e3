from sqlboil.queries.query import (
    Having,
    InClause,
    Join,
    JoinKind,
    Query,
    Where,
    raw,
)


def test_set_limit():
    q = Query()
    q.set_limit(10)
    assert q.limit == 10


def test_set_offset():
    q = Query()
    q.set_offset(10)
    assert q.offset == 10


def test_set_sql():
    q = Query()
    q.set_sql("select * from thing", 5, 3)
    assert len(q.raw_sql.args) == 2
    assert q.raw_sql.sql == "select * from thing"


def test_set_load():
    q = Query()
    q.set_load("one", "two")
    assert q.load == ["one", "two"]


def test_append_load():
    q = Query()
    q.set_load("one")
    q.append_load("two", "three")
    assert q.load == ["one", "two", "three"]


def test_append_where():
    q = Query()
    expect = "x > $1 AND y > $2"
    q.append_where(expect, 5, 3)
    q.append_where(expect, 5, 3)

    assert len(q.where) == 2
    assert q.where[0].clause == expect and q.where[1].clause == expect
    assert q.where[0].args == [5, 3]
    assert q.where[1].args == [5, 3]
    assert q.where[0].or_separator is False


def test_set_last_where_as_or():
    q = Query()
    q.append_where("")
    assert q.where[0].or_separator is False

    q.set_last_where_as_or()
    assert len(q.where) == 1
    assert q.where[0].or_separator is True

    q.append_where("")
    q.set_last_where_as_or()
    assert len(q.where) == 2
    assert q.where[0].or_separator is True
    assert q.where[1].or_separator is True


def test_set_last_where_as_or_empty():
    q = Query()
    q.set_last_where_as_or()
    assert q.where == []


def test_append_in():
    q = Query()
    expect = "col IN ?"
    q.append_in(expect, 5, 3)
    q.append_in(expect, 5, 3)

    assert len(q.in_) == 2
    assert q.in_[0].clause == expect and q.in_[1].clause == expect
    assert q.in_[0].args == [5, 3]
    assert q.in_ == [InClause(expect, [5, 3]), InClause(expect, [5, 3])]


def test_set_last_in_as_or():
    q = Query()
    q.append_in("")
    assert q.in_[0].or_separator is False

    q.set_last_in_as_or()
    assert len(q.in_) == 1
    assert q.in_[0].or_separator is True

    q.append_in("")
    q.set_last_in_as_or()
    assert len(q.in_) == 2
    assert q.in_[0].or_separator is True
    assert q.in_[1].or_separator is True


def test_append_group_by():
    q = Query()
    expect = "col1, col2"
    q.append_group_by(expect)
    q.append_group_by(expect)
    assert q.group_by == [expect, expect]


def test_append_order_by():
    q = Query()
    expect = "col1 desc, col2 asc"
    q.append_order_by(expect)
    q.append_order_by(expect)
    assert q.order_by == [expect, expect]


def test_append_having():
    q = Query()
    expect = "count(orders.order_id) > ?"
    q.append_having(expect, 10)
    q.append_having(expect, 10)

    assert len(q.having) == 2
    assert q.having[0].clause == expect and q.having[1].clause == expect
    assert q.having[0].args[0] == 10 and q.having[1].args[0] == 10
    assert q.having[0] == Having(expect, [10])


def test_from():
    q = Query()
    q.append_from("videos a", "orders b")
    q.append_from("videos a", "orders b")

    expect = ["videos a", "orders b", "videos a", "orders b"]
    assert q.from_ == expect

    q.set_from("videos a", "orders b")
    assert q.from_ == expect[:2]


def test_set_select():
    q = Query(select_cols=["hello"])
    q.set_select(None)
    assert q.select_cols == []


def test_set_count():
    q = Query()
    q.set_count()
    assert q.count is True


def test_set_update():
    q = Query()
    q.set_update({"test": 5})
    assert q.update["test"] == 5


def test_set_delete():
    q = Query()
    q.set_delete()
    assert q.delete is True


def test_set_for():
    q = Query()
    q.set_for("update")
    assert q.for_lock == "update"


def test_executor_is_stored():
    db = object()
    q = Query()
    q.executor = db
    assert q.executor is db


def test_append_select():
    q = Query()
    q.append_select("col1", "col2")
    q.append_select("col1", "col2")
    assert len(q.select_cols) == 4
    assert q.select_cols == ["col1", "col2", "col1", "col2"]


def test_raw():
    db = object()
    q = raw(db, "thing", 5)
    assert q.raw_sql.sql == "thing"
    assert q.raw_sql.args[0] == 5
    assert q.executor is db


def test_append_inner_join():
    q = Query()
    q.append_inner_join("thing=$1 AND stuff=$2", 2, 5)
    q.append_inner_join("thing=$1 AND stuff=$2", 2, 5)

    assert len(q.joins) == 2
    assert q.joins[0].clause == "thing=$1 AND stuff=$2"
    assert q.joins[1].clause == "thing=$1 AND stuff=$2"
    assert len(q.joins[0].args) == 2
    assert len(q.joins[1].args) == 2
    assert q.joins[0].args == [2, 5]
    assert q.joins[0].kind is JoinKind.INNER
    assert q.joins[0] == Join("thing=$1 AND stuff=$2", [2, 5], JoinKind.INNER)


def test_where_defaults():
    assert Where("a=?") == Where("a=?", [], False)
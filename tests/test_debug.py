import datetime
from decimal import Decimal

import pytest

from sql_weave import Builder, Columns
from sql_weave.escape import debug_literal


def test_debug_build():
    q = Builder()
    q("SELECT %s FROM %s", Columns(["foo, bar"]), "users")
    q("WHERE active IS TRUE")
    q("AND user_id = %$ OR user = %$", 42, "root")

    assert q.build() == (
        "SELECT foo, bar FROM users\n"
        "WHERE active IS TRUE\n"
        "AND user_id = $1 OR user = $2",
        [42, "root"],
    )
    assert q.debug_build() == (
        "SELECT foo, bar FROM 'users'\n"
        "WHERE active IS TRUE\n"
        "AND user_id = 42 OR user = 'root'"
    )


def test_debug_values():
    ts = datetime.datetime(
        2009,
        11,
        10,
        14,
        13,
        15,
        16,
        tzinfo=datetime.timezone(datetime.timedelta(hours=2)),
    )

    b = Builder()
    b.add("SELECT %s FROM table", Columns(["foo", "bar"]))
    b.add("WHERE id = %$", 123)
    b.add("OR id = %$ + %d", "42", 69.069)
    b.add("XOR created_at = %$", ts)
    b.add("MORE offset = %$", datetime.timedelta(seconds=4))
    b.add("MAYBE IN arr = %$", [1, 2, 3])

    assert b.debug_build() == (
        "SELECT foo, bar FROM table\n"
        "WHERE id = 123\n"
        "OR id = '42' + 69.069\n"
        "XOR created_at = '2009-11-10 12:13:15.000016'\n"
        "MORE offset = '0:00:04'\n"
        "MAYBE IN arr = '[1, 2, 3]'"
    )


def test_debug_expansion():
    b = Builder()
    b.add("WHERE id IN (%+$)", [1, "a"])
    b.add("AND (x, y) IN (%#?)", [[1, "a"], [2, "b"]])
    assert b.debug_build() == (
        "WHERE id IN (1, 'a')\nAND (x, y) IN ((1, 'a'), (2, 'b'))"
    )


def test_debug_ignores_dialect():
    assert Builder().add("%$ %? %@", 1, 2, 3).debug_build() == "1 2 3"


def test_debug_skips_numeric_check():
    assert Builder().add("LIMIT %d", "x").debug_build() == "LIMIT 'x'"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("str", "'str'"),
        ("it's", "'it's'"),
        (42, "42"),
        (4.5, "4.5"),
        (Decimal("1.50"), "1.50"),
        (True, "'True'"),
        (None, "NULL"),
        (Columns(["a", "b"]), "a, b"),
        (datetime.datetime(2020, 1, 2, 3, 4, 5), "'2020-01-02 03:04:05.000000'"),
        (datetime.date(2020, 1, 2), "'2020-01-02'"),
        ((1, 2), "'(1, 2)'"),
    ],
)
def test_debug_literal(value, expected):
    assert debug_literal(value) == expected

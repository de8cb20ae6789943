import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.sql import bindparam
from sqlalchemy.types import Float

from sql_weave import Builder, MixedPlaceholders


def compile_literal(stmt):
    return str(
        stmt.compile(dialect=postgresql.dialect(), compile_kwargs={"literal_binds": True})
    )


@pytest.mark.parametrize(
    ("arg", "expected"),
    [
        (42, (42, "Integer()")),
        (bindparam("x", 42, type_=Float()), (42, "Float()")),
    ],
)
@pytest.mark.parametrize("verb", ["%$", "%?", "%@"])
def test_placeholder(verb, arg, expected):
    q = Builder().add(f"FOO {verb}", arg)
    stmt = q.sqlalchemy_text()
    assert [(x.value, repr(x.type)) for x in stmt._bindparams.values()] == [expected]
    assert compile_literal(stmt) == "FOO (42)"


def test_slice():
    q = Builder()
    q.add("SELECT * FROM t")
    q.add("WHERE id IN (%+$) AND name = %s", [1, 2], "'x'")
    stmt = q.sqlalchemy_text()
    assert [(x.key, x.value) for x in stmt._bindparams.values()] == [
        ("_arg_1", 1),
        ("_arg_2", 2),
    ]
    assert compile_literal(stmt) == (
        "SELECT * FROM t\nWHERE id IN ((1), (2)) AND name = 'x'"
    )


def test_mixed():
    with pytest.raises(MixedPlaceholders):
        Builder().add("%$ %?", 1, 2).sqlalchemy_text()

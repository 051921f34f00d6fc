"""Integration tests running rendered statements against in-memory SQLite.

SQLite's driver uses the same ``?`` placeholder style, so statements go
through SQLAlchemy's exec_driver_sql untouched.
"""

from datetime import date

import pytest
from sqlalchemy import create_engine

from babysql import select, count, insert, update, delete


@pytest.fixture
def conn():
    """Connection to a fresh in-memory database with a seeded users table."""
    engine = create_engine("sqlite://")
    with engine.connect() as connection:
        connection.exec_driver_sql(
            "CREATE TABLE users ("
            "id INTEGER PRIMARY KEY, name TEXT, age INTEGER, "
            "status TEXT, role TEXT, joined DATE)"
        )
        for row in [
            {"id": 1, "name": "alice", "age": 34, "status": "active", "role": "admin"},
            {"id": 2, "name": "bob", "age": 17, "status": "active", "role": "user"},
            {"id": 3, "name": "carol", "age": 45, "status": "banned", "role": "admin"},
            {"id": 4, "name": "dave", "age": 29, "status": "active", "role": "user"},
        ]:
            connection.exec_driver_sql(*insert("users").data(row).render().as_tuple())
        yield connection
    engine.dispose()


def _run(conn, builder):
    sql, params = builder.render()
    return conn.exec_driver_sql(sql, tuple(params))


def test_select_with_order_and_limit(conn):
    rows = _run(
        conn,
        select("users")
        .columns(["id", "name"])
        .where("status", "=", "active")
        .order_by("id", "DESC")
        .limit(2),
    ).fetchall()

    assert [tuple(r) for r in rows] == [(4, "dave"), (2, "bob")]


def test_mixed_connectors(conn):
    rows = _run(
        conn,
        select("users")
        .columns("id")
        .where("status", "=", "active")
        .where("age", ">", 18)
        .where("role", "=", "admin", "OR")
        .order_by("id"),
    ).fetchall()

    assert [r[0] for r in rows] == [1, 3, 4]


def test_count(conn):
    total = _run(conn, count("users").count_column("id", "userCount")).scalar()
    assert total == 4


def test_like_and_in(conn):
    rows = _run(
        conn,
        select("users").columns("name").where_like("name", "a", "right").where_in("id", [1, 2, 3]),
    ).fetchall()

    assert [r[0] for r in rows] == ["alice"]


def test_empty_in_matches_nothing(conn):
    rows = _run(conn, select("users").where_in("id", [])).fetchall()
    assert rows == []


def test_paginate(conn):
    rows = _run(conn, select("users").columns("id").order_by("id").paginate(2, 2)).fetchall()
    assert [r[0] for r in rows] == [3, 4]


def test_update_then_select(conn):
    result = _run(conn, update("users").data({"status": "inactive", "age": 18}).where("id", "=", 2))
    assert result.rowcount == 1

    row = _run(conn, select("users").columns(["status", "age"]).where("id", "=", 2)).one()
    assert tuple(row) == ("inactive", 18)


def test_insert_date_value(conn):
    _run(conn, insert("users").data({"id": 10, "name": "erin", "joined": date(2024, 1, 31)}))

    joined = _run(conn, select("users").columns("joined").where("id", "=", 10)).scalar()
    assert joined == "2024-01-31"


def test_delete_where_raw(conn):
    result = _run(conn, delete("users").where_raw("age < ? OR status = ?", [18, "banned"]))
    assert result.rowcount == 2

    assert _run(conn, count("users")).scalar() == 2


def test_delete_all_when_allowed(conn):
    _run(conn, delete("users").allow_unsafe())
    assert _run(conn, count("users")).scalar() == 0

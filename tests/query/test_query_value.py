"""Tests for sqlfluent.query.query.Query."""

import pytest

from sqlfluent import Query, SqlFragment


def test_list_arguments_are_flattened_one_level():
    assert Query("x", 1, [2, 3], "a").args == (1, 2, 3, "a")
    assert Query("x", [[1, 2], 3]).args == ([1, 2], 3)


def test_tuples_are_not_flattened():
    assert Query("x", (1, 2)).args == ((1, 2),)


def test_sql_args():
    assert Query("SELECT ?", 1).sql_args() == ("SELECT ?", (1,))


def test_structural_equality_and_hash():
    assert Query("SELECT ?", 1) == Query("SELECT ?", 1)
    assert Query("SELECT ?", 1) != Query("SELECT ?", 2)
    assert Query("SELECT ?", 1) != Query("SELECT ? ", 1)
    assert hash(Query("SELECT ?", 1)) == hash(Query("SELECT ?", 1))


def test_from_fragment_keeps_arguments():
    query = Query.from_fragment(SqlFragment(sql="SELECT ?", args=([1, 2],)))
    assert query.args == ([1, 2],)
    assert Query.from_fragment(SqlFragment(sql="SELECT ?", args=(1,))) == Query("SELECT ?", 1)


def test_query_is_frozen():
    query = Query("SELECT 1")
    with pytest.raises(ValueError):
        query.sql = "SELECT 2"


def test_str():
    assert str(Query("SELECT ?", 1)) == "[SQL = SELECT ?] [ARGS = [1]]"

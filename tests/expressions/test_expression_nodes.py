"""Tests for sqlfluent.expressions: node construction and validation."""

import pytest

from sqlfluent.expressions import (
    ComparisonExpression,
    ComparisonOperator,
    Expression,
    GroupExpression,
    InListExpression,
    LogicalExpression,
    LogicalOperator,
    SelectQueryExpression,
    SqlFragment,
    LimitExpression,
)
from sqlfluent import SqliteDialect
from tests.helpers import Wizards


def _level_above(value):
    return ComparisonExpression(column=Wizards.level, operator=ComparisonOperator.GREATER_THAN, value=value)


def test_comparison_operator_tokens():
    assert [op.value for op in ComparisonOperator] == [
        "=", "<>", "<", "<=", ">", ">=", "IS NULL", "IS NOT NULL", "LIKE", "ILIKE", "NOT LIKE",
    ]


def test_unary_operators():
    assert ComparisonOperator.IS_NULL.is_unary
    assert ComparisonOperator.IS_NOT_NULL.is_unary
    assert not ComparisonOperator.EQUALS.is_unary
    assert not ComparisonOperator.LIKE.is_unary


def test_binary_comparison_requires_value():
    with pytest.raises(ValueError, match="use is_null"):
        ComparisonExpression(column=Wizards.guild, operator=ComparisonOperator.EQUALS, value=None)


def test_unary_comparison_rejects_value():
    with pytest.raises(ValueError, match="does not take a value"):
        ComparisonExpression(column=Wizards.guild, operator=ComparisonOperator.IS_NULL, value="x")


def test_not_requires_exactly_one_child():
    with pytest.raises(ValueError, match="NOT takes exactly one expression"):
        LogicalExpression(operator=LogicalOperator.NOT, expressions=(_level_above(1), _level_above(2)))
    LogicalExpression(operator=LogicalOperator.NOT, expressions=(_level_above(1),))


def test_logical_requires_children():
    with pytest.raises(ValueError):
        LogicalExpression(operator=LogicalOperator.AND, expressions=())


def test_in_list_requires_values():
    with pytest.raises(ValueError):
        InListExpression(column=Wizards.id, values=())
    assert InListExpression(column=Wizards.id, values=[1, 2]).values == (1, 2)


def test_nodes_are_frozen():
    node = _level_above(3)
    with pytest.raises(ValueError):
        node.value = 4


def test_group_keeps_child():
    child = _level_above(3)
    assert GroupExpression(expression=child).expression is child


def test_select_query_defaults():
    expression = SelectQueryExpression(table=Wizards)
    assert not expression.has_clauses
    assert SelectQueryExpression(table=Wizards, limit=LimitExpression(limit=1)).has_clauses


def test_accept_dispatches_to_renderer():
    fragment = _level_above(3).accept(SqliteDialect(), use_table_alias=True)
    assert fragment == SqlFragment(sql="w.level > ?", args=(3,))


def test_base_expression_cannot_render():
    with pytest.raises(NotImplementedError):
        Expression().accept(SqliteDialect())


def test_sql_fragment_join_keeps_argument_order():
    joined = SqlFragment.join(
        [SqlFragment(sql="a = ?", args=(1,)), SqlFragment(sql="b"), SqlFragment(sql="c IN (?, ?)", args=(2, 3))],
        " AND ",
    )
    assert joined == SqlFragment(sql="a = ? AND b AND c IN (?, ?)", args=(1, 2, 3))

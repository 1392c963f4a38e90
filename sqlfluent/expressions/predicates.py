"""Predicate nodes: comparisons, logical combinators, IN, BETWEEN, EXISTS and groups."""

from __future__ import annotations

import enum
from typing import Any

from pydantic import Field, model_validator

from ..column import Column
from ._bases import SqlFragment, WhereExpression


class ComparisonOperator(enum.Enum):
    """Binary (or postfix, for the null checks) comparison operators."""

    EQUALS = "="
    NOT_EQUALS = "<>"
    LESS_THAN = "<"
    LESS_THAN_OR_EQUAL = "<="
    GREATER_THAN = ">"
    GREATER_THAN_OR_EQUAL = ">="
    IS_NULL = "IS NULL"
    IS_NOT_NULL = "IS NOT NULL"
    LIKE = "LIKE"
    ILIKE = "ILIKE"
    NOT_LIKE = "NOT LIKE"

    @property
    def is_unary(self) -> bool:
        """True for operators that take no value (``IS NULL``, ``IS NOT NULL``)."""
        return self in (ComparisonOperator.IS_NULL, ComparisonOperator.IS_NOT_NULL)


class LogicalOperator(enum.Enum):
    AND = "AND"
    OR = "OR"
    NOT = "NOT"


class ComparisonExpression(WhereExpression):
    """``column <operator> ?``, or ``column IS [NOT] NULL`` without a value."""

    column: Column
    operator: ComparisonOperator
    value: Any = None

    @model_validator(mode="after")
    def _check_value(self):
        if self.operator.is_unary and self.value is not None:
            raise ValueError(f"{self.operator.value} does not take a value")
        if not self.operator.is_unary and self.value is None:
            raise ValueError(
                f"Cannot compare {self.column.key} {self.operator.value} NULL; use is_null() or is_not_null()"
            )
        return self

    def accept(self, renderer, use_table_alias: bool = False) -> SqlFragment:
        return renderer.render_comparison(self, use_table_alias)


class LogicalExpression(WhereExpression):
    """Children joined by AND / OR, or a single child negated by NOT."""

    operator: LogicalOperator
    expressions: tuple[WhereExpression, ...] = Field(min_length=1)

    @model_validator(mode="after")
    def _check_arity(self):
        if self.operator is LogicalOperator.NOT and len(self.expressions) != 1:
            raise ValueError("NOT takes exactly one expression")
        return self

    def accept(self, renderer, use_table_alias: bool = False) -> SqlFragment:
        return renderer.render_logical(self, use_table_alias)


class InListExpression(WhereExpression):
    """``column [NOT] IN (?, ?, ...)``."""

    column: Column
    values: tuple[Any, ...] = Field(min_length=1)
    negated: bool = False

    def accept(self, renderer, use_table_alias: bool = False) -> SqlFragment:
        return renderer.render_in_list(self, use_table_alias)


class BetweenExpression(WhereExpression):
    """``column BETWEEN ? AND ?`` (inclusive)."""

    column: Column
    low: Any
    high: Any

    def accept(self, renderer, use_table_alias: bool = False) -> SqlFragment:
        return renderer.render_between(self, use_table_alias)


class ExistsExpression(WhereExpression):
    """``[NOT] EXISTS (<subquery>)`` over an already rendered subquery."""

    subquery: str
    args: tuple[Any, ...] = ()
    negated: bool = False

    def accept(self, renderer, use_table_alias: bool = False) -> SqlFragment:
        return renderer.render_exists(self, use_table_alias)


class GroupExpression(WhereExpression):
    """Parenthesized child; no change in meaning."""

    expression: WhereExpression

    def accept(self, renderer, use_table_alias: bool = False) -> SqlFragment:
        return renderer.render_group(self, use_table_alias)

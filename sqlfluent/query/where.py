"""WHERE clause builders.

A Where collects predicates. One predicate is used as-is; several are combined
with the block operator (AND unless the block was opened with ``or_``)::

    Where(Wizards).eq(Wizards.guild, "Azure").or_(
        lambda w: w.gt(Wizards.level, 10).is_null(Wizards.retired_at)
    )
    # w.guild = ? AND (w.level > ? OR w.retired_at IS NULL)

NullableWhere has the same surface but ignores predicates whose value is None,
which suits optional search filters.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional, TYPE_CHECKING

from pydantic import BaseModel, Field, field_validator

from ..column import Column
from ..dialects import Dialect
from ..expressions import (
    BetweenExpression,
    ComparisonExpression,
    ComparisonOperator,
    ExistsExpression,
    GroupExpression,
    InListExpression,
    LogicalExpression,
    LogicalOperator,
    SqlFragment,
    WhereExpression,
)
from ..table import Table

if TYPE_CHECKING:
    from .select import Select


class Where(BaseModel):
    """Strict predicate builder: every predicate method requires a value."""

    model_config = {"arbitrary_types_allowed": True}

    table: type[Table]
    operator: LogicalOperator = LogicalOperator.AND
    """Operator combining the predicates of this block (AND or OR)."""
    expressions: list[WhereExpression] = Field(default_factory=list)

    def __init__(self, table: type[Table], operator: LogicalOperator | str = LogicalOperator.AND, **data: Any):
        super().__init__(table=table, operator=operator, **data)

    @field_validator("operator")
    @classmethod
    def _check_operator(cls, value: LogicalOperator) -> LogicalOperator:
        if value is LogicalOperator.NOT:
            raise ValueError("A where block combines predicates with AND or OR, not NOT")
        return value

    @property
    def expression(self) -> Optional[WhereExpression]:
        """The combined predicate, or None when nothing was added."""
        if not self.expressions:
            return None
        if len(self.expressions) == 1:
            return self.expressions[0]
        return LogicalExpression(operator=self.operator, expressions=tuple(self.expressions))

    def fragment(self, dialect: Optional[Dialect] = None, use_table_alias: bool = False) -> Optional[SqlFragment]:
        """Render the combined predicate, with the table's dialect unless one is given."""
        expression = self.expression
        if expression is None:
            return None
        return (dialect or self.table.get_dialect()).render(expression, use_table_alias)

    def add(self, expression: WhereExpression) -> Where:
        self.expressions.append(expression)
        return self

    def _compare(self, column: Column, operator: ComparisonOperator, value: Any = None) -> Where:
        return self.add(ComparisonExpression(column=column, operator=operator, value=value))

    def _sub_block(self, block: Callable[[Where], Any], operator: LogicalOperator) -> Optional[WhereExpression]:
        sub = type(self)(self.table, operator)
        block(sub)
        return sub.expression

    # comparisons

    def eq(self, column: Column, value: Any) -> Where:
        return self._compare(column, ComparisonOperator.EQUALS, value)

    def neq(self, column: Column, value: Any) -> Where:
        return self._compare(column, ComparisonOperator.NOT_EQUALS, value)

    def lt(self, column: Column, value: Any) -> Where:
        return self._compare(column, ComparisonOperator.LESS_THAN, value)

    def lte(self, column: Column, value: Any) -> Where:
        return self._compare(column, ComparisonOperator.LESS_THAN_OR_EQUAL, value)

    def gt(self, column: Column, value: Any) -> Where:
        return self._compare(column, ComparisonOperator.GREATER_THAN, value)

    def gte(self, column: Column, value: Any) -> Where:
        return self._compare(column, ComparisonOperator.GREATER_THAN_OR_EQUAL, value)

    def is_null(self, column: Column) -> Where:
        return self._compare(column, ComparisonOperator.IS_NULL)

    def is_not_null(self, column: Column) -> Where:
        return self._compare(column, ComparisonOperator.IS_NOT_NULL)

    # lists and ranges

    def in_list(self, column: Column, values: Iterable[Any]) -> Where:
        values = list(values)
        if not values:
            raise ValueError("Cannot create IN expression with empty list")
        return self.add(InListExpression(column=column, values=tuple(values)))

    def not_in_list(self, column: Column, values: Iterable[Any]) -> Where:
        values = list(values)
        if not values:
            raise ValueError("Cannot create NOT IN expression with empty list")
        return self.add(InListExpression(column=column, values=tuple(values), negated=True))

    def between(self, column: Column, low: Any, high: Any) -> Where:
        """``column BETWEEN low AND high``, both ends inclusive."""
        if low is None or high is None:
            raise ValueError("Both ends of a BETWEEN range are required")
        return self.add(BetweenExpression(column=column, low=low, high=high))

    # patterns

    def like(self, column: Column, pattern: str) -> Where:
        return self._compare(column, ComparisonOperator.LIKE, pattern)

    def like_contains(self, column: Column, pattern: str) -> Where:
        return self._compare(column, ComparisonOperator.LIKE, f"%{pattern}%")

    def like_starts(self, column: Column, pattern: str) -> Where:
        return self._compare(column, ComparisonOperator.LIKE, f"{pattern}%")

    def like_ends(self, column: Column, pattern: str) -> Where:
        return self._compare(column, ComparisonOperator.LIKE, f"%{pattern}")

    def ilike(self, column: Column, pattern: str) -> Where:
        return self._compare(column, ComparisonOperator.ILIKE, pattern)

    def not_like(self, column: Column, pattern: str) -> Where:
        return self._compare(column, ComparisonOperator.NOT_LIKE, pattern)

    # nested blocks

    def and_(self, block: Callable[[Where], Any]) -> Where:
        """Parenthesized sub-block whose predicates are joined with AND."""
        expression = self._sub_block(block, LogicalOperator.AND)
        if expression is not None:
            self.add(GroupExpression(expression=expression))
        return self

    def or_(self, block: Callable[[Where], Any]) -> Where:
        """Parenthesized sub-block whose predicates are joined with OR."""
        expression = self._sub_block(block, LogicalOperator.OR)
        if expression is not None:
            self.add(GroupExpression(expression=expression))
        return self

    def group(self, block: Callable[[Where], Any]) -> Where:
        """Parenthesized sub-block using this block's operator."""
        expression = self._sub_block(block, self.operator)
        if expression is not None:
            self.add(GroupExpression(expression=expression))
        return self

    def not_(self, block: Callable[[Where], Any]) -> Where:
        """``NOT (...)`` around the sub-block, whose predicates are joined with AND."""
        expression = self._sub_block(block, LogicalOperator.AND)
        if expression is not None:
            self.add(LogicalExpression(operator=LogicalOperator.NOT, expressions=(expression,)))
        return self

    def nullable(self, block: Callable[[NullableWhere], Any]) -> Where:
        """Sub-block in which predicates with a None value are skipped."""
        sub = NullableWhere(self.table, self.operator)
        block(sub)
        if sub.expression is not None:
            self.add(sub.expression)
        return self

    def cond(self, predicate: bool, block: Callable[[Where], Any]) -> Where:
        """Apply ``block`` to this builder only when ``predicate`` is true."""
        if predicate:
            block(self)
        return self

    # subqueries

    def _exists(self, subquery, negated: bool) -> Where:
        from .select import Select

        if callable(subquery) and not isinstance(subquery, Select):
            select = Select(self.table)
            subquery(select)
            subquery = select
        query = subquery.sql_args() if isinstance(subquery, Select) else subquery
        return self.add(ExistsExpression(subquery=query.sql, args=query.args, negated=negated))

    def exists(self, subquery: Select | Callable[[Select], Any]) -> Where:
        """``EXISTS (<subquery>)``; accepts a Select, a Query, or a block building a Select on this table."""
        return self._exists(subquery, negated=False)

    def not_exists(self, subquery: Select | Callable[[Select], Any]) -> Where:
        return self._exists(subquery, negated=True)


class NullableWhere(Where):
    """Predicate builder that skips predicates whose value is None (or an empty list)."""

    def eq(self, column: Column, value: Any) -> Where:
        return self if value is None else super().eq(column, value)

    def neq(self, column: Column, value: Any) -> Where:
        return self if value is None else super().neq(column, value)

    def lt(self, column: Column, value: Any) -> Where:
        return self if value is None else super().lt(column, value)

    def lte(self, column: Column, value: Any) -> Where:
        return self if value is None else super().lte(column, value)

    def gt(self, column: Column, value: Any) -> Where:
        return self if value is None else super().gt(column, value)

    def gte(self, column: Column, value: Any) -> Where:
        return self if value is None else super().gte(column, value)

    def in_list(self, column: Column, values: Optional[Iterable[Any]]) -> Where:
        values = list(values or ())
        return super().in_list(column, values) if values else self

    def not_in_list(self, column: Column, values: Optional[Iterable[Any]]) -> Where:
        values = list(values or ())
        return super().not_in_list(column, values) if values else self

    def between(self, column: Column, low: Any = None, high: Any = None) -> Where:
        """BETWEEN when both ends are given, ``>=`` or ``<=`` when only one is, nothing otherwise."""
        if low is not None and high is not None:
            return super().between(column, low, high)
        if low is not None:
            return self.gte(column, low)
        if high is not None:
            return self.lte(column, high)
        return self

    def like(self, column: Column, pattern: Optional[str]) -> Where:
        return self if pattern is None else super().like(column, pattern)

    def like_contains(self, column: Column, pattern: Optional[str]) -> Where:
        return self if pattern is None else super().like_contains(column, pattern)

    def like_starts(self, column: Column, pattern: Optional[str]) -> Where:
        return self if pattern is None else super().like_starts(column, pattern)

    def like_ends(self, column: Column, pattern: Optional[str]) -> Where:
        return self if pattern is None else super().like_ends(column, pattern)

    def ilike(self, column: Column, pattern: Optional[str]) -> Where:
        return self if pattern is None else super().ilike(column, pattern)

    def not_like(self, column: Column, pattern: Optional[str]) -> Where:
        return self if pattern is None else super().not_like(column, pattern)

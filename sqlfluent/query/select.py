"""SELECT builder."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from pydantic import BaseModel, Field

from ..column import Column
from ..expressions import (
    ColumnsSelectExpression,
    CountSelectExpression,
    ExistsSelectExpression,
    JoinContext,
    LimitExpression,
    OffsetExpression,
    OrderByColumn,
    OrderByExpression,
    OrderDirection,
    SelectClauseExpression,
    SelectOneExpression,
    SelectQueryExpression,
    TableJoinExpression,
    WhereExpression,
)
from ..table import Table
from .join import Join
from .query import Query
from .where import Where

logger = logging.getLogger(__name__)


class Select(BaseModel):
    """Fluent SELECT builder for a Table.

    Every method mutates the builder and returns it, so calls chain::

        Wizards.select(Wizards.id, Wizards.name) \\
            .where(lambda w: w.eq(Wizards.guild, "Azure")) \\
            .order_by(Wizards.name.asc) \\
            .paginate(2, 20) \\
            .sql_args()

    Columns are rendered qualified with their table alias (``w.name``).
    """

    model_config = {"arbitrary_types_allowed": True}

    table: type[Table]
    """The table in the FROM clause."""
    columns: list[Column] = Field(default_factory=list)
    """Columns accumulated by select(); rendered only while the select clause is a columns clause."""
    select_clause: SelectClauseExpression = Field(default_factory=SelectOneExpression)
    condition: Optional[WhereExpression] = None
    joins: list[TableJoinExpression] = Field(default_factory=list)
    join_context: Optional[JoinContext] = None
    """Aliases shared by the joins of this select; created on the first join."""
    orders: Optional[OrderByExpression] = None
    limit_value: Optional[int] = None
    offset_value: Optional[int] = None

    def __init__(self, table: type[Table], **data: Any):
        super().__init__(table=table, **data)

    # select clause

    def select(self, *columns: Column) -> Select:
        """Add columns to the select list (columns of joined tables are allowed)."""
        if not columns:
            raise ValueError("select columns can not be empty")
        self.columns.extend(columns)
        self.select_clause = ColumnsSelectExpression(columns=tuple(self.columns))
        return self

    def select_all(self, *except_: Column) -> Select:
        """Select every column of the table except the given ones."""
        return self.select(*(col for col in self.table.columns_list() if col not in except_))

    def select_primary(self, value: Any, *columns: Column) -> Select:
        """Select the row whose primary key equals ``value`` (all columns when none are given)."""
        primary_key = self.table.primary_key()
        if columns:
            self.select(*columns)
        else:
            self.select_all()
        return self.where(lambda w: w.eq(primary_key, value))

    def count(self, block: Optional[Callable[[Select], Any]] = None) -> Select:
        """``SELECT COUNT(*)``; ``block`` can add where/join clauses."""
        self.select_clause = CountSelectExpression()
        if block is not None:
            block(self)
        return self

    def exists(self, block: Optional[Callable[[Select], Any]] = None) -> Select:
        """``SELECT EXISTS (SELECT 1 FROM ...)``; ``block`` configures the inner select."""
        subquery = Select(self.table)
        if block is not None:
            block(subquery)
        self.select_clause = ExistsSelectExpression(subquery=subquery.expression)
        return self

    # clauses

    def where(self, block: Where | WhereExpression | Callable[[Where], Any]) -> Select:
        """Set the WHERE clause from a block, a Where builder or an expression (replaces any previous one)."""
        self.condition = _where_condition(self.table, block)
        return self

    def join(self, block: Callable[[Join], Any]) -> Select:
        if self.join_context is None:
            self.join_context = JoinContext()
        join = Join(self.table, self.join_context)
        block(join)
        if join.expression is None:
            raise ValueError("Join clause cannot be empty")
        self.join_context.add_table(join.expression.table)
        self.joins.append(join.expression)
        return self

    def order_by(self, *orders: OrderByColumn | Column | tuple[Column, OrderDirection]) -> Select:
        """Set ORDER BY from ``Column.asc``/``Column.desc``, ``(column, direction)`` pairs or bare columns (ascending)."""
        if not orders:
            raise ValueError("order_by requires at least one column")
        normalized = []
        for order in orders:
            if isinstance(order, OrderByColumn):
                normalized.append(order)
            elif isinstance(order, Column):
                normalized.append(OrderByColumn(column=order))
            elif isinstance(order, tuple) and len(order) == 2:
                normalized.append(OrderByColumn(column=order[0], direction=order[1]))
            else:
                raise TypeError(f"order_by requires OrderByColumn, Column, or (Column, OrderDirection); got {type(order)}")
        self.orders = OrderByExpression(orders=tuple(normalized))
        return self

    def limit(self, value: Optional[int]) -> Select:
        """Set LIMIT; None removes it."""
        if value is not None and value <= 0:
            raise ValueError("Limit must be greater than 0")
        self.limit_value = value
        return self

    def offset(self, value: Optional[int]) -> Select:
        """Set OFFSET; None removes it."""
        if value is not None and value < 0:
            raise ValueError("Offset must be greater than or equal to 0")
        self.offset_value = value
        return self

    def paginate(self, page: Optional[int], size: Optional[int]) -> Select:
        """Set LIMIT/OFFSET for a 1-based page; does nothing unless both are given."""
        if page is None or size is None:
            return self
        if page <= 0:
            raise ValueError("Page must be greater than 0")
        if size <= 0:
            raise ValueError("Page size must be greater than 0")
        self.limit_value = size
        self.offset_value = (page - 1) * size
        return self

    # rendering

    @property
    def expression(self) -> SelectQueryExpression:
        return SelectQueryExpression(
            table=self.table,
            select_clause=self.select_clause,
            joins=tuple(self.joins),
            condition=self.condition,
            order_by=self.orders,
            limit=None if self.limit_value is None else LimitExpression(limit=self.limit_value),
            offset=None if self.offset_value is None else OffsetExpression(offset=self.offset_value),
        )

    def sql_args(self) -> Query:
        fragment = self.table.get_dialect().render(self.expression, use_table_alias=True)
        logger.debug("%s %s", fragment.sql, fragment.args)
        return Query.from_fragment(fragment)


def _where_condition(table: type[Table], block) -> Optional[WhereExpression]:
    """Resolve the argument of a ``where(...)`` call to an expression."""
    if isinstance(block, WhereExpression):
        return block
    if isinstance(block, Where):
        return block.expression
    where = Where(table)
    block(where)
    return where.expression

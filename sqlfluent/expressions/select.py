"""SELECT statement and its select-clause variants."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import Field

from ..column import Column
from ._bases import Expression, SelectClauseExpression, SqlFragment, WhereExpression
from .join import TableJoinExpression
from .order import OrderByExpression
from .pagination import LimitExpression, OffsetExpression


class SelectOneExpression(SelectClauseExpression):
    """``SELECT 1``, used when no columns were chosen."""

    def accept(self, renderer, use_table_alias: bool = False) -> SqlFragment:
        return renderer.render_select_one(self, use_table_alias)


class ColumnsSelectExpression(SelectClauseExpression):
    columns: tuple[Column, ...] = Field(min_length=1)

    def accept(self, renderer, use_table_alias: bool = False) -> SqlFragment:
        return renderer.render_columns_select(self, use_table_alias)


class CountSelectExpression(SelectClauseExpression):
    def accept(self, renderer, use_table_alias: bool = False) -> SqlFragment:
        return renderer.render_count_select(self, use_table_alias)


class ExistsSelectExpression(SelectClauseExpression):
    """``SELECT EXISTS (<subquery>)``."""

    subquery: SelectQueryExpression

    def accept(self, renderer, use_table_alias: bool = False) -> SqlFragment:
        return renderer.render_exists_select(self, use_table_alias)


class SelectQueryExpression(Expression):
    """Root of a SELECT statement.

    Arguments are collected in clause order: select clause, joins, where,
    limit, offset.
    """

    table: Any  # type[Table]
    select_clause: SelectClauseExpression = Field(default_factory=SelectOneExpression)
    joins: tuple[TableJoinExpression, ...] = ()
    condition: Optional[WhereExpression] = None
    order_by: Optional[OrderByExpression] = None
    limit: Optional[LimitExpression] = None
    offset: Optional[OffsetExpression] = None

    @property
    def has_clauses(self) -> bool:
        """True when anything follows ``FROM <table>``."""
        return bool(self.joins) or any(
            part is not None for part in (self.condition, self.order_by, self.limit, self.offset)
        )

    def accept(self, renderer, use_table_alias: bool = False) -> SqlFragment:
        return renderer.render_select(self, use_table_alias)


ExistsSelectExpression.model_rebuild()

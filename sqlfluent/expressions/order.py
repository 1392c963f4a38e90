"""ORDER BY expression."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field

from ..column import Column
from ._bases import Expression, SqlFragment


class OrderDirection(enum.Enum):
    ASC = "ASC"
    DESC = "DESC"


class OrderByColumn(BaseModel):
    """One ORDER BY item: a column and its direction."""

    model_config = ConfigDict(frozen=True)

    column: Column
    direction: OrderDirection = OrderDirection.ASC


class OrderByExpression(Expression):
    orders: tuple[OrderByColumn, ...] = Field(min_length=1)

    def accept(self, renderer, use_table_alias: bool = False) -> SqlFragment:
        return renderer.render_order_by(self, use_table_alias)

"""JOIN expressions and the alias context shared by the joins of one select."""

from __future__ import annotations

import enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..column import Column
from ._bases import Expression, SqlFragment


class JoinType(enum.Enum):
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    INNER = "INNER"
    OUTER = "OUTER"
    FULL = "FULL"


class JoinCondition(BaseModel):
    """Equality pairing ``left = right`` of the ON clause."""

    model_config = ConfigDict(frozen=True)

    left: Column
    right: Column


class JoinContext(BaseModel):
    """Table -> alias mapping shared by all joins of a single select.

    A table is registered at most once: the first alias wins.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    table_aliases: dict[Any, str] = Field(default_factory=dict)

    def add_table(self, table) -> None:
        if table not in self.table_aliases:
            self.table_aliases[table] = table.alias()

    def table_alias(self, table) -> Optional[str]:
        return self.table_aliases.get(table)


class TableJoinExpression(Expression):
    """``<TYPE> JOIN <table> <alias> ON <left> = <right>``."""

    table: Any  # type[Table]
    type: JoinType
    condition: JoinCondition
    context: Optional[JoinContext] = None

    def accept(self, renderer, use_table_alias: bool = False) -> SqlFragment:
        return renderer.render_join(self, use_table_alias)

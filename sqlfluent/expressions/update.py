"""UPDATE statement, SET list and column assignments."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..column import Column
from ._bases import Expression, SqlFragment, WhereExpression


class Assignment(BaseModel):
    """``column = value``; shared by INSERT and UPDATE."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    column: Column
    value: Any = None


class SetExpression(Expression):
    """SET list. A None value renders as ``col = COALESCE(?, col)`` so the stored value is kept."""

    assignments: tuple[Assignment, ...] = Field(min_length=1)

    def accept(self, renderer, use_table_alias: bool = False) -> SqlFragment:
        return renderer.render_set(self, use_table_alias)


class UpdateQueryExpression(Expression):
    table: Any  # type[Table]
    set_expression: SetExpression
    condition: Optional[WhereExpression] = None

    def accept(self, renderer, use_table_alias: bool = False) -> SqlFragment:
        return renderer.render_update(self, use_table_alias)

"""INSERT statement."""

from typing import Any

from pydantic import Field

from ._bases import Expression, SqlFragment
from .update import Assignment


class InsertValuesExpression(Expression):
    """``INSERT INTO <table> (<keys>) VALUES (?, ...)``."""

    table: Any  # type[Table]
    assignments: tuple[Assignment, ...] = Field(min_length=1)

    def accept(self, renderer, use_table_alias: bool = False) -> SqlFragment:
        return renderer.render_insert(self, use_table_alias)

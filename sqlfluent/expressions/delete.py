"""DELETE statement."""

from typing import Any, Optional

from ._bases import Expression, SqlFragment, WhereExpression


class DeleteQueryExpression(Expression):
    """``DELETE FROM <table> [WHERE ...]``; without a condition every row is deleted."""

    table: Any  # type[Table]
    condition: Optional[WhereExpression] = None

    def accept(self, renderer, use_table_alias: bool = False) -> SqlFragment:
        return renderer.render_delete(self, use_table_alias)

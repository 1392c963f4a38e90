"""LIMIT and OFFSET expressions."""

from ._bases import Expression, SqlFragment


class LimitExpression(Expression):
    limit: int

    def accept(self, renderer, use_table_alias: bool = False) -> SqlFragment:
        return renderer.render_limit(self, use_table_alias)


class OffsetExpression(Expression):
    offset: int

    def accept(self, renderer, use_table_alias: bool = False) -> SqlFragment:
        return renderer.render_offset(self, use_table_alias)

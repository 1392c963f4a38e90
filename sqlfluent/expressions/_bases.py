"""Base expression types for SQL expression trees."""

from __future__ import annotations

from typing import Any, Iterable, TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from ..dialects.base import Dialect


class SqlFragment(BaseModel):
    """Partial render result: SQL text with ``?`` placeholders and the values bound to them, in order."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    sql: str
    args: tuple[Any, ...] = ()

    @classmethod
    def join(cls, fragments: Iterable[SqlFragment], separator: str = " ") -> SqlFragment:
        """Concatenate fragments; arguments keep the left-to-right order of the text."""
        fragments = tuple(fragments)
        return cls(
            sql=separator.join(f.sql for f in fragments),
            args=sum((f.args for f in fragments), ()),
        )


class Expression(BaseModel):
    """Base type for all SQL expression nodes.

    Nodes are immutable and do not know any SQL syntax: ``accept`` hands the
    node to the renderer method for its kind, which returns a SqlFragment.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def accept(self, renderer: Dialect, use_table_alias: bool = False) -> SqlFragment:
        """Render this node with the given dialect."""
        raise NotImplementedError("Subclasses must implement `accept`")


class WhereExpression(Expression):
    """Boolean-valued node usable in WHERE clauses."""


class SelectClauseExpression(Expression):
    """The ``SELECT ...`` head of a select statement."""

"""UPDATE builder."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, TYPE_CHECKING

from pydantic import BaseModel, Field

from ..column import Column
from ..expressions import Assignment, SetExpression, UpdateQueryExpression, WhereExpression
from ..table import Table
from .query import Query
from .select import _where_condition
from .where import Where

if TYPE_CHECKING:
    from ..filters import UpdateFilter

logger = logging.getLogger(__name__)


class Update(BaseModel):
    """UPDATE builder.

    A None value keeps the stored one (``col = COALESCE(?, col)``), so partial
    updates can pass every field::

        Wizards.update_primary(7, lambda u: u.set(Wizards.name, None).set(Wizards.level, 10))
        # UPDATE wizards SET name = COALESCE(?, name), level = ? WHERE id = ?
    """

    model_config = {"arbitrary_types_allowed": True}

    table: type[Table]
    assignments: list[Assignment] = Field(default_factory=list)
    condition: Optional[WhereExpression] = None
    update_filter: Optional[Any] = None
    """UpdateFilter checked before the statement runs (see executor.persist_update)."""

    def __init__(self, table: type[Table], **data: Any):
        super().__init__(table=table, **data)

    def update(self, block: Callable[[Update], Any]) -> Update:
        block(self)
        return self

    def update_primary(self, value: Any, block: Callable[[Update], Any]) -> Update:
        """Update the row whose primary key equals ``value``."""
        primary_key = self.table.primary_key()
        self.where(lambda w: w.eq(primary_key, value))
        return self.update(block)

    def set(self, column: Column, value: Any) -> Update:
        if column.table is not self.table:
            raise ValueError(
                f"Column {column.key} belongs to {column.table.get_table_name()}, "
                f"not {self.table.get_table_name()}"
            )
        self.assignments.append(Assignment(column=column, value=value))
        return self

    def where(self, block: Where | WhereExpression | Callable[[Where], Any]) -> Update:
        """Set the WHERE clause (replaces any previous one); without one every row is updated."""
        self.condition = _where_condition(self.table, block)
        return self

    def filter(self, block: Callable[[UpdateFilter], Any]) -> Update:
        from ..filters import UpdateFilter

        self.update_filter = UpdateFilter(self.table)
        block(self.update_filter)
        return self

    def filters(self) -> Optional[UpdateFilter]:
        return self.update_filter

    @property
    def expression(self) -> UpdateQueryExpression:
        if not self.assignments:
            raise ValueError("No columns specified for update")
        return UpdateQueryExpression(
            table=self.table,
            set_expression=SetExpression(assignments=tuple(self.assignments)),
            condition=self.condition,
        )

    def sql_args(self) -> Query:
        fragment = self.table.get_dialect().render(self.expression)
        logger.debug("%s %s", fragment.sql, fragment.args)
        return Query.from_fragment(fragment)

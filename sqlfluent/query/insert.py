"""INSERT builder."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, TYPE_CHECKING

from pydantic import BaseModel, Field

from ..column import Column
from ..expressions import Assignment, InsertValuesExpression
from ..table import Table
from .query import Query

if TYPE_CHECKING:
    from ..filters import InsertFilter

logger = logging.getLogger(__name__)


class Insert(BaseModel):
    """INSERT builder: ``Wizards.insert(lambda i: i.set(Wizards.name, "Merlin").set(Wizards.level, 9))``.

    Assignments with a None value are dropped, so the column gets its database default.
    """

    model_config = {"arbitrary_types_allowed": True}

    table: type[Table]
    assignments: list[Assignment] = Field(default_factory=list)
    insert_filter: Optional[Any] = None
    """InsertFilter checked before the statement runs (see executor.persist_insert)."""

    def __init__(self, table: type[Table], **data: Any):
        super().__init__(table=table, **data)

    def insert(self, block: Callable[[Insert], Any]) -> Insert:
        block(self)
        return self

    def set(self, column: Column, value: Any) -> Insert:
        if column.table is not self.table:
            raise ValueError(
                f"Column {column.key} belongs to {column.table.get_table_name()}, "
                f"not {self.table.get_table_name()}"
            )
        if value is not None:
            self.assignments.append(Assignment(column=column, value=value))
        return self

    def filter(self, block: Callable[[InsertFilter], Any]) -> Insert:
        from ..filters import InsertFilter

        self.insert_filter = InsertFilter(self.table)
        block(self.insert_filter)
        return self

    def filters(self) -> Optional[InsertFilter]:
        return self.insert_filter

    @property
    def expression(self) -> InsertValuesExpression:
        if not self.assignments:
            raise ValueError("No columns specified for insert")
        return InsertValuesExpression(table=self.table, assignments=tuple(self.assignments))

    def sql_args(self) -> Query:
        fragment = self.table.get_dialect().render(self.expression)
        logger.debug("%s %s", fragment.sql, fragment.args)
        return Query.from_fragment(fragment)

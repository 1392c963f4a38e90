"""DELETE builder."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from pydantic import BaseModel

from ..expressions import DeleteQueryExpression, WhereExpression
from ..table import Table
from .query import Query
from .select import _where_condition
from .where import Where

logger = logging.getLogger(__name__)


class Delete(BaseModel):
    """DELETE builder; without a where clause every row of the table is deleted."""

    model_config = {"arbitrary_types_allowed": True}

    table: type[Table]
    condition: Optional[WhereExpression] = None

    def __init__(self, table: type[Table], **data: Any):
        super().__init__(table=table, **data)

    def delete_where(self, block: Optional[Where | WhereExpression | Callable[[Where], Any]] = None) -> Delete:
        self.condition = None if block is None else _where_condition(self.table, block)
        return self

    def delete_primary(self, value: Any) -> Delete:
        primary_key = self.table.primary_key()
        return self.delete_where(lambda w: w.eq(primary_key, value))

    @property
    def expression(self) -> DeleteQueryExpression:
        return DeleteQueryExpression(table=self.table, condition=self.condition)

    def sql_args(self) -> Query:
        fragment = self.table.get_dialect().render(self.expression)
        logger.debug("%s %s", fragment.sql, fragment.args)
        return Query.from_fragment(fragment)

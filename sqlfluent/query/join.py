"""JOIN builder: picks the table to join from an ON pairing."""

from typing import Any, Optional

from pydantic import BaseModel, Field

from ..column import Column
from ..expressions import JoinCondition, JoinContext, JoinType, TableJoinExpression
from ..table import Table


class Join(BaseModel):
    """Builds one join of a select on ``table``.

    The side of the pairing that is not the selected table is joined::

        select.join(lambda j: j.inner(WizardSpells.wizard_id, Wizards.id))
        # INNER JOIN wizard_spells ws ON ws.wizard_id = w.id

    When neither side is the selected table (chained joins), the side not yet
    registered in the context is joined; the right-hand side on a tie.
    Declaring several pairings in one block keeps the last one. The select
    registers the joined table in the context once the block is done.
    """

    model_config = {"arbitrary_types_allowed": True}

    table: type[Table]
    context: JoinContext = Field(default_factory=JoinContext)
    expression: Optional[TableJoinExpression] = None

    def __init__(self, table: type[Table], context: Optional[JoinContext] = None, **data: Any):
        if context is not None:
            data["context"] = context
        super().__init__(table=table, **data)

    def _table_to_join(self, left: Column, right: Column):
        if left.table is self.table:
            return right.table
        if right.table is self.table:
            return left.table
        left_known = self.context.table_alias(left.table) is not None
        right_known = self.context.table_alias(right.table) is not None
        if left_known and not right_known:
            return right.table
        if right_known and not left_known:
            return left.table
        return right.table

    def _join(self, left: Column, right: Column, join_type: JoinType) -> "Join":
        table = self._table_to_join(left, right)
        self.expression = TableJoinExpression(
            table=table,
            type=join_type,
            condition=JoinCondition(left=left, right=right),
            context=self.context,
        )
        return self

    def left(self, left: Column, right: Column) -> "Join":
        return self._join(left, right, JoinType.LEFT)

    def right(self, left: Column, right: Column) -> "Join":
        return self._join(left, right, JoinType.RIGHT)

    def inner(self, left: Column, right: Column) -> "Join":
        return self._join(left, right, JoinType.INNER)

    def outer(self, left: Column, right: Column) -> "Join":
        return self._join(left, right, JoinType.OUTER)

    def full(self, left: Column, right: Column) -> "Join":
        return self._join(left, right, JoinType.FULL)

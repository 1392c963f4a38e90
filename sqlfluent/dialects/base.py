"""Base Dialect type: renders expression trees to SQL and opens connections."""

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from pydantic import BaseModel

from ..expressions import (
    BetweenExpression,
    ColumnsSelectExpression,
    ComparisonExpression,
    CountSelectExpression,
    DeleteQueryExpression,
    ExistsExpression,
    ExistsSelectExpression,
    Expression,
    GroupExpression,
    InListExpression,
    InsertValuesExpression,
    LimitExpression,
    LogicalExpression,
    OffsetExpression,
    OrderByExpression,
    SelectOneExpression,
    SelectQueryExpression,
    SetExpression,
    SqlFragment,
    TableJoinExpression,
    UpdateQueryExpression,
)


class Dialect(BaseModel, ABC):
    """Base for database dialects.

    A dialect is the only place that knows SQL syntax: each expression node
    calls back the ``render_*`` method for its kind (see ``Expression.accept``).
    ``use_table_alias`` selects between ``alias.key`` / ``table alias`` and bare
    names; it is passed down unchanged to child nodes.
    """

    model_config = {"arbitrary_types_allowed": True}

    SUPPORTED_SCHEMA: ClassVar[tuple[str, ...]] = ()
    """URL schemes this dialect handles (e.g. ('sqlite',))."""

    def render(self, expression: Expression, use_table_alias: bool = False) -> SqlFragment:
        """Render any expression node."""
        return expression.accept(self, use_table_alias)

    @abstractmethod
    def connect(self, url: str) -> Any:
        """Return a new raw DB-API connection for the given URL."""
        ...  # pylint: disable=unnecessary-ellipsis

    # statements

    @abstractmethod
    def render_insert(self, expression: InsertValuesExpression, use_table_alias: bool) -> SqlFragment: ...

    @abstractmethod
    def render_select(self, expression: SelectQueryExpression, use_table_alias: bool) -> SqlFragment: ...

    @abstractmethod
    def render_update(self, expression: UpdateQueryExpression, use_table_alias: bool) -> SqlFragment: ...

    @abstractmethod
    def render_delete(self, expression: DeleteQueryExpression, use_table_alias: bool) -> SqlFragment: ...

    # select clauses

    @abstractmethod
    def render_select_one(self, expression: SelectOneExpression, use_table_alias: bool) -> SqlFragment: ...

    @abstractmethod
    def render_columns_select(self, expression: ColumnsSelectExpression, use_table_alias: bool) -> SqlFragment: ...

    @abstractmethod
    def render_count_select(self, expression: CountSelectExpression, use_table_alias: bool) -> SqlFragment: ...

    @abstractmethod
    def render_exists_select(self, expression: ExistsSelectExpression, use_table_alias: bool) -> SqlFragment: ...

    # predicates

    @abstractmethod
    def render_comparison(self, expression: ComparisonExpression, use_table_alias: bool) -> SqlFragment: ...

    @abstractmethod
    def render_logical(self, expression: LogicalExpression, use_table_alias: bool) -> SqlFragment: ...

    @abstractmethod
    def render_in_list(self, expression: InListExpression, use_table_alias: bool) -> SqlFragment: ...

    @abstractmethod
    def render_between(self, expression: BetweenExpression, use_table_alias: bool) -> SqlFragment: ...

    @abstractmethod
    def render_exists(self, expression: ExistsExpression, use_table_alias: bool) -> SqlFragment: ...

    @abstractmethod
    def render_group(self, expression: GroupExpression, use_table_alias: bool) -> SqlFragment: ...

    # other clauses

    @abstractmethod
    def render_join(self, expression: TableJoinExpression, use_table_alias: bool) -> SqlFragment: ...

    @abstractmethod
    def render_order_by(self, expression: OrderByExpression, use_table_alias: bool) -> SqlFragment: ...

    @abstractmethod
    def render_limit(self, expression: LimitExpression, use_table_alias: bool) -> SqlFragment: ...

    @abstractmethod
    def render_offset(self, expression: OffsetExpression, use_table_alias: bool) -> SqlFragment: ...

    @abstractmethod
    def render_set(self, expression: SetExpression, use_table_alias: bool) -> SqlFragment: ...

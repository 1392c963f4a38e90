"""Pre-write validation: checks run before an INSERT or UPDATE.

Each check is a ``SELECT EXISTS (...)`` on some table plus the outcome that
counts as a failure: a uniqueness check fails when a row exists, a reference
check fails when none does.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

from .column import Column
from .query import Select, Where
from .table import Table


class FilterResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    ok: bool
    err: Optional[str] = None
    field: Optional[str] = None
    """Key of the column the failure is attached to."""


class FilterCheck(BaseModel):
    model_config = {"arbitrary_types_allowed": True}

    select: Select
    error_case: bool = True
    """The existence result that makes the check fail."""
    msg: str
    field: Optional[str] = None


class BaseFilter(BaseModel):
    """Collects checks; they are built lazily when filters() is called."""

    model_config = {"arbitrary_types_allowed": True}

    table: type[Table]
    check_builders: list[Callable[[], FilterCheck]] = Field(default_factory=list)

    def __init__(self, table: type[Table], **data: Any):
        super().__init__(table=table, **data)

    def predicate(self, msg: str, block: Callable[[Select], Any]) -> BaseFilter:
        """Fail with ``msg`` when the select built by ``block`` finds a row."""
        def build() -> FilterCheck:
            return FilterCheck(select=Select(self.table).exists(block), error_case=True, msg=msg)
        self.check_builders.append(build)
        return self

    def check_exists(self, attached_column: Column, foreign_table: type[Table], where: Where,
                     msg: str = "Referenced record doesn't exist") -> BaseFilter:
        """Fail with ``msg`` when no row of ``foreign_table`` matches ``where``."""
        def build() -> FilterCheck:
            select = Select(foreign_table).exists(lambda s: s.where(where))
            return FilterCheck(select=select, error_case=False, msg=msg, field=attached_column.key)
        self.check_builders.append(build)
        return self

    def filters(self) -> list[FilterCheck]:
        return [build() for build in self.check_builders]


class InsertFilter(BaseFilter):

    def unique(self, column: Column, value: Any, msg: str = "Record already exists") -> InsertFilter:
        """Fail when a row already has ``value`` in ``column``; nothing is checked for None."""
        if value is None:
            return self

        def build() -> FilterCheck:
            select = Select(self.table).exists(lambda s: s.where(lambda w: w.eq(column, value)))
            return FilterCheck(select=select, error_case=True, msg=msg, field=column.key)
        self.check_builders.append(build)
        return self

    def exists(self, column: Column, foreign_table: type[Table], foreign_column: Column, value: Any,
               msg: str = "Referenced record doesn't exist") -> InsertFilter:
        """Fail when no ``foreign_table`` row has ``value`` in ``foreign_column``; nothing is checked for None."""
        if value is None:
            return self
        where = Where(foreign_table).eq(foreign_column, value)
        return self.check_exists(column, foreign_table, where, msg)


class UpdateFilter(BaseFilter):

    def unique(self, column: Column, pk: Any, value: Any, msg: str = "Record already exists") -> UpdateFilter:
        """Fail when another row (primary key other than ``pk``) already has ``value`` in ``column``."""
        table_pk = self.table.primary_key()
        if value is None:
            return self

        def build() -> FilterCheck:
            select = Select(self.table).exists(
                lambda s: s.where(lambda w: w.eq(column, value).neq(table_pk, pk))
            )
            return FilterCheck(select=select, error_case=True, msg=msg, field=column.key)
        self.check_builders.append(build)
        return self

    def exists(self, column: Column, foreign_table: type[Table], foreign_column: Column, value: Any,
               msg: str = "Referenced record doesn't exist") -> UpdateFilter:
        """Fail when no ``foreign_table`` row has ``value`` in ``foreign_column``; nothing is checked for None."""
        if value is None:
            return self
        where = Where(foreign_table).eq(foreign_column, value)
        return self.check_exists(column, foreign_table, where, msg)

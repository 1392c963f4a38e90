"""Statement execution on a DB-API connection.

Every function takes ``conn``: anything with ``execute(sql, parameters)``
returning a cursor, i.e. a ``sqlite3.Connection`` or a ``Transaction``.
Nothing here commits. Connections from ``get_connection()`` run each statement
on its own; wrap calls in ``transaction()`` to keep or discard them together.

The ``persist_*`` and ``select_*`` helpers report database errors in their
result instead of raising; the lower-level helpers let driver errors propagate.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Optional, Sequence, TypeVar

from pydantic import BaseModel, ConfigDict

from .filters import BaseFilter, FilterCheck, FilterResult
from .query import Delete, Insert, Query, Select, Update
from .row import Row
from .table import Table

logger = logging.getLogger(__name__)

R = TypeVar("R")


# results

class InsertResult(BaseModel):
    """Outcome of persist_insert: success (with the generated id), filter failure, or database error."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    generated_id: Optional[Any] = None
    error: Optional[FilterResult] = None
    exception: Optional[Exception] = None

    @property
    def is_success(self) -> bool:
        return self.error is None and self.exception is None

    @property
    def is_filter_failure(self) -> bool:
        return self.error is not None

    @property
    def is_database_error(self) -> bool:
        return self.exception is not None


class UpdateResult(BaseModel):
    """Outcome of persist_update: success, filter failure, or database error."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    error: Optional[FilterResult] = None
    exception: Optional[Exception] = None

    @property
    def is_success(self) -> bool:
        return self.error is None and self.exception is None

    @property
    def is_filter_failure(self) -> bool:
        return self.error is not None

    @property
    def is_database_error(self) -> bool:
        return self.exception is not None


class SelectResult(BaseModel):
    """Outcome of select_one / select_list: a value, nothing found, or database error."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    value: Optional[Any] = None
    empty: bool = False
    exception: Optional[Exception] = None

    @property
    def is_success(self) -> bool:
        return not self.empty and self.exception is None

    @property
    def is_empty(self) -> bool:
        return self.empty

    @property
    def is_database_error(self) -> bool:
        return self.exception is not None


# raw execution

def execute(conn, query: Query) -> int:
    """Run a statement; returns the number of affected rows."""
    logger.debug("%s %s", query.sql, query.args)
    return conn.execute(query.sql, query.args).rowcount


def execute_return_key(conn, query: Query) -> Optional[int]:
    """Run an INSERT; returns the generated row id."""
    logger.debug("%s %s", query.sql, query.args)
    return conn.execute(query.sql, query.args).lastrowid


def map_one(conn, query: Query, mapper: Callable[[Row], R]) -> Optional[R]:
    """Map the first row with ``mapper``; None when the query returns no row."""
    logger.debug("%s %s", query.sql, query.args)
    cursor = conn.execute(query.sql, query.args)
    values = cursor.fetchone()
    if values is None:
        return None
    return mapper(Row.from_cursor(cursor, values))


def map_list(conn, query: Query, mapper: Callable[[Row], R]) -> list[R]:
    logger.debug("%s %s", query.sql, query.args)
    cursor = conn.execute(query.sql, query.args)
    return [mapper(Row.from_cursor(cursor, values)) for values in cursor.fetchall()]


def execute_batch(conn, sql: str, batch_args: Iterable[Sequence[Any]]) -> None:
    """Run ``sql`` once per argument tuple; all or none of the executions are kept."""
    conn.execute("SAVEPOINT execute_batch")
    try:
        for args in batch_args:
            conn.execute(sql, tuple(args))
    except Exception:
        logger.exception("Batch execution failed for %s", sql)
        conn.execute("ROLLBACK TO SAVEPOINT execute_batch")
        conn.execute("RELEASE SAVEPOINT execute_batch")
        raise
    conn.execute("RELEASE SAVEPOINT execute_batch")


# filters

def run_filter_check(conn, check: FilterCheck) -> FilterResult:
    exists = map_one(conn, check.select.sql_args(), lambda row: row.get(0, bool))
    if exists == check.error_case:
        return FilterResult(ok=False, err=check.msg, field=check.field)
    return FilterResult(ok=True)


def run_filters(conn, base_filter: BaseFilter) -> FilterResult:
    """Run the checks in order; the first failure is returned."""
    for check in base_filter.filters():
        result = run_filter_check(conn, check)
        if not result.ok:
            return result
    return FilterResult(ok=True)


# builders

def persist_insert(conn, insert: Insert) -> InsertResult:
    if insert.filters() is not None:
        result = run_filters(conn, insert.filters())
        if not result.ok:
            return InsertResult(error=result)
    query = insert.sql_args()
    try:
        return InsertResult(generated_id=execute_return_key(conn, query))
    except Exception as error:  # pylint: disable=broad-except
        logger.warning("Insert into %s failed: %s", insert.table.get_table_name(), error)
        return InsertResult(exception=error)


def persist_update(conn, update: Update) -> UpdateResult:
    if update.filters() is not None:
        result = run_filters(conn, update.filters())
        if not result.ok:
            return UpdateResult(error=result)
    query = update.sql_args()
    try:
        execute(conn, query)
    except Exception as error:  # pylint: disable=broad-except
        logger.warning("Update of %s failed: %s", update.table.get_table_name(), error)
        return UpdateResult(exception=error)
    return UpdateResult()


def persist_delete(conn, delete: Delete) -> int:
    """Run the DELETE; driver errors propagate. Returns the number of deleted rows."""
    return execute(conn, delete.sql_args())


def select_one(conn, select: Select, mapper: Callable[[Row], R]) -> SelectResult:
    query = select.sql_args()
    try:
        value = map_one(conn, query, mapper)
    except Exception as error:  # pylint: disable=broad-except
        logger.warning("Select from %s failed: %s", select.table.get_table_name(), error)
        return SelectResult(exception=error)
    if value is None:
        return SelectResult(empty=True)
    return SelectResult(value=value)


def select_list(conn, select: Select, mapper: Callable[[Row], R]) -> SelectResult:
    query = select.sql_args()
    try:
        values = map_list(conn, query, mapper)
    except Exception as error:  # pylint: disable=broad-except
        logger.warning("Select from %s failed: %s", select.table.get_table_name(), error)
        return SelectResult(exception=error)
    if not values:
        return SelectResult(empty=True)
    return SelectResult(value=values)


def count_records(conn, table: type[Table], block: Optional[Callable[[Select], Any]] = None) -> int:
    """``SELECT COUNT(*)`` on ``table``; ``block`` can add where/join clauses."""
    return map_one(conn, Select(table).count(block).sql_args(), lambda row: row.get(0, int))

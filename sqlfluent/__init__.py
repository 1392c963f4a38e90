"""sqlfluent: typed SQL statement builder rendering parameterized queries."""

from .column import Column, ColumnType, column
from .table import Table, create_table_query
from .query import Delete, Insert, Join, NullableWhere, Query, Select, Update, Where
from .expressions import OrderDirection, SqlFragment
from .dialects import Dialect, SqliteDialect
from .filters import FilterCheck, FilterResult, InsertFilter, UpdateFilter
from .row import Row
from .connection import connect, get_connection
from .transaction import TransactionError, transaction
from .executor import (
    InsertResult,
    SelectResult,
    UpdateResult,
    count_records,
    execute,
    execute_batch,
    execute_return_key,
    map_list,
    map_one,
    persist_delete,
    persist_insert,
    persist_update,
    run_filter_check,
    run_filters,
    select_list,
    select_one,
)

"""SQLite dialect."""

import logging
import sqlite3
import urllib.parse

from typing import ClassVar, Optional

from ..column import Column
from ..expressions import (
    BetweenExpression,
    ColumnsSelectExpression,
    ComparisonExpression,
    ComparisonOperator,
    CountSelectExpression,
    DeleteQueryExpression,
    ExistsExpression,
    ExistsSelectExpression,
    GroupExpression,
    InListExpression,
    InsertValuesExpression,
    LimitExpression,
    LogicalExpression,
    LogicalOperator,
    OffsetExpression,
    OrderByExpression,
    SelectOneExpression,
    SelectQueryExpression,
    SetExpression,
    SqlFragment,
    TableJoinExpression,
    UpdateQueryExpression,
)

from .base import Dialect

logger = logging.getLogger(__name__)


class SqliteDialect(Dialect):
    """Dialect for SQLite (scheme sqlite): ``?`` placeholders, ``table alias`` references."""

    SUPPORTED_SCHEMA: ClassVar[tuple[str, ...]] = ("sqlite",)

    def connect(self, url: str):
        parsed = urllib.parse.urlparse(url)
        path = (parsed.path or "")[1:] or parsed.hostname
        logger.info("Connecting to SQLite database %s", path)
        # transactions are opened explicitly (see TransactionManager)
        conn = sqlite3.connect(path, isolation_level=None)
        conn.execute("PRAGMA foreign_keys = ON")
        return conn

    # references

    @staticmethod
    def _column_ref(column: Column, use_table_alias: bool) -> str:
        if use_table_alias:
            return column.key_with_table_alias
        return column.key

    @staticmethod
    def _table_ref(table, use_table_alias: bool, alias: Optional[str] = None) -> str:
        if use_table_alias:
            return f"{table.get_table_name()} {alias or table.alias()}"
        return table.get_table_name()

    # statements

    def render_insert(self, expression: InsertValuesExpression, use_table_alias: bool) -> SqlFragment:
        keys = ", ".join(assignment.column.key for assignment in expression.assignments)
        placeholders = ", ".join("?" for _ in expression.assignments)
        return SqlFragment(
            sql=f"INSERT INTO {expression.table.get_table_name()} ({keys}) VALUES ({placeholders})",
            args=tuple(assignment.value for assignment in expression.assignments),
        )

    def render_select(self, expression: SelectQueryExpression, use_table_alias: bool) -> SqlFragment:
        head = expression.select_clause.accept(self, use_table_alias)
        # an EXISTS select is complete on its own unless the outer statement has clauses
        if isinstance(expression.select_clause, ExistsSelectExpression) and not expression.has_clauses:
            return head
        fragments = [head, SqlFragment(sql=f"FROM {self._table_ref(expression.table, use_table_alias)}")]
        fragments += [join.accept(self, use_table_alias) for join in expression.joins]
        if expression.condition is not None:
            where = expression.condition.accept(self, use_table_alias)
            fragments.append(SqlFragment(sql=f"WHERE {where.sql}", args=where.args))
        if expression.order_by is not None:
            order_by = expression.order_by.accept(self, use_table_alias)
            fragments.append(SqlFragment(sql=f"ORDER BY {order_by.sql}", args=order_by.args))
        for clause in (expression.limit, expression.offset):
            if clause is not None:
                fragments.append(clause.accept(self, use_table_alias))
        return SqlFragment.join(fragments)

    def render_update(self, expression: UpdateQueryExpression, use_table_alias: bool) -> SqlFragment:
        assignments = expression.set_expression.accept(self, use_table_alias)
        fragments = [
            SqlFragment(sql=f"UPDATE {self._table_ref(expression.table, use_table_alias)}"),
            SqlFragment(sql=f"SET {assignments.sql}", args=assignments.args),
        ]
        if expression.condition is not None:
            where = expression.condition.accept(self, use_table_alias)
            fragments.append(SqlFragment(sql=f"WHERE {where.sql}", args=where.args))
        return SqlFragment.join(fragments)

    def render_delete(self, expression: DeleteQueryExpression, use_table_alias: bool) -> SqlFragment:
        fragments = [SqlFragment(sql=f"DELETE FROM {self._table_ref(expression.table, use_table_alias)}")]
        if expression.condition is not None:
            where = expression.condition.accept(self, use_table_alias)
            fragments.append(SqlFragment(sql=f"WHERE {where.sql}", args=where.args))
        return SqlFragment.join(fragments)

    def render_set(self, expression: SetExpression, use_table_alias: bool) -> SqlFragment:
        parts = []
        for assignment in expression.assignments:
            ref = self._column_ref(assignment.column, use_table_alias)
            if assignment.value is None:
                parts.append(f"{ref} = COALESCE(?, {ref})")
            else:
                parts.append(f"{ref} = ?")
        return SqlFragment(
            sql=", ".join(parts),
            args=tuple(assignment.value for assignment in expression.assignments),
        )

    # select clauses

    def render_select_one(self, expression: SelectOneExpression, use_table_alias: bool) -> SqlFragment:
        return SqlFragment(sql="SELECT 1")

    def render_columns_select(self, expression: ColumnsSelectExpression, use_table_alias: bool) -> SqlFragment:
        refs = ", ".join(self._column_ref(column, use_table_alias) for column in expression.columns)
        return SqlFragment(sql=f"SELECT {refs}")

    def render_count_select(self, expression: CountSelectExpression, use_table_alias: bool) -> SqlFragment:
        return SqlFragment(sql="SELECT COUNT(*)")

    def render_exists_select(self, expression: ExistsSelectExpression, use_table_alias: bool) -> SqlFragment:
        subquery = expression.subquery.accept(self, use_table_alias)
        return SqlFragment(sql=f"SELECT EXISTS ({subquery.sql})", args=subquery.args)

    # predicates

    def render_comparison(self, expression: ComparisonExpression, use_table_alias: bool) -> SqlFragment:
        ref = self._column_ref(expression.column, use_table_alias)
        if expression.operator.is_unary:
            return SqlFragment(sql=f"{ref} {expression.operator.value}")
        # SQLite has no ILIKE; its LIKE is already case-insensitive for ASCII
        token = "LIKE" if expression.operator is ComparisonOperator.ILIKE else expression.operator.value
        return SqlFragment(sql=f"{ref} {token} ?", args=(expression.value,))

    def render_logical(self, expression: LogicalExpression, use_table_alias: bool) -> SqlFragment:
        fragments = [child.accept(self, use_table_alias) for child in expression.expressions]
        if expression.operator is LogicalOperator.NOT:
            return SqlFragment(sql=f"NOT ({fragments[0].sql})", args=fragments[0].args)
        return SqlFragment.join(fragments, f" {expression.operator.value} ")

    def render_in_list(self, expression: InListExpression, use_table_alias: bool) -> SqlFragment:
        ref = self._column_ref(expression.column, use_table_alias)
        operator = "NOT IN" if expression.negated else "IN"
        placeholders = ", ".join("?" for _ in expression.values)
        return SqlFragment(sql=f"{ref} {operator} ({placeholders})", args=expression.values)

    def render_between(self, expression: BetweenExpression, use_table_alias: bool) -> SqlFragment:
        ref = self._column_ref(expression.column, use_table_alias)
        return SqlFragment(sql=f"{ref} BETWEEN ? AND ?", args=(expression.low, expression.high))

    def render_exists(self, expression: ExistsExpression, use_table_alias: bool) -> SqlFragment:
        operator = "NOT EXISTS" if expression.negated else "EXISTS"
        return SqlFragment(sql=f"{operator} ({expression.subquery})", args=expression.args)

    def render_group(self, expression: GroupExpression, use_table_alias: bool) -> SqlFragment:
        inner = expression.expression.accept(self, use_table_alias)
        return SqlFragment(sql=f"({inner.sql})", args=inner.args)

    # other clauses

    def render_join(self, expression: TableJoinExpression, use_table_alias: bool) -> SqlFragment:
        left = self._column_ref(expression.condition.left, use_table_alias)
        right = self._column_ref(expression.condition.right, use_table_alias)
        alias = expression.context.table_alias(expression.table) if expression.context else None
        table = self._table_ref(expression.table, use_table_alias, alias)
        return SqlFragment(sql=f"{expression.type.value} JOIN {table} ON {left} = {right}")

    def render_order_by(self, expression: OrderByExpression, use_table_alias: bool) -> SqlFragment:
        return SqlFragment(sql=", ".join(
            f"{self._column_ref(order.column, use_table_alias)} {order.direction.value}"
            for order in expression.orders
        ))

    def render_limit(self, expression: LimitExpression, use_table_alias: bool) -> SqlFragment:
        return SqlFragment(sql="LIMIT ?", args=(expression.limit,))

    def render_offset(self, expression: OffsetExpression, use_table_alias: bool) -> SqlFragment:
        return SqlFragment(sql="OFFSET ?", args=(expression.offset,))

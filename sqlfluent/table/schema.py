"""Table schema: CREATE TABLE statement generation."""

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .base import Table

logger = logging.getLogger("sqlfluent")


def create_table_query(table: "type[Table]"):
    """Return ``CREATE TABLE IF NOT EXISTS`` for the table, columns in declaration order."""
    from ..query import Query

    definitions = []
    for col in table.columns_list():
        definition = f"{col.key} {col.type.sql_type}"
        if table.has_primary_key() and col is table.primary_key():
            definition += " PRIMARY KEY"
        definitions.append(definition)
    logger.info("CREATE TABLE %s", table.get_table_name())
    return Query(f"CREATE TABLE IF NOT EXISTS {table.get_table_name()} ({', '.join(definitions)})")

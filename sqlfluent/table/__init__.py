"""Table base class, metaclass, and schema statements."""

from .base import Table
from .meta import TableMeta
from .schema import create_table_query

__all__ = [
    "Table",
    "TableMeta",
    "create_table_query",
]

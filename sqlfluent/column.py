"""Column metadata for Table models.

After a Table subclass is created, each annotated attribute is represented by a
Column instance stored in TableSubClass._columns: dict[str, Column], and the
class attribute itself is replaced by that Column (``Wizards.name``). Column
holds the physical key, the semantic ColumnType and a back-reference to the
owning table.
"""

from __future__ import annotations

import enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class ColumnType(enum.Enum):
    """Semantic value type of a column."""

    STRING = "STRING"
    INT = "INT"
    LONG = "LONG"
    FLOAT = "FLOAT"
    DOUBLE = "DOUBLE"
    DECIMAL = "DECIMAL"
    BOOLEAN = "BOOLEAN"
    DATE_TEXT = "DATE_TEXT"
    DATE_TIMESTAMP = "DATE_TIMESTAMP"

    @property
    def sql_type(self) -> str:
        """Native storage type used in ``CREATE TABLE`` statements."""
        return _SQL_TYPES[self]


_SQL_TYPES: dict[ColumnType, str] = {
    ColumnType.STRING: "TEXT",
    ColumnType.INT: "INTEGER",
    ColumnType.LONG: "INTEGER",
    ColumnType.FLOAT: "REAL",
    ColumnType.DOUBLE: "REAL",
    ColumnType.DECIMAL: "NUMERIC",
    ColumnType.BOOLEAN: "INTEGER",
    ColumnType.DATE_TEXT: "TEXT",
    ColumnType.DATE_TIMESTAMP: "INTEGER",
}


class ColumnDeclaration(BaseModel):
    """Placeholder assigned in a Table class body; replaced by a Column when the class is built."""

    model_config = ConfigDict(frozen=True)

    key: Optional[str] = None
    """Physical column name; defaults to the attribute name."""
    primary_key: bool = False
    type: Optional[ColumnType] = None
    """Explicit type; overrides inference from the annotation."""


def column(key: Optional[str] = None, *, primary_key: bool = False,
           type: Optional[ColumnType] = None) -> Any:  # pylint: disable=redefined-builtin
    """Declare a column with options, e.g. ``id: int = column(primary_key=True)``."""
    return ColumnDeclaration(key=key, primary_key=primary_key, type=type)


class Column(BaseModel):
    """A single column of a table: physical key, semantic type and owning table.

    Stored in MyTable._columns["name"] and exposed as ``MyTable.name``.
    """

    model_config = ConfigDict(frozen=True)

    table: Any  # type["Table"] - avoids circular import
    name: str
    """Attribute name on the Table class."""
    key: str
    """Physical name in SQL (prefixed with ``tablename_`` when the table uses prefixes)."""
    type: ColumnType

    @property
    def key_with_table_alias(self) -> str:
        """Key qualified with the owning table's alias (e.g. ``w.level``)."""
        return f"{self.table.alias()}.{self.key}"

    @property
    def asc(self):
        """Order by this column ascending (for use in ``order_by(...)``)."""
        from .expressions.order import OrderByColumn, OrderDirection
        return OrderByColumn(column=self, direction=OrderDirection.ASC)

    @property
    def desc(self):
        """Order by this column descending (for use in ``order_by(...)``)."""
        from .expressions.order import OrderByColumn, OrderDirection
        return OrderByColumn(column=self, direction=OrderDirection.DESC)

    def __hash__(self) -> int:
        return hash((self.table, self.key))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Column):
            return NotImplemented
        return self.table is other.table and self.key == other.key

    def __repr__(self) -> str:
        return f"Column({self.table.get_table_name()}.{self.key}, {self.type.name})"


__all__ = ["Column", "ColumnDeclaration", "ColumnType", "column"]

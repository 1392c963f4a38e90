"""Table base class: schema metadata and statement shortcuts."""

from typing import Any, Callable, Optional, TYPE_CHECKING

from ..column import Column
from ..dialects import Dialect
from .meta import TableMeta

if TYPE_CHECKING:
    from ..query import Delete, Insert, Select, Update


class Table(metaclass=TableMeta):
    """Base class for table declarations.

    Subclass it and annotate one attribute per column::

        class Wizards(Table, table_name="wizards"):
            id: int = column(primary_key=True)
            name: str
            power_level: float = column(type=ColumnType.FLOAT)

    Tables are schema objects: they are used as classes, never instantiated.
    Each annotated attribute becomes a Column (``Wizards.name``).
    """

    # metadata

    @classmethod
    def get_table_name(cls) -> str:
        return cls._table_name

    @classmethod
    def alias(cls) -> str:
        """Alias used in SELECT statements (``wizard_spells`` -> ``ws`` by default)."""
        return cls._alias

    @classmethod
    def get_dialect(cls) -> Dialect:
        return cls._dialect

    @classmethod
    def columns_list(cls) -> list[Column]:
        """All columns, in declaration order."""
        return list(cls._columns.values())

    @classmethod
    def get_column(cls, name: str) -> Column:
        """Return a column by attribute name or physical key."""
        if name in cls._columns:
            return cls._columns[name]
        for col in cls._columns.values():
            if col.key == name:
                return col
        raise KeyError(f"Table {cls._table_name} has no column `{name}`")

    @classmethod
    def primary_key(cls) -> Column:
        """Return the primary key column; raises ValueError when none was declared."""
        if cls._primary_key is None:
            raise ValueError(f"Table {cls._table_name} does not have a primary key")
        return cls._primary_key

    @classmethod
    def has_primary_key(cls) -> bool:
        return cls._primary_key is not None

    # statement shortcuts

    @classmethod
    def select(cls, *columns: Column) -> "Select":
        from ..query import Select
        return Select(cls).select(*columns)

    @classmethod
    def select_all(cls, *except_: Column) -> "Select":
        from ..query import Select
        return Select(cls).select_all(*except_)

    @classmethod
    def select_primary(cls, value: Any, *columns: Column) -> "Select":
        from ..query import Select
        return Select(cls).select_primary(value, *columns)

    @classmethod
    def insert(cls, block: Callable[["Insert"], Any]) -> "Insert":
        from ..query import Insert
        return Insert(cls).insert(block)

    @classmethod
    def update(cls, block: Callable[["Update"], Any]) -> "Update":
        from ..query import Update
        return Update(cls).update(block)

    @classmethod
    def update_primary(cls, value: Any, block: Callable[["Update"], Any]) -> "Update":
        from ..query import Update
        return Update(cls).update_primary(value, block)

    @classmethod
    def delete_where(cls, block: Optional[Callable] = None) -> "Delete":
        from ..query import Delete
        return Delete(cls).delete_where(block)

    @classmethod
    def delete_primary(cls, value: Any) -> "Delete":
        from ..query import Delete
        return Delete(cls).delete_primary(value)

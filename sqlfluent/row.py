"""Row: one result row, readable by column name or position."""

from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


_CONVERTERS = {
    int: int,
    float: float,
    str: str,
    bool: lambda value: bool(int(value)),
    Decimal: lambda value: Decimal(str(value)),
}


class Row(BaseModel):
    """A fetched row: ``row["name"]``, ``row[0]`` or ``row.get("level", int)``."""

    model_config = ConfigDict(frozen=True)

    names: tuple[str, ...]
    values: tuple[Any, ...]

    @classmethod
    def from_cursor(cls, cursor, values) -> "Row":
        return cls(names=tuple(description[0] for description in cursor.description), values=tuple(values))

    def _index(self, key: str | int) -> int:
        if isinstance(key, int):
            if not -len(self.values) <= key < len(self.values):
                raise IndexError(f"Row has {len(self.values)} columns, no column {key}")
            return key
        try:
            return self.names.index(key)
        except ValueError as error:
            raise KeyError(f"Row has no column `{key}`") from error

    def __getitem__(self, key: str | int) -> Any:
        return self.values[self._index(key)]

    def __len__(self) -> int:
        return len(self.values)

    def get(self, key: str | int, type_: Optional[type] = None) -> Any:
        """Return the value, converted to ``type_`` (int, float, str, bool or Decimal) when given.

        NULL is returned as None whatever the type.
        """
        value = self[key]
        if value is None or type_ is None:
            return value
        try:
            converter = _CONVERTERS[type_]
        except KeyError as error:
            raise TypeError(f"Unsupported type: {type_}") from error
        return converter(value)

    def as_dict(self) -> dict[str, Any]:
        return dict(zip(self.names, self.values))

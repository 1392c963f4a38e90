"""Map a Python annotation to a ColumnType."""

import datetime
import decimal
import types
import typing

from ..column import ColumnType

_TRANSLATE_TYPE: dict[type, ColumnType] = {
    bool: ColumnType.BOOLEAN,
    int: ColumnType.INT,
    float: ColumnType.DOUBLE,
    str: ColumnType.STRING,
    decimal.Decimal: ColumnType.DECIMAL,
    datetime.datetime: ColumnType.DATE_TEXT,
    datetime.date: ColumnType.DATE_TEXT,
}


def unwrap_optional(annotation):
    """Return X for ``Optional[X]`` / ``X | None``; other annotations are returned unchanged."""
    if typing.get_origin(annotation) in (typing.Union, types.UnionType):
        arguments = [a for a in typing.get_args(annotation) if a is not type(None)]
        if len(arguments) == 1:
            return arguments[0]
    return annotation


def resolve_column_type(annotation) -> ColumnType:
    """Infer the ColumnType of an annotation; raise TypeError when it has no SQL counterpart."""
    base_type = unwrap_optional(annotation)
    try:
        return _TRANSLATE_TYPE[base_type]
    except (KeyError, TypeError) as error:
        raise TypeError(f"Type `{annotation}` has no known conversion to SQL type") from error

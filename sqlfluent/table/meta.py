"""Metaclass for Table: reads column annotations and sets Column instances on the class."""

import typing

from ..column import Column, ColumnDeclaration
from ..dialects import Dialect, SqliteDialect
from ..utils.acronym import acronym
from ..utils.resolve_column_type import resolve_column_type


class TableMeta(type):
    """Metaclass for Table: turns annotated attributes into Column instances.

    Class keywords:
        table_name: physical table name (default: class name lower-cased)
        alias: table alias used in SELECT statements (default: acronym of table_name)
        use_prefix: prefix every column key with ``<table_name>_``
        dialect: Dialect used to render statements (default: SqliteDialect())
    """

    def __new__(mcs, name, bases, namespace,
                table_name: str = None,
                alias: str = None,
                use_prefix: bool = False,
                dialect: Dialect = None,
                **kwargs):
        result = super().__new__(mcs, name, bases, namespace, **kwargs)
        # the Table base class itself declares no columns
        if not any(isinstance(base, TableMeta) for base in bases):
            result._reserved = frozenset(attr for attr in dir(result) if not attr.startswith("_"))
            result._declarations = {}
            result._columns = {}
            return result

        result._table_name = table_name or name.lower()
        result._alias = alias or acronym(result._table_name)
        result._use_prefix = use_prefix
        result._dialect = dialect or SqliteDialect()

        declarations: dict[str, ColumnDeclaration] = {}
        for base in reversed(bases):
            declarations.update(getattr(base, "_declarations", {}))
        hints = typing.get_type_hints(result)
        for attr, annotation in hints.items():
            if attr.startswith("_") or typing.get_origin(annotation) is typing.ClassVar:
                continue
            value = namespace.get(attr, declarations.get(attr, ColumnDeclaration()))
            if not isinstance(value, ColumnDeclaration):
                raise TypeError(
                    f"`{name}.{attr}` must be declared with column(...), got {value!r}"
                )
            declarations[attr] = value
        result._declarations = {attr: declarations[attr] for attr in hints if attr in declarations}

        result._columns = {}
        primary_key = None
        for attr, declaration in result._declarations.items():
            if attr in result._reserved:
                raise ValueError(f"Column name `{attr}` on {name} collides with the Table API")
            key = declaration.key or attr
            if use_prefix:
                key = f"{result._table_name}_{key}"
            column_type = declaration.type or resolve_column_type(hints[attr])
            col = Column(table=result, name=attr, key=key, type=column_type)
            if declaration.primary_key:
                if primary_key is not None:
                    raise ValueError(
                        f"Table {result._table_name} declares more than one primary key "
                        f"({primary_key.name}, {attr})"
                    )
                primary_key = col
            result._columns[attr] = col
            setattr(result, attr, col)
        result._primary_key = primary_key
        return result

    def __init__(cls, name, bases, namespace, **kwargs):
        super().__init__(name, bases, namespace)

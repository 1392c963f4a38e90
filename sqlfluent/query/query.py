"""Query: a rendered SQL statement and its positional arguments."""

from typing import Any

from pydantic import BaseModel, ConfigDict

from ..expressions import SqlFragment


class Query(BaseModel):
    """SQL text with ``?`` placeholders and the arguments bound to them.

    List arguments are flattened one level, so a list passed for an ``IN (?, ?)``
    clause binds one value per placeholder::

        Query("SELECT * FROM wizards WHERE id IN (?, ?)", [1, 2]).args == (1, 2)

    Two queries are equal when their SQL and arguments are equal.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    sql: str
    args: tuple[Any, ...] = ()

    def __init__(self, sql: str, *args: Any):
        flattened = []
        for arg in args:
            if isinstance(arg, list):
                flattened.extend(arg)
            else:
                flattened.append(arg)
        super().__init__(sql=sql, args=tuple(flattened))

    @classmethod
    def from_fragment(cls, fragment: SqlFragment) -> "Query":
        """Build a query from a rendered fragment; arguments are kept as-is."""
        return cls.model_construct(sql=fragment.sql, args=tuple(fragment.args))

    def sql_args(self) -> tuple[str, tuple[Any, ...]]:
        return self.sql, self.args

    def __str__(self) -> str:
        return f"[SQL = {self.sql}] [ARGS = {list(self.args)}]"

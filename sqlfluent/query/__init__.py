"""Statement builders and the rendered Query value."""

from .query import Query
from .where import NullableWhere, Where
from .join import Join
from .select import Select
from .insert import Insert
from .update import Update
from .delete import Delete

__all__ = [
    "Delete",
    "Insert",
    "Join",
    "NullableWhere",
    "Query",
    "Select",
    "Update",
    "Where",
]

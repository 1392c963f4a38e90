"""SQL expression tree: immutable nodes rendered by a Dialect into SqlFragments."""

from ._bases import Expression, SelectClauseExpression, SqlFragment, WhereExpression
from .delete import DeleteQueryExpression
from .insert import InsertValuesExpression
from .join import JoinCondition, JoinContext, JoinType, TableJoinExpression
from .order import OrderByColumn, OrderByExpression, OrderDirection
from .pagination import LimitExpression, OffsetExpression
from .predicates import (
    BetweenExpression,
    ComparisonExpression,
    ComparisonOperator,
    ExistsExpression,
    GroupExpression,
    InListExpression,
    LogicalExpression,
    LogicalOperator,
)
from .select import (
    ColumnsSelectExpression,
    CountSelectExpression,
    ExistsSelectExpression,
    SelectOneExpression,
    SelectQueryExpression,
)
from .update import Assignment, SetExpression, UpdateQueryExpression

__all__ = [
    "Assignment",
    "BetweenExpression",
    "ColumnsSelectExpression",
    "ComparisonExpression",
    "ComparisonOperator",
    "CountSelectExpression",
    "DeleteQueryExpression",
    "ExistsExpression",
    "ExistsSelectExpression",
    "Expression",
    "GroupExpression",
    "InListExpression",
    "InsertValuesExpression",
    "JoinCondition",
    "JoinContext",
    "JoinType",
    "LimitExpression",
    "LogicalExpression",
    "LogicalOperator",
    "OffsetExpression",
    "OrderByColumn",
    "OrderByExpression",
    "OrderDirection",
    "SelectClauseExpression",
    "SelectOneExpression",
    "SelectQueryExpression",
    "SetExpression",
    "SqlFragment",
    "TableJoinExpression",
    "UpdateQueryExpression",
    "WhereExpression",
]

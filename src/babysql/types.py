"""Value types shared by the statement builder"""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Iterator, Literal, Union


Primitive = Union[str, int, float, Decimal, bool, date, datetime, None]

WhereOperator = Literal[
    "=", "!=", "<>", ">", ">=", "<", "<=", "LIKE", "NOT LIKE", "IS", "IS NOT"
]


class StatementKind(str, Enum):
    """SQL operation a builder renders"""

    SELECT = "select"
    COUNT = "count"
    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"


class Connector(str, Enum):
    """How a predicate joins the one before it"""

    AND = "AND"
    OR = "OR"


class OrderDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class LikeMode(str, Enum):
    """Which side(s) of a LIKE value get a wildcard"""

    BOTH = "both"
    LEFT = "left"
    RIGHT = "right"


def sql_text(value: Any) -> str:
    """Plain text of an enum member or string, for splicing into SQL"""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


@dataclass(frozen=True)
class Predicate:
    """One WHERE condition with its bindings and its connector to the previous one"""

    sql: str
    params: tuple[Primitive, ...] = ()
    connector: str = Connector.AND.value


@dataclass(frozen=True)
class OrderTerm:
    column: str
    direction: str = OrderDirection.ASC.value

    def __str__(self) -> str:
        return f"{self.column} {self.direction}"


@dataclass(frozen=True)
class BuiltStatement:
    """Rendered SQL with one positional ``?`` per entry in ``params``

    Unpacks like a pair so it can be fed straight to a DB-API cursor:

        >>> sql, params = select("users").where("id", "=", 1).render()
        >>> cursor.execute(sql, params)
    """

    sql: str
    params: list[Primitive] = field(default_factory=list)

    @property
    def placeholder_count(self) -> int:
        """Number of ``?`` placeholders in the SQL text"""
        return self.sql.count("?")

    def as_tuple(self) -> tuple[str, tuple[Primitive, ...]]:
        """Get both SQL and bindings as a tuple"""
        return self.sql, tuple(self.params)

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def __iter__(self) -> Iterator[Any]:
        yield self.sql
        yield list(self.params)

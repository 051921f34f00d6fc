"""Fluent builder that renders parameterized SQL statements

A builder accumulates clause configuration through chained calls and
renders it into SQL text with positional ``?`` placeholders plus the
matching list of bindings. Nothing is validated or executed; the two
safety checks (missing payload, unconditioned UPDATE/DELETE) happen at
render time only.

Example:
    >>> from babysql import select
    >>> stmt = (
    ...     select("users")
    ...     .columns(["id", "name"])
    ...     .where("status", "=", "active")
    ...     .order_by("id", "DESC")
    ...     .limit(20)
    ...     .render()
    ... )
    >>> stmt.sql
    'SELECT id, name FROM users WHERE status = ? ORDER BY id DESC LIMIT ?'
    >>> stmt.params
    ['active', 20]
"""

import logging
import math
import warnings
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from babysql.config import BuilderSettings
from babysql.exceptions import MissingPayloadError, UnsafeStatementError
from babysql.types import (
    BuiltStatement,
    Connector,
    LikeMode,
    OrderDirection,
    OrderTerm,
    Predicate,
    Primitive,
    StatementKind,
    WhereOperator,
    sql_text,
)

logger = logging.getLogger(__name__)

ConnectorLike = Union[Connector, str]


def _clamp(n: Union[int, float], floor: int) -> int:
    """Truncate toward zero and raise to floor; NaN and infinities count as 0"""
    value = int(n) if math.isfinite(n) else 0
    return max(floor, value)


class _Clauses:
    """SQL parts joined by single spaces, with bindings collected alongside"""

    def __init__(self, base: str, *values: Primitive):
        self._parts: list[str] = [base]
        self._bindings: list[Primitive] = list(values)

    def when(self, condition: Any, template: str, *values: Primitive) -> "_Clauses":
        """Add a clause and bind its values when condition is truthy"""
        if condition:
            self._parts.append(template)
            self._bindings.extend(values)
        return self

    def sql(self) -> str:
        return " ".join(self._parts)

    def bindings(self) -> list[Primitive]:
        return list(self._bindings)


class StatementBuilder:
    """Accumulates clauses for one statement kind against one table"""

    def __init__(
        self,
        kind: Union[StatementKind, str],
        table: str,
        settings: Optional[BuilderSettings] = None,
    ):
        if settings is None:
            settings = BuilderSettings.from_env()

        self._kind = StatementKind(kind)
        self._table = table
        self._settings = settings

        self._columns: list[str] = []
        self._data: Optional[dict[str, Primitive]] = None
        self._wheres: list[Predicate] = []
        self._order: list[OrderTerm] = []
        self._limit: Optional[int] = None
        self._offset: Optional[int] = None

        self._count_column = settings.count_column
        self._count_alias = settings.count_alias

        self._allow_unsafe = False
        self._debug = settings.debug

    @property
    def kind(self) -> StatementKind:
        return self._kind

    @property
    def table(self) -> str:
        return self._table

    # -- payload and projection ------------------------------------------

    def data(self, values: Mapping[str, Primitive]) -> "StatementBuilder":
        """Column values for INSERT/UPDATE; key order fixes column and binding order"""
        self._data = dict(values)
        return self

    def columns(self, cols: Union[str, Iterable[str]]) -> "StatementBuilder":
        """Columns for SELECT; empty means ``*``"""
        if isinstance(cols, str):
            self._columns = [cols]
        else:
            self._columns = list(cols)
        return self

    def count_column(self, column: str = "*", alias: str = "total") -> "StatementBuilder":
        """Projection for COUNT: ``COUNT(<column>) AS <alias>``"""
        self._count_column = column
        self._count_alias = alias
        return self

    # -- predicates ------------------------------------------------------

    def _add_where(
        self, sql: str, params: Sequence[Primitive], connector: ConnectorLike
    ) -> "StatementBuilder":
        self._wheres.append(
            Predicate(sql=sql, params=tuple(params), connector=sql_text(connector))
        )
        return self

    def where(
        self,
        column: str,
        op: Union[WhereOperator, str],
        value: Primitive,
        connector: ConnectorLike = Connector.AND,
    ) -> "StatementBuilder":
        """Add ``<column> <op> ?`` bound to value"""
        return self._add_where(f"{column} {op} ?", [value], connector)

    def where_like(
        self,
        column: str,
        value: str,
        mode: Union[LikeMode, str] = LikeMode.BOTH,
        connector: ConnectorLike = Connector.AND,
    ) -> "StatementBuilder":
        """Add ``<column> LIKE ?`` with value wrapped in ``%`` per mode

        ``both`` gives ``%value%``, ``left`` gives ``%value``, ``right``
        gives ``value%``.
        """
        mode = sql_text(mode)
        if mode == LikeMode.BOTH.value:
            value = f"%{value}%"
        elif mode == LikeMode.LEFT.value:
            value = f"%{value}"
        elif mode == LikeMode.RIGHT.value:
            value = f"{value}%"
        return self._add_where(f"{column} LIKE ?", [value], connector)

    def where_in(
        self,
        column: str,
        values: Iterable[Primitive],
        connector: ConnectorLike = Connector.AND,
    ) -> "StatementBuilder":
        """Add ``<column> IN (?, ...)``; an empty list becomes ``1=0``"""
        values = list(values)
        if not values:
            return self._add_where("1=0", [], connector)
        placeholders = ", ".join("?" for _ in values)
        return self._add_where(f"{column} IN ({placeholders})", values, connector)

    def where_raw(
        self,
        sql: str,
        params: Optional[Sequence[Primitive]] = None,
        connector: ConnectorLike = Connector.AND,
    ) -> "StatementBuilder":
        """Add a parenthesized raw condition; the caller aligns ``?`` with params"""
        return self._add_where(f"({sql})", list(params or []), connector)

    # -- ordering and paging ---------------------------------------------

    def order_by(
        self, column: str, direction: Union[OrderDirection, str] = OrderDirection.ASC
    ) -> "StatementBuilder":
        """Append an ORDER BY term (SELECT only)"""
        self._order.append(OrderTerm(column=column, direction=sql_text(direction)))
        return self

    def limit(self, n: Union[int, float]) -> "StatementBuilder":
        self._limit = _clamp(n, 0)
        return self

    def offset(self, n: Union[int, float]) -> "StatementBuilder":
        self._offset = _clamp(n, 0)
        return self

    def paginate(self, page: Union[int, float], page_size: Union[int, float]) -> "StatementBuilder":
        """Set LIMIT/OFFSET for a 1-based page number"""
        page = _clamp(page, 1)
        size = _clamp(page_size, 1)
        self._limit = size
        self._offset = (page - 1) * size
        return self

    # -- flags -----------------------------------------------------------

    def allow_unsafe(self) -> "StatementBuilder":
        """Permit UPDATE/DELETE without a WHERE clause"""
        self._allow_unsafe = True
        return self

    def debug(self, enabled: bool = True) -> "StatementBuilder":
        """Log the rendered SQL and params on every render

        Records go to the ``babysql.builder`` logger at INFO, so they only
        show once logging is configured at INFO for that logger, e.g.
        ``logging.basicConfig(level=logging.INFO)``.
        """
        self._debug = enabled
        return self

    # -- rendering -------------------------------------------------------

    def _check_safe(self) -> None:
        if not self._wheres and not self._allow_unsafe:
            raise UnsafeStatementError(self._kind.value, self._table)

    def _head(self) -> _Clauses:
        kind = self._kind

        if kind is StatementKind.SELECT:
            cols = ", ".join(self._columns) if self._columns else "*"
            return _Clauses(f"SELECT {cols} FROM {self._table}")

        if kind is StatementKind.COUNT:
            return _Clauses(
                f"SELECT COUNT({self._count_column}) AS {self._count_alias} "
                f"FROM {self._table}"
            )

        if kind is StatementKind.INSERT:
            if self._data is None:
                raise MissingPayloadError(kind.value, self._table)
            keys = list(self._data)
            placeholders = ", ".join("?" for _ in keys)
            return _Clauses(
                f"INSERT INTO {self._table} ({', '.join(keys)}) VALUES ({placeholders})",
                *(self._data[k] for k in keys),
            )

        if kind is StatementKind.UPDATE:
            if self._data is None:
                raise MissingPayloadError(kind.value, self._table)
            self._check_safe()
            keys = list(self._data)
            sets = ", ".join(f"{k} = ?" for k in keys)
            return _Clauses(
                f"UPDATE {self._table} SET {sets}",
                *(self._data[k] for k in keys),
            )

        self._check_safe()
        return _Clauses(f"DELETE FROM {self._table}")

    def _where_sql(self) -> str:
        parts = [self._wheres[0].sql]
        parts.extend(f"{w.connector} {w.sql}" for w in self._wheres[1:])
        return " ".join(parts)

    def render(self) -> BuiltStatement:
        """Render the SQL text and its bindings

        Does not change the builder: rendering twice without mutation gives
        equal results, and further chained calls affect later renders.

        Raises:
            MissingPayloadError: INSERT/UPDATE without data()
            UnsafeStatementError: UPDATE/DELETE without predicates or allow_unsafe()
        """
        kind = self._kind
        query = self._head()

        if kind is not StatementKind.INSERT:
            if self._wheres:
                where_params = [p for w in self._wheres for p in w.params]
                query.when(True, f"WHERE {self._where_sql()}", *where_params)

            query.when(
                self._order and kind is StatementKind.SELECT,
                "ORDER BY " + ", ".join(str(o) for o in self._order),
            )

            if kind is not StatementKind.COUNT:
                query.when(self._limit is not None, "LIMIT ?", self._limit)
                query.when(self._offset is not None, "OFFSET ?", self._offset)

                if self._limit is None and self._offset is not None and self._settings.warn_bare_offset:
                    warnings.warn(
                        f"{kind.value.upper()} on '{self._table}' has OFFSET without LIMIT; "
                        "many database engines reject this.",
                        UserWarning,
                        stacklevel=2,
                    )

        stmt = BuiltStatement(sql=query.sql(), params=query.bindings())

        if self._debug:
            logger.info("[babysql] SQL: %s", stmt.sql)
            logger.info("[babysql] PARAMS: %r", stmt.params)

        return stmt

    def __repr__(self) -> str:
        return (
            f"StatementBuilder(kind='{self._kind.value}', table='{self._table}', "
            f"wheres={len(self._wheres)}, order={len(self._order)})"
        )

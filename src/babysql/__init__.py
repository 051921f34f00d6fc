"""
babysql - fluent builder for parameterized SQL statements

Code is organized in layers
- types and exceptions describe statements and render failures
- builder renders one statement into (sql, params)
- factory is the entry point, one function per statement kind
- config loads builder defaults from TOML profiles

Nothing here executes SQL; pass the rendered pair to a qmark DB-API driver.
"""

# Layer 1: Configuration
from babysql.config import BuilderSettings, load_profile, list_profiles, load_settings

# Layer 2: Types and errors
from babysql.types import (
    BuiltStatement,
    Connector,
    LikeMode,
    OrderDirection,
    Primitive,
    StatementKind,
)
from babysql.exceptions import BabySQLError, MissingPayloadError, UnsafeStatementError

# Layer 3: Builder and factory
from babysql.builder import StatementBuilder
from babysql.factory import StatementFactory, select, count, insert, update, delete

__version__ = "0.1.0"
__all__ = [
    # Layer 1: Configuration
    "BuilderSettings",
    "load_profile",
    "list_profiles",
    "load_settings",
    # Layer 2: Types and errors
    "BuiltStatement",
    "Connector",
    "LikeMode",
    "OrderDirection",
    "Primitive",
    "StatementKind",
    "BabySQLError",
    "MissingPayloadError",
    "UnsafeStatementError",
    # Layer 3: Builder and factory
    "StatementBuilder",
    "StatementFactory",
    "select",
    "count",
    "insert",
    "update",
    "delete",
]

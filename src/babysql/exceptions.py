"""Errors raised when a statement cannot be rendered"""


class BabySQLError(Exception):
    """Base class for babysql errors"""


class MissingPayloadError(BabySQLError, ValueError):
    """INSERT or UPDATE rendered before any data was supplied"""

    def __init__(self, kind: str, table: str):
        self.kind = kind
        self.table = table
        super().__init__(
            f"{kind.upper()} on '{table}' has no data. "
            "Call .data({...}) before rendering."
        )


class UnsafeStatementError(BabySQLError, RuntimeError):
    """UPDATE or DELETE without a WHERE clause that was not explicitly allowed"""

    def __init__(self, kind: str, table: str):
        self.kind = kind
        self.table = table
        super().__init__(
            f"Unsafe {kind.upper()} on '{table}': no WHERE clause, so every row "
            "would be affected. Add a predicate, or call .allow_unsafe() to "
            "permit a full-table operation."
        )

"""Exceptions raised by the database layer and statement builders."""

from typing import Any, Optional


class DatabaseException(Exception):
    """Raised when the database fails to run a statement."""

    def __init__(self, message: str, sql: Optional[str] = None, values: Any = None):
        self.sql = sql
        self.values = values
        super().__init__(message)


class DatabaseStatementException(DatabaseException):
    """Raised when a statement is built or used incorrectly."""

    def __init__(self, message: str, statement=None):
        self.statement = statement
        sql = None
        values = None
        if statement is not None:
            sql = statement.generate_sql()
            values = statement.get_values()
        super().__init__(message, sql=sql, values=values)

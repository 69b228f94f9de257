"""Core database and statement components."""

from .database import Database
from .exceptions import DatabaseException, DatabaseStatementException
from .models import DatabaseConfig, PlaceholderStyle, StatementResult
from .statements import DatabaseStatement, DatabaseInsert

__all__ = [
    "Database",
    "DatabaseException",
    "DatabaseStatementException",
    "DatabaseConfig",
    "PlaceholderStyle",
    "StatementResult",
    "DatabaseStatement",
    "DatabaseInsert"
]

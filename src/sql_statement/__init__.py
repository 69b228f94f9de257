"""SQL Statement Builder - INSERT statement construction over DB-API connections."""

from .core.database import Database
from .core.exceptions import DatabaseException, DatabaseStatementException
from .core.models import DatabaseConfig, PlaceholderStyle, StatementResult
from .core.statements import DatabaseInsert

__version__ = "1.0.0"
__all__ = [
    "Database",
    "DatabaseException",
    "DatabaseStatementException",
    "DatabaseConfig",
    "PlaceholderStyle",
    "StatementResult",
    "DatabaseInsert"
]

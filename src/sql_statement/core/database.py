"""Database facade creating and running statements."""

import re
from typing import Optional

from .exceptions import DatabaseException, DatabaseStatementException
from .models import DatabaseConfig, StatementResult
from .statements import DatabaseInsert
from ..utils.sqlglot_helpers import quote_identifier, check_sql_syntax
from ..utils.logging_config import get_logger

DEFAULT_TABLE_PREFIX = 'tbl_'
TABLE_PREFIX_PATTERN = re.compile(r'\btbl_(\S+?)([\s.,]|$)')


class Database:
    """
    Entry point for building statements against a DB-API 2.0 connection.

    The connection is optional: statements can be built and rendered
    without one, only `execute()` needs it.
    """

    def __init__(self, connection=None, config: Optional[DatabaseConfig] = None, **settings):
        """
        Initialize the database.

        Args:
            connection: DB-API 2.0 connection (optional)
            config: Database configuration; built from `settings` when omitted
            **settings: DatabaseConfig fields
        """
        self.logger = get_logger('database')
        self.connection = connection
        self.config = config or DatabaseConfig(**settings)
        self._last_insert_id: Optional[int] = None
        self.logger.debug(f"Database initialized with prefix: {self.prefix}, dialect: {self.config.dialect}, "
                          f"placeholders: {self.config.placeholder_style.value}")

    @property
    def prefix(self) -> str:
        return self.config.table_prefix

    def is_connected(self) -> bool:
        return self.connection is not None

    def replace_table_prefix(self, sql: str) -> str:
        """Rewrite tbl_ table names to use the configured table prefix."""
        if self.prefix == DEFAULT_TABLE_PREFIX:
            return sql
        return TABLE_PREFIX_PATTERN.sub(lambda m: f"{self.prefix}{m.group(1)}{m.group(2)}", sql)

    def quote_identifier(self, name: str) -> str:
        return quote_identifier(name, self.config.dialect)

    def insert(self, table: str) -> DatabaseInsert:
        """Create an INSERT statement on `table`."""
        return DatabaseInsert(self, table)

    def get_last_insert_id(self) -> Optional[int]:
        return self._last_insert_id

    def execute(self, statement) -> StatementResult:
        """
        Execute a statement on the connection.

        Args:
            statement: DatabaseStatement to run

        Returns:
            StatementResult with the row count and last insert id

        Raises:
            DatabaseStatementException: If the statement is incomplete or does not parse
            DatabaseException: If there is no connection or the driver fails
        """
        if not self.is_connected():
            raise DatabaseException("No database connection available")

        statement.finalize()
        statement.validate()
        sql = statement.generate_sql()
        values = statement.get_values()

        if self.config.validate_sql:
            syntax_error = check_sql_syntax(sql, self.config.dialect)
            if syntax_error:
                raise DatabaseStatementException(syntax_error, statement)

        self.logger.info(f"Executing: {sql}")
        cursor = None
        try:
            cursor = self.connection.cursor()
            cursor.execute(sql, values)
            insert_id = getattr(cursor, 'lastrowid', None)
            result = StatementResult(
                sql=sql,
                values=values,
                success=True,
                row_count=cursor.rowcount,
                insert_id=insert_id
            )
        except Exception as e:
            self.logger.error(f"Statement execution failed: {str(e)}", exc_info=True)
            raise DatabaseException(f"Failed to execute statement: {e}", sql=sql, values=values) from e
        finally:
            if cursor is not None:
                cursor.close()

        if insert_id:
            self._last_insert_id = insert_id
        self.logger.debug(f"Statement affected {result.row_count} rows")
        return result

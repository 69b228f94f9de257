"""SQLGlot helper functions for dialect-aware SQL rendering and checks."""

from typing import Optional
import sqlglot
import sqlglot.expressions as exp
from sqlglot.errors import ParseError

from .logging_config import get_logger

logger = get_logger('utils.sqlglot')


def quote_identifier(name: str, dialect: str = "mysql") -> str:
    """Quote a single identifier with the dialect's quote character."""
    return exp.to_identifier(name, quoted=True).sql(dialect=dialect)


def check_sql_syntax(sql: str, dialect: str = "mysql") -> Optional[str]:
    """
    Parse SQL to make sure the dialect accepts it.

    `%s` placeholders are read as `?` since sqlglot has no format paramstyle.

    Args:
        sql: SQL string to check
        dialect: SQL dialect used for parsing

    Returns:
        Error message if the SQL does not parse, None if it does
    """
    try:
        sqlglot.parse_one(sql.replace('%s', '?'), read=dialect)
    except ParseError as e:
        logger.debug(f"SQL failed to parse with dialect {dialect}: {e}")
        return f"Invalid SQL for dialect {dialect}: {e}"
    return None

"""Data models for statement building and execution."""

import os
from typing import Dict, List, Optional, Any, Union
from dataclasses import dataclass, field
from enum import Enum

from ..utils.validation import validate_dialect, validate_placeholder_style, validate_table_prefix


class PlaceholderStyle(str, Enum):
    """Placeholder style enumeration, named after DB-API paramstyles."""
    QMARK = "qmark"
    FORMAT = "format"
    NAMED = "named"


@dataclass
class DatabaseConfig:
    """Settings shared by a database and the statements it creates."""
    table_prefix: str = "tbl_"
    dialect: str = "mysql"
    placeholder_style: PlaceholderStyle = PlaceholderStyle.QMARK
    validate_sql: bool = False

    def __post_init__(self):
        for error in (
            validate_table_prefix(self.table_prefix),
            validate_dialect(self.dialect),
            validate_placeholder_style(self.placeholder_style),
        ):
            if error:
                raise ValueError(error)
        self.dialect = self.dialect.lower()
        self.placeholder_style = PlaceholderStyle(self.placeholder_style)

    @classmethod
    def from_env(cls, **overrides) -> "DatabaseConfig":
        """
        Build a configuration from SQL_STATEMENT_* environment variables.

        Args:
            **overrides: Explicit values taking precedence over the environment

        Returns:
            DatabaseConfig instance
        """
        settings = {
            'table_prefix': os.getenv('SQL_STATEMENT_TABLE_PREFIX', 'tbl_'),
            'dialect': os.getenv('SQL_STATEMENT_DIALECT', 'mysql'),
            'placeholder_style': os.getenv('SQL_STATEMENT_PLACEHOLDER_STYLE', 'qmark'),
            'validate_sql': os.getenv('SQL_STATEMENT_VALIDATE_SQL', 'false').lower() in ('1', 'true', 'yes', 'on'),
        }
        settings.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**settings)


@dataclass
class StatementResult:
    """Outcome of running a statement."""
    sql: str
    values: Union[List[Any], Dict[str, Any]] = field(default_factory=list)
    success: bool = True
    row_count: int = -1
    insert_id: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "sql": self.sql,
            "values": self.values,
            "success": self.success,
            "row_count": self.row_count,
            "insert_id": self.insert_id,
        }

"""Logging setup for the statement builder.

Every module logs under the `sql_statement` namespace. Level, format and an
optional rotating log file come from arguments or SQL_STATEMENT_LOG_* variables.
"""

import logging
import logging.config
import os
from pathlib import Path
from typing import Any, Dict, Optional

LOG_NAMESPACE = 'sql_statement'
DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'


def build_logging_config(
    level: str,
    format_string: str,
    log_file: Optional[str] = None,
    enable_console: bool = True,
    max_file_size: int = 10 * 1024 * 1024,
    backup_count: int = 5
) -> Dict[str, Any]:
    """Build the dictConfig mapping for the namespace logger."""
    handlers: Dict[str, Dict[str, Any]] = {}
    if enable_console:
        # stdout is left to command output
        handlers['console'] = {
            'class': 'logging.StreamHandler',
            'formatter': 'standard',
            'stream': 'ext://sys.stderr'
        }
    if log_file:
        handlers['file'] = {
            'class': 'logging.handlers.RotatingFileHandler',
            'formatter': 'file',
            'filename': log_file,
            'maxBytes': max_file_size,
            'backupCount': backup_count,
            'encoding': 'utf8'
        }

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'standard': {'format': format_string, 'datefmt': '%Y-%m-%d %H:%M:%S'},
            'file': {'format': FILE_FORMAT, 'datefmt': '%Y-%m-%d %H:%M:%S'}
        },
        'handlers': handlers,
        'loggers': {
            LOG_NAMESPACE: {
                'level': level,
                'handlers': list(handlers),
                'propagate': False
            }
        }
    }


class SQLStatementLogger:
    """Configures the namespace logger once and hands out child loggers."""

    _configured = False

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        if not cls._configured:
            cls.setup_logging()
        return logging.getLogger(f"{LOG_NAMESPACE}.{name}")

    @classmethod
    def setup_logging(
        cls,
        level: Optional[str] = None,
        log_file: Optional[str] = None,
        format_string: Optional[str] = None,
        enable_console: bool = True
    ):
        """
        Configure logging for the statement builder.

        Args:
            level: Log level name, defaults to $SQL_STATEMENT_LOG_LEVEL or WARNING
            log_file: Rotating log file path, defaults to $SQL_STATEMENT_LOG_FILE
            format_string: Console format, defaults to $SQL_STATEMENT_LOG_FORMAT
            enable_console: Whether to log to stderr
        """
        level = (level or os.getenv('SQL_STATEMENT_LOG_LEVEL', 'WARNING')).upper()
        log_file = log_file or os.getenv('SQL_STATEMENT_LOG_FILE')
        format_string = format_string or os.getenv('SQL_STATEMENT_LOG_FORMAT', DEFAULT_FORMAT)

        if log_file:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)

        logging.config.dictConfig(build_logging_config(level, format_string, log_file, enable_console))
        cls._configured = True
        logging.getLogger(f"{LOG_NAMESPACE}.config").debug(
            f"Logging configured - Level: {level}, File: {log_file or 'None'}")


def get_logger(name: str) -> logging.Logger:
    """Convenience function to get a logger instance."""
    return SQLStatementLogger.get_logger(name)

"""Command-line interface for the SQL statement builder."""

import json
import sys
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.text import Text

from .core.database import Database
from .core.exceptions import DatabaseStatementException
from .core.models import DatabaseConfig
from .formatters.json_formatter import JSONFormatter
from .formatters.console_formatter import ConsoleFormatter
from .utils.validation import validate_dialect, validate_placeholder_style, validate_table_name
from .utils.sqlglot_helpers import check_sql_syntax
from .utils.logging_config import get_logger


@click.group()
@click.version_option(version="1.0.0", prog_name="sql-statement")
def cli():
    """SQL Statement Builder - Build parameterized SQL statements."""
    logger = get_logger('cli')
    logger.debug("SQL Statement Builder CLI started")


def _fail(console: Console, message: str) -> None:
    console.print("[red]Error:[/red]", Text(message), soft_wrap=True)
    sys.exit(1)


@cli.command()
@click.argument('table')
@click.option(
    '--row', '-r', 'rows',
    multiple=True,
    required=True,
    help='Row to insert as a JSON object (repeat for an extended insert)'
)
@click.option(
    '--update-on-duplicate', '-u',
    is_flag=True,
    help='Add an ON DUPLICATE KEY UPDATE clause'
)
@click.option(
    '--update-column', '-c', 'update_columns',
    multiple=True,
    help='Column to update on duplicate key (default: all inserted columns)'
)
@click.option(
    '--prefix', '-p',
    default=None,
    help='Table prefix replacing tbl_ (default: $SQL_STATEMENT_TABLE_PREFIX or tbl_)'
)
@click.option(
    '--dialect', '-d',
    default=None,
    help='SQL dialect (default: $SQL_STATEMENT_DIALECT or mysql)'
)
@click.option(
    '--placeholder-style', '-s',
    type=click.Choice(['qmark', 'format', 'named']),
    default=None,
    help='Placeholder style (default: $SQL_STATEMENT_PLACEHOLDER_STYLE or qmark)'
)
@click.option(
    '--output-format', '-o',
    type=click.Choice(['console', 'json', 'compact']),
    default='console',
    help='Output format (default: console)'
)
@click.option(
    '--validate',
    is_flag=True,
    help='Check that the generated SQL parses for the dialect'
)
def insert(
    table: str,
    rows: Tuple[str, ...],
    update_on_duplicate: bool,
    update_columns: Tuple[str, ...],
    prefix: Optional[str],
    dialect: Optional[str],
    placeholder_style: Optional[str],
    output_format: str,
    validate: bool
):
    """Build an INSERT INTO statement for TABLE."""
    logger = get_logger('cli.insert')
    console = Console()

    logger.info(f"Building INSERT - table: {table}, rows: {len(rows)}, format: {output_format}")

    table_error = validate_table_name(table)
    if table_error:
        logger.error(f"Invalid table: {table_error}")
        _fail(console, table_error)

    if dialect:
        dialect_error = validate_dialect(dialect)
        if dialect_error:
            logger.error(f"Invalid dialect: {dialect_error}")
            _fail(console, dialect_error)

    if placeholder_style:
        style_error = validate_placeholder_style(placeholder_style)
        if style_error:
            _fail(console, style_error)

    parsed_rows = []
    for raw in rows:
        try:
            row = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid row JSON: {raw}")
            _fail(console, f"Invalid row JSON: {e}")
        if not isinstance(row, dict):
            _fail(console, f"Row must be a JSON object: {raw}")
        parsed_rows.append(row)

    try:
        config = DatabaseConfig.from_env(
            table_prefix=prefix,
            dialect=dialect,
            placeholder_style=placeholder_style
        )
    except ValueError as e:
        _fail(console, str(e))

    db = Database(config=config)
    try:
        statement = db.insert(table)
        if len(parsed_rows) == 1:
            statement.values(parsed_rows[0])
        else:
            statement.extended(parsed_rows)
        if update_on_duplicate or update_columns:
            statement.update_on_duplicate_key(list(update_columns) or None)
        statement.validate()
    except DatabaseStatementException as e:
        logger.error(f"Statement building failed: {str(e)}")
        _fail(console, str(e))

    if validate or config.validate_sql:
        syntax_error = check_sql_syntax(statement.generate_sql(), config.dialect)
        if syntax_error:
            _fail(console, syntax_error)

    if output_format == 'json':
        click.echo(JSONFormatter().format(statement))
    elif output_format == 'compact':
        ConsoleFormatter(console).format_compact(statement)
    else:
        ConsoleFormatter(console).format(statement)

    logger.info("INSERT statement built successfully")


def main():
    """Main entry point."""
    logger = get_logger('main')
    try:
        cli()
    except Exception as e:
        logger.error(f"Unexpected error in main: {str(e)}", exc_info=True)
        raise


if __name__ == '__main__':
    main()

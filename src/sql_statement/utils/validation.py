"""Input validation utilities."""

import re
from typing import Optional

IDENTIFIER_PATTERN = re.compile(r'^[0-9a-zA-Z_\-]+$')

SUPPORTED_PLACEHOLDER_STYLES = {"qmark", "format", "named"}


def validate_identifier(name: str) -> Optional[str]:
    """
    Validate a single table or column name segment.

    Args:
        name: Unquoted identifier

    Returns:
        Error message if invalid, None if valid
    """
    if not isinstance(name, str):
        return "Identifier must be a string"

    if not name:
        return "Identifier cannot be empty"

    if not IDENTIFIER_PATTERN.match(name):
        return f"Identifier '{name}' contains invalid characters"

    return None


def validate_table_name(table: str) -> Optional[str]:
    """
    Validate a table name, optionally qualified with a schema.

    Args:
        table: Table name string

    Returns:
        Error message if invalid, None if valid
    """
    if not table:
        return "Table name cannot be empty"

    if not isinstance(table, str):
        return "Table name must be a string"

    if len(table.strip()) == 0:
        return "Table name cannot be empty or whitespace only"

    for segment in table.strip('`').split('.'):
        error = validate_identifier(segment.strip('`'))
        if error:
            return error

    return None


def validate_table_prefix(prefix: str) -> Optional[str]:
    """Validate a table prefix. An empty prefix is allowed."""
    if not isinstance(prefix, str):
        return "Table prefix must be a string"

    if prefix and not IDENTIFIER_PATTERN.match(prefix):
        return f"Table prefix '{prefix}' contains invalid characters"

    return None


def validate_dialect(dialect: str) -> Optional[str]:
    """
    Validate SQL dialect.

    Args:
        dialect: SQL dialect string

    Returns:
        Error message if invalid, None if valid
    """
    if not dialect:
        return "Dialect cannot be empty"

    if not isinstance(dialect, str):
        return "Dialect must be a string"

    # Dialects with ON DUPLICATE KEY UPDATE semantics
    supported_dialects = {"mysql", "doris", "starrocks"}

    if dialect.lower() not in supported_dialects:
        return f"Unsupported dialect '{dialect}'. Supported: {', '.join(sorted(supported_dialects))}"

    return None


def validate_placeholder_style(style: str) -> Optional[str]:
    """Validate a placeholder style name."""
    if not style:
        return "Placeholder style cannot be empty"

    style = getattr(style, 'value', style)
    if style not in SUPPORTED_PLACEHOLDER_STYLES:
        return f"Unsupported placeholder style '{style}'. Supported: {', '.join(sorted(SUPPORTED_PLACEHOLDER_STYLES))}"

    return None

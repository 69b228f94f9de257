"""Base statement class shared by all statement builders."""

import hashlib
import json
import re
from abc import ABC, abstractmethod
from typing import Dict, List, Any, Mapping, Iterable, Union

from ..exceptions import DatabaseStatementException
from ..models import PlaceholderStyle, StatementResult
from ...utils.validation import validate_identifier
from ...utils.logging_config import get_logger

ALIAS_PATTERN = re.compile(r'\s+AS\s+', re.IGNORECASE)


class DatabaseStatement(ABC):
    """
    Builds a SQL statement out of named parts.

    Parts are stored per part type and rendered in the order returned by
    `get_statement_structure()`, whatever order they were appended in.
    Values bound to placeholders are kept in placeholder order.
    """

    STATEMENTS_DELIMITER = ' '
    FORMATTED_PART_DELIMITER = '\n'
    LIST_DELIMITER = ', '

    def __init__(self, db, statement: str):
        """
        Initialize the statement.

        Args:
            db: Database the statement belongs to
            statement: Leading SQL keywords, e.g. INSERT INTO
        """
        self.db = db
        self.logger = get_logger('statements.base')
        self._parts: Dict[str, List[str]] = {}
        self._columns: List[str] = []
        self._bound_counts: Dict[str, int] = {}
        if self.placeholder_style == PlaceholderStyle.NAMED:
            self._values: Union[List[Any], Dict[str, Any]] = {}
        else:
            self._values = []
        self.unsafe_append_sql_part('statement', statement)

    @abstractmethod
    def get_statement_structure(self) -> List[str]:
        """Return the part types of this statement, in rendering order."""
        pass

    @property
    def placeholder_style(self) -> PlaceholderStyle:
        return self.db.config.placeholder_style

    def get_separator_for_part_type(self, type: str) -> str:
        """
        Get the string used in front of a part of the given type when
        generating formatted SQL.

        Args:
            type: The SQL part type

        Returns:
            The separator string
        """
        if not isinstance(type, str):
            raise TypeError(f"Part type must be a string, got {type.__class__.__name__}")
        return self.STATEMENTS_DELIMITER

    def unsafe_append_sql_part(self, type: str, part: str) -> "DatabaseStatement":
        """
        Append raw SQL under the given part type.

        The part is not escaped in any way: only pass SQL built from quoted
        identifiers and placeholders.
        """
        if type not in self.get_statement_structure():
            raise DatabaseStatementException(
                f"Invalid SQL part type '{type}' for {self.__class__.__name__}", self)
        self._parts.setdefault(type, []).append(part)
        self.logger.debug(f"Appended '{type}' part: {part}")
        return self

    def contains_sql_parts(self, *types: str) -> bool:
        """Check if any of the given part types already hold a part."""
        return any(self._parts.get(t) for t in types)

    def get_sql_parts(self) -> Dict[str, List[str]]:
        return {t: list(parts) for t, parts in self._parts.items()}

    def replace_table_prefix(self, table: str) -> str:
        return self.db.replace_table_prefix(table)

    def as_ticked_string(self, value: str) -> str:
        """
        Quote an identifier.

        `*` is left as is, `a.b` quotes each segment and `a AS b` quotes both
        sides. Backticks already present are removed before quoting.

        Args:
            value: Identifier to quote

        Returns:
            The quoted identifier, or an empty string for an empty value
        """
        if not value:
            return ''
        if not isinstance(value, str):
            raise TypeError(f"Identifier must be a string, got {value.__class__.__name__}")
        value = value.strip()
        if value == '*':
            return value

        aliased = ALIAS_PATTERN.split(value)
        if len(aliased) == 2:
            return f"{self.as_ticked_string(aliased[0])} AS {self.as_ticked_string(aliased[1])}"
        if '.' in value:
            return '.'.join(self.as_ticked_string(segment) for segment in value.split('.'))

        name = value.strip('`')
        error = validate_identifier(name)
        if error:
            raise DatabaseStatementException(error, self)
        return self.db.quote_identifier(name)

    def as_ticked_list(self, values: Iterable[str]) -> str:
        return self.LIST_DELIMITER.join(self.as_ticked_string(v) for v in values)

    def as_placeholders_list(self, values: Mapping[str, Any]) -> str:
        """
        Build the placeholders for a row of values, in the mapping's order.

        Must be called before `append_values()` for the same row, since named
        placeholders are numbered from the values bound so far.
        """
        if self.placeholder_style == PlaceholderStyle.QMARK:
            return self.LIST_DELIMITER.join('?' for _ in values)
        if self.placeholder_style == PlaceholderStyle.FORMAT:
            return self.LIST_DELIMITER.join('%s' for _ in values)
        return self.LIST_DELIMITER.join(f":{name}" for name in self._placeholder_names(values))

    def _placeholder_names(self, columns: Iterable[str]) -> List[str]:
        """Name a row's placeholders, unique against bound values and each other."""
        taken = set(self._values) if isinstance(self._values, dict) else set()
        counts = dict(self._bound_counts)
        names = []
        for column in columns:
            name = re.sub(r'\W', '_', str(column))
            count = counts.get(name, 0)
            candidate = name if count == 0 else f"{name}_{count}"
            while candidate in taken:
                count += 1
                candidate = f"{name}_{count}"
            counts[name] = counts.get(name, 0) + 1
            taken.add(candidate)
            names.append(candidate)
        return names

    def append_values(self, values: Mapping[str, Any]) -> "DatabaseStatement":
        """Bind a row of values, in the mapping's order."""
        names = self._placeholder_names(values)
        for name, (column, value) in zip(names, values.items()):
            if column not in self._columns:
                self._columns.append(column)
            if isinstance(self._values, dict):
                self._values[name] = value
            else:
                self._values.append(value)
            base = re.sub(r'\W', '_', str(column))
            self._bound_counts[base] = self._bound_counts.get(base, 0) + 1
        return self

    def get_values(self) -> Union[List[Any], Dict[str, Any]]:
        """Return the bound values: a list for positional styles, a dict for named."""
        return self._values.copy()

    def get_columns(self) -> List[str]:
        """Return the column names bound so far, in first-seen order."""
        return list(self._columns)

    def generate_sql(self) -> str:
        """Render all parts on a single line."""
        parts = []
        for type in self.get_statement_structure():
            parts.extend(self._parts.get(type, []))
        return self.STATEMENTS_DELIMITER.join(parts)

    def generate_formatted_sql(self) -> str:
        """Render all parts, each preceded by the separator of its part type."""
        sql = ''
        for type in self.get_statement_structure():
            for part in self._parts.get(type, []):
                if sql:
                    sql += self.get_separator_for_part_type(type)
                sql += part
        return sql

    def compute_hash(self) -> str:
        """Compute an md5 hash of the SQL and its values, usable as a cache key."""
        payload = json.dumps([self.generate_sql(), self.get_values()], default=str, sort_keys=True)
        return hashlib.md5(payload.encode('utf-8')).hexdigest()

    def finalize(self) -> "DatabaseStatement":
        """Hook called right before execution."""
        return self

    def validate(self) -> "DatabaseStatement":
        """Hook raising DatabaseStatementException when the statement is incomplete."""
        return self

    def execute(self) -> StatementResult:
        return self.db.execute(self)

    def __str__(self) -> str:
        return self.generate_sql()

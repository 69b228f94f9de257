"""Builder for INSERT INTO statements."""

from typing import Any, Iterable, List, Mapping, Optional, Union

from .base_statement import DatabaseStatement
from ..exceptions import DatabaseStatementException
from ...utils.logging_config import get_logger


class DatabaseInsert(DatabaseStatement):
    """
    Builds INSERT INTO statements.

    A statement holds a single values clause, filled either by `values()` for
    one row or `extended()` for many, and at most one ON DUPLICATE KEY UPDATE
    clause.

    Example:
        db.insert('tbl_entries').values({'id': 1, 'name': 'a'}).update_on_duplicate_key()
    """

    def __init__(self, db, table: str):
        """
        Create an INSERT statement on a table.

        Args:
            db: The database the statement belongs to
            table: Table name; its tbl_ prefix is replaced by the database prefix
        """
        super().__init__(db, 'INSERT INTO')
        self.logger = get_logger('statements.insert')
        table = self.replace_table_prefix(table)
        table = self.as_ticked_string(table)
        self.unsafe_append_sql_part('table', table)

    def get_statement_structure(self) -> List[str]:
        return [
            'statement',
            'table',
            'cols',
            'values',
            'on duplicate',
        ]

    def get_separator_for_part_type(self, type: str) -> str:
        if not isinstance(type, str):
            raise TypeError(f"Part type must be a string, got {type.__class__.__name__}")
        if type in ('values', 'on duplicate'):
            return self.FORMATTED_PART_DELIMITER
        return self.STATEMENTS_DELIMITER

    def values(self, values: Mapping[str, Any]) -> "DatabaseInsert":
        """
        Insert a single row. Can only be called once per statement.

        Args:
            values: Column names mapped to the values to bind

        Returns:
            The current instance
        """
        self._ensure_no_values_clause()
        if not values:
            raise DatabaseStatementException('No values to insert found', self)

        cols = f"({self.as_ticked_list(values.keys())})"
        placeholders = f"VALUES ({self.as_placeholders_list(values)})"
        self.unsafe_append_sql_part('cols', cols)
        self.unsafe_append_sql_part('values', placeholders)
        self.append_values(values)
        return self

    def extended(self, rows: Iterable[Mapping[str, Any]]) -> "DatabaseInsert":
        """
        Insert many rows in one statement. Can only be called once per statement.

        Columns are taken from the first row; every other row must have the
        same columns and is bound in the first row's column order.

        Args:
            rows: Rows of column names mapped to values

        Returns:
            The current instance
        """
        self._ensure_no_values_clause()
        rows = list(rows)
        if not rows:
            raise DatabaseStatementException('No rows to insert found', self)

        columns = list(rows[0].keys())
        if not columns:
            raise DatabaseStatementException('No values to insert found', self)
        for index, row in enumerate(rows):
            if set(row.keys()) != set(columns):
                raise DatabaseStatementException(
                    f"Row {index} columns {sorted(row.keys())} do not match {sorted(columns)}", self)

        cols = f"({self.as_ticked_list(columns)})"
        self.unsafe_append_sql_part('cols', cols)
        tuples = []
        for row in rows:
            ordered = {column: row[column] for column in columns}
            tuples.append(f"({self.as_placeholders_list(ordered)})")
            self.append_values(ordered)
        self.unsafe_append_sql_part('values', 'VALUES ' + ', '.join(tuples))
        self.logger.debug(f"Extended insert with {len(rows)} rows of {len(columns)} columns")
        return self

    def update_on_duplicate_key(
        self,
        columns: Optional[Union[Iterable[str], Mapping[str, Any], str]] = None
    ) -> "DatabaseInsert":
        """
        Add an ON DUPLICATE KEY UPDATE clause re-using the inserted values.
        Can only be called once per statement, after `values()` or `extended()`.

        Args:
            columns: Columns to update. Only the keys of a mapping are used.
                Defaults to every inserted column, which is what extended
                inserts usually want.

        Returns:
            The current instance
        """
        if self.contains_sql_parts('on duplicate'):
            raise DatabaseStatementException(
                'DatabaseInsert can not hold more than one on duplicate clause', self)
        if not self.get_values():
            raise DatabaseStatementException(
                'update_on_duplicate_key() needs values() to be called first', self)

        if isinstance(columns, str):
            columns = [columns] if columns else []
        elif isinstance(columns, Mapping):
            columns = list(columns.keys())
        columns = list(columns or [])
        if not columns:
            columns = self.get_columns()

        updates = []
        for column in columns:
            column = self.as_ticked_string(column)
            updates.append(f"{column} = VALUES({column})")
        self.unsafe_append_sql_part(
            'on duplicate', f"ON DUPLICATE KEY UPDATE {self.LIST_DELIMITER.join(updates)}")
        return self

    def validate(self) -> "DatabaseInsert":
        if not self.contains_sql_parts('values'):
            raise DatabaseStatementException('DatabaseInsert needs a values clause', self)
        return self

    def _ensure_no_values_clause(self):
        if self.contains_sql_parts('values'):
            raise DatabaseStatementException(
                'DatabaseInsert can not hold more than one values clause', self)

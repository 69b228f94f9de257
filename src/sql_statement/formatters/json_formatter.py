"""JSON output formatter."""

import json
from typing import Dict, Any, Optional

from ..core.models import StatementResult


class JSONFormatter:
    """Formats statements and execution results as JSON."""

    def __init__(self, indent: Optional[int] = 2):
        """
        Initialize JSON formatter.

        Args:
            indent: JSON indentation level (None for compact output)
        """
        self.indent = indent

    def to_dict(self, statement) -> Dict[str, Any]:
        return {
            "sql": statement.generate_sql(),
            "formatted_sql": statement.generate_formatted_sql(),
            "values": statement.get_values(),
            "hash": statement.compute_hash()
        }

    def format(self, statement) -> str:
        """
        Format a statement as JSON string.

        Args:
            statement: DatabaseStatement to format

        Returns:
            JSON string with the SQL, its formatted variant, bound values and hash
        """
        return json.dumps(self.to_dict(statement), indent=self.indent, ensure_ascii=False, default=str)

    def format_result(self, result: StatementResult) -> str:
        return json.dumps(result.to_dict(), indent=self.indent, ensure_ascii=False, default=str)

    def format_to_file(self, statement, file_path: str) -> None:
        """
        Format a statement and write it to file.

        Args:
            statement: DatabaseStatement to format
            file_path: Output file path
        """
        json_str = self.format(statement)
        with open(file_path, 'w', encoding='utf-8') as f:
            f.write(json_str)

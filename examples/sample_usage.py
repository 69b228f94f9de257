#!/usr/bin/env python3
"""
Sample usage examples for the SQL Statement Builder.
"""

from sql_statement import Database
from sql_statement.formatters import JSONFormatter, ConsoleFormatter


def main():
    """Demonstrate various usage patterns."""
    print("SQL Statement Builder - Sample Usage")
    print("=" * 50)

    db = Database(table_prefix="sym_")

    # Example 1: Single row
    print("\n1. Single Row Insert:")
    statement = db.insert("tbl_authors").values({"username": "admin", "email": "admin@example.com"})
    ConsoleFormatter().format_compact(statement)

    # Example 2: Extended insert updating existing rows
    print("\n2. Extended Insert With ON DUPLICATE KEY UPDATE:")
    rows = [
        {"entry_id": 1, "field_id": 3, "value": "first"},
        {"entry_id": 2, "field_id": 3, "value": "second"},
        {"entry_id": 3, "field_id": 3, "value": "third"},
    ]
    statement = db.insert("tbl_entries_data_3").extended(rows).update_on_duplicate_key(["value"])
    ConsoleFormatter().format(statement)

    # Example 3: Named placeholders as JSON
    print("\n3. Named Placeholders (JSON):")
    named_db = Database(placeholder_style="named")
    statement = named_db.insert("tbl_sessions").extended([
        {"session": "a1", "session_expires": 1700000000},
        {"session": "b2", "session_expires": 1700000600},
    ])
    print(JSONFormatter().format(statement))


if __name__ == "__main__":
    main()

"""Pytest configuration and fixtures."""

import pytest
from sql_statement import Database


class FakeCursor:
    """DB-API cursor recording executed statements."""

    def __init__(self, connection):
        self.connection = connection
        self.rowcount = -1
        self.lastrowid = None
        self.closed = False

    def execute(self, sql, params=None):
        if self.connection.error is not None:
            raise self.connection.error
        self.connection.executed.append((sql, params))
        self.rowcount = len(params) if params else 0
        self.lastrowid = self.connection.next_insert_id

    def close(self):
        self.closed = True


class FakeConnection:
    """DB-API connection handing out FakeCursor instances."""

    def __init__(self, next_insert_id=42, error=None, cursor_error=None):
        self.next_insert_id = next_insert_id
        self.error = error
        self.cursor_error = cursor_error
        self.executed = []
        self.cursors = []

    def cursor(self):
        if self.cursor_error is not None:
            raise self.cursor_error
        cursor = FakeCursor(self)
        self.cursors.append(cursor)
        return cursor


@pytest.fixture
def sample_rows():
    """Rows for extended inserts."""
    return [
        {"id": 1, "name": "first", "value": 10},
        {"id": 2, "name": "second", "value": 20},
        {"value": 30, "id": 3, "name": "third"},
    ]


@pytest.fixture
def db():
    """Database without connection using default settings."""
    return Database()


@pytest.fixture
def connection():
    return FakeConnection()


@pytest.fixture
def connected_db(connection):
    """Database bound to a fake connection."""
    return Database(connection)

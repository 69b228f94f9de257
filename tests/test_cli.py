"""Tests for the command-line interface."""

import json

import pytest
from click.testing import CliRunner

from sql_statement.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


class TestInsertCommand:
    """Test cases for the insert command."""

    def test_json_output(self, runner):
        result = runner.invoke(cli, ['insert', 'tbl_entries', '--row', '{"id": 1, "name": "first"}', '-o', 'json'])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data['sql'] == "INSERT INTO `tbl_entries` (`id`, `name`) VALUES (?, ?)"
        assert data['values'] == [1, 'first']

    def test_extended_with_update(self, runner):
        result = runner.invoke(cli, [
            'insert', 'tbl_entries',
            '-r', '{"id": 1, "name": "first"}',
            '-r', '{"id": 2, "name": "second"}',
            '--update-on-duplicate',
            '-o', 'compact',
        ])

        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert lines[0] == (
            "INSERT INTO `tbl_entries` (`id`, `name`) VALUES (?, ?), (?, ?) "
            "ON DUPLICATE KEY UPDATE `id` = VALUES(`id`), `name` = VALUES(`name`)"
        )
        assert lines[1] == "[1, 'first', 2, 'second']"

    def test_update_column_implies_clause(self, runner):
        result = runner.invoke(cli, ['insert', 'tbl_entries', '-r', '{"id": 1, "name": "a"}', '-c', 'name', '-o', 'json'])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)['sql'].endswith("ON DUPLICATE KEY UPDATE `name` = VALUES(`name`)")

    def test_prefix_and_placeholder_options(self, runner):
        result = runner.invoke(cli, [
            'insert', 'tbl_entries', '-r', '{"id": 1}',
            '--prefix', 'sym_', '--placeholder-style', 'named', '-o', 'json',
        ])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data['sql'] == "INSERT INTO `sym_entries` (`id`) VALUES (:id)"
        assert data['values'] == {'id': 1}

    def test_prefix_from_environment(self, runner):
        result = runner.invoke(
            cli,
            ['insert', 'tbl_entries', '-r', '{"id": 1}', '-o', 'json'],
            env={'SQL_STATEMENT_TABLE_PREFIX': 'env_'}
        )

        assert result.exit_code == 0, result.output
        assert json.loads(result.output)['sql'].startswith("INSERT INTO `env_entries`")

    def test_console_output(self, runner):
        result = runner.invoke(cli, ['insert', 'tbl_entries', '-r', '{"id": 1}'])

        assert result.exit_code == 0, result.output
        assert "INSERT INTO `tbl_entries`" in result.output
        assert "Bound Values" in result.output

    def test_validate_flag(self, runner):
        result = runner.invoke(cli, ['insert', 'tbl_entries', '-r', '{"id": 1}', '--validate', '-o', 'json'])

        assert result.exit_code == 0, result.output

    def test_invalid_json(self, runner):
        result = runner.invoke(cli, ['insert', 'tbl_entries', '-r', '{id: 1}'])

        assert result.exit_code == 1
        assert "Invalid row JSON" in result.output

    def test_row_must_be_object(self, runner):
        result = runner.invoke(cli, ['insert', 'tbl_entries', '-r', '[1, 2]'])

        assert result.exit_code == 1
        assert "Row must be a JSON object" in result.output

    def test_mismatched_rows(self, runner):
        result = runner.invoke(cli, ['insert', 'tbl_entries', '-r', '{"id": 1}', '-r', '{"name": "b"}'])

        assert result.exit_code == 1
        assert "Row 1" in result.output

    def test_invalid_table(self, runner):
        result = runner.invoke(cli, ['insert', 'tbl entries', '-r', '{"id": 1}'])

        assert result.exit_code == 1
        assert "invalid characters" in result.output

    def test_invalid_dialect(self, runner):
        result = runner.invoke(cli, ['insert', 'tbl_entries', '-r', '{"id": 1}', '-d', 'postgres'])

        assert result.exit_code == 1
        assert "Unsupported dialect" in result.output

    def test_row_required(self, runner):
        result = runner.invoke(cli, ['insert', 'tbl_entries'])

        assert result.exit_code != 0

    def test_version(self, runner):
        result = runner.invoke(cli, ['--version'])

        assert result.exit_code == 0
        assert "1.0.0" in result.output

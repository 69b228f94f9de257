"""Tests for logging configuration."""

import logging

from sql_statement.utils.logging_config import SQLStatementLogger, build_logging_config, get_logger


class TestLoggingConfig:
    """Test cases for the shared logger setup."""

    def test_logger_namespace(self):
        logger = get_logger('tests.namespace')

        assert logger.name == 'sql_statement.tests.namespace'
        assert get_logger('tests.namespace') is logger

    def test_setup_logging_level(self, tmp_path):
        log_file = tmp_path / "logs" / "sql_statement.log"
        SQLStatementLogger.setup_logging(level='debug', log_file=str(log_file), enable_console=False)
        try:
            get_logger('tests.file').debug("written to file")
            for handler in logging.getLogger('sql_statement').handlers:
                handler.flush()

            assert logging.getLogger('sql_statement').level == logging.DEBUG
            assert "written to file" in log_file.read_text()
        finally:
            for handler in logging.getLogger('sql_statement').handlers:
                handler.close()
            SQLStatementLogger.setup_logging(level='WARNING')

    def test_build_config_handlers(self):
        config = build_logging_config('INFO', '%(message)s', log_file='/tmp/x.log', enable_console=False)
        logger_config = config['loggers']['sql_statement']

        assert logger_config['level'] == 'INFO'
        assert logger_config['handlers'] == ['file']
        assert config['handlers']['file']['filename'] == '/tmp/x.log'

    def test_build_config_console_uses_stderr(self):
        config = build_logging_config('WARNING', '%(message)s')

        assert config['loggers']['sql_statement']['handlers'] == ['console']
        assert config['handlers']['console']['stream'] == 'ext://sys.stderr'

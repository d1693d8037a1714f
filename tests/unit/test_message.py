"""
Tests for the Log facade and logger setup.

Tests level parsing, runtime level changes, and the file/console handlers.
"""
import logging
import os

import pytest

from src.utils.message import (
    ColorFormatter,
    Log,
    _level_from_name,
    init_logger,
    purge_old_logs,
)


@pytest.fixture
def app_logger():
    """The Log facade's logger, with its levels restored afterwards."""
    logger = Log._logger
    logger_level = logger.level
    handler_levels = [handler.level for handler in logger.handlers]
    yield logger
    logger.setLevel(logger_level)
    for handler, level in zip(logger.handlers, handler_levels):
        handler.setLevel(level)


def _close_handlers(logger):
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


# =============================================================================
# Level Parsing Tests
# =============================================================================

class TestLevelFromName:
    """Tests for _level_from_name."""

    @pytest.mark.parametrize("name, level", [
        ("DEBUG", logging.DEBUG),
        ("INFO", logging.INFO),
        ("WARNING", logging.WARNING),
        ("ERROR", logging.ERROR),
        ("CRITICAL", logging.CRITICAL),
    ])
    def test_known_names(self, name, level):
        """Test each level name maps to its logging constant."""
        assert _level_from_name(name) == level

    def test_case_insensitive(self):
        """Test lower-case names are accepted."""
        assert _level_from_name("warning") == logging.WARNING

    def test_int_passes_through(self):
        """Test integer levels are returned unchanged."""
        assert _level_from_name(logging.ERROR) == logging.ERROR

    def test_unknown_name_falls_back_to_info(self):
        """Test unknown names default to INFO."""
        assert _level_from_name("VERBOSE") == logging.INFO


# =============================================================================
# Log Facade Tests
# =============================================================================

class TestLogSetLevel:
    """Tests for Log.set_level."""

    def test_set_level_by_name(self, app_logger):
        """Test a level name updates the logger and every handler."""
        Log.set_level("WARNING")
        assert app_logger.level == logging.WARNING
        assert app_logger.handlers
        assert all(handler.level == logging.WARNING for handler in app_logger.handlers)

    def test_set_level_by_int(self, app_logger):
        """Test an integer level updates the logger and every handler."""
        Log.set_level(logging.ERROR)
        assert app_logger.level == logging.ERROR
        assert all(handler.level == logging.ERROR for handler in app_logger.handlers)

    def test_set_level_unknown_name(self, app_logger):
        """Test an unknown name sets INFO."""
        Log.set_level("LOUD")
        assert app_logger.level == logging.INFO
        assert all(handler.level == logging.INFO for handler in app_logger.handlers)

    def test_messages_below_level_are_dropped(self, app_logger):
        """Test the logger filters by the level that was set."""
        Log.set_level("ERROR")
        assert not app_logger.isEnabledFor(logging.INFO)
        assert app_logger.isEnabledFor(logging.ERROR)


# =============================================================================
# Logger Setup Tests
# =============================================================================

class TestInitLogger:
    """Tests for init_logger and its handlers."""

    def test_console_only(self):
        """Test console logging uses the colour formatter and no file."""
        logger = init_logger(name="test-console-only", file_logging=False, level=logging.INFO)
        try:
            assert logger.level == logging.INFO
            assert logger.propagate is False
            assert len(logger.handlers) == 1
            assert isinstance(logger.handlers[0].formatter, ColorFormatter)
        finally:
            _close_handlers(logger)

    def test_file_logging_creates_log(self, tmp_path):
        """Test file logging writes a timestamped log in the given folder."""
        logger = init_logger(
            name="test-file-logging",
            log_folder=str(tmp_path),
            console_logging=False,
            file_logging=True,
        )
        try:
            logger.info("hello")
            for handler in logger.handlers:
                handler.flush()
            logs = [f for f in os.listdir(tmp_path) if f.startswith("projectboard_")]
            assert len(logs) == 1
            with open(tmp_path / logs[0], encoding="utf-8") as f:
                assert "hello" in f.read()
        finally:
            _close_handlers(logger)

    def test_second_init_adds_no_handlers(self):
        """Test init_logger is idempotent per logger name."""
        logger = init_logger(name="test-idempotent", file_logging=False)
        try:
            init_logger(name="test-idempotent", file_logging=False)
            assert len(logger.handlers) == 1
        finally:
            _close_handlers(logger)

    def test_color_formatter_keeps_record_plain(self):
        """Test colouring does not leak into the shared record."""
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", None, None)
        ColorFormatter(fmt="%(levelname)s %(message)s").format(record)
        assert record.levelname == "ERROR"


class TestPurgeOldLogs:
    """Tests for purge_old_logs."""

    def test_keeps_most_recent(self, tmp_path):
        """Test only the newest log files survive."""
        for day in range(1, 6):
            (tmp_path / f"projectboard_2024-01-0{day}_000000.log").write_text("x")
        (tmp_path / "other.txt").write_text("x")

        purge_old_logs(str(tmp_path), keep=2)

        assert sorted(os.listdir(tmp_path)) == [
            "other.txt",
            "projectboard_2024-01-04_000000.log",
            "projectboard_2024-01-05_000000.log",
        ]

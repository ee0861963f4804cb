"""Tests for utility modules."""

import io
import logging

import pytest

from mathdown.utils.file_handler import FileHandler
from mathdown.utils.logger import ColoredFormatter, get_logger, setup_logger


class TestLogger:
    """Tests for logger utility."""

    def test_setup_logger_with_level(self):
        """Test logger with explicit level."""
        logger = setup_logger("test_debug", level="DEBUG")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "test_debug"
        assert logger.level == logging.DEBUG

    def test_setup_logger_no_duplicates(self):
        """Test that repeated calls don't add duplicate handlers."""
        logger1 = setup_logger("test_dup", level="INFO")
        handler_count1 = len(logger1.handlers)

        logger2 = setup_logger("test_dup", level="INFO")
        handler_count2 = len(logger2.handlers)

        assert handler_count1 == handler_count2
        assert logger1 is logger2

    def test_setup_logger_with_file(self, tmp_path):
        """Test logging to file."""
        log_file = tmp_path / "logs" / "test.log"
        logger = setup_logger("test_file_logger", level="INFO", log_file=log_file)
        logger.info("written to file")

        for handler in logger.handlers:
            handler.flush()

        assert log_file.exists()
        assert "written to file" in log_file.read_text(encoding="utf-8")

    def test_get_logger(self):
        """Test get_logger returns named logger."""
        assert get_logger("test_get").name == "test_get"

    def test_colored_formatter_restores_levelname(self):
        """Colors are applied to output only."""
        formatter = ColoredFormatter(fmt="%(levelname)s %(message)s")
        record = logging.LogRecord("x", logging.WARNING, __file__, 1, "msg", None, None)

        output = formatter.format(record)

        assert "\033[33m" in output
        assert record.levelname == "WARNING"


class TestFileHandler:
    """Tests for file handler."""

    def test_write_and_read_file(self, tmp_path):
        """Written content reads back, parent dirs are created."""
        path = tmp_path / "out" / "page.html"
        FileHandler.write_file(path, "<p>é</p>")

        assert path.exists()
        assert FileHandler.read_file(path) == "<p>é</p>"

    def test_read_missing_file(self, tmp_path):
        """Missing files raise FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            FileHandler.read_file(tmp_path / "missing.md")

    def test_read_source_stdin(self, monkeypatch):
        """None and '-' read stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO("# from stdin"))
        assert FileHandler.read_source(None) == "# from stdin"

    def test_read_source_file(self, tmp_path):
        """A path reads the file."""
        path = tmp_path / "doc.md"
        path.write_text("text", encoding="utf-8")
        assert FileHandler.read_source(path) == "text"

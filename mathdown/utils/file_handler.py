"""
File handler for I/O operations.

Reads Markdown sources and writes rendered HTML.
"""

import sys
from pathlib import Path
from typing import Optional

from mathdown.utils.logger import setup_logger


logger = setup_logger(__name__)


class FileHandler:
    """Handler for file I/O operations."""

    @staticmethod
    def read_file(file_path: Path, encoding: str = "utf-8") -> str:
        """
        Read file contents.

        Args:
            file_path: Path to the file
            encoding: Text encoding

        Returns:
            File contents as string

        Raises:
            FileNotFoundError: If file doesn't exist
        """
        logger.debug(f"Reading file: {file_path}")

        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        content = file_path.read_text(encoding=encoding)

        logger.debug(f"Read {len(content)} characters from {file_path}")
        return content

    @staticmethod
    def write_file(file_path: Path, content: str, encoding: str = "utf-8") -> None:
        """
        Write content to file, creating parent directories.

        Args:
            file_path: Path to the file
            content: Content to write
            encoding: Text encoding
        """
        logger.debug(f"Writing to file: {file_path}")

        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content, encoding=encoding)

        logger.debug(f"Wrote {len(content)} characters to {file_path}")

    @staticmethod
    def read_source(file_path: Optional[Path], encoding: str = "utf-8") -> str:
        """Read from ``file_path``, or stdin when it is None or ``-``."""
        if file_path is None or str(file_path) == "-":
            logger.debug("Reading markdown from stdin")
            return sys.stdin.read()
        return FileHandler.read_file(file_path, encoding=encoding)

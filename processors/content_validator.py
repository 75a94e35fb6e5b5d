"""Cheap probe for at least one parseable line."""

from pathlib import Path
from typing import Iterator, Optional

from errors import FileNotReadableError, FileTooLargeError
from extractors.factory import GrammarFactory
from utils.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_FILE_SIZE = 100 * 1024 * 1024
BUFFER_SIZE = 8192


def check_file_size(path: Path, max_file_size: int) -> None:
    """
    Refuse files larger than the configured maximum.

    Raises:
        FileNotReadableError: If the file cannot be inspected
        FileTooLargeError: If the file exceeds max_file_size bytes
    """
    try:
        size = path.stat().st_size
    except OSError as e:
        raise FileNotReadableError(path.name, str(e)) from e

    if size > max_file_size:
        logger.error(
            f"The file is too big to process: {path.name} (size: {size} bytes)"
        )
        raise FileTooLargeError(path.name, size, max_file_size)


def iter_lines(path: Path) -> Iterator[str]:
    """
    Stream a text file as UTF-8, one line at a time.

    Raises:
        FileNotReadableError: On open, read or decoding failures
    """
    try:
        with open(path, encoding="utf-8", buffering=BUFFER_SIZE) as f:
            for line in f:
                yield line.rstrip("\r\n")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"File reading error: {path.name} - {e}")
        raise FileNotReadableError(path.name, str(e)) from e


class ContentValidator:
    """Check that a file holds at least one line any grammar understands."""

    def __init__(
        self,
        grammars: Optional[GrammarFactory] = None,
        max_file_size: int = DEFAULT_MAX_FILE_SIZE,
    ):
        self.grammars = grammars or GrammarFactory()
        self.max_file_size = max_file_size

    def has_parseable_line(self, path: Path) -> bool:
        """
        Scan a file until the first line that matches a grammar.

        Args:
            path: File to scan

        Returns:
            True on the first matching line, False after a full scan without one

        Raises:
            FileTooLargeError: If the file exceeds the size limit
            FileNotReadableError: If the file cannot be read as text
        """
        path = Path(path)
        logger.info(f"Checking the contents of the file: {path.name}")
        check_file_size(path, self.max_file_size)

        for line in iter_lines(path):
            if self.grammars.is_parseable(line):
                logger.info(f"A valid line was found in the file: {path.name}")
                return True

        logger.warning(f"No valid lines found in the file: {path.name}")
        return False

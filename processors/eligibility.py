"""Name, size and extension preconditions for candidate files."""

import re
from pathlib import Path

from errors import FileNotReadableError
from models.rejection import EligibilityResult, RejectionReason
from utils.logging_config import get_logger

logger = get_logger(__name__)


class EligibilityFilter:
    """Decide from file metadata alone whether a file is worth scanning."""

    def __init__(self, year: str, extension: str = ".txt"):
        """
        Initialize the filter.

        Args:
            year: Four-digit processing year that eligible names must contain
            extension: Suffix eligible names must end with (case-sensitive)
        """
        year = str(year)
        if not re.fullmatch(r"\d{4}", year):
            raise ValueError(f"Processing year must have four digits, got '{year}'")
        self.year = year
        self.extension = extension

    def evaluate_metadata(self, name: str, size: int) -> EligibilityResult:
        """
        Check a file's name and size.

        Reasons are evaluated in a fixed order: empty file, wrong year,
        incorrect extension. The first failing condition is reported.

        Args:
            name: File name
            size: File size in bytes

        Returns:
            EligibilityResult carrying the rejection reason when not eligible
        """
        if size == 0:
            return EligibilityResult.failed(RejectionReason.EMPTY_FILE)
        if self.year not in name:
            return EligibilityResult.failed(RejectionReason.WRONG_YEAR)
        if not name.endswith(self.extension):
            return EligibilityResult.failed(RejectionReason.INCORRECT_EXTENSION)
        return EligibilityResult.passed()

    def evaluate(self, path: Path) -> EligibilityResult:
        """
        Check a file on disk.

        Raises:
            FileNotReadableError: If the file cannot be inspected
        """
        path = Path(path)
        try:
            size = path.stat().st_size
        except OSError as e:
            raise FileNotReadableError(path.name, str(e)) from e

        result = self.evaluate_metadata(path.name, size)
        if not result.eligible:
            logger.debug(f"{path.name} is not eligible: {result.reason.value}")
        return result

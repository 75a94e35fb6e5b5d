"""Per-line amount extraction into the statistics aggregator."""

from pathlib import Path
from typing import Optional

from errors import FileNotReadableError, NoValidLinesError
from extractors.factory import GrammarFactory
from models.document import Amount
from processors.content_validator import DEFAULT_MAX_FILE_SIZE, check_file_size, iter_lines
from stats.aggregator import StatisticsAggregator
from utils.logging_config import get_logger

logger = get_logger(__name__)


class AmountExtractor:
    """Classify every line of a file and record the amounts it carries."""

    def __init__(
        self,
        aggregator: StatisticsAggregator,
        grammars: Optional[GrammarFactory] = None,
        max_file_size: int = DEFAULT_MAX_FILE_SIZE,
    ):
        """
        Initialize the extractor.

        Args:
            aggregator: Receives every amount of a successfully parsed file
            grammars: Grammar set (defaults to the built-in Check/Invoice/Order)
            max_file_size: Largest accepted file in bytes
        """
        self.aggregator = aggregator
        self.grammars = grammars or GrammarFactory()
        self.max_file_size = max_file_size

    def parse(self, path: Path) -> list[Amount]:
        """
        Extract amounts from a file without recording them.

        Args:
            path: File to parse

        Returns:
            One Amount per matched line, in file order

        Raises:
            FileNotReadableError: Missing or unreadable file
            FileTooLargeError: File over the size limit
            AmountFormatError: A matched line held a malformed amount
            NoValidLinesError: No line produced an amount
        """
        path = Path(path)
        logger.info(f"The beginning of file analysis: {path.name}")

        if not path.is_file():
            raise FileNotReadableError(path.name, "file does not exist")
        check_file_size(path, self.max_file_size)

        amounts = []
        for line in iter_lines(path):
            amount = self.grammars.extract_line(line, path.name)
            if amount is not None:
                amounts.append(amount)

        if not amounts:
            raise NoValidLinesError(path.name)

        return amounts

    def extract(self, path: Path) -> list[Amount]:
        """
        Extract amounts from a file and record them into the aggregator.

        Nothing is recorded unless the whole file parses, so a file that fails
        halfway leaves the aggregator untouched.

        Args:
            path: File to parse

        Returns:
            The recorded amounts

        Raises:
            FileProcessingError: See parse()
        """
        amounts = self.parse(path)
        self.record(amounts)

        logger.info(f"File analysis completed: {Path(path).name} ({len(amounts)} amounts)")
        return amounts

    def record(self, amounts: list[Amount]) -> None:
        """Commit parsed amounts to the aggregator."""
        for amount in amounts:
            self.aggregator.record_amount(amount)

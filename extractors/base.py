"""Base grammar class for per-document-type amount extraction."""

import logging
import re
from abc import ABC, abstractmethod
from decimal import Decimal, InvalidOperation
from typing import Optional

from errors import AmountFormatError
from models.document import Amount, DocumentType

logger = logging.getLogger(__name__)


class BaseGrammar(ABC):
    """
    Abstract base class for document grammars.

    A grammar is a case-insensitive pattern with a single capturing group for
    the amount, plus the normalization applied to the captured text before
    it is converted to a Decimal.
    """

    document_type: DocumentType
    pattern: re.Pattern
    format_error: type[AmountFormatError] = AmountFormatError

    @abstractmethod
    def normalize(self, raw_amount: str) -> str:
        """
        Rewrite captured amount text into a form Decimal() accepts.

        Args:
            raw_amount: Text captured by the pattern's first group

        Returns:
            Normalized numeric string
        """
        pass

    def search(self, line: str) -> Optional[str]:
        """
        Find the amount text in a line.

        Args:
            line: A single line of document text

        Returns:
            Captured amount text, or None if the grammar does not match
        """
        match = self.pattern.search(line)
        if match and len(match.groups()) >= 1:
            return match.group(1).strip()
        return None

    def matches(self, line: str) -> bool:
        """Check whether the line carries an amount for this document type."""
        return bool(line and line.strip()) and self.pattern.search(line) is not None

    def parse_amount(self, raw_amount: str, line: str = "", filename: str = "") -> Decimal:
        """
        Convert captured amount text to a Decimal.

        Args:
            raw_amount: Text captured by the pattern
            line: The full line, kept for the error message
            filename: Source file, kept for the error message

        Returns:
            Parsed, non-negative Decimal

        Raises:
            AmountFormatError: The type-specific subclass when conversion fails
        """
        try:
            value = Decimal(self.normalize(raw_amount))
        except (InvalidOperation, ValueError) as e:
            logger.error(
                f"Incorrect format of the {self.document_type.value.upper()} amount: "
                f"{line.strip()} (failed to convert: {raw_amount}): {e}"
            )
            raise self.format_error(filename, raw_amount, line) from e

        if not value.is_finite() or value < 0:
            raise self.format_error(filename, raw_amount, line)
        return value

    def extract(self, line: str, filename: str = "") -> Optional[Amount]:
        """
        Extract an Amount from a line.

        Args:
            line: A single line of document text
            filename: Source file, used in logs and errors

        Returns:
            Amount if the grammar matched, None otherwise

        Raises:
            AmountFormatError: The line matched but the amount is malformed
        """
        raw_amount = self.search(line)
        if raw_amount is None:
            return None

        value = self.parse_amount(raw_amount, line, filename)
        logger.debug(
            f"The {self.document_type.value.upper()} has been processed: "
            f"amount = {value}, line = {line.strip()}"
        )
        return Amount(document_type=self.document_type, value=value, source_line=line.strip())


def compile_grammar(expression: str) -> re.Pattern:
    """Compile a grammar expression with the flags every grammar shares."""
    return re.compile(expression, re.IGNORECASE)

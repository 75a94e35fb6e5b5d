"""Factory for the ordered set of document grammars."""

from typing import Optional

from extractors.base import BaseGrammar
from extractors.check import CheckGrammar
from extractors.invoice import InvoiceGrammar
from extractors.order import OrderGrammar
from models.document import Amount, DocumentType


class GrammarFactory:
    """Holds one grammar per document type, tried in Check, Invoice, Order order."""

    def __init__(self):
        """Initialize factory with the built-in grammars."""
        self._grammars = self._build_grammar_map()

    def _build_grammar_map(self) -> dict[DocumentType, BaseGrammar]:
        """Build mapping of document types to grammar instances."""
        # Insertion order is the matching precedence
        return {
            DocumentType.CHECK: CheckGrammar(),
            DocumentType.INVOICE: InvoiceGrammar(),
            DocumentType.ORDER: OrderGrammar(),
        }

    def get_grammar(self, document_type: DocumentType) -> Optional[BaseGrammar]:
        """
        Get the grammar for a document type.

        Args:
            document_type: The document type to get a grammar for

        Returns:
            Grammar instance or None if the type has no grammar
        """
        return self._grammars.get(document_type)

    def get_grammars(self) -> list[BaseGrammar]:
        """Get grammars in matching order."""
        return list(self._grammars.values())

    def get_supported_types(self) -> list[DocumentType]:
        """Get list of document types with a grammar."""
        return list(self._grammars.keys())

    def is_parseable(self, line: str) -> bool:
        """Check whether any grammar matches the line."""
        return any(grammar.matches(line) for grammar in self._grammars.values())

    def extract_line(self, line: str, filename: str = "") -> Optional[Amount]:
        """
        Extract an Amount using the first grammar that matches.

        Args:
            line: A single line of document text
            filename: Source file, used in logs and errors

        Returns:
            Amount, or None when no grammar matches or the line is blank

        Raises:
            AmountFormatError: The first matching grammar could not parse its amount
        """
        if not line or not line.strip():
            return None

        for grammar in self._grammars.values():
            if grammar.search(line) is not None:
                return grammar.extract(line, filename)
        return None

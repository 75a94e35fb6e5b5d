"""Invoice grammar."""

from errors import InvoiceAmountFormatError
from extractors.base import BaseGrammar, compile_grammar
from models.document import DocumentType


class InvoiceGrammar(BaseGrammar):
    """
    Grammar for invoices.

    Lines look like "Total Amount: $99.99" or "total amount 12.5$": an
    optional colon, an optional leading or trailing dollar sign and at most
    two decimal digits.
    """

    document_type = DocumentType.INVOICE
    pattern = compile_grammar(r"total\s+amount\s*:?\s*\$?\s*(\d+(?:\.\d{1,2})?)\$?")
    format_error = InvoiceAmountFormatError

    def normalize(self, raw_amount: str) -> str:
        return raw_amount.replace(",", ".")

"""Check (bill) grammar."""

from errors import CheckAmountFormatError
from extractors.base import BaseGrammar, compile_grammar
from models.document import DocumentType


class CheckGrammar(BaseGrammar):
    """
    Grammar for checks.

    Lines look like "Bill total amount EURO 123,45". The currency label is
    optional and the decimal separator may be "." or ",".
    """

    document_type = DocumentType.CHECK
    pattern = compile_grammar(r"Bill total amount(?: EURO)?\s*(\d+(?:[.,]\d+)?)")
    format_error = CheckAmountFormatError

    def normalize(self, raw_amount: str) -> str:
        # Comma is a decimal separator here
        return raw_amount.replace(",", ".")

"""Order grammar."""

from errors import OrderAmountFormatError
from extractors.base import BaseGrammar, compile_grammar
from models.document import DocumentType


class OrderGrammar(BaseGrammar):
    """
    Grammar for orders.

    Lines look like "Order Total 1,234.56". Commas are thousands separators
    and are removed, not turned into a decimal point, so "1,234" reads as
    1234 here while the check and invoice grammars would read 1.234.
    """

    document_type = DocumentType.ORDER
    pattern = compile_grammar(
        r"Order Total\s*(\d{1,4}(?:,\d{3})*(?:\.\d{2})?|\d+(?:\.\d{2})?)"
    )
    format_error = OrderAmountFormatError

    def normalize(self, raw_amount: str) -> str:
        return raw_amount.replace(",", "")

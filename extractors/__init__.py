"""Per-document-type amount grammars."""

from extractors.base import BaseGrammar
from extractors.check import CheckGrammar
from extractors.factory import GrammarFactory
from extractors.invoice import InvoiceGrammar
from extractors.order import OrderGrammar

__all__ = [
    "BaseGrammar",
    "GrammarFactory",
    "CheckGrammar",
    "InvoiceGrammar",
    "OrderGrammar",
]

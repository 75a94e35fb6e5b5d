"""Document types and extracted amounts."""

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DocumentType(str, Enum):
    """Enumeration of supported financial document types."""

    CHECK = "Check"
    INVOICE = "Invoice"
    ORDER = "Order"

    @property
    def currency_symbol(self) -> str:
        """Currency label used for display only."""
        return CURRENCY_SYMBOLS[self]


CURRENCY_SYMBOLS: dict[DocumentType, str] = {
    DocumentType.CHECK: "€",
    DocumentType.INVOICE: "$",
    DocumentType.ORDER: "€",
}


class Amount(BaseModel):
    """A single monetary amount extracted from one matched line."""

    model_config = ConfigDict(frozen=True)

    document_type: DocumentType
    value: Decimal = Field(ge=0)
    source_line: str = ""

    @field_validator("value", mode="before")
    @classmethod
    def parse_decimal(cls, v):
        """Accept ints, floats and strings; floats go through str() to keep digits."""
        if isinstance(v, float):
            return Decimal(str(v))
        return v


class TypeTotals(BaseModel):
    """Running total and record count for one document type."""

    total: Decimal = Decimal("0")
    count: int = 0


def empty_statistics() -> dict[DocumentType, TypeTotals]:
    """Statistics mapping with a zeroed entry for every document type."""
    return {document_type: TypeTotals() for document_type in DocumentType}

"""Data models for document turnover processing."""

from models.batch_result import FileResult, FileStatus, RunCounters, RunResult
from models.document import (
    CURRENCY_SYMBOLS,
    Amount,
    DocumentType,
    TypeTotals,
    empty_statistics,
)
from models.rejection import EligibilityResult, InvalidFileRecord, RejectionReason
from models.session import Session, SessionValidator, TokenExpiryValidator

__all__ = [
    "Amount",
    "DocumentType",
    "CURRENCY_SYMBOLS",
    "TypeTotals",
    "empty_statistics",
    "RejectionReason",
    "InvalidFileRecord",
    "EligibilityResult",
    "FileResult",
    "FileStatus",
    "RunCounters",
    "RunResult",
    "Session",
    "SessionValidator",
    "TokenExpiryValidator",
]

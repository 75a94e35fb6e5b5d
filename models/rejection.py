"""Rejection reasons and invalid-file records."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel


class RejectionReason(str, Enum):
    """Why a file was moved to quarantine."""

    EMPTY_FILE = "EMPTY_FILE"
    WRONG_YEAR = "WRONG_YEAR"
    INCORRECT_EXTENSION = "INCORRECT_EXTENSION"
    PARSING_ERROR = "PARSING_ERROR"
    INCORRECT_CONTENT = "INCORRECT_CONTENT"


class InvalidFileRecord(BaseModel):
    """A quarantined file and the single reason it was rejected."""

    reason: RejectionReason
    filename: str


class EligibilityResult(BaseModel):
    """Outcome of the name/size/extension precondition check."""

    eligible: bool
    reason: Optional[RejectionReason] = None

    @classmethod
    def passed(cls) -> "EligibilityResult":
        return cls(eligible=True)

    @classmethod
    def failed(cls, reason: RejectionReason) -> "EligibilityResult":
        return cls(eligible=False, reason=reason)

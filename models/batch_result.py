"""Data models for pipeline run results."""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from models.document import Amount, DocumentType, TypeTotals
from models.rejection import InvalidFileRecord, RejectionReason


class FileStatus(str, Enum):
    """Processing state of a single file."""

    DISCOVERED = "discovered"
    ELIGIBILITY_CHECKED = "eligibility_checked"
    CONTENT_VALIDATED = "content_validated"
    EXTRACTED = "extracted"
    AGGREGATED = "aggregated"
    QUARANTINED = "quarantined"


class FileResult(BaseModel):
    """Result of routing one file through the pipeline."""

    filename: str
    file_path: str
    status: FileStatus = FileStatus.DISCOVERED
    rejection_reason: Optional[RejectionReason] = None
    error_message: Optional[str] = None
    amounts: list[Amount] = Field(default_factory=list)
    processing_time_seconds: Optional[float] = None

    @property
    def total(self) -> Decimal:
        """Sum of every amount extracted from this file."""
        return sum((amount.value for amount in self.amounts), Decimal("0"))


class RunCounters(BaseModel):
    """File counters for one pipeline invocation."""

    total_processed: int = 0
    valid_count: int = 0
    invalid_count: int = 0

    @property
    def success_rate(self) -> float:
        """Calculate success rate as percentage."""
        if self.total_processed == 0:
            return 0.0
        return (self.valid_count / self.total_processed) * 100


class RunResult(BaseModel):
    """Complete result of one pipeline run."""

    started_at: datetime
    completed_at: Optional[datetime] = None
    input_directory: str
    quarantine_directory: Optional[str] = None
    results: list[FileResult] = Field(default_factory=list)
    counters: RunCounters = Field(default_factory=RunCounters)
    statistics: dict[DocumentType, TypeTotals] = Field(default_factory=dict)
    invalid_files: list[InvalidFileRecord] = Field(default_factory=list)
    stats_file: Optional[str] = None
    report_file: Optional[str] = None

    @property
    def duration_seconds(self) -> Optional[float]:
        """Calculate total duration in seconds."""
        if self.completed_at:
            return (self.completed_at - self.started_at).total_seconds()
        return None

    def get_successful_results(self) -> list[FileResult]:
        """Get all files whose amounts reached the aggregator."""
        return [
            result for result in self.results if result.status == FileStatus.AGGREGATED
        ]

    def get_quarantined_results(self) -> list[FileResult]:
        """Get all files moved to quarantine."""
        return [
            result for result in self.results if result.status == FileStatus.QUARANTINED
        ]

    def get_results_by_reason(self, reason: RejectionReason) -> list[FileResult]:
        """Get all quarantined files rejected for a specific reason."""
        return [result for result in self.results if result.rejection_reason == reason]

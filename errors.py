"""Exception hierarchy for the document turnover pipeline.

Each exception formats its own message from the values it carries, so the
text can never drift away from the failure it describes.
"""

from pathlib import Path
from typing import Optional

from models.document import DocumentType
from models.rejection import RejectionReason


class PipelineError(Exception):
    """Base class for all pipeline failures."""

    def __init__(self, *args):
        super().__init__(self.format_message(), *args)

    def format_message(self) -> str:
        return "Pipeline failure"


class FileProcessingError(PipelineError):
    """Per-file failure; the file is quarantined and the run continues."""

    rejection_reason = RejectionReason.PARSING_ERROR

    def __init__(self, filename: str):
        self.filename = filename
        super().__init__()

    def format_message(self) -> str:
        return f"Error processing the file {self.filename}"


class FileTooLargeError(FileProcessingError):
    def __init__(self, filename: str, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(filename)

    def format_message(self) -> str:
        return (
            f"The file {self.filename} exceeds the maximum allowed size "
            f"({self.size} bytes > {self.limit} bytes)"
        )


class FileNotReadableError(FileProcessingError):
    def __init__(self, filename: str, reason: str = ""):
        self.reason = reason
        super().__init__(filename)

    def format_message(self) -> str:
        message = f"The file {self.filename} cannot be read"
        if self.reason:
            message += f": {self.reason}"
        return message


class NoValidLinesError(FileProcessingError):
    def format_message(self) -> str:
        return f"There are no valid lines in the file {self.filename}"


class AmountFormatError(FileProcessingError):
    """A grammar matched a line but its amount could not be converted."""

    document_type: Optional[DocumentType] = None

    def __init__(self, filename: str, raw_amount: str, line: str):
        self.raw_amount = raw_amount
        self.line = line
        super().__init__(filename)

    def format_message(self) -> str:
        label = self.document_type.value.upper() if self.document_type else "document"
        return (
            f"Incorrect format of the {label} amount in {self.filename}: "
            f"'{self.raw_amount}' (line: {self.line.strip()!r})"
        )


class CheckAmountFormatError(AmountFormatError):
    document_type = DocumentType.CHECK


class InvoiceAmountFormatError(AmountFormatError):
    document_type = DocumentType.INVOICE


class OrderAmountFormatError(AmountFormatError):
    document_type = DocumentType.ORDER


class QuarantineError(PipelineError):
    """A rejected file could not be moved into the quarantine directory."""

    def __init__(self, filename: str, destination: Path, cause: OSError):
        self.filename = filename
        self.destination = destination
        self.cause = cause
        super().__init__()

    def format_message(self) -> str:
        return (
            f"The file {self.filename} could not be moved to "
            f"{self.destination}: {self.cause}"
        )


class InvalidSessionError(PipelineError):
    def format_message(self) -> str:
        return "The access session is absent or expired"


class InvalidDirectoryError(PipelineError):
    def __init__(self, directory: Path):
        self.directory = directory
        super().__init__()

    def format_message(self) -> str:
        return (
            f"The specified directory does not exist or is not a directory: "
            f"{self.directory}"
        )


class StatisticsExportError(PipelineError):
    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__()

    def format_message(self) -> str:
        return f"Failed to export statistics to file {self.path}: {self.cause}"


class ReportExportError(PipelineError):
    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__()

    def format_message(self) -> str:
        return f"Failed to export the invalid-file report to {self.path}: {self.cause}"

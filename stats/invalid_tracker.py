"""Tracking and reporting of quarantined files."""

import threading
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path

from errors import ReportExportError
from models.rejection import InvalidFileRecord, RejectionReason
from utils.logging_config import get_logger

logger = get_logger(__name__)

TWO_PLACES = Decimal("0.01")


class InvalidFileTracker:
    """Record the rejection reason of every quarantined file and report on them."""

    def __init__(self):
        self._lock = threading.Lock()
        self._by_reason: dict[RejectionReason, list[str]] = {}
        self._records: list[InvalidFileRecord] = []

    def record(self, reason: RejectionReason, filename: str) -> InvalidFileRecord:
        """
        Record one quarantined file.

        Args:
            reason: The single reason the file was rejected
            filename: Name of the quarantined file

        Returns:
            The stored record
        """
        entry = InvalidFileRecord(reason=reason, filename=filename)
        with self._lock:
            self._by_reason.setdefault(reason, []).append(filename)
            self._records.append(entry)
        return entry

    @property
    def total_invalid(self) -> int:
        with self._lock:
            return len(self._records)

    @property
    def records(self) -> list[InvalidFileRecord]:
        with self._lock:
            return list(self._records)

    def files_for(self, reason: RejectionReason) -> list[str]:
        with self._lock:
            return list(self._by_reason.get(reason, []))

    def by_reason(self) -> dict[RejectionReason, list[str]]:
        """Per-reason file lists, in enum order, skipping unused reasons."""
        with self._lock:
            return {
                reason: list(self._by_reason[reason])
                for reason in RejectionReason
                if reason in self._by_reason
            }

    def percentage_breakdown(self) -> list[tuple[RejectionReason, Decimal, int]]:
        """
        Share of each reason among all invalid files.

        Returns:
            Rows of (reason, percentage rounded to two decimals, file count)
        """
        grouped = self.by_reason()
        total = sum(len(files) for files in grouped.values())
        if total == 0:
            return []

        return [
            (
                reason,
                (Decimal(len(files) * 100) / Decimal(total)).quantize(
                    TWO_PLACES, rounding=ROUND_HALF_UP
                ),
                len(files),
            )
            for reason, files in grouped.items()
        ]

    def _render_breakdown(self) -> list[str]:
        lines = [
            "==================== ANALYSIS OF INVALID FILES ====================",
            f"{'The reason for the invalidity':<30} | {'Percent':<10} | {'Number of files':<15}",
            "-" * 64,
        ]
        for reason, percentage, count in self.percentage_breakdown():
            lines.append(f"{reason.value:<30} | {percentage:>6.2f}% | {count:>15}")
        lines.append("-" * 64)
        lines.append(
            f"{'Total invalid files:':<30} | {Decimal(100):>6.2f}% | {self.total_invalid:>15}"
        )
        return lines

    def generate_report(self) -> str:
        """
        Build the detailed report text.

        Returns:
            Total count, per-reason file lists and the percentage table
        """
        lines = [
            "==== DETAILED REPORT ON INVALID FILES ====",
            f"The total number of invalid files: {self.total_invalid}",
        ]

        for reason, files in self.by_reason().items():
            lines.append("")
            lines.append(f"{reason.value}:")
            lines.append(f"Number of files: {len(files)}")
            lines.append("Files:")
            lines.extend(f" - {filename}" for filename in files)

        if self.total_invalid:
            lines.append("")
            lines.extend(self._render_breakdown())

        return "\n".join(lines)

    def export_report(self, file_path: Path) -> Path:
        """
        Write the total count and per-reason file lists to a text file.

        Args:
            file_path: Destination file

        Returns:
            Path of the written file

        Raises:
            ReportExportError: If the file cannot be written
        """
        file_path = Path(file_path)
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(file_path, "w", encoding="utf-8") as f:
                f.write("Detailed report on invalid files\n")
                f.write(f"The total number of invalid files: {self.total_invalid}\n")
                for reason, files in self.by_reason().items():
                    f.write(f"\n{reason.value}:\n")
                    f.write(f"Number of files: {len(files)}\n")
                    for filename in files:
                        f.write(f" - {filename}\n")
        except OSError as e:
            logger.error(f"Error exporting the report to {file_path}: {e}")
            raise ReportExportError(file_path, e) from e

        logger.info(f"Invalid-file report exported to {file_path}")
        return file_path

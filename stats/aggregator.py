"""Thread-safe turnover statistics per document type."""

import re
import threading
from decimal import Decimal
from pathlib import Path
from typing import Callable, Optional

from errors import StatisticsExportError
from models.document import Amount, DocumentType, TypeTotals, empty_statistics
from utils.logging_config import get_logger

logger = get_logger(__name__)

MAX_BAR_LENGTH = 50
BAR_CHAR = "█"

EXPORT_LINE_PATTERN = re.compile(r"^(\w+) (total|count): (\S+)$")


def format_amount(value: Decimal) -> str:
    """Two-decimal rendering used for display."""
    return f"{value:.2f}"


def format_export_amount(value: Decimal) -> str:
    """
    Exact rendering used for the export file.

    At least two decimals are written; extra digits are kept so the file
    reads back to the same total.
    """
    if value.as_tuple().exponent >= -2:
        return f"{value:.2f}"
    return f"{value:f}"


class StatisticsAggregator:
    """
    Accumulate per-type totals and record counts.

    Every record call takes the internal lock, so totals stay consistent when
    several threads record at once even though the pipeline itself walks the
    directory sequentially.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._statistics = empty_statistics()

    def record(self, document_type: DocumentType, amount: Decimal) -> None:
        """
        Add one amount to a document type's running total.

        Args:
            document_type: Type the amount belongs to
            amount: Non-negative amount
        """
        if document_type not in self._statistics:
            logger.warning(f"Unsupported type: {document_type}")
            return

        with self._lock:
            current = self._statistics[document_type]
            self._statistics[document_type] = TypeTotals(
                total=current.total + amount, count=current.count + 1
            )

    def record_amount(self, amount: Amount) -> None:
        self.record(amount.document_type, amount.value)

    def snapshot(self) -> dict[DocumentType, TypeTotals]:
        """Copy of the current statistics."""
        with self._lock:
            return {key: value.model_copy() for key, value in self._statistics.items()}

    def total_for(self, document_type: DocumentType) -> Decimal:
        with self._lock:
            return self._statistics[document_type].total

    def count_for(self, document_type: DocumentType) -> int:
        with self._lock:
            return self._statistics[document_type].count

    @property
    def grand_total(self) -> Decimal:
        return sum((totals.total for totals in self.snapshot().values()), Decimal("0"))

    def render_table(self) -> str:
        """Formatted table of type, total and number of records."""
        lines = [
            "==================== FINANCIAL STATISTICS ====================",
            f"{'Type':<15} | {'Total Amount':<15} | {'Number of Files':<20}",
            "-" * 63,
        ]
        for document_type, totals in self.snapshot().items():
            lines.append(
                f"{document_type.value:<15} | {format_amount(totals.total):<15} | "
                f"{totals.count:<20}"
            )
        lines.append("=" * 64)
        return "\n".join(lines)

    def render_bar_chart(self) -> str:
        """Bar chart with bars scaled to the largest total."""
        snapshot = self.snapshot()
        lines = ["===== Graphical Representation ====="]

        max_value = max((totals.total for totals in snapshot.values()), default=Decimal("0"))
        if max_value == 0:
            lines.append("No data to display a bar chart.")
            return "\n".join(lines)

        for document_type, totals in snapshot.items():
            bar_length = int(totals.total / max_value * MAX_BAR_LENGTH)
            lines.append(
                f"{document_type.value:<10}: {BAR_CHAR * bar_length} "
                f"({format_amount(totals.total):>8} {document_type.currency_symbol}) "
                f"[{totals.count} files]"
            )
        lines.append("-" * 64)
        return "\n".join(lines)

    def display(self, echo: Optional[Callable[[str], None]] = None) -> str:
        """
        Render the table and bar chart.

        Args:
            echo: Optional sink that receives the rendered text

        Returns:
            The rendered text
        """
        rendered = f"{self.render_table()}\n\n{self.render_bar_chart()}"
        if echo:
            echo(rendered)
        return rendered

    def export(self, file_path: Path) -> Path:
        """
        Write the statistics to a flat text file.

        Each document type produces two lines: "<Type> total: <value>" and
        "<Type> count: <n>".

        Args:
            file_path: Destination file

        Returns:
            Path of the written file

        Raises:
            StatisticsExportError: If the file cannot be written
        """
        file_path = Path(file_path)
        logger.info(f"Exporting statistics to file: {file_path}")

        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(file_path, "w", encoding="utf-8") as f:
                for document_type, totals in self.snapshot().items():
                    f.write(
                        f"{document_type.value} total: {format_export_amount(totals.total)}\n"
                    )
                    f.write(f"{document_type.value} count: {totals.count}\n")
        except OSError as e:
            logger.error(f"Failed to export statistics to file: {file_path}. Error: {e}")
            raise StatisticsExportError(file_path, e) from e

        logger.info(f"Statistics exported successfully to {file_path}")
        return file_path


def read_statistics_export(file_path: Path) -> dict[DocumentType, TypeTotals]:
    """
    Parse a file written by StatisticsAggregator.export.

    Args:
        file_path: Exported statistics file

    Returns:
        Statistics mapping with an entry for every document type

    Raises:
        ValueError: On a line that does not follow the export format
    """
    statistics = empty_statistics()

    with open(file_path, encoding="utf-8") as f:
        for line_number, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue

            match = EXPORT_LINE_PATTERN.match(line)
            if not match:
                raise ValueError(f"Unexpected statistics line {line_number}: {line!r}")

            document_type = DocumentType(match.group(1))
            current = statistics[document_type]
            if match.group(2) == "total":
                statistics[document_type] = TypeTotals(
                    total=Decimal(match.group(3)), count=current.count
                )
            else:
                statistics[document_type] = TypeTotals(
                    total=current.total, count=int(match.group(3))
                )

    return statistics

"""CSV export of per-file pipeline outcomes."""

import csv
from datetime import datetime
from pathlib import Path
from typing import Optional

from config import Config
from models import FileResult
from utils import get_logger

logger = get_logger(__name__)


class CSVExporter:
    """Export file results and their amounts to CSV."""

    def __init__(self, output_dir: Optional[Path] = None):
        """
        Initialize CSV exporter.

        Args:
            output_dir: Directory for output files (defaults to Config.OUTPUT_DIR)
        """
        self.output_dir = Path(output_dir or Config.OUTPUT_DIR)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def export(
        self, results: list[FileResult], filename_prefix: str = "documents"
    ) -> dict[str, Path]:
        """
        Export file results to CSV.

        Two files are written: one row per processed file, and one row per
        extracted amount.

        Args:
            results: FileResult objects from a pipeline run
            filename_prefix: Prefix for output filenames

        Returns:
            Dictionary mapping file type to output path
        """
        if not results:
            logger.warning("No file results to export")
            return {}

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        files_path = self.output_dir / f"{filename_prefix}_{timestamp}.csv"
        amounts_path = self.output_dir / f"{filename_prefix}_amounts_{timestamp}.csv"

        file_headers = [
            "file_id",
            "filename",
            "status",
            "rejection_reason",
            "amount_count",
            "file_total",
            "error_message",
        ]

        logger.info(f"Writing {len(results)} file results to {files_path}")
        with open(files_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=file_headers)
            writer.writeheader()

            for idx, result in enumerate(results, start=1):
                writer.writerow(
                    {
                        "file_id": f"DOC_{idx:05d}",
                        "filename": result.filename,
                        "status": result.status.value,
                        "rejection_reason": (
                            result.rejection_reason.value if result.rejection_reason else ""
                        ),
                        "amount_count": len(result.amounts),
                        "file_total": f"{result.total:.2f}",
                        "error_message": result.error_message or "",
                    }
                )

        amount_headers = ["file_id", "filename", "document_type", "amount", "source_line"]
        amount_rows = 0
        with open(amounts_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=amount_headers)
            writer.writeheader()

            for idx, result in enumerate(results, start=1):
                for amount in result.amounts:
                    writer.writerow(
                        {
                            "file_id": f"DOC_{idx:05d}",
                            "filename": result.filename,
                            "document_type": amount.document_type.value,
                            "amount": str(amount.value),
                            "source_line": amount.source_line,
                        }
                    )
                    amount_rows += 1

        logger.info(f"Wrote {amount_rows} amounts to {amounts_path}")
        return {"files": files_path, "amounts": amounts_path}

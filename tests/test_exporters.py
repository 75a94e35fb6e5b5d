"""Tests for the CSV and markdown run exporters."""

import csv
from datetime import datetime, timedelta
from decimal import Decimal

from exporters import CSVExporter, SummaryGenerator
from models import (
    Amount,
    DocumentType,
    FileResult,
    FileStatus,
    InvalidFileRecord,
    RejectionReason,
    RunCounters,
    RunResult,
    TypeTotals,
    empty_statistics,
)


def build_results() -> list[FileResult]:
    return [
        FileResult(
            filename="invoice_2024.txt",
            file_path="/docs/invoice_2024.txt",
            status=FileStatus.AGGREGATED,
            amounts=[
                Amount(document_type=DocumentType.INVOICE, value=Decimal("10.00")),
                Amount(
                    document_type=DocumentType.CHECK,
                    value=Decimal("2.50"),
                    source_line="Bill total amount 2,50",
                ),
            ],
        ),
        FileResult(
            filename="notes_2023.txt",
            file_path="/docs/notes_2023.txt",
            status=FileStatus.QUARANTINED,
            rejection_reason=RejectionReason.WRONG_YEAR,
        ),
    ]


def build_run_result() -> RunResult:
    statistics = empty_statistics()
    statistics[DocumentType.INVOICE] = TypeTotals(total=Decimal("1234.5"), count=1)
    started = datetime(2024, 6, 1, 12, 0)
    return RunResult(
        started_at=started,
        completed_at=started + timedelta(seconds=3),
        input_directory="/docs",
        results=build_results(),
        counters=RunCounters(total_processed=2, valid_count=1, invalid_count=1),
        statistics=statistics,
        invalid_files=[
            InvalidFileRecord(reason=RejectionReason.WRONG_YEAR, filename="notes_2023.txt")
        ],
    )


class TestCSVExporter:
    """Test cases for CSVExporter."""

    def test_export_writes_both_ledgers(self, tmp_path):
        exporter = CSVExporter(output_dir=tmp_path)

        paths = exporter.export(build_results(), filename_prefix="run")

        with open(paths["files"], newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
        assert [row["file_id"] for row in rows] == ["DOC_00001", "DOC_00002"]
        assert rows[0]["file_total"] == "12.50"
        assert rows[0]["amount_count"] == "2"
        assert rows[1]["rejection_reason"] == "WRONG_YEAR"
        assert rows[1]["status"] == "quarantined"

        with open(paths["amounts"], newline="", encoding="utf-8") as f:
            amounts = list(csv.DictReader(f))
        assert len(amounts) == 2
        assert amounts[1]["document_type"] == "Check"
        assert amounts[1]["source_line"] == "Bill total amount 2,50"

    def test_export_nothing(self, tmp_path):
        assert CSVExporter(output_dir=tmp_path).export([]) == {}


class TestSummaryGenerator:
    """Test cases for SummaryGenerator."""

    def test_generate_summary(self, tmp_path):
        generator = SummaryGenerator(tmp_path)

        path = generator.generate_summary(build_run_result())

        content = path.read_text(encoding="utf-8")
        assert path.name.startswith("RUN_SUMMARY_")
        assert "- **Total Files Processed:** 2" in content
        assert "- **Valid:** 1 (50.0%)" in content
        assert "| Invoice | 1,234.50 $ | 1 |" in content
        assert "| WRONG_YEAR | 1 | 100.00% |" in content
        assert "- notes_2023.txt" in content
        assert "**Processing Time:** 3.00s" in content

    def test_custom_output_file(self, tmp_path):
        run_result = build_run_result()
        run_result.invalid_files = []
        target = tmp_path / "summary.md"

        path = SummaryGenerator(tmp_path).generate_summary(run_result, target)

        assert path == target
        assert "No files were quarantined." in target.read_text(encoding="utf-8")

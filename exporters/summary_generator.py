"""Generate markdown summary reports for pipeline runs."""

from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Optional

from models import RejectionReason, RunResult


class SummaryGenerator:
    """Generate markdown summary reports for pipeline runs."""

    def __init__(self, output_dir: Path):
        """
        Initialize summary generator.

        Args:
            output_dir: Directory to save summary file
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def generate_summary(
        self, run_result: RunResult, output_file: Optional[Path] = None
    ) -> Path:
        """
        Generate a run summary.

        Args:
            run_result: Result returned by DocumentPipeline.process_directory
            output_file: Optional custom output path

        Returns:
            Path to generated summary file
        """
        if output_file is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            output_file = self.output_dir / f"RUN_SUMMARY_{timestamp}.md"

        stats = self._calculate_statistics(run_result)
        content = self._generate_markdown(stats)

        with open(output_file, "w", encoding="utf-8") as f:
            f.write(content)

        return output_file

    def _calculate_statistics(self, run_result: RunResult) -> dict:
        """Collect the figures the report shows."""
        counters = run_result.counters

        stats = {
            "timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
            "input_directory": run_result.input_directory,
            "total_files": counters.total_processed,
            "valid": counters.valid_count,
            "invalid": counters.invalid_count,
            "success_rate": counters.success_rate,
            "processing_time": run_result.duration_seconds or 0,
        }

        stats["turnover"] = [
            {
                "type": document_type.value,
                "currency": document_type.currency_symbol,
                "total": totals.total,
                "count": totals.count,
            }
            for document_type, totals in run_result.statistics.items()
        ]
        stats["grand_total"] = sum(
            (row["total"] for row in stats["turnover"]), Decimal("0")
        )

        stats["rejections"] = []
        for reason in RejectionReason:
            files = [r.filename for r in run_result.invalid_files if r.reason == reason]
            if files:
                stats["rejections"].append(
                    {
                        "reason": reason.value,
                        "count": len(files),
                        "share": len(files) / counters.invalid_count * 100,
                        "files": files,
                    }
                )

        return stats

    def _generate_markdown(self, stats: dict) -> str:
        """Generate markdown content from statistics."""
        md = []

        md.append("# Document Turnover Run Summary")
        md.append("")
        md.append(f"**Generated:** {stats['timestamp']}")
        md.append(f"**Directory:** {stats['input_directory']}")
        md.append("")
        md.append("---")
        md.append("")

        md.append("## Files")
        md.append("")
        md.append(f"- **Total Files Processed:** {stats['total_files']}")
        md.append(f"- **Valid:** {stats['valid']} ({stats['success_rate']:.1f}%)")
        md.append(f"- **Quarantined:** {stats['invalid']}")
        md.append(f"- **Processing Time:** {stats['processing_time']:.2f}s")
        md.append("")

        md.append("## Turnover")
        md.append("")
        md.append("| Type | Total | Records |")
        md.append("|------|-------|---------|")
        for row in stats["turnover"]:
            md.append(f"| {row['type']} | {row['total']:,.2f} {row['currency']} | {row['count']} |")
        md.append("")
        md.append(f"**Combined Total:** {stats['grand_total']:,.2f}")
        md.append("")

        md.append("## Quarantine")
        md.append("")
        if not stats["rejections"]:
            md.append("No files were quarantined.")
        else:
            md.append("| Reason | Files | Share |")
            md.append("|--------|-------|-------|")
            for row in stats["rejections"]:
                md.append(f"| {row['reason']} | {row['count']} | {row['share']:.2f}% |")
            md.append("")
            for row in stats["rejections"]:
                md.append(f"**{row['reason']}**")
                for filename in row["files"]:
                    md.append(f"- {filename}")
                md.append("")
        md.append("")

        md.append("---")
        md.append("")
        md.append("*Generated by the document turnover pipeline*")

        return "\n".join(md)

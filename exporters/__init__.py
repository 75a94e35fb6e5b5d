"""Supplementary run outputs: CSV ledgers and markdown summaries."""

from exporters.csv_exporter import CSVExporter
from exporters.summary_generator import SummaryGenerator

__all__ = ["CSVExporter", "SummaryGenerator"]

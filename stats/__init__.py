"""Turnover statistics and invalid-file tracking."""

from stats.aggregator import StatisticsAggregator, read_statistics_export
from stats.invalid_tracker import InvalidFileTracker

__all__ = ["StatisticsAggregator", "InvalidFileTracker", "read_statistics_export"]

"""Tests for StatisticsAggregator and the statistics export format."""

from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

import pytest

from errors import StatisticsExportError
from models import Amount, DocumentType
from stats import StatisticsAggregator, read_statistics_export


class TestStatisticsAggregator:
    """Test cases for StatisticsAggregator."""

    def setup_method(self):
        self.aggregator = StatisticsAggregator()

    def test_starts_empty_for_every_type(self):
        snapshot = self.aggregator.snapshot()

        assert set(snapshot) == set(DocumentType)
        assert all(totals.total == 0 and totals.count == 0 for totals in snapshot.values())

    def test_record_accumulates(self):
        self.aggregator.record(DocumentType.CHECK, Decimal("10.50"))
        self.aggregator.record(DocumentType.CHECK, Decimal("4.50"))
        self.aggregator.record_amount(
            Amount(document_type=DocumentType.ORDER, value=Decimal("100"))
        )

        assert self.aggregator.total_for(DocumentType.CHECK) == Decimal("15.00")
        assert self.aggregator.count_for(DocumentType.CHECK) == 2
        assert self.aggregator.count_for(DocumentType.ORDER) == 1
        assert self.aggregator.count_for(DocumentType.INVOICE) == 0
        assert self.aggregator.grand_total == Decimal("115.00")

    def test_snapshot_is_a_copy(self):
        snapshot = self.aggregator.snapshot()
        self.aggregator.record(DocumentType.INVOICE, Decimal("1"))

        assert snapshot[DocumentType.INVOICE].count == 0

    def test_concurrent_records(self):
        def record_one(_):
            self.aggregator.record(DocumentType.INVOICE, Decimal("0.01"))

        with ThreadPoolExecutor(max_workers=8) as executor:
            list(executor.map(record_one, range(1000)))

        assert self.aggregator.total_for(DocumentType.INVOICE) == Decimal("10.00")
        assert self.aggregator.count_for(DocumentType.INVOICE) == 1000

    def test_render_table(self):
        self.aggregator.record(DocumentType.CHECK, Decimal("123.45"))

        table = self.aggregator.render_table()

        assert "FINANCIAL STATISTICS" in table
        assert "123.45" in table
        assert "Invoice" in table

    def test_bar_chart_without_data(self):
        assert "No data to display a bar chart." in self.aggregator.render_bar_chart()

    def test_bar_chart_scales_to_largest_total(self):
        self.aggregator.record(DocumentType.ORDER, Decimal("200"))
        self.aggregator.record(DocumentType.CHECK, Decimal("100"))

        chart = self.aggregator.render_bar_chart()
        order_line = next(line for line in chart.splitlines() if line.startswith("Order"))
        check_line = next(line for line in chart.splitlines() if line.startswith("Check"))

        assert order_line.count("█") == 50
        assert check_line.count("█") == 25
        assert "€" in order_line

    def test_display_sends_text_to_echo(self):
        received = []

        rendered = self.aggregator.display(received.append)

        assert received == [rendered]
        assert "Graphical Representation" in rendered

    def test_export_format(self, tmp_path):
        self.aggregator.record(DocumentType.CHECK, Decimal("10.5"))
        self.aggregator.record(DocumentType.ORDER, Decimal("1000"))
        path = tmp_path / "nested" / "total_amount.txt"

        self.aggregator.export(path)

        assert path.read_text(encoding="utf-8").splitlines() == [
            "Check total: 10.50",
            "Check count: 1",
            "Invoice total: 0.00",
            "Invoice count: 0",
            "Order total: 1000.00",
            "Order count: 1",
        ]

    def test_export_keeps_extra_decimals(self, tmp_path):
        self.aggregator.record(DocumentType.CHECK, Decimal("1.234"))
        self.aggregator.record(DocumentType.INVOICE, Decimal("12"))
        path = self.aggregator.export(tmp_path / "total_amount.txt")

        lines = path.read_text(encoding="utf-8").splitlines()

        assert "Check total: 1.234" in lines
        assert "Invoice total: 12.00" in lines
        assert "1.23 " in self.aggregator.render_table()
        assert read_statistics_export(path)[DocumentType.CHECK].total == Decimal("1.234")

    def test_export_can_be_read_back(self, tmp_path):
        self.aggregator.record(DocumentType.INVOICE, Decimal("99.99"))
        self.aggregator.record(DocumentType.INVOICE, Decimal("0.01"))
        path = self.aggregator.export(tmp_path / "total_amount.txt")

        statistics = read_statistics_export(path)

        assert statistics[DocumentType.INVOICE].total == Decimal("100.00")
        assert statistics[DocumentType.INVOICE].count == 2
        assert statistics[DocumentType.CHECK].count == 0

    def test_read_rejects_unknown_lines(self, tmp_path):
        path = tmp_path / "total_amount.txt"
        path.write_text("Check total: 1.00\ngarbage\n")

        with pytest.raises(ValueError):
            read_statistics_export(path)

    def test_export_failure(self, tmp_path):
        # A directory cannot be opened for writing
        target = tmp_path / "total_amount.txt"
        target.mkdir()

        with pytest.raises(StatisticsExportError) as exc_info:
            self.aggregator.export(target)

        assert exc_info.value.path == target

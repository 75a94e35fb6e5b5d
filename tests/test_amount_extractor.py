"""Tests for AmountExtractor."""

from decimal import Decimal

import pytest

from errors import CheckAmountFormatError, FileNotReadableError, NoValidLinesError
from extractors import CheckGrammar, GrammarFactory
from extractors.base import compile_grammar
from models import DocumentType
from processors import AmountExtractor
from stats import StatisticsAggregator


class LooseCheckGrammar(CheckGrammar):
    """Captures any token after the check label, well-formed or not."""

    pattern = compile_grammar(r"Bill total amount\s*(\S+)")


class LooseGrammarFactory(GrammarFactory):
    def _build_grammar_map(self):
        grammars = super()._build_grammar_map()
        grammars[DocumentType.CHECK] = LooseCheckGrammar()
        return grammars


class TestAmountExtractor:
    """Test cases for AmountExtractor."""

    def setup_method(self):
        self.aggregator = StatisticsAggregator()
        self.extractor = AmountExtractor(self.aggregator)

    def test_mixed_document_types(self, tmp_path):
        path = tmp_path / "mixed_2024.txt"
        path.write_text(
            "Bill total amount EURO 10,50\n"
            "Some description\n"
            "Total amount: $20.00\n"
            "\n"
            "Order Total 1,000.00\n"
            "Bill total amount 4,50\n"
        )

        amounts = self.extractor.extract(path)

        assert [amount.document_type for amount in amounts] == [
            DocumentType.CHECK,
            DocumentType.INVOICE,
            DocumentType.ORDER,
            DocumentType.CHECK,
        ]
        assert self.aggregator.total_for(DocumentType.CHECK) == Decimal("15.00")
        assert self.aggregator.count_for(DocumentType.CHECK) == 2
        assert self.aggregator.total_for(DocumentType.INVOICE) == Decimal("20.00")
        assert self.aggregator.total_for(DocumentType.ORDER) == Decimal("1000.00")

    def test_parse_does_not_record(self, tmp_path):
        path = tmp_path / "order_2024.txt"
        path.write_text("Order Total 99.00\n")

        amounts = self.extractor.parse(path)

        assert amounts[0].value == Decimal("99.00")
        assert self.aggregator.count_for(DocumentType.ORDER) == 0

    def test_no_valid_lines(self, tmp_path):
        path = tmp_path / "notes_2024.txt"
        path.write_text("nothing\nto see\n")

        with pytest.raises(NoValidLinesError):
            self.extractor.extract(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotReadableError):
            self.extractor.extract(tmp_path / "missing_2024.txt")

    def test_directory_is_not_readable(self, tmp_path):
        with pytest.raises(FileNotReadableError):
            self.extractor.extract(tmp_path)

    def test_malformed_amount_records_nothing(self, tmp_path):
        path = tmp_path / "check_2024.txt"
        path.write_text(
            "Total amount: $5.00\n"
            "Bill total amount 10\n"
            "Bill total amount 1x2\n"
        )
        extractor = AmountExtractor(self.aggregator, grammars=LooseGrammarFactory())

        with pytest.raises(CheckAmountFormatError) as exc_info:
            extractor.extract(path)

        assert exc_info.value.raw_amount == "1x2"
        assert self.aggregator.grand_total == Decimal("0")
        assert self.aggregator.count_for(DocumentType.INVOICE) == 0
        assert self.aggregator.count_for(DocumentType.CHECK) == 0

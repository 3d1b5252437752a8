"""Tests for the transaction normalization pipeline."""

import pytest

from watchboard.errors import NotFoundError
from watchboard.processing.normalizer import (
    dedupe_by_ticker,
    filter_by_representative,
    normalize,
    parse_amount,
    top_transactions,
)
from watchboard.schemas.trade import TransactionRecord


class TestParseAmount:
    def test_strips_dollar_and_separator(self):
        assert parse_amount("$12,345") == 12345

    def test_multiple_separators(self):
        assert parse_amount("$1,000,001") == 1000001

    def test_range_uses_leading_number(self):
        assert parse_amount("$1,001 - $15,000") == 1001
        assert parse_amount("$1,000,001 - $5,000,000") == 1000001

    def test_open_ended_range(self):
        assert parse_amount("$50,000,001 +") == 50000001

    def test_decimal(self):
        assert parse_amount("$1,234.50") == 1234.5

    def test_unparsable_is_zero(self):
        assert parse_amount("N/A") == 0
        assert parse_amount("") == 0
        assert parse_amount("--") == 0

    def test_missing_is_zero(self):
        assert parse_amount(None) == 0

    def test_numeric_passthrough(self):
        assert parse_amount(2500) == 2500.0
        assert parse_amount(12.5) == 12.5


class TestFilterAndDedupe:
    def test_filter_ignores_case(self, pelosi_records):
        matched = filter_by_representative(pelosi_records, "NANCY PELOSI")
        assert len(matched) == 3
        assert all(isinstance(r, TransactionRecord) for r in matched)

    def test_filter_requires_full_name(self, pelosi_records):
        assert filter_by_representative(pelosi_records, "Pelosi") == []

    def test_filter_skips_missing_representative(self):
        records = [{"ticker": "AAPL", "amount": "$1,000"}]
        assert filter_by_representative(records, "Nancy Pelosi") == []

    def test_dedupe_keeps_first(self, pelosi_records):
        records = [TransactionRecord.model_validate(r) for r in pelosi_records[:3]]
        unique = dedupe_by_ticker(records)
        assert [r.ticker for r in unique] == ["AAPL", "MSFT"]
        assert unique[0].amount == "$1,000"


class TestNormalize:
    def test_example_from_disclosures(self, pelosi_records):
        result = normalize(pelosi_records, "nancy pelosi")
        assert [(t.ticker, t.amount) for t in result] == [("MSFT", 2000), ("AAPL", 1000)]

    def test_case_insensitive(self, pelosi_records):
        assert normalize(pelosi_records, "NANCY PELOSI") == normalize(
            pelosi_records, "nancy pelosi"
        )

    def test_empty_input_not_found(self):
        with pytest.raises(NotFoundError) as exc:
            normalize([], "Nancy Pelosi")
        assert exc.value.name == "Nancy Pelosi"
        assert 'No transactions found for "Nancy Pelosi"' in exc.value.message

    def test_unknown_member_not_found(self, pelosi_records):
        with pytest.raises(NotFoundError):
            normalize(pelosi_records, "Dan Crenshaw")

    def test_passthrough_fields(self, sample_house_trade_raw):
        (result,) = normalize([sample_house_trade_raw], "Nancy Pelosi")
        assert result.ticker == "NVDA"
        assert result.amount == 15001
        assert result.amount_text == "$15,001 - $50,000"
        assert result.transaction_date == "2024-01-02"
        assert result.representative == "Nancy Pelosi"

    def test_stable_for_equal_amounts(self):
        records = [
            {"representative": "Ro Khanna", "ticker": t, "amount": amount}
            for t, amount in [("A", "$100"), ("B", "N/A"), ("C", "$100"), ("D", "$500"), ("E", "")]
        ]
        result = normalize(records, "Ro Khanna")
        assert [t.ticker for t in result] == ["D", "A", "C", "B", "E"]

    def test_no_duplicate_tickers_and_descending(self):
        tickers = ["AAPL", "MSFT", "NVDA", "AAPL", "GOOG", "MSFT", "TSLA", "NVDA"]
        amounts = ["$15,001 - $50,000", "$1,001 - $15,000", "N/A", "$250,001 - $500,000",
                   "$50,001 - $100,000", "$2,000", "$1,001 - $15,000", "$999,999"]
        records = [
            {"representative": "Dan Crenshaw", "ticker": t, "amount": a}
            for t, a in zip(tickers, amounts)
        ]
        result = normalize(records, "dan crenshaw")

        seen = [t.ticker for t in result]
        assert len(seen) == len(set(seen)) == 5
        amounts_out = [t.amount for t in result]
        assert amounts_out == sorted(amounts_out, reverse=True)
        # TSLA and MSFT tie at 1001; MSFT came first
        assert seen.index("MSFT") < seen.index("TSLA")

    def test_accepts_records_and_dicts(self, pelosi_records):
        records = [TransactionRecord.model_validate(pelosi_records[0]), pelosi_records[2]]
        result = normalize(records, "Nancy Pelosi")
        assert [t.ticker for t in result] == ["MSFT", "AAPL"]


class TestTopTransactions:
    def test_slices_first_n(self):
        records = [
            {"representative": "Ro Khanna", "ticker": f"T{i}", "amount": f"${i},000"}
            for i in range(1, 9)
        ]
        result = normalize(records, "Ro Khanna")
        top = top_transactions(result, 5)
        assert [t.ticker for t in top] == ["T8", "T7", "T6", "T5", "T4"]

    def test_shorter_than_limit(self, pelosi_records):
        result = normalize(pelosi_records, "Nancy Pelosi")
        assert len(top_transactions(result, 5)) == 2

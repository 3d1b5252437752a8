"""Transaction normalization for the House Stock Watcher view.

Given the full upstream feed and a representative name, the pipeline:
1. Filters records by case-insensitive exact name match
2. Keeps the first record seen for each ticker
3. Parses the dollar amount text into a float
4. Sorts by amount, largest first (stable)

Amount policy: ``$`` and every ``,`` are stripped, then the leading numeric
token is parsed. Range values such as ``"$1,001 - $15,000"`` therefore
normalize to their lower bound, and anything without a leading number
normalizes to 0.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from watchboard.errors import NotFoundError
from watchboard.schemas.trade import NormalizedTransaction, TransactionRecord

logger = logging.getLogger(__name__)

LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+))")


def parse_amount(value: Any) -> float:
    """Parse disclosure amount text like ``"$12,345"`` into a float."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if not isinstance(value, str):
        return 0.0

    cleaned = value.replace("$", "").replace(",", "")
    match = LEADING_NUMBER.match(cleaned)
    if match is None:
        return 0.0
    return float(match.group(1))


def _coerce(record: TransactionRecord | Mapping[str, Any]) -> TransactionRecord:
    if isinstance(record, TransactionRecord):
        return record
    return TransactionRecord.model_validate(record)


def filter_by_representative(
    records: Iterable[TransactionRecord | Mapping[str, Any]], target_name: str
) -> list[TransactionRecord]:
    """Keep records whose representative matches ``target_name`` ignoring case."""
    wanted = target_name.casefold()
    return [
        rec
        for rec in map(_coerce, records)
        if (rec.representative or "").casefold() == wanted
    ]


def dedupe_by_ticker(records: Iterable[TransactionRecord]) -> list[TransactionRecord]:
    """Drop every record whose ticker was already seen earlier in the sequence."""
    seen: set[str | None] = set()
    unique = []
    for rec in records:
        if rec.ticker in seen:
            continue
        seen.add(rec.ticker)
        unique.append(rec)
    return unique


def to_normalized(record: TransactionRecord) -> NormalizedTransaction:
    amount_text = record.amount if isinstance(record.amount, str) else ""
    if not amount_text and record.amount is not None:
        amount_text = str(record.amount)
    return NormalizedTransaction(
        ticker=record.ticker,
        amount=parse_amount(record.amount),
        amount_text=amount_text,
        transaction_date=record.transaction_date,
        representative=record.representative,
    )


def normalize(
    records: Iterable[TransactionRecord | Mapping[str, Any]], target_name: str
) -> list[NormalizedTransaction]:
    """Run the full filter -> dedupe -> parse -> sort pipeline.

    Raises NotFoundError when no record belongs to ``target_name``.
    """
    matched = filter_by_representative(records, target_name)
    if not matched:
        raise NotFoundError(target_name)

    unique = dedupe_by_ticker(matched)
    normalized = [to_normalized(rec) for rec in unique]
    # sorted() is stable, so equal amounts keep their deduplicated order
    result = sorted(normalized, key=lambda t: t.amount, reverse=True)

    logger.info(
        "Normalized %d transactions for %s (%d unique tickers)",
        len(matched), target_name, len(result),
    )
    return result


def top_transactions(
    transactions: Sequence[NormalizedTransaction], limit: int = 5
) -> list[NormalizedTransaction]:
    """First ``limit`` entries of an already sorted result set."""
    return list(transactions[:limit])

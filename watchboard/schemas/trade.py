from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class TransactionRecord(BaseModel):
    """One disclosure as published by House Stock Watcher.

    Only the fields the pipeline reads are declared; the rest are kept as
    extras so they pass through untouched.
    """

    model_config = ConfigDict(extra="allow")

    representative: str | None = None
    ticker: str | None = None
    amount: Any = None
    transaction_date: str | None = None


class NormalizedTransaction(BaseModel):
    model_config = ConfigDict(frozen=True)

    ticker: str | None = None
    amount: float = 0.0
    amount_text: str = ""
    transaction_date: str | None = None
    representative: str | None = None

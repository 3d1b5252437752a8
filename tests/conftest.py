"""Test configuration and fixtures."""

from __future__ import annotations

import httpx
import pytest


@pytest.fixture
def sample_house_trade_raw() -> dict:
    """Sample raw record from House Stock Watcher."""
    return {
        "disclosure_year": 2024,
        "disclosure_date": "01/15/2024",
        "transaction_date": "2024-01-02",
        "owner": "joint",
        "ticker": "NVDA",
        "asset_description": "NVIDIA Corporation",
        "type": "purchase",
        "amount": "$15,001 - $50,000",
        "representative": "Nancy Pelosi",
        "district": "CA11",
        "ptr_link": "https://example.com/filing.pdf",
        "cap_gains_over_200_usd": "False",
    }


@pytest.fixture
def pelosi_records() -> list[dict]:
    """Duplicate AAPL entries plus one MSFT entry for the same member."""
    return [
        {"representative": "Nancy Pelosi", "ticker": "AAPL", "amount": "$1,000",
         "transaction_date": "2024-01-02"},
        {"representative": "Nancy Pelosi", "ticker": "AAPL", "amount": "$5,000",
         "transaction_date": "2024-01-03"},
        {"representative": "Nancy Pelosi", "ticker": "MSFT", "amount": "$2,000",
         "transaction_date": "2024-01-04"},
        {"representative": "Ro Khanna", "ticker": "TSLA", "amount": "$9,000",
         "transaction_date": "2024-01-05"},
    ]


@pytest.fixture
def mock_http():
    """Build an httpx.AsyncClient backed by a handler function."""

    def _make(handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make

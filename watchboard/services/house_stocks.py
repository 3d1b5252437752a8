"""Fetch-and-normalize cycle for the House Stock Watcher page."""

from __future__ import annotations

from watchboard.config import settings
from watchboard.ingestion.trades.house_watcher import HouseWatcherClient
from watchboard.processing.normalizer import normalize
from watchboard.schemas.trade import NormalizedTransaction
from watchboard.state.controller import ViewController
from watchboard.state.view import ViewState


async def load_transactions(
    representative: str, client: HouseWatcherClient | None = None
) -> list[NormalizedTransaction]:
    """Re-fetch the whole feed and normalize it for one representative."""
    if client is not None:
        records = await client.fetch_transactions()
    else:
        async with HouseWatcherClient() as owned:
            records = await owned.fetch_transactions()
    return normalize(records, representative)


def create_controller() -> ViewController:
    state = ViewState(
        defaults=tuple(settings.default_representatives),
        empty_input_message="Please enter a valid representative name.",
    )
    return ViewController(load_transactions, state, settings.default_representative)

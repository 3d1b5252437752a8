from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from watchboard.errors import InputError, WatchboardError
from watchboard.logging_config import correlation_id_var, generate_correlation_id
from watchboard.state import view
from watchboard.state.view import ViewState

logger = logging.getLogger(__name__)

Loader = Callable[[str], Awaitable[Sequence[Any]]]


class ViewController:
    """Drives a ViewState through fetch cycles triggered by user actions."""

    def __init__(self, loader: Loader, state: ViewState, default_selection: str) -> None:
        self.loader = loader
        self.state = state
        self.default_selection = default_selection

    async def select(self, name: str) -> ViewState:
        """Fetch and process ``name``; applied only if still the latest request."""
        self.state = view.request_selection(self.state, name)
        token = self.state.latest_token
        reset = correlation_id_var.set(generate_correlation_id(token))
        try:
            logger.info("Loading %s (request %d)", name, token)
            try:
                results = await self.loader(name)
            except WatchboardError as e:
                logger.warning("Request %d for %s failed: %s", token, name, e.message)
                self.state = view.apply_failure(self.state, token, e.message)
            else:
                if not self.state.is_current(token):
                    logger.debug("Discarding stale request %d for %s", token, name)
                self.state = view.apply_success(self.state, token, results)
        finally:
            correlation_id_var.reset(reset)
        return self.state

    async def add_custom(self, text: str | None) -> ViewState:
        """Add a user-entered name and immediately select it."""
        try:
            self.state = view.add_custom_selection(self.state, text)
        except InputError as e:
            self.state = view.report_error(self.state, e.message)
            return self.state
        name = view.validate_name(self.state, text)
        return await self.select(view.listed_name(self.state, name))

    async def start(self) -> ViewState:
        """Activate the default selection the first time only."""
        if self.state.started:
            return self.state
        self.state = view.mark_started(self.state)
        return await self.select(self.default_selection)

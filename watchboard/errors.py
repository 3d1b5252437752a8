"""Error taxonomy shared by both dashboards.

Every error carries a human-readable ``message`` that is shown in place of
the results; none of them is retried or fatal.
"""

from __future__ import annotations


class WatchboardError(Exception):
    """Base class for errors surfaced to the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class FetchError(WatchboardError):
    """Network failure or non-success HTTP status."""

    def __init__(self, message: str, url: str = "", status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ParseError(WatchboardError):
    """Malformed JSON or a payload of unexpected shape."""


class NotFoundError(WatchboardError):
    """No representative transactions or geocoding result for a name."""

    def __init__(self, name: str, message: str | None = None) -> None:
        super().__init__(
            message
            or f'No transactions found for "{name}". Please enter a valid representative.'
        )
        self.name = name


class InputError(WatchboardError):
    """Empty or whitespace-only user-entered name."""

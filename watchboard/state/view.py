"""Immutable view state and the transitions that produce new states.

Every transition is a pure function ``(state, ...) -> state``. A fetch cycle
is tagged with the request token issued by ``request_selection``; results
carrying an older token are discarded, so the most recent selection always
wins regardless of which response arrives last.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from typing import Any

from watchboard.errors import InputError


@dataclass(frozen=True)
class ViewState:
    """Everything a page needs to render one selection."""

    defaults: tuple[str, ...] = ()
    selection: str | None = None
    custom_selections: tuple[str, ...] = ()
    error: str = ""
    results: tuple[Any, ...] = ()
    latest_token: int = 0
    started: bool = False

    # Message used when a custom name is blank
    empty_input_message: str = field(default="Please enter a valid name.", compare=False)

    @property
    def selections(self) -> tuple[str, ...]:
        """Built-in selections followed by the user-added ones."""
        return self.defaults + self.custom_selections

    def is_current(self, token: int) -> bool:
        return token == self.latest_token


def request_selection(state: ViewState, name: str) -> ViewState:
    """Start a new fetch cycle for ``name`` and issue its request token."""
    return replace(
        state,
        selection=name,
        error="",
        latest_token=state.latest_token + 1,
    )


def apply_success(state: ViewState, token: int, results: Sequence[Any]) -> ViewState:
    if not state.is_current(token):
        return state
    return replace(state, results=tuple(results), error="")


def apply_failure(state: ViewState, token: int, message: str) -> ViewState:
    if not state.is_current(token):
        return state
    return replace(state, results=(), error=message)


def report_error(state: ViewState, message: str) -> ViewState:
    """Show an error raised before any fetch started.

    Issues a fresh token so that a fetch still in flight cannot overwrite
    the error when it completes.
    """
    return replace(
        state, results=(), error=message, latest_token=state.latest_token + 1,
    )


def validate_name(state: ViewState, text: str | None) -> str:
    name = (text or "").strip()
    if not name:
        raise InputError(state.empty_input_message)
    return name


def listed_name(state: ViewState, name: str) -> str:
    """The listed spelling of ``name`` when it is already a selection."""
    wanted = name.casefold()
    for known in state.selections:
        if known.casefold() == wanted:
            return known
    return name


def add_custom_selection(state: ViewState, text: str | None) -> ViewState:
    """Append a user-entered name to the selection list.

    Raises InputError for blank text, leaving the list untouched. Names that
    are already listed (ignoring case) are not appended again.
    """
    name = validate_name(state, text)
    known = {s.casefold() for s in state.selections}
    if name.casefold() in known:
        return state
    return replace(state, custom_selections=state.custom_selections + (name,))


def mark_started(state: ViewState) -> ViewState:
    return replace(state, started=True)

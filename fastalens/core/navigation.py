"""Total transition functions over :class:`NavigationState`.

Each function takes the current state (and the catalog where file data is
needed) and returns the next state. None of them mutate their inputs.
"""

from __future__ import annotations

import re
from dataclasses import replace

from fastalens.core.analytics import build_snapshot
from fastalens.core.errors import FilterInputError
from fastalens.core.state import InputMode, NavigationState
from fastalens.domain.sequences import Catalog, FilterRange

_RANGE_PATTERN = re.compile(r"\+?([0-9]+)-\+?([0-9]+)")


def clamp_index(index: int, size: int) -> int:
    if size <= 0:
        return 0
    return max(0, min(index, size - 1))


def recompute(state: NavigationState, catalog: Catalog) -> NavigationState:
    raw_lengths = catalog.raw_lengths(state.selected_file_index)
    snapshot = build_snapshot(raw_lengths, state.filter_range)
    return replace(
        state,
        snapshot=snapshot,
        selected_sequence_index=clamp_index(
            state.selected_sequence_index, snapshot.total
        ),
    )


def initial_state(catalog: Catalog, filter_range: FilterRange | None = None) -> NavigationState:
    state = NavigationState(filter_range=filter_range or FilterRange())
    return recompute(state, catalog)


def move_file(state: NavigationState, catalog: Catalog, step: int) -> NavigationState:
    target = clamp_index(state.selected_file_index + step, len(catalog))
    if target == state.selected_file_index:
        return state
    return recompute(replace(state, selected_file_index=target), catalog)


def move_sequence(state: NavigationState, step: int) -> NavigationState:
    target = clamp_index(state.selected_sequence_index + step, state.snapshot.total)
    if target == state.selected_sequence_index:
        return state
    return replace(state, selected_sequence_index=target)


def set_filter(
    state: NavigationState,
    catalog: Catalog,
    filter_range: FilterRange,
) -> NavigationState:
    return recompute(replace(state, filter_range=filter_range), catalog)


def set_filter_min(state: NavigationState, catalog: Catalog, value: int) -> NavigationState:
    return set_filter(state, catalog, replace(state.filter_range, min=value))


def set_filter_max(state: NavigationState, catalog: Catalog, value: int) -> NavigationState:
    return set_filter(state, catalog, replace(state.filter_range, max=value))


def begin_filter_input(state: NavigationState) -> NavigationState:
    return replace(state, mode=InputMode.FILTER_INPUT, buffer="")


def append_character(state: NavigationState, character: str) -> NavigationState:
    return replace(state, buffer=state.buffer + character)


def delete_character(state: NavigationState) -> NavigationState:
    if not state.buffer:
        return state
    return replace(state, buffer=state.buffer[:-1])


def cancel_filter_input(state: NavigationState) -> NavigationState:
    return replace(state, mode=InputMode.BROWSING, buffer="")


def parse_filter_text(text: str) -> FilterRange:
    """Parse ``"min-max"`` into a bounded range, raising FilterInputError otherwise."""
    match = _RANGE_PATTERN.fullmatch(text.strip())
    if match is None:
        raise FilterInputError(
            message="Filter must look like min-max",
            detail=repr(text),
        )
    return FilterRange(min=int(match.group(1)), max=int(match.group(2)))


def commit_filter_input(state: NavigationState, catalog: Catalog) -> NavigationState:
    """
    Apply the typed range and leave filter input mode.

    Raises FilterInputError when the buffer does not parse; the caller decides
    what a rejected buffer means (the controller discards it).
    """
    filter_range = parse_filter_text(state.buffer)
    return set_filter(cancel_filter_input(state), catalog, filter_range)


def request_quit(state: NavigationState) -> NavigationState:
    return replace(state, quit_requested=True)

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from fastalens.core import navigation
from fastalens.core.errors import FilterInputError, format_error
from fastalens.core.logging import get_logger, log_event
from fastalens.core.state import InputMode, NavigationState, NavigationStateStore
from fastalens.domain.sequences import Catalog, FilterRange

DEFAULT_QUICK_FILTER_MIN = 1000
DEFAULT_QUICK_FILTER_MAX = 10000


@dataclass(frozen=True)
class KeyInput:
    """A single key press: a named key and, when printable, its character."""

    key: str
    character: str | None = None

    @classmethod
    def char(cls, character: str) -> KeyInput:
        return cls(key=character, character=character)


Transition = Callable[[NavigationState], NavigationState]


class NavigationController:
    """Owns the navigation state and applies one key press at a time."""

    def __init__(
        self,
        catalog: Catalog,
        *,
        quick_filter_min: int = DEFAULT_QUICK_FILTER_MIN,
        quick_filter_max: int = DEFAULT_QUICK_FILTER_MAX,
        initial_filter: FilterRange | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.catalog = catalog
        self.quick_filter_min = quick_filter_min
        self.quick_filter_max = quick_filter_max
        self._logger = logger or get_logger("fastalens.controller")
        self.store = NavigationStateStore(
            navigation.initial_state(catalog, initial_filter)
        )

    @property
    def state(self) -> NavigationState:
        return self.store.state

    @property
    def should_quit(self) -> bool:
        return self.state.quit_requested

    def handle_key(self, key: KeyInput) -> NavigationState:
        current = self.state
        if current.quit_requested:
            return current
        if current.mode is InputMode.FILTER_INPUT:
            new_state = self._handle_filter_input(current, key)
        else:
            new_state = self._handle_browsing(current, key)
        self._log_changes(current, new_state)
        self.store.replace(new_state)
        return new_state

    def _browsing_transitions(self) -> dict[str, Transition]:
        catalog = self.catalog
        return {
            "down": lambda state: navigation.move_file(state, catalog, 1),
            "up": lambda state: navigation.move_file(state, catalog, -1),
            "right": lambda state: navigation.move_sequence(state, 1),
            "left": lambda state: navigation.move_sequence(state, -1),
            "quit": navigation.request_quit,
        }

    def _browsing_shortcuts(self) -> dict[str, Transition]:
        catalog = self.catalog
        return {
            "q": navigation.request_quit,
            "m": lambda state: navigation.set_filter_min(
                state, catalog, self.quick_filter_min
            ),
            "M": lambda state: navigation.set_filter_max(
                state, catalog, self.quick_filter_max
            ),
            "i": navigation.begin_filter_input,
        }

    def _handle_browsing(self, state: NavigationState, key: KeyInput) -> NavigationState:
        transition = self._browsing_transitions().get(key.key)
        if transition is None and key.character:
            transition = self._browsing_shortcuts().get(key.character)
        if transition is None:
            return state
        return transition(state)

    def _handle_filter_input(
        self, state: NavigationState, key: KeyInput
    ) -> NavigationState:
        if key.key == "enter":
            try:
                return navigation.commit_filter_input(state, self.catalog)
            except FilterInputError as exc:
                message, _severity = format_error(exc)
                log_event(
                    self._logger,
                    "filter_input_rejected",
                    level=logging.DEBUG,
                    reason=message,
                )
                return navigation.cancel_filter_input(state)
        if key.key == "escape":
            return navigation.cancel_filter_input(state)
        if key.key == "backspace":
            return navigation.delete_character(state)
        if key.character:
            return navigation.append_character(state, key.character)
        return state

    def _log_changes(self, old: NavigationState, new: NavigationState) -> None:
        if new.selected_file_index != old.selected_file_index:
            log_event(
                self._logger,
                "file_selected",
                index=new.selected_file_index,
                path=self.catalog[new.selected_file_index].path,
                records=new.snapshot.total,
            )
        if new.filter_range != old.filter_range:
            log_event(
                self._logger,
                "filter_changed",
                filter=new.filter_range.describe(),
                records=new.snapshot.total,
            )
        if new.quit_requested and not old.quit_requested:
            log_event(self._logger, "session_quit")

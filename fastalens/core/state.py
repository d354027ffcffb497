from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from fastalens.domain.sequences import AnalyticsSnapshot, FilterRange


class InputMode(str, Enum):
    BROWSING = "browsing"
    FILTER_INPUT = "filter_input"


@dataclass(frozen=True, slots=True)
class NavigationState:
    selected_file_index: int = 0
    selected_sequence_index: int = 0
    filter_range: FilterRange = FilterRange()
    mode: InputMode = InputMode.BROWSING
    buffer: str = ""
    snapshot: AnalyticsSnapshot = AnalyticsSnapshot()
    quit_requested: bool = False

    @property
    def selected_length(self) -> int | None:
        return self.snapshot.length_at(self.selected_sequence_index)


class NavigationStateStore:
    """Holds the current navigation state and notifies read-only listeners."""

    def __init__(self, initial: NavigationState | None = None) -> None:
        self._state = initial or NavigationState()
        self._listeners: set[Callable[[NavigationState], None]] = set()

    @property
    def state(self) -> NavigationState:
        return self._state

    def subscribe(self, callback: Callable[[NavigationState], None]) -> None:
        self._listeners.add(callback)
        callback(self._state)

    def unsubscribe(self, callback: Callable[[NavigationState], None]) -> None:
        self._listeners.discard(callback)

    def replace(self, new_state: NavigationState) -> bool:
        if new_state == self._state:
            return False
        self._state = new_state
        for callback in list(self._listeners):
            callback(self._state)
        return True

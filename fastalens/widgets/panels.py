from __future__ import annotations

from rich.text import Text
from textual.widgets import Static

from fastalens.core.state import NavigationState, NavigationStateStore


class StatePanel(Static):
    """Bordered panel that redraws itself from navigation state updates."""

    def __init__(self, state_store: NavigationStateStore, *, id: str, title: str) -> None:
        super().__init__("", id=id)
        self.title = title
        self._state_store = state_store
        self._state_subscription = self._handle_state_update

    def on_mount(self) -> None:
        self.border_title = self.title
        self._state_store.subscribe(self._state_subscription)

    def on_unmount(self) -> None:
        self._state_store.unsubscribe(self._state_subscription)

    def _handle_state_update(self, state: NavigationState) -> None:
        self.update(self.render_state(state))

    def render_state(self, state: NavigationState) -> Text | str:
        """Return the panel body for ``state``; subclasses override this."""
        return ""

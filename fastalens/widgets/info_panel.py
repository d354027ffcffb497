from __future__ import annotations

from rich.text import Text

from fastalens.core.state import InputMode, NavigationState, NavigationStateStore
from fastalens.widgets.panels import StatePanel


def format_filter_info(state: NavigationState) -> str:
    if state.mode is InputMode.FILTER_INPUT:
        return f"Filter (min-max): {state.buffer}"
    selected = state.selected_length
    return (
        f"Filter: {state.filter_range.describe()}"
        f" | Total: {state.snapshot.total}"
        f" | Selected len: {selected if selected is not None else 0}"
    )


class FilterInfoPanel(StatePanel):
    def __init__(self, state_store: NavigationStateStore) -> None:
        super().__init__(state_store, id="filter_info", title="Filter & Info")

    def render_state(self, state: NavigationState) -> Text:
        style = "yellow" if state.mode is InputMode.FILTER_INPUT else ""
        return Text(format_filter_info(state), style=style)

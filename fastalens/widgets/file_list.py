from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Static

from fastalens.core.state import NavigationState, NavigationStateStore
from fastalens.domain.sequences import Catalog

SELECTED_PREFIX = "> "
UNSELECTED_PREFIX = "  "


def render_file_rows(catalog: Catalog, selected_index: int) -> Text:
    # One line per file so row index and scroll offset line up.
    text = Text(no_wrap=True, overflow="ellipsis")
    for index, item in enumerate(catalog):
        if index:
            text.append("\n")
        if index == selected_index:
            text.append(f"{SELECTED_PREFIX}{item.path}", style="bold yellow")
        else:
            text.append(f"{UNSELECTED_PREFIX}{item.path}")
    return text


def row_scroll_offset(selected: int, scroll_y: int, visible_rows: int) -> int:
    """Smallest scroll change that keeps row ``selected`` inside the viewport."""
    if visible_rows <= 0 or selected < scroll_y:
        return selected
    if selected >= scroll_y + visible_rows:
        return selected - visible_rows + 1
    return scroll_y


class FileListPanel(VerticalScroll, can_focus=False):
    """Scrollable list of catalog paths that follows the selected file."""

    def __init__(self, catalog: Catalog, state_store: NavigationStateStore) -> None:
        super().__init__(id="file_list")
        self._catalog = catalog
        self._state_store = state_store
        self._rows = Static("", id="file_list_rows")

    def compose(self) -> ComposeResult:
        yield self._rows

    def on_mount(self) -> None:
        self.border_title = "FASTA Files"
        self._state_store.subscribe(self._handle_state_update)

    def on_unmount(self) -> None:
        self._state_store.unsubscribe(self._handle_state_update)

    def _handle_state_update(self, state: NavigationState) -> None:
        selected = state.selected_file_index
        self._rows.update(render_file_rows(self._catalog, selected))
        self.call_after_refresh(self._scroll_to_row, selected)

    def _scroll_to_row(self, selected: int) -> None:
        target = row_scroll_offset(
            selected,
            int(self.scroll_y),
            self.scrollable_content_region.height,
        )
        if target != int(self.scroll_y):
            self.scroll_to(y=target, animate=False, immediate=True)

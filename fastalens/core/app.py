from __future__ import annotations

from pathlib import Path

from textual import events
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical

from fastalens import __version__
from fastalens.core.controller import KeyInput, NavigationController
from fastalens.core.state import NavigationState
from fastalens.widgets.file_list import FileListPanel
from fastalens.widgets.histogram import HistogramPanel
from fastalens.widgets.info_panel import FilterInfoPanel
from fastalens.widgets.key_help import ControlsPanel
from fastalens.widgets.top_bar import TopBar


def key_input_from_event(event: events.Key) -> KeyInput:
    character = event.character if event.is_printable else None
    return KeyInput(key=event.key, character=character)


class FastaLensApp(App):
    TITLE = "fastalens"
    CSS_PATH = Path(__file__).parent.parent / "styles" / "index.tcss"

    def __init__(self, controller: NavigationController, root: Path) -> None:
        super().__init__()
        self.controller = controller
        self.root = root

    def compose(self) -> ComposeResult:
        store = self.controller.store
        with Vertical(id="app_main_container"):
            yield TopBar(
                app_title=FastaLensApp.TITLE,
                app_version=__version__,
                root_path=str(self.root),
                file_count=len(self.controller.catalog),
                state_store=store,
            )
            yield FileListPanel(self.controller.catalog, store)
            yield Horizontal(
                HistogramPanel(store),
                Vertical(
                    FilterInfoPanel(store),
                    ControlsPanel(
                        quick_filter_min=self.controller.quick_filter_min,
                        quick_filter_max=self.controller.quick_filter_max,
                    ),
                    id="details_pane",
                ),
                id="main_pane",
            )

    def on_mount(self) -> None:
        self.controller.store.subscribe(self._handle_state_update)

    def on_unmount(self) -> None:
        self.controller.store.unsubscribe(self._handle_state_update)

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        self.controller.handle_key(key_input_from_event(event))

    async def action_quit(self) -> None:
        self.controller.handle_key(KeyInput("quit"))

    def _handle_state_update(self, state: NavigationState) -> None:
        if state.quit_requested:
            self.exit(0)

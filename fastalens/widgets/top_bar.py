from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.reactive import reactive
from textual.widgets import Label

from fastalens.core.state import InputMode, NavigationState, NavigationStateStore


class TopBar(Container):
    """Custom application title bar."""

    root_path = reactive("", always_update=True)
    mode = reactive(InputMode.BROWSING, always_update=True)

    def __init__(
        self,
        *,
        app_title: str | None,
        app_version: str,
        root_path: str,
        file_count: int,
        state_store: NavigationStateStore,
    ) -> None:
        super().__init__()
        self._state_store = state_store
        self._state_subscription = self._handle_state_update
        self._file_count = file_count

        self.title_label = Horizontal(
            Label(
                f"{app_title}",
                id="topbar_app_name",
            ),
            Label(
                f"v{app_version}",
                id="topbar_app_version",
            ),
            id="app_meta_container",
        )
        self.status_label = Label("", id="topbar_status")
        self.count_label = Label("", id="topbar_file_count")
        self._initial_root_path = root_path

    def on_mount(self) -> None:
        self.root_path = self._initial_root_path
        self.count_label.update(f"[dim]Files:[/dim] {self._file_count}")
        self._state_store.subscribe(self._state_subscription)

    def on_unmount(self) -> None:
        self._state_store.unsubscribe(self._state_subscription)

    def watch_root_path(self) -> None:
        self._update_status()

    def watch_mode(self) -> None:
        self._update_status()

    def _update_status(self) -> None:
        if not self.root_path:
            self.status_label.update("")
            return

        status = {
            InputMode.BROWSING: "[dim]Browsing - [/dim]",
            InputMode.FILTER_INPUT: "[b]Filter input[/b] - ",
        }
        self.status_label.update(status[self.mode] + escape(self.root_path))

    def _handle_state_update(self, state: NavigationState) -> None:
        self.mode = state.mode

    def compose(self) -> ComposeResult:
        yield self.title_label
        yield self.status_label
        yield self.count_label

from __future__ import annotations

from dataclasses import dataclass

from rich.text import Text
from textual.widgets import Static


@dataclass(frozen=True)
class HelpRow:
    keys: str
    shortcut: str
    style: str


def build_help_rows(quick_filter_min: int, quick_filter_max: int) -> tuple[HelpRow, ...]:
    return (
        HelpRow("q", "quit", "red"),
        HelpRow("↑↓", "files", "cyan"),
        HelpRow("←→", "seq", "cyan"),
        HelpRow("i", "filter", "magenta"),
        HelpRow("m/M", f"{quick_filter_min}/{quick_filter_max}", "green"),
    )


def render_help_rows(rows: tuple[HelpRow, ...]) -> Text:
    text = Text()
    for row in rows:
        text.append(row.keys, style=row.style)
        text.append(f":{row.shortcut} ")
    text.rstrip()
    return text


class ControlsPanel(Static):
    """Single-line key legend."""

    def __init__(self, *, quick_filter_min: int, quick_filter_max: int) -> None:
        super().__init__(
            render_help_rows(build_help_rows(quick_filter_min, quick_filter_max)),
            id="controls",
        )

    def on_mount(self) -> None:
        self.border_title = "Controls"

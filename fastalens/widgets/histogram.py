from __future__ import annotations

from typing import Sequence

from rich.text import Text

from fastalens.core.state import NavigationState, NavigationStateStore
from fastalens.domain.sequences import Bin
from fastalens.widgets.panels import StatePanel

BAR_SPAN = 50
BAR_CHAR = "█"


def scale_counts(bins: Sequence[Bin], span: int = BAR_SPAN) -> list[int]:
    """Scale bin counts so the largest count maps to ``span`` cells."""
    if not bins:
        return []
    max_count = max(item.count for item in bins) or 1
    return [item.count * span // max_count for item in bins]


def render_histogram(bins: Sequence[Bin], span: int = BAR_SPAN) -> Text:
    if not bins:
        return Text("No sequences in range.", style="dim")
    label_width = max(len(item.label) for item in bins)
    text = Text()
    for index, (item, cells) in enumerate(zip(bins, scale_counts(bins, span))):
        if index:
            text.append("\n")
        text.append(item.label.rjust(label_width), style="cyan")
        text.append(" ")
        text.append(BAR_CHAR * cells, style="green")
        text.append(f" {item.count}", style="bold yellow")
    return text


class HistogramPanel(StatePanel):
    def __init__(self, state_store: NavigationStateStore) -> None:
        super().__init__(state_store, id="histogram", title="Length Bins (filtered)")

    def render_state(self, state: NavigationState) -> Text:
        return render_histogram(state.snapshot.bins)

from .file_list import FileListPanel
from .histogram import HistogramPanel
from .info_panel import FilterInfoPanel
from .key_help import ControlsPanel
from .top_bar import TopBar

__all__ = [
    "FileListPanel",
    "HistogramPanel",
    "FilterInfoPanel",
    "ControlsPanel",
    "TopBar",
]

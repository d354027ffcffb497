"""Rendering helpers and a headless run of the Textual app."""

from __future__ import annotations

import unittest
from dataclasses import replace
from pathlib import Path

from fastalens.core.app import FastaLensApp
from fastalens.core.controller import NavigationController
from fastalens.core.navigation import initial_state
from fastalens.core.state import InputMode, NavigationStateStore
from fastalens.domain.sequences import Bin, Catalog, FilterRange
from fastalens.widgets.file_list import FileListPanel, render_file_rows, row_scroll_offset
from fastalens.widgets.histogram import render_histogram, scale_counts
from fastalens.widgets.info_panel import format_filter_info
from fastalens.widgets.key_help import build_help_rows, render_help_rows
from fastalens.widgets.panels import StatePanel


def _catalog() -> Catalog:
    return Catalog.from_lengths({"b.fa": [10, 20, 30], "a.fa": [5, 150, 300, 999, 1000]})


def _long_catalog(size: int = 40) -> Catalog:
    return Catalog.from_lengths({f"f{index:02d}.fa": [10] for index in range(size)})


class RenderHelperTests(unittest.TestCase):
    def test_scale_counts_maps_largest_to_span(self) -> None:
        bins = [Bin("0-9", 4), Bin("10-19", 2), Bin("20-29", 0)]

        self.assertEqual(scale_counts(bins), [50, 25, 0])
        self.assertEqual(scale_counts([]), [])

    def test_scale_counts_handles_all_zero(self) -> None:
        self.assertEqual(scale_counts([Bin("0-0", 0)]), [0])

    def test_histogram_lists_every_bin(self) -> None:
        text = render_histogram([Bin("0-99", 3), Bin("100-199", 1)]).plain
        lines = text.splitlines()

        self.assertEqual(len(lines), 2)
        self.assertTrue(lines[0].startswith("   0-99 "))
        self.assertTrue(lines[0].endswith(" 3"))
        self.assertIn("█" * 50, lines[0])
        self.assertIn("█" * 16, lines[1])

    def test_histogram_empty_message(self) -> None:
        self.assertEqual(render_histogram([]).plain, "No sequences in range.")

    def test_file_rows_mark_selection(self) -> None:
        lines = render_file_rows(_catalog(), 1).plain.splitlines()

        self.assertEqual(lines, ["  a.fa", "> b.fa"])

    def test_file_rows_never_wrap(self) -> None:
        text = render_file_rows(_catalog(), 0)

        self.assertTrue(text.no_wrap)

    def test_row_offset_keeps_visible_row(self) -> None:
        self.assertEqual(row_scroll_offset(4, 2, 5), 2)
        self.assertEqual(row_scroll_offset(2, 2, 5), 2)

    def test_row_offset_follows_selection_down(self) -> None:
        self.assertEqual(row_scroll_offset(7, 2, 5), 3)
        self.assertEqual(row_scroll_offset(30, 0, 3), 28)

    def test_row_offset_follows_selection_up(self) -> None:
        self.assertEqual(row_scroll_offset(1, 5, 5), 1)

    def test_row_offset_without_viewport(self) -> None:
        self.assertEqual(row_scroll_offset(6, 0, 0), 6)

    def test_base_panel_renders_empty_body(self) -> None:
        state = initial_state(_catalog())
        panel = StatePanel(NavigationStateStore(state), id="plain", title="Plain")

        self.assertEqual(panel.render_state(state), "")

    def test_filter_info_browsing(self) -> None:
        state = initial_state(_catalog())

        self.assertEqual(
            format_filter_info(state),
            "Filter: 0-∞ | Total: 5 | Selected len: 5",
        )

    def test_filter_info_bounded_and_empty(self) -> None:
        state = initial_state(_catalog(), FilterRange(2000, 3000))

        self.assertEqual(
            format_filter_info(state),
            "Filter: 2000-3000 | Total: 0 | Selected len: 0",
        )

    def test_filter_info_while_typing(self) -> None:
        state = replace(
            initial_state(_catalog()), mode=InputMode.FILTER_INPUT, buffer="10-2"
        )

        self.assertEqual(format_filter_info(state), "Filter (min-max): 10-2")

    def test_help_rows_show_quick_filter_values(self) -> None:
        text = render_help_rows(build_help_rows(100, 200)).plain

        self.assertEqual(text, "q:quit ↑↓:files ←→:seq i:filter m/M:100/200")


class FastaLensAppTests(unittest.IsolatedAsyncioTestCase):
    async def test_keys_drive_controller_and_quit_exits(self) -> None:
        controller = NavigationController(_catalog())
        app = FastaLensApp(controller, Path("."))

        async with app.run_test() as pilot:
            await pilot.press("down")
            await pilot.pause()
            self.assertEqual(controller.state.selected_file_index, 1)

            await pilot.press("i")
            await pilot.pause()
            self.assertIs(controller.state.mode, InputMode.FILTER_INPUT)

            await pilot.press("enter")
            await pilot.pause()
            self.assertIs(controller.state.mode, InputMode.BROWSING)

            await pilot.press("q")

        self.assertTrue(controller.should_quit)
        self.assertEqual(app.return_value, 0)

    async def test_file_list_scrolls_to_selected_row(self) -> None:
        controller = NavigationController(_long_catalog())
        app = FastaLensApp(controller, Path("."))

        async with app.run_test(size=(80, 30)) as pilot:
            await pilot.pause()
            panel = app.query_one(FileListPanel)
            visible = panel.scrollable_content_region.height
            self.assertGreater(visible, 0)
            self.assertLess(visible, 30)

            for _ in range(30):
                await pilot.press("down")
            await pilot.pause()
            await pilot.pause()

            self.assertEqual(controller.state.selected_file_index, 30)
            top = int(panel.scroll_y)
            self.assertLessEqual(top, 30)
            self.assertLess(30, top + visible)

            for _ in range(30):
                await pilot.press("up")
            await pilot.pause()
            await pilot.pause()

            self.assertEqual(int(panel.scroll_y), 0)

    async def test_ctrl_q_follows_input_mode(self) -> None:
        controller = NavigationController(_catalog())
        app = FastaLensApp(controller, Path("."))

        async with app.run_test() as pilot:
            await pilot.press("i")
            await pilot.press("ctrl+q")
            await pilot.pause()
            self.assertFalse(controller.should_quit)
            self.assertIs(controller.state.mode, InputMode.FILTER_INPUT)

            await pilot.press("enter")
            await pilot.press("ctrl+q")

        self.assertTrue(controller.should_quit)
        self.assertEqual(app.return_value, 0)


if __name__ == "__main__":
    unittest.main()

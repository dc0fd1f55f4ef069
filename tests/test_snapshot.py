"""
Tests for the one-shot rich panel.
"""

import io

from rich.console import Console
from rich.panel import Panel

from timebar.progress_bars import render_bar
from timebar.snapshot import bar_text, build_panel, print_snapshot


def make_console(width=80):
    return Console(file=io.StringIO(), width=width, record=True, color_system=None)


class TestBarText:
    """Tests for styled bar rows."""

    def test_plain_text_matches_bar(self):
        bar = render_bar(" D ", 50.0, 10)
        assert bar_text(bar).plain == bar.text

    def test_filled_and_empty_styles(self):
        bar = render_bar(" D ", 50.0, 10)
        styles = [str(span.style) for span in bar_text(bar).spans]
        assert "blue" in styles
        assert "dim blue" in styles


class TestPanel:
    """Tests for the panel layout."""

    def test_build_panel(self, mid_june_snapshot):
        panel = build_panel(mid_june_snapshot, 80)
        assert isinstance(panel, Panel)
        assert panel.width == 80
        assert "12:30:45 - Thursday June 15, 2023" in str(panel.title)
        assert "It is day 166 of 365" in str(panel.subtitle)

    def test_print_snapshot(self, mid_june_snapshot):
        console = make_console()
        print_snapshot(console, mid_june_snapshot)
        output = console.export_text()

        assert "Thursday June 15, 2023" in output
        assert "199 days remaining in 2023" in output
        for label in (" M ", " H ", " D ", " Y "):
            assert label in output
        assert "75.83" in output
        assert "█" in output and "░" in output

    def test_narrow_console(self, mid_june_snapshot):
        console = make_console(width=20)
        print_snapshot(console, mid_june_snapshot)
        assert "75.83" in console.export_text()

"""
One-shot rich view of the time bars, for scripts and terminals where the
curses dashboard is not wanted.
"""

from typing import Optional

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .dashboard import BARS_INSET, frame_header, status_line
from .progress_bars import RenderedBar, bar_width, render_panel
from .time_calculations import TimeSnapshot, sample_and_compute_metrics, take_snapshot

# Panel border plus padding on each side
PANEL_CHROME = 4


def bar_text(bar: RenderedBar) -> Text:
    """Build a styled row for one bar."""
    text = Text(bar.label, style="bold white")
    filled = bar.filled_count
    text.append(bar.glyphs[:filled], style="blue")
    text.append(bar.glyphs[filled:], style="dim blue")
    text.append(f" {bar.numeric_label}", style="white")
    return text


def build_panel(snapshot: TimeSnapshot, width: int) -> Panel:
    """Create the dashboard panel for a snapshot at a given console width."""
    glyph_width = bar_width(width - PANEL_CHROME + BARS_INSET)
    bars = render_panel(sample_and_compute_metrics(snapshot), glyph_width)
    return Panel(
        Group(*(bar_text(bar) for bar in bars)),
        title=f"[bold]{frame_header(snapshot.local)}[/bold]",
        subtitle=status_line(snapshot.reference_date),
        border_style="blue",
        width=width,
    )


def print_snapshot(console: Optional[Console] = None, snapshot: Optional[TimeSnapshot] = None):
    if console is None:
        console = Console()
    if snapshot is None:
        snapshot = take_snapshot()
    console.print(build_panel(snapshot, console.width))

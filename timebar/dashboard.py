"""
Curses dashboard
Draws the header clock, side borders, the five time bars and the
day-of-year status line, redrawing every few milliseconds.

Controls:
- q / Esc: Quit
- Ctrl+C: Quit
"""

import curses
import logging
from datetime import date, datetime
from typing import List, Optional

from .progress_bars import RenderedBar, bar_width, render_panel
from .time_calculations import (
    TimeSnapshot,
    current_year,
    day_of_year,
    sample_and_compute_metrics,
    take_snapshot,
)

logger = logging.getLogger(__name__)

HEADER_FORMAT = "%H:%M:%S - %A %B %d, %Y"
BORDER_CHAR = "┃"
BORDER_ROWS = 7
BARS_TOP = 2
BARS_LEFT = 1
# The bar window leaves room for both side borders and the frame edge
BARS_INSET = 3
DAYS_IN_YEAR = 365
DEFAULT_REFRESH_MS = 75

PAIR_BANNER = 1
PAIR_BORDER = 2
PAIR_BARS = 3

QUIT_KEYS = (ord('q'), ord('Q'), 27)


def frame_header(now: datetime) -> str:
    return now.strftime(HEADER_FORMAT)


def status_line(today: date) -> str:
    """Day-of-year summary shown under the frame."""
    day = day_of_year(today)
    return (f" It is day {day} of {DAYS_IN_YEAR} - "
            f"{DAYS_IN_YEAR - day} days remaining in {current_year(today)}")


def center(text: str, width: int) -> str:
    """Center text in the terminal width."""
    return text.center(max(width, len(text)))


def init_colors():
    """Set up the color pairs if the terminal supports them."""
    if not curses.has_colors():
        return
    curses.start_color()
    curses.init_pair(PAIR_BANNER, curses.COLOR_WHITE, curses.COLOR_BLUE)
    curses.init_pair(PAIR_BORDER, curses.COLOR_BLUE, curses.COLOR_BLACK)
    curses.init_pair(PAIR_BARS, curses.COLOR_WHITE, curses.COLOR_BLACK)


class TimeDashboard:
    """Main application class."""

    def __init__(self, refresh_ms: int = DEFAULT_REFRESH_MS):
        self.refresh_ms = refresh_ms
        self._last_width: Optional[int] = None

    def put(self, stdscr, y: int, x: int, text: str, pair: int = 0):
        """Write text clipped to the screen."""
        height, width = stdscr.getmaxyx()
        if y >= height or x >= width:
            return
        try:
            stdscr.addstr(y, x, text[:width - x], curses.color_pair(pair))
        except curses.error:
            # writing the bottom-right cell moves the cursor off-screen
            pass

    def draw_frame(self, stdscr, snapshot: TimeSnapshot, width: int):
        """Draw the header, side borders and status line."""
        self.put(stdscr, 0, 0, center(frame_header(snapshot.local), width), PAIR_BANNER)

        inner = BORDER_CHAR + " " * max(0, width - 2) + BORDER_CHAR
        for row in range(1, BORDER_ROWS + 1):
            self.put(stdscr, row, 0, inner, PAIR_BORDER)

        status = center(status_line(snapshot.reference_date), width)
        self.put(stdscr, BORDER_ROWS + 1, 0, status, PAIR_BANNER)

    def draw_bars(self, stdscr, bars: List[RenderedBar]):
        for i, bar in enumerate(bars):
            self.put(stdscr, BARS_TOP + i, BARS_LEFT, bar.text, PAIR_BARS)

    def draw(self, stdscr, snapshot: TimeSnapshot) -> List[RenderedBar]:
        """Draw one full tick and return the rendered bars."""
        _, width = stdscr.getmaxyx()
        glyph_width = bar_width(width - BARS_INSET)
        if glyph_width != self._last_width:
            logger.debug("Bar width changed: %s -> %s", self._last_width, glyph_width)
            self._last_width = glyph_width

        bars = render_panel(sample_and_compute_metrics(snapshot), glyph_width)
        stdscr.erase()
        self.draw_frame(stdscr, snapshot, width)
        self.draw_bars(stdscr, bars)
        stdscr.refresh()
        return bars

    def run(self, stdscr):
        """Main application loop."""
        init_colors()
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal cannot hide the cursor")
        stdscr.timeout(self.refresh_ms)

        logger.info("Dashboard started (refresh every %d ms)", self.refresh_ms)
        while True:
            self.draw(stdscr, take_snapshot())
            key = stdscr.getch()
            if key in QUIT_KEYS:
                break
        logger.info("Dashboard stopped")

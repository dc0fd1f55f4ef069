"""
Progress bar rendering
Turns (label, percentage) pairs into rows of filled/empty block glyphs
with a zero-padded percentage suffix.
"""

from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

FILLED_GLYPH = "█"
EMPTY_GLYPH = "░"

# Columns reserved for the label prefix, the numeric suffix and the frame
BAR_MARGIN = 18
LABEL_WIDTH = 5


@dataclass(frozen=True)
class ProgressMetric:
    """A label and how far through its unit we are."""

    label: str
    percentage: float


@dataclass(frozen=True)
class RenderedBar:
    """One bar row ready to be written to the screen."""

    label: str
    glyphs: str
    numeric_label: str

    @property
    def filled_count(self) -> int:
        return self.glyphs.count(FILLED_GLYPH)

    @property
    def text(self) -> str:
        return f"{self.label}{self.glyphs} {self.numeric_label}"


def format_label(percentage: float) -> str:
    """Two decimals, zero-padded on the left to 5 characters.

    Longer values such as 100.00 are left as they are.
    """
    return f"{percentage:.2f}".rjust(LABEL_WIDTH, "0")


def bar_width(window_width: int) -> int:
    """Glyph region width for a window, never below zero."""
    return max(0, window_width - BAR_MARGIN)


def render_bar(label: str, percentage: float, width: int) -> RenderedBar:
    """Render a single bar of ``width - 1`` glyphs.

    Column ``n`` (1-based) is filled while ``n / width * 100`` is below the
    percentage, so the fill saturates for values outside 0-100.
    """
    glyphs = []
    for n in range(1, width):
        if n / width * 100.0 < percentage:
            glyphs.append(FILLED_GLYPH)
        else:
            glyphs.append(EMPTY_GLYPH)
    return RenderedBar(label, "".join(glyphs), format_label(percentage))


def render_panel(bars: Iterable[Union[ProgressMetric, Tuple[str, float]]],
                 width: int) -> List[RenderedBar]:
    """Render every bar at the same width; row i is the i-th input."""
    rendered = []
    for bar in bars:
        if isinstance(bar, ProgressMetric):
            label, percentage = bar.label, bar.percentage
        else:
            label, percentage = bar
        rendered.append(render_bar(label, percentage, width))
    return rendered

"""
Terminal dashboard of minute, hour, day, month and year progress bars.
"""

from .progress_bars import (
    ProgressMetric,
    RenderedBar,
    bar_width,
    format_label,
    render_bar,
    render_panel,
)
from .time_calculations import (
    TimeSnapshot,
    current_year,
    day_of_year,
    sample_and_compute_metrics,
    seconds_in_month,
    take_snapshot,
)

__version__ = "0.1.0"

"""
Time fraction calculations
Converts a sampled instant into how much of the current minute, hour,
day, month and year has elapsed.

Every function takes the instant explicitly; only take_snapshot() reads
the live clock.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import List, Optional

from .progress_bars import ProgressMetric

SECONDS_IN_MINUTE = 60
SECONDS_IN_HOUR = 3600
SECONDS_IN_DAY = 86400
# 365 days, also used in leap years
SECONDS_IN_YEAR = 31536000

# February is always 28 days here
MONTH_LENGTH_DAYS = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]

METRIC_LABELS = [" M ", " H ", " D ", " M ", " Y "]


@dataclass(frozen=True)
class TimeSnapshot:
    """One clock reading: local wall clock plus the same instant in UTC."""

    local: datetime
    utc: datetime

    @classmethod
    def from_instant(cls, instant: datetime) -> "TimeSnapshot":
        """Build a snapshot from a fixed instant, keeping its own zone as local."""
        if instant.tzinfo is None:
            instant = instant.astimezone()
        return cls(local=instant, utc=instant.astimezone(timezone.utc))

    @property
    def reference_date(self) -> date:
        """UTC calendar date used for the year and the day-of-year status line."""
        return self.utc.date()


def take_snapshot() -> TimeSnapshot:
    """Sample the system clock once."""
    return TimeSnapshot.from_instant(datetime.now(timezone.utc).astimezone())


def fractional_seconds(now: datetime) -> float:
    """Seconds within the minute, including the millisecond part."""
    return now.second + (now.microsecond // 1000) / 1000.0


def seconds_elapsed_today(now: datetime) -> float:
    return (now.hour * SECONDS_IN_HOUR
            + now.minute * SECONDS_IN_MINUTE
            + fractional_seconds(now))


def percentage_elapsed(elapsed_seconds: float, unit_seconds: float) -> float:
    """Share of a unit that has passed, 0-100."""
    return elapsed_seconds / unit_seconds * 100.0


def percentage_of_minute_elapsed(now: datetime) -> float:
    return percentage_elapsed(fractional_seconds(now), SECONDS_IN_MINUTE)


def percentage_of_hour_elapsed(now: datetime) -> float:
    elapsed = now.minute * SECONDS_IN_MINUTE + fractional_seconds(now)
    return percentage_elapsed(elapsed, SECONDS_IN_HOUR)


def percentage_of_day_elapsed(now: datetime) -> float:
    return percentage_elapsed(seconds_elapsed_today(now), SECONDS_IN_DAY)


def seconds_in_month(year: int, month: int) -> int:
    """Length of a month in seconds, leap February included."""
    # the first day of the next month...
    if month == 12:
        first_of_next = date(year + 1, 1, 1)
    else:
        first_of_next = date(year, month + 1, 1)
    # ...is preceded by the last day of this one
    last_day = first_of_next - timedelta(days=1)
    return last_day.day * SECONDS_IN_DAY


def percentage_of_month_elapsed(now: datetime, reference: Optional[date] = None) -> float:
    """Share of the month elapsed since local midnight on day 1.

    The month length is looked up from ``reference``, which defaults to
    ``now``'s own date so both sides of the fraction use the same month.
    """
    if reference is None:
        reference = now.date()
    elapsed = (now.day - 1) * SECONDS_IN_DAY + seconds_elapsed_today(now)
    return percentage_elapsed(elapsed, seconds_in_month(reference.year, reference.month))


def percentage_of_year_elapsed(now: datetime) -> float:
    """Seconds since Jan 1 00:00 UTC over a fixed 365-day year.

    In a leap year this under-reports and can pass 100 on Dec 31.
    """
    now_utc = now.astimezone(timezone.utc)
    start_of_year = datetime(now_utc.year, 1, 1, tzinfo=timezone.utc)
    elapsed = (now_utc - start_of_year).total_seconds()
    return percentage_elapsed(elapsed, SECONDS_IN_YEAR)


def day_of_year(today: date) -> int:
    """Ordinal day from the fixed month table (not leap-aware)."""
    return sum(MONTH_LENGTH_DAYS[:today.month - 1]) + today.day


def current_year(today: date) -> int:
    return today.year


def sample_and_compute_metrics(snapshot: Optional[TimeSnapshot] = None) -> List[ProgressMetric]:
    """Compute the five metrics (minute, hour, day, month, year) from one snapshot."""
    if snapshot is None:
        snapshot = take_snapshot()

    now = snapshot.local
    percentages = [
        percentage_of_minute_elapsed(now),
        percentage_of_hour_elapsed(now),
        percentage_of_day_elapsed(now),
        percentage_of_month_elapsed(now),
        percentage_of_year_elapsed(snapshot.utc),
    ]
    return [ProgressMetric(label, percentage)
            for label, percentage in zip(METRIC_LABELS, percentages)]

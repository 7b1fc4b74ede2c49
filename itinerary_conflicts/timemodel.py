"""Time model: wall-clock parsing, span comparison and display formatting.

All values are minutes since midnight on the activity's day. Parsing is
fail-open: anything that cannot be read as a time yields ``None`` and the
caller skips the activity instead of raising.
"""

from __future__ import annotations

import re
from datetime import time
from typing import NamedTuple

from itinerary_conflicts.models.itinerary import Activity

MINUTES_PER_DAY = 24 * 60

_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")


class TimeSpan(NamedTuple):
    """Half-open [start, end) interval in minutes since midnight."""

    start: int
    end: int


def parse_time_to_minutes(value: str | time | None) -> int | None:
    """Parse "HH:MM" (or a ``time``) into minutes since midnight.

    Returns None for missing, malformed or out-of-range values.
    """
    if isinstance(value, time):
        return value.hour * 60 + value.minute
    if not isinstance(value, str):
        return None

    match = _TIME_PATTERN.match(value.strip())
    if not match:
        return None

    hours, minutes = int(match.group(1)), int(match.group(2))
    seconds = int(match.group(3) or 0)
    if hours > 23 or minutes > 59 or seconds > 59:
        return None
    return hours * 60 + minutes


def is_reversed_range(start: int, end: int, cutoff_minutes: int) -> bool:
    """End before start, and too late in the morning to be a midnight span."""
    return end < start and end > cutoff_minutes


def spans_midnight(start: int, end: int, cutoff_minutes: int) -> bool:
    """End before start but early enough to read as running past midnight."""
    return end < start and end <= cutoff_minutes


def activity_span(activity: Activity, cutoff_minutes: int = 360) -> TimeSpan | None:
    """Comparable span for an activity, or None if it cannot be placed.

    Activities ending after midnight get their end pushed into the next day
    so the span stays ordered.
    """
    start = parse_time_to_minutes(activity.start_time)
    end = parse_time_to_minutes(activity.end_time)
    if start is None or end is None:
        return None
    if is_reversed_range(start, end, cutoff_minutes):
        return None
    if spans_midnight(start, end, cutoff_minutes):
        end += MINUTES_PER_DAY
    return TimeSpan(start, end)


def spans_overlap(a: TimeSpan, b: TimeSpan) -> bool:
    """Half-open overlap test; touching spans do not overlap."""
    return a.start < b.end and b.start < a.end


def overlap_minutes(a: TimeSpan, b: TimeSpan) -> int:
    """Length of the shared part of two spans (0 if disjoint)."""
    return max(0, min(a.end, b.end) - max(a.start, b.start))


def format_minutes_to_time(minutes: int) -> str:
    """Format minutes since midnight as a 12-hour clock string ("9:05 AM")."""
    normalized = minutes % MINUTES_PER_DAY
    hours, mins = divmod(normalized, 60)
    period = "PM" if hours >= 12 else "AM"
    display_hours = hours % 12 or 12
    return f"{display_hours}:{mins:02d} {period}"


def format_duration(minutes: int) -> str:
    """Format a duration as "45 min", "2h" or "1h 30m"."""
    if minutes < 0:
        return f"-{format_duration(abs(minutes))}"
    if minutes < 60:
        return f"{minutes} min"
    hours, mins = divmod(minutes, 60)
    if mins == 0:
        return f"{hours}h"
    return f"{hours}h {mins}m"

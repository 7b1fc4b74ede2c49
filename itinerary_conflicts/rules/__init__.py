"""Conflict rules, one module per conflict family."""

from .overlap import check_overlaps
from .time_range import check_time_ranges
from .transitions import check_schedule_feasibility, check_transitions

# Run order defines the order of conflicts in the result
RULES = (check_overlaps, check_transitions, check_time_ranges)

__all__ = [
    "RULES",
    "check_overlaps",
    "check_schedule_feasibility",
    "check_time_ranges",
    "check_transitions",
]

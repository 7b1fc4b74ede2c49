"""Per-activity time range checks (reversed ranges, spans past midnight)."""

from collections.abc import Sequence

from itinerary_conflicts.models.common import ConflictType
from itinerary_conflicts.models.conflicts import ConflictCandidate, ConflictDetectionOptions
from itinerary_conflicts.models.itinerary import Activity
from itinerary_conflicts.timemodel import (
    is_reversed_range,
    parse_time_to_minutes,
    spans_midnight,
)


def check_time_ranges(
    activities: Sequence[Activity],
    options: ConflictDetectionOptions,
) -> list[ConflictCandidate]:
    """Flag activities whose end time comes before their start time.

    An end time at or before the cutoff (06:00 by default) is read as the
    activity running past midnight; anything later is a reversed range.
    """
    candidates: list[ConflictCandidate] = []
    cutoff = options.past_midnight_cutoff_minutes

    for activity in activities:
        start = parse_time_to_minutes(activity.start_time)
        end = parse_time_to_minutes(activity.end_time)
        if start is None or end is None:
            continue

        if is_reversed_range(start, end, cutoff):
            conflict_type = ConflictType.reverse_order
        elif options.check_past_midnight and spans_midnight(start, end, cutoff):
            conflict_type = ConflictType.past_midnight
        else:
            continue

        candidates.append(
            ConflictCandidate(
                type=conflict_type,
                activity_ids=[activity.id],
                activity_names=[activity.name],
                spans=[(start, end)],
            )
        )

    return candidates

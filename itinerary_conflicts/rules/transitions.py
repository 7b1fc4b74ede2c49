"""Transition rules between consecutive activities.

For each neighbouring pair in caller order, compares the free gap with the
leg that connects them:

- leg present, gap shorter than the leg's duration -> insufficient_travel
- leg present, slack after travel under the tight threshold -> tight_transition
- no leg, gap longer than long_gap_minutes -> long_gap

Pairs whose spans overlap (negative gap) are left to the overlap rule.
``check_schedule_feasibility`` applies the same buffer thresholds to a
single hop for edit-time feedback.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import time

from itinerary_conflicts.models.common import ConflictType
from itinerary_conflicts.models.conflicts import (
    ConflictCandidate,
    ConflictDetails,
    ConflictDetectionOptions,
    ScheduleCheck,
)
from itinerary_conflicts.models.itinerary import Activity
from itinerary_conflicts.timemodel import activity_span, parse_time_to_minutes


def check_transitions(
    activities: Sequence[Activity],
    options: ConflictDetectionOptions,
) -> list[ConflictCandidate]:
    """Check travel feasibility and idle time between neighbouring activities.

    Args:
        activities: Itinerary in caller order
        options: Detection thresholds

    Returns:
        Candidates in sequence order, at most one per neighbouring pair
    """
    candidates: list[ConflictCandidate] = []
    cutoff = options.past_midnight_cutoff_minutes

    for i in range(len(activities) - 1):
        current = activities[i]
        following = activities[i + 1]

        current_span = activity_span(current, cutoff)
        following_span = activity_span(following, cutoff)
        if current_span is None or following_span is None:
            continue

        gap_minutes = following_span.start - current_span.end
        if gap_minutes < 0:
            continue

        leg = current.transport_to_next
        base = {
            "activity_ids": [current.id, following.id],
            "activity_names": [current.name, following.name],
            "spans": [tuple(current_span), tuple(following_span)],
        }

        if leg is None:
            if gap_minutes > options.long_gap_minutes:
                candidates.append(
                    ConflictCandidate(
                        type=ConflictType.long_gap,
                        details=ConflictDetails(gap_minutes=gap_minutes),
                        **base,
                    )
                )
            continue

        travel_minutes = leg.estimated_duration
        buffer_minutes = gap_minutes - travel_minutes
        details = ConflictDetails(
            available_minutes=gap_minutes,
            required_minutes=travel_minutes,
            buffer_minutes=buffer_minutes,
        )

        if buffer_minutes < 0:
            candidates.append(
                ConflictCandidate(
                    type=ConflictType.insufficient_travel, details=details, **base
                )
            )
        elif buffer_minutes < options.tight_threshold_minutes:
            candidates.append(
                ConflictCandidate(
                    type=ConflictType.tight_transition, details=details, **base
                )
            )

    return candidates


def check_schedule_feasibility(
    end_time: str | time,
    start_time: str | time,
    travel_minutes: int,
    options: ConflictDetectionOptions | None = None,
) -> ScheduleCheck | None:
    """Check a single hop while the user is editing times or modes.

    Same thresholds as the transition rule, applied to raw clock values.
    Returns None when either time cannot be parsed.
    """
    options = options or ConflictDetectionOptions()
    end = parse_time_to_minutes(end_time)
    start = parse_time_to_minutes(start_time)
    if end is None or start is None:
        return None

    buffer_minutes = start - end - travel_minutes

    if buffer_minutes < 0:
        return ScheduleCheck(
            is_feasible=False,
            buffer_minutes=buffer_minutes,
            warning=(
                f"Need {-buffer_minutes} more minutes. "
                "Adjust activity times or choose faster transport."
            ),
        )
    if buffer_minutes < options.min_buffer_minutes:
        warning = "Very tight schedule. Consider adding buffer time."
    elif buffer_minutes < options.tight_threshold_minutes:
        warning = "Limited buffer time between activities."
    else:
        warning = None
    return ScheduleCheck(
        is_feasible=True, buffer_minutes=buffer_minutes, warning=warning
    )

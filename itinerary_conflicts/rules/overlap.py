"""Overlap rule.

Compares every pair of activities in the day, not only neighbours: two
bookings can collide even when other items sit between them in the list.
Pairs with equal start times are reported as ``same_time`` instead of
``overlap``.
"""

from collections.abc import Sequence

from itinerary_conflicts.models.common import ConflictType
from itinerary_conflicts.models.conflicts import (
    ConflictCandidate,
    ConflictDetails,
    ConflictDetectionOptions,
)
from itinerary_conflicts.models.itinerary import Activity
from itinerary_conflicts.timemodel import activity_span, overlap_minutes, spans_overlap


def check_overlaps(
    activities: Sequence[Activity],
    options: ConflictDetectionOptions,
) -> list[ConflictCandidate]:
    """Find every pair of activities whose time spans overlap.

    Args:
        activities: Itinerary in caller order
        options: Detection thresholds (only the midnight cutoff is used)

    Returns:
        One candidate per overlapping pair, ordered by (i, j) in input order
    """
    candidates: list[ConflictCandidate] = []
    cutoff = options.past_midnight_cutoff_minutes

    spans = [activity_span(activity, cutoff) for activity in activities]

    for i, first in enumerate(activities):
        first_span = spans[i]
        if first_span is None:
            continue

        for j in range(i + 1, len(activities)):
            second = activities[j]
            second_span = spans[j]
            if second_span is None:
                continue

            if not spans_overlap(first_span, second_span):
                continue

            conflict_type = (
                ConflictType.same_time
                if first_span.start == second_span.start
                else ConflictType.overlap
            )

            candidates.append(
                ConflictCandidate(
                    type=conflict_type,
                    activity_ids=[first.id, second.id],
                    activity_names=[first.name, second.name],
                    spans=[tuple(first_span), tuple(second_span)],
                    details=ConflictDetails(
                        overlap_minutes=overlap_minutes(first_span, second_span)
                    ),
                )
            )

    return candidates

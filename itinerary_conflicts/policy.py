"""Severity and fix policy.

Turns a raw rule finding into the severity, wording and optional
remediation hint shown to the traveler. Every ConflictType must have a
handler in ``_HANDLERS``; the module refuses to import otherwise.
"""

from __future__ import annotations

from collections.abc import Callable

from pydantic import BaseModel, Field

from itinerary_conflicts.models.common import ConflictSeverity, ConflictType
from itinerary_conflicts.models.conflicts import ConflictCandidate, ConflictDetectionOptions
from itinerary_conflicts.timemodel import format_duration, format_minutes_to_time


class Classification(BaseModel):
    """Severity and wording for one conflict."""

    severity: ConflictSeverity = Field(description="How serious the conflict is")
    short_message: str = Field(description="Short label for badges")
    message: str = Field(description="Full sentence describing the conflict")
    suggested_fix: str | None = Field(default=None, description="Remediation hint")


def _label(candidate: ConflictCandidate, index: int) -> str:
    """Activity name, falling back to its id when unnamed."""
    return candidate.activity_names[index] or candidate.activity_ids[index]


def _classify_overlap(
    candidate: ConflictCandidate, options: ConflictDetectionOptions
) -> Classification:
    overlap = format_duration(candidate.details.overlap_minutes or 0)
    first, second = _label(candidate, 0), _label(candidate, 1)

    # Phrase the fix from the activity that starts first
    if candidate.spans[0][0] <= candidate.spans[1][0]:
        earlier, later, later_start = first, second, candidate.spans[1][0]
    else:
        earlier, later, later_start = second, first, candidate.spans[0][0]

    return Classification(
        severity=ConflictSeverity.error,
        short_message=f"{overlap} overlap",
        message=f'"{first}" overlaps with "{second}" by {overlap}',
        suggested_fix=(
            f'End "{earlier}" by {format_minutes_to_time(later_start)} '
            f'or start "{later}" later'
        ),
    )


def _classify_same_time(
    candidate: ConflictCandidate, options: ConflictDetectionOptions
) -> Classification:
    start = format_minutes_to_time(candidate.spans[0][0])
    return Classification(
        severity=ConflictSeverity.error,
        short_message="Same start time",
        message=(
            f'"{_label(candidate, 0)}" and "{_label(candidate, 1)}" '
            f"both start at {start}"
        ),
        suggested_fix="Stagger the start times or combine into one activity",
    )


def _classify_insufficient_travel(
    candidate: ConflictCandidate, options: ConflictDetectionOptions
) -> Classification:
    details = candidate.details
    shortfall = format_duration(abs(details.buffer_minutes or 0))
    return Classification(
        severity=ConflictSeverity.error,
        short_message=f"Need {shortfall} more",
        message=(
            f'Not enough time to travel from "{_label(candidate, 0)}" to '
            f'"{_label(candidate, 1)}". Need '
            f"{format_duration(details.required_minutes or 0)}, only have "
            f"{format_duration(details.available_minutes or 0)}"
        ),
        suggested_fix=(
            f"Add {shortfall} more between the activities "
            "or choose a faster transportation mode"
        ),
    )


def _classify_tight_transition(
    candidate: ConflictCandidate, options: ConflictDetectionOptions
) -> Classification:
    buffer_minutes = candidate.details.buffer_minutes or 0
    buffer = format_duration(buffer_minutes)
    first, second = _label(candidate, 0), _label(candidate, 1)

    if buffer_minutes < options.min_buffer_minutes:
        message = (
            f'Very tight transition between "{first}" and "{second}" '
            f"(only {buffer} buffer)"
        )
    else:
        message = f'Limited buffer time ({buffer}) between "{first}" and "{second}"'

    return Classification(
        severity=ConflictSeverity.warning,
        short_message=f"{buffer} buffer",
        message=message,
        suggested_fix="Add more buffer time for unexpected delays",
    )


def _classify_long_gap(
    candidate: ConflictCandidate, options: ConflictDetectionOptions
) -> Classification:
    gap = format_duration(candidate.details.gap_minutes or 0)
    return Classification(
        severity=ConflictSeverity.info,
        short_message=f"{gap} gap",
        message=f'{gap} gap between "{_label(candidate, 0)}" and "{_label(candidate, 1)}"',
    )


def _classify_reverse_order(
    candidate: ConflictCandidate, options: ConflictDetectionOptions
) -> Classification:
    start, end = candidate.spans[0]
    return Classification(
        severity=ConflictSeverity.error,
        short_message="Invalid time range",
        message=(
            f'"{_label(candidate, 0)}" has an end time '
            f"({format_minutes_to_time(end)}) before its start time "
            f"({format_minutes_to_time(start)})"
        ),
        suggested_fix="Swap the start and end times, or adjust to span past midnight",
    )


def _classify_past_midnight(
    candidate: ConflictCandidate, options: ConflictDetectionOptions
) -> Classification:
    end = format_minutes_to_time(candidate.spans[0][1])
    return Classification(
        severity=ConflictSeverity.info,
        short_message="Spans midnight",
        message=f'"{_label(candidate, 0)}" spans past midnight (ends at {end})',
    )


_HANDLERS: dict[
    ConflictType,
    Callable[[ConflictCandidate, ConflictDetectionOptions], Classification],
] = {
    ConflictType.overlap: _classify_overlap,
    ConflictType.same_time: _classify_same_time,
    ConflictType.insufficient_travel: _classify_insufficient_travel,
    ConflictType.tight_transition: _classify_tight_transition,
    ConflictType.long_gap: _classify_long_gap,
    ConflictType.reverse_order: _classify_reverse_order,
    ConflictType.past_midnight: _classify_past_midnight,
}

_unhandled = set(ConflictType) - set(_HANDLERS)
if _unhandled:
    raise RuntimeError(
        f"No severity handler for conflict types: {sorted(t.value for t in _unhandled)}"
    )


def classify(
    candidate: ConflictCandidate, options: ConflictDetectionOptions
) -> Classification:
    """Assign severity, messages and suggested fix to a rule finding."""
    return _HANDLERS[candidate.type](candidate, options)


def conflict_id(conflict_type: ConflictType, activity_ids: list[str]) -> str:
    """Deterministic conflict id, stable across re-runs on the same itinerary."""
    return "-".join(["conflict", conflict_type.value, *activity_ids])

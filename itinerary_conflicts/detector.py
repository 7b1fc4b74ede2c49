"""Conflict aggregator.

Runs every rule over an itinerary, applies the severity policy and builds
the result consumed by timeline, banner and detail views. Detection is a
pure function of (activities, options): nothing is cached or retained
between calls, so callers memoize if they re-render often.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from pydantic.alias_generators import to_camel

from itinerary_conflicts.config import Settings, get_settings
from itinerary_conflicts.metrics.core import record_detection_run
from itinerary_conflicts.metrics.registry import MetricsClient
from itinerary_conflicts.models.common import ConflictSeverity
from itinerary_conflicts.models.conflicts import (
    ConflictCheckResult,
    ConflictDetectionOptions,
    ConflictSummary,
    TimeConflict,
)
from itinerary_conflicts.models.itinerary import Activity
from itinerary_conflicts.policy import classify, conflict_id
from itinerary_conflicts.rules import RULES
from itinerary_conflicts.timemodel import is_reversed_range, parse_time_to_minutes

logger = logging.getLogger(__name__)


def resolve_options(
    options: ConflictDetectionOptions | Mapping[str, Any] | None = None,
    settings: Settings | None = None,
) -> ConflictDetectionOptions:
    """Fill unspecified options from the configured defaults.

    Explicitly set fields (on a model, or keys in a mapping) always win.
    Mapping keys may be field names or camelCase aliases; a key mapped to
    None counts as unset. Unknown keys raise ``ValidationError``.
    """
    settings = settings or get_settings()

    if isinstance(options, ConflictDetectionOptions):
        overrides = options.model_dump(include=options.model_fields_set)
    else:
        names_by_alias = {
            to_camel(name): name for name in ConflictDetectionOptions.model_fields
        }
        overrides = {
            names_by_alias.get(key, key): value
            for key, value in (options or {}).items()
            if value is not None
        }

    defaults = {
        name: getattr(settings, name)
        for name in ConflictDetectionOptions.model_fields
    }
    return ConflictDetectionOptions(**{**defaults, **overrides})


def _skipped_activities(
    activities: Sequence[Activity], cutoff_minutes: int
) -> list[tuple[str, str]]:
    """Activities the time-based rules will ignore, with the reason.

    Unparsable times are dropped silently from the checks rather than
    reported as a conflict. This is the fail-open policy for malformed
    input; it is logged here so a missing diagnostic can be traced.
    """
    skipped: list[tuple[str, str]] = []
    for activity in activities:
        start = parse_time_to_minutes(activity.start_time)
        end = parse_time_to_minutes(activity.end_time)
        if start is None or end is None:
            skipped.append((activity.id, "unparsable_time"))
        elif is_reversed_range(start, end, cutoff_minutes):
            skipped.append((activity.id, "reversed_range"))
    return skipped


def detect_time_conflicts(
    activities: Sequence[Activity],
    options: ConflictDetectionOptions | Mapping[str, Any] | None = None,
    metrics: MetricsClient | None = None,
) -> ConflictCheckResult:
    """Detect scheduling conflicts in an ordered itinerary.

    Args:
        activities: Activities in caller order; each may carry the leg to the next
        options: Thresholds; unspecified fields fall back to settings
        metrics: Optional metrics client for telemetry

    Returns:
        Conflicts in rule order (overlaps, then transitions, then time
        ranges), severity flags, summary counts and a per-activity index
    """
    resolved = resolve_options(options)

    skipped = _skipped_activities(activities, resolved.past_midnight_cutoff_minutes)
    for activity_id, reason in skipped:
        logger.debug(
            "activity_skipped",
            extra={"activity_id": activity_id, "reason": reason},
        )
        if metrics:
            metrics.inc_skipped_activity(reason)

    conflicts: list[TimeConflict] = []
    for rule in RULES:
        for candidate in rule(activities, resolved):
            classification = classify(candidate, resolved)

            if (
                classification.severity is ConflictSeverity.info
                and not resolved.include_infos
            ):
                continue

            if metrics:
                metrics.inc_conflict(
                    candidate.type.value, classification.severity.value
                )

            conflicts.append(
                TimeConflict(
                    id=conflict_id(candidate.type, candidate.activity_ids),
                    type=candidate.type,
                    severity=classification.severity,
                    message=classification.message,
                    short_message=classification.short_message,
                    activity_ids=list(candidate.activity_ids),
                    suggested_fix=classification.suggested_fix,
                    details=candidate.details,
                )
            )

    conflicts_by_activity: dict[str, list[TimeConflict]] = {
        activity.id: [] for activity in activities
    }
    for conflict in conflicts:
        for activity_id in dict.fromkeys(conflict.activity_ids):
            conflicts_by_activity.setdefault(activity_id, []).append(conflict)

    summary = ConflictSummary(
        total_conflicts=len(conflicts),
        errors=_count(conflicts, ConflictSeverity.error),
        warnings=_count(conflicts, ConflictSeverity.warning),
        infos=_count(conflicts, ConflictSeverity.info),
    )

    record_detection_run(
        activity_count=len(activities),
        skipped_count=len(skipped),
        errors=summary.errors,
        warnings=summary.warnings,
        infos=summary.infos,
    )
    if metrics:
        metrics.observe_detection_run(len(activities), len(conflicts))

    return ConflictCheckResult(
        conflicts=conflicts,
        has_errors=summary.errors > 0,
        has_warnings=summary.warnings > 0,
        summary=summary,
        conflicts_by_activity=conflicts_by_activity,
    )


def _count(conflicts: Iterable[TimeConflict], severity: ConflictSeverity) -> int:
    return sum(1 for c in conflicts if c.severity is severity)


def get_most_severe_conflict(
    conflicts: Sequence[TimeConflict],
) -> TimeConflict | None:
    """Highest-severity conflict; the earliest one wins ties. None if empty."""
    if not conflicts:
        return None
    return max(conflicts, key=lambda c: c.severity.rank)


def filter_by_severity(
    conflicts: Iterable[TimeConflict],
    minimum: ConflictSeverity,
) -> list[TimeConflict]:
    """Conflicts at or above ``minimum``, in their original order."""
    return [c for c in conflicts if c.severity.rank >= minimum.rank]

"""Conflict models produced by the detection engine."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .common import ConflictSeverity, ConflictType


class ConflictDetectionOptions(BaseModel):
    """Thresholds for one detection run.

    Accepts snake_case names or their camelCase aliases (`longGapMinutes`).
    Unknown keys are rejected so a misspelt threshold never silently
    falls back to its default.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid"
    )

    min_buffer_minutes: int = Field(
        default=5, ge=0, description="Buffer below which a transition is very tight"
    )
    tight_buffer_minutes: int = Field(
        default=15, ge=0, description="Preferred slack after travel"
    )
    long_gap_minutes: int = Field(
        default=180, ge=0, description="Idle gap considered unusually long"
    )
    include_infos: bool = Field(
        default=True, description="Keep info-level conflicts in the result"
    )
    check_past_midnight: bool = Field(
        default=True, description="Flag activities that run past midnight"
    )
    past_midnight_cutoff_minutes: int = Field(
        default=360,
        ge=0,
        le=1440,
        description="Latest end time (minutes) still read as a past-midnight span",
    )

    @property
    def tight_threshold_minutes(self) -> int:
        """Buffer below which a feasible transition counts as tight."""
        return max(self.tight_buffer_minutes, self.min_buffer_minutes)


class ConflictDetails(BaseModel):
    """Numbers behind a conflict, for display."""

    overlap_minutes: int | None = Field(default=None, description="Minutes of overlap")
    available_minutes: int | None = Field(
        default=None, description="Minutes between the two activities"
    )
    required_minutes: int | None = Field(
        default=None, description="Travel minutes the leg needs"
    )
    buffer_minutes: int | None = Field(
        default=None, description="Slack left after travel"
    )
    gap_minutes: int | None = Field(default=None, description="Idle minutes")


class ConflictCandidate(BaseModel):
    """Raw rule finding, before severity and wording are applied."""

    type: ConflictType = Field(description="Conflict category")
    activity_ids: list[str] = Field(description="Implicated activities, in order")
    activity_names: list[str] = Field(description="Names parallel to activity_ids")
    spans: list[tuple[int, int]] = Field(
        description="(start, end) minutes parallel to activity_ids"
    )
    details: ConflictDetails = Field(default_factory=ConflictDetails)


class TimeConflict(BaseModel):
    """One detected problem in the itinerary."""

    id: str = Field(description="Deterministic id from type and activity ids")
    type: ConflictType = Field(description="Conflict category")
    severity: ConflictSeverity = Field(description="How serious the conflict is")
    message: str = Field(description="Full sentence describing the conflict")
    short_message: str = Field(description="Short label for badges")
    activity_ids: list[str] = Field(description="Implicated activities, in order")
    suggested_fix: str | None = Field(
        default=None, description="Human-readable remediation hint"
    )
    details: ConflictDetails = Field(default_factory=ConflictDetails)


class ConflictSummary(BaseModel):
    """Conflict counts by severity."""

    total_conflicts: int = 0
    errors: int = 0
    warnings: int = 0
    infos: int = 0


class ConflictCheckResult(BaseModel):
    """Aggregate output of one detection run."""

    conflicts: list[TimeConflict] = Field(
        default_factory=list, description="All conflicts in detection order"
    )
    has_errors: bool = Field(default=False, description="Any error-level conflict")
    has_warnings: bool = Field(
        default=False, description="Any warning-level conflict"
    )
    summary: ConflictSummary = Field(default_factory=ConflictSummary)
    conflicts_by_activity: dict[str, list[TimeConflict]] = Field(
        default_factory=dict, description="Activity id -> conflicts referencing it"
    )


class ScheduleCheck(BaseModel):
    """Whether one hop fits between an end time and the next start time."""

    is_feasible: bool = Field(description="Travel fits in the available time")
    buffer_minutes: int = Field(description="Slack left after travel; negative if short")
    warning: str | None = Field(default=None, description="Advice when slack is thin")

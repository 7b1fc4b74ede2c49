"""Itinerary time-conflict detection engine."""

from .detector import (
    detect_time_conflicts,
    filter_by_severity,
    get_most_severe_conflict,
    resolve_options,
)
from .display import get_conflict_icon, get_severity_color, get_transport_option
from .models import (
    Activity,
    ActivityType,
    ConflictCheckResult,
    ConflictDetectionOptions,
    ConflictSeverity,
    ConflictType,
    ItineraryLeg,
    Location,
    ScheduleCheck,
    TimeConflict,
    TransportationMode,
    link_activities,
)
from .rules import check_schedule_feasibility

__all__ = [
    # Detection
    "check_schedule_feasibility",
    "detect_time_conflicts",
    "filter_by_severity",
    "get_most_severe_conflict",
    "resolve_options",
    # Display
    "get_conflict_icon",
    "get_severity_color",
    "get_transport_option",
    # Models
    "Activity",
    "ActivityType",
    "ConflictCheckResult",
    "ConflictDetectionOptions",
    "ConflictSeverity",
    "ConflictType",
    "ItineraryLeg",
    "Location",
    "ScheduleCheck",
    "TimeConflict",
    "TransportationMode",
    "link_activities",
]

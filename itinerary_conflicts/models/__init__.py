"""Convenient imports for all model types."""

# Common enums
from .common import ActivityType, ConflictSeverity, ConflictType, TransportationMode

# Conflict models
from .conflicts import (
    ConflictCandidate,
    ConflictCheckResult,
    ConflictDetails,
    ConflictDetectionOptions,
    ConflictSummary,
    ScheduleCheck,
    TimeConflict,
)

# Itinerary models
from .itinerary import (
    MODE_DURATION_MULTIPLIERS,
    MODE_OVERHEAD_MINUTES,
    MODE_SPEEDS_MPH,
    Activity,
    ItineraryLeg,
    Location,
    calculate_distance,
    estimate_mode_duration,
    estimate_travel_duration,
    link_activities,
    suggest_transport_mode,
)

__all__ = [
    # Common
    "ActivityType",
    "ConflictSeverity",
    "ConflictType",
    "TransportationMode",
    # Conflicts
    "ConflictCandidate",
    "ConflictCheckResult",
    "ConflictDetails",
    "ConflictDetectionOptions",
    "ConflictSummary",
    "ScheduleCheck",
    "TimeConflict",
    # Itinerary
    "MODE_DURATION_MULTIPLIERS",
    "MODE_OVERHEAD_MINUTES",
    "MODE_SPEEDS_MPH",
    "Activity",
    "ItineraryLeg",
    "Location",
    "calculate_distance",
    "estimate_mode_duration",
    "estimate_travel_duration",
    "link_activities",
    "suggest_transport_mode",
]

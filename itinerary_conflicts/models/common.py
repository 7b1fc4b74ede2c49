"""Common enums used across the conflict engine."""

from __future__ import annotations

from enum import Enum


class ConflictSeverity(str, Enum):
    """Severity of a detected conflict."""

    error = "error"
    warning = "warning"
    info = "info"

    @property
    def rank(self) -> int:
        """Ordinal used to compare severities (error is highest)."""
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {
    ConflictSeverity.error: 2,
    ConflictSeverity.warning: 1,
    ConflictSeverity.info: 0,
}


class ConflictType(str, Enum):
    """Categories of schedule conflicts."""

    overlap = "overlap"
    same_time = "same_time"
    insufficient_travel = "insufficient_travel"
    tight_transition = "tight_transition"
    long_gap = "long_gap"
    reverse_order = "reverse_order"
    past_midnight = "past_midnight"


class TransportationMode(str, Enum):
    """Ways of getting from one activity to the next."""

    car = "car"
    transit = "transit"
    walking = "walking"
    rideshare = "rideshare"
    bike = "bike"


class ActivityType(str, Enum):
    """Activity categories (display only)."""

    sightseeing = "sightseeing"
    dining = "dining"
    entertainment = "entertainment"
    shopping = "shopping"
    outdoor = "outdoor"
    cultural = "cultural"
    relaxation = "relaxation"
    nightlife = "nightlife"
    transport = "transport"
    lodging = "lodging"
    other = "other"

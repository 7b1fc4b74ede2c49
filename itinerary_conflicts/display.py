"""Display-only lookups for conflict and transport presentation.

Tables are keyed by enum so a new member without an entry shows up in
``tests/unit/test_display.py`` rather than falling through to a default.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, Field

from itinerary_conflicts.models.common import (
    ConflictSeverity,
    ConflictType,
    TransportationMode,
)


class TransportationOption(BaseModel):
    """Presentation metadata for a transportation mode."""

    mode: TransportationMode = Field(description="Transportation mode")
    icon: str = Field(description="Lucide icon name")
    label: str = Field(description="Short label")
    description: str = Field(description="One-line description")
    color: str = Field(description="Hex color")


SEVERITY_COLORS: Mapping[ConflictSeverity, str] = MappingProxyType(
    {
        ConflictSeverity.error: "#EF4444",  # red
        ConflictSeverity.warning: "#F59E0B",  # amber
        ConflictSeverity.info: "#3B82F6",  # blue
    }
)

CONFLICT_ICONS: Mapping[ConflictType, str] = MappingProxyType(
    {
        ConflictType.overlap: "AlertOctagon",
        ConflictType.same_time: "AlertOctagon",
        ConflictType.insufficient_travel: "Clock",
        ConflictType.tight_transition: "AlertTriangle",
        ConflictType.long_gap: "Coffee",
        ConflictType.reverse_order: "ArrowDownUp",
        ConflictType.past_midnight: "Moon",
    }
)

TRANSPORTATION_OPTIONS: Mapping[TransportationMode, TransportationOption] = (
    MappingProxyType(
        {
            TransportationMode.car: TransportationOption(
                mode=TransportationMode.car,
                icon="Car",
                label="Drive",
                description="Personal vehicle",
                color="#3B82F6",
            ),
            TransportationMode.transit: TransportationOption(
                mode=TransportationMode.transit,
                icon="Train",
                label="Transit",
                description="Bus, subway, train",
                color="#8B5CF6",
            ),
            TransportationMode.walking: TransportationOption(
                mode=TransportationMode.walking,
                icon="Footprints",
                label="Walk",
                description="On foot",
                color="#10B981",
            ),
            TransportationMode.rideshare: TransportationOption(
                mode=TransportationMode.rideshare,
                icon="CarTaxiFront",
                label="Rideshare",
                description="Uber, Lyft",
                color="#F59E0B",
            ),
            TransportationMode.bike: TransportationOption(
                mode=TransportationMode.bike,
                icon="Bike",
                label="Bike",
                description="Bicycle or scooter",
                color="#EC4899",
            ),
        }
    )
)


def get_severity_color(severity: ConflictSeverity) -> str:
    """Hex color for a severity."""
    return SEVERITY_COLORS[severity]


def get_conflict_icon(conflict_type: ConflictType) -> str:
    """Icon name for a conflict type."""
    return CONFLICT_ICONS[conflict_type]


def get_transport_option(mode: TransportationMode) -> TransportationOption:
    """Presentation metadata for a transportation mode."""
    return TRANSPORTATION_OPTIONS[mode]

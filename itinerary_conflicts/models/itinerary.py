"""Itinerary models: activities and the legs connecting them."""

from __future__ import annotations

import math
from collections.abc import Sequence
from datetime import time
from types import MappingProxyType

from pydantic import BaseModel, Field

from .common import ActivityType, TransportationMode

EARTH_RADIUS_MILES = 3959

# Used when either end of a leg has no coordinates
DEFAULT_LEG_DISTANCE_MILES = 1.0
DEFAULT_LEG_DURATION_MINUTES = 10

# Distance assumed when choosing a mode for a leg without coordinates
UNKNOWN_DISTANCE_MILES = 2.0

# Rough multipliers relative to driving the same route
MODE_DURATION_MULTIPLIERS = MappingProxyType(
    {
        TransportationMode.car: 1.0,
        TransportationMode.transit: 1.5,
        TransportationMode.walking: 4.0,
        TransportationMode.rideshare: 1.1,
        TransportationMode.bike: 2.0,
    }
)

# Average door-to-door speeds in mph, city traffic and transfers included
MODE_SPEEDS_MPH = MappingProxyType(
    {
        TransportationMode.car: 25,
        TransportationMode.transit: 15,
        TransportationMode.walking: 3,
        TransportationMode.rideshare: 22,
        TransportationMode.bike: 10,
    }
)

# Fixed minutes per hop: parking, waiting for a stop or pickup, bike locks
MODE_OVERHEAD_MINUTES = MappingProxyType(
    {
        TransportationMode.car: 2,
        TransportationMode.transit: 8,
        TransportationMode.walking: 0,
        TransportationMode.rideshare: 5,
        TransportationMode.bike: 1,
    }
)


def estimate_mode_duration(
    baseline_drive_minutes: float, mode: TransportationMode
) -> int:
    """Convert a driving-time estimate into whole minutes for another mode.

    Args:
        baseline_drive_minutes: Estimated driving time for the hop
        mode: Transportation mode actually used

    Returns:
        Mode-adjusted duration in minutes, rounded up
    """
    if baseline_drive_minutes <= 0:
        return 0
    # Round first so float noise (20 * 1.1) does not add a minute
    adjusted = round(baseline_drive_minutes * MODE_DURATION_MULTIPLIERS[mode], 6)
    return math.ceil(adjusted)


def estimate_travel_duration(distance_miles: float, mode: TransportationMode) -> int:
    """Travel minutes for a distance: speed-based time plus per-mode overhead.

    Rounds half up to whole minutes.
    """
    moving_minutes = max(distance_miles, 0.0) / MODE_SPEEDS_MPH[mode] * 60
    return math.floor(moving_minutes + MODE_OVERHEAD_MINUTES[mode] + 0.5)


def suggest_transport_mode(distance_miles: float) -> TransportationMode:
    """Pick a sensible mode for a hop of the given length."""
    if distance_miles < 0.3:
        return TransportationMode.walking
    if distance_miles < 1.5:
        return TransportationMode.bike
    if distance_miles < 5:
        return TransportationMode.car
    # Longer hops: rideshare avoids parking
    return TransportationMode.rideshare


class Location(BaseModel):
    """Where an activity takes place."""

    name: str = Field(default="", description="Venue or place name")
    address: str = Field(default="", description="Street address")
    lat: float | None = Field(default=None, description="Latitude in decimal degrees")
    lng: float | None = Field(default=None, description="Longitude in decimal degrees")

    @property
    def has_coordinates(self) -> bool:
        """Whether both latitude and longitude are known."""
        return self.lat is not None and self.lng is not None


def calculate_distance(origin: Location, destination: Location) -> float:
    """Great-circle (haversine) distance in miles between two locations.

    Raises:
        ValueError: If either location lacks coordinates
    """
    if not (origin.has_coordinates and destination.has_coordinates):
        raise ValueError("Both locations need lat/lng to compute a distance")

    lat1, lat2 = math.radians(origin.lat), math.radians(destination.lat)
    d_lat = lat2 - lat1
    d_lng = math.radians(destination.lng - origin.lng)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2) ** 2
    )
    return EARTH_RADIUS_MILES * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


class ItineraryLeg(BaseModel):
    """Transportation hop from one activity to the next."""

    id: str = Field(description="Leg identifier")
    from_activity_id: str | None = Field(
        default=None, description="Activity the leg departs from"
    )
    to_activity_id: str | None = Field(
        default=None, description="Activity the leg arrives at"
    )
    transportation_mode: TransportationMode = Field(
        default=TransportationMode.car, description="How the traveler moves"
    )
    estimated_duration: int = Field(
        ge=0, description="Mode-adjusted travel time in minutes"
    )
    estimated_distance: float = Field(
        default=0.0, ge=0, description="Distance in a consistent unit"
    )
    notes: str | None = Field(default=None, description="Free-form notes")

    @classmethod
    def from_baseline(
        cls,
        leg_id: str,
        baseline_drive_minutes: float,
        transportation_mode: TransportationMode,
        estimated_distance: float = 0.0,
        **kwargs,
    ) -> ItineraryLeg:
        """Build a leg whose duration is derived from a driving estimate."""
        return cls(
            id=leg_id,
            transportation_mode=transportation_mode,
            estimated_duration=estimate_mode_duration(
                baseline_drive_minutes, transportation_mode
            ),
            estimated_distance=estimated_distance,
            **kwargs,
        )

    @classmethod
    def between(
        cls,
        from_activity: Activity,
        to_activity: Activity,
        transportation_mode: TransportationMode = TransportationMode.car,
    ) -> ItineraryLeg:
        """Build the leg from one activity to the next.

        Distance and duration come from the venues' coordinates; when either
        venue has none, a 1 mile / 10 minute hop is assumed.
        """
        origin, destination = from_activity.location, to_activity.location
        if origin.has_coordinates and destination.has_coordinates:
            distance = calculate_distance(origin, destination)
            duration = estimate_travel_duration(distance, transportation_mode)
        else:
            distance = DEFAULT_LEG_DISTANCE_MILES
            duration = DEFAULT_LEG_DURATION_MINUTES

        return cls(
            id=f"leg-{from_activity.id}-{to_activity.id}",
            from_activity_id=from_activity.id,
            to_activity_id=to_activity.id,
            transportation_mode=transportation_mode,
            estimated_duration=duration,
            estimated_distance=round(distance, 2),
        )

    def with_mode(self, transportation_mode: TransportationMode) -> ItineraryLeg:
        """Copy of this leg re-estimated for another mode over the same distance."""
        return self.model_copy(
            update={
                "transportation_mode": transportation_mode,
                "estimated_duration": estimate_travel_duration(
                    self.estimated_distance, transportation_mode
                ),
            }
        )


class Activity(BaseModel):
    """One scheduled itinerary item.

    Times are kept as supplied ("HH:MM" strings or ``time`` values) and are
    only interpreted by the time model, so a malformed value never prevents
    the itinerary from being checked.
    """

    id: str = Field(description="Stable activity identifier")
    name: str = Field(default="", description="Display name")
    type: ActivityType = Field(default=ActivityType.other, description="Category")
    description: str = Field(default="", description="Longer description")
    location: Location = Field(default_factory=Location, description="Venue")
    start_time: str | time | None = Field(
        default=None, description="Local start time"
    )
    end_time: str | time | None = Field(default=None, description="Local end time")
    transport_to_next: ItineraryLeg | None = Field(
        default=None, description="Leg to the next activity in sequence"
    )


def link_activities(activities: Sequence[Activity]) -> list[Activity]:
    """Attach a leg from each activity to the next one in sequence.

    The mode is suggested from the distance between venues. The last
    activity gets no leg. Inputs are copied, never modified.
    """
    linked: list[Activity] = []
    for index, activity in enumerate(activities):
        if index + 1 == len(activities):
            linked.append(activity.model_copy(update={"transport_to_next": None}))
            break

        following = activities[index + 1]
        if activity.location.has_coordinates and following.location.has_coordinates:
            distance = calculate_distance(activity.location, following.location)
        else:
            distance = UNKNOWN_DISTANCE_MILES

        leg = ItineraryLeg.between(
            activity, following, suggest_transport_mode(distance)
        )
        linked.append(activity.model_copy(update={"transport_to_next": leg}))

    return linked

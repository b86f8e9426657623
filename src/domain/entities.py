"""
Domain entities with business logic.

Patterns used
-------------
- **Strategy Pattern** on ``Ride``: each variant supplies a ``FarePolicy``;
  ``Driver`` and ``Rider`` only ever talk to the abstract ``Ride``.
- ``Driver`` and ``Rider`` keep append-only histories of *shared* ride
  references.  A ride has no back-reference to who holds it.

All validation happens before any attribute is assigned, so a failed
constructor never leaves a half-built object behind.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from .enums import RideType
from .errors import InvalidArgument
from .pricing import FarePolicy, PremiumFare, StandardFare

logger = logging.getLogger(__name__)

MIN_RATING = 0.0
MAX_RATING = 5.0
NO_RIDES_MESSAGE = "No rides requested yet."


def _check_ride(ride: Optional[Ride]) -> Ride:
    if not isinstance(ride, Ride):
        logger.warning("Rejected ride reference %r", ride)
        raise InvalidArgument("Invalid ride reference")
    return ride


# ── Rides ─────────────────────────────────────────────────────────────


class Ride(ABC):
    def __init__(self, id: int, pickup: str, dropoff: str, distance: float):
        # ``not >`` also rejects NaN
        if not distance > 0:
            logger.warning("Rejected ride %s with distance %r", id, distance)
            raise InvalidArgument("Distance must be greater than 0")
        self._id = id
        self._pickup = pickup
        self._dropoff = dropoff
        self._distance = distance
        self._fare = 0.0

    @abstractmethod
    def fare_policy(self) -> FarePolicy:
        """Return the policy that prices this ride."""

    @property
    def id(self) -> int:
        return self._id

    @property
    def pickup(self) -> str:
        return self._pickup

    @property
    def dropoff(self) -> str:
        return self._dropoff

    @property
    def distance(self) -> float:
        return self._distance

    @property
    def fare(self) -> float:
        return self._fare

    @property
    def ride_type(self) -> Optional[RideType]:
        return self.fare_policy().ride_type

    @property
    def label(self) -> str:
        return self.fare_policy().label

    def calculate_fare(self) -> float:
        """Price the ride with its policy and store the result."""
        self._fare = self.fare_policy().calculate(self._distance)
        logger.debug("Ride %s fare computed: %.2f", self._id, self._fare)
        return self._fare

    def details(self) -> str:
        return (
            f"Ride ID: {self._id}\n"
            f"Pickup: {self._pickup}\n"
            f"Dropoff: {self._dropoff}\n"
            f"Distance: {self._distance:g} miles\n"
            f"Fare: ${self._fare:.2f} ({self.label} Ride)"
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self._id!r}, pickup={self._pickup!r}, "
            f"dropoff={self._dropoff!r}, distance={self._distance!r})"
        )


class StandardRide(Ride):
    def fare_policy(self) -> FarePolicy:
        return StandardFare()


class PremiumRide(Ride):
    def fare_policy(self) -> FarePolicy:
        return PremiumFare()


# ── Actors ────────────────────────────────────────────────────────────


class Driver:
    def __init__(self, id: int, name: str, rating: float):
        if not MIN_RATING <= rating <= MAX_RATING:
            logger.warning("Rejected driver %s with rating %r", id, rating)
            raise InvalidArgument("Rating must be between 0 and 5")
        self._id = id
        self._name = name
        self._rating = rating
        self._rides: list[Ride] = []

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def rating(self) -> float:
        return self._rating

    @property
    def rides(self) -> tuple[Ride, ...]:
        return tuple(self._rides)

    @property
    def completed_rides(self) -> int:
        return len(self._rides)

    def add_ride(self, ride: Ride) -> None:
        self._rides.append(_check_ride(ride))
        logger.debug("Driver %s assigned ride %s", self._id, ride.id)

    def driver_info(self) -> str:
        return (
            f"Driver ID: {self._id}\n"
            f"Name: {self._name}\n"
            f"Rating: {self._rating:.2f}\n"
            f"Completed Rides: {self.completed_rides}"
        )


class Rider:
    def __init__(self, id: int, name: str):
        self._id = id
        self._name = name
        self._rides: list[Ride] = []

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def rides(self) -> tuple[Ride, ...]:
        return tuple(self._rides)

    def request_ride(self, ride: Ride) -> None:
        self._rides.append(_check_ride(ride))
        logger.debug("Rider %s requested ride %s", self._id, ride.id)

    def view_rides(self) -> str:
        """Ride records in request order, or the empty-history message."""
        if not self._rides:
            return NO_RIDES_MESSAGE
        return "\n".join(ride.details() for ride in self._rides)

    def rider_info(self) -> str:
        return (
            f"Rider ID: {self._id}\n"
            f"Name: {self._name}\n"
            f"Requested Rides History:\n"
            f"{self.view_rides()}"
        )

"""Pydantic read-only snapshots of the domain entities.

Entities share ``Ride`` references and keep mutating histories; a snapshot
freezes what they look like at one moment so it can be handed around or
serialised with ``model_dump``.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from .enums import RideType


class RideSnapshot(BaseModel):
    id: int
    pickup: str
    dropoff: str
    distance: float = Field(..., gt=0)
    fare: float = Field(..., ge=0)
    label: str
    ride_type: Optional[RideType] = None

    model_config = {"from_attributes": True, "frozen": True}


class DriverSnapshot(BaseModel):
    id: int
    name: str
    rating: float = Field(..., ge=0, le=5)
    completed_rides: int
    rides: tuple[RideSnapshot, ...] = ()

    model_config = {"from_attributes": True, "frozen": True}


class RiderSnapshot(BaseModel):
    id: int
    name: str
    rides: tuple[RideSnapshot, ...] = ()

    model_config = {"from_attributes": True, "frozen": True}

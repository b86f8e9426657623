"""
Fare Policies  (Strategy Pattern)
=================================

Formula
-------
Fare = Distance x Rate_Per_Mile

* **Standard**: 1.50 / mile
* **Premium**:  3.00 / mile

Default rates come from :data:`src.config.settings` and can be overridden per
policy instance.  A new ride variant only needs a new ``FarePolicy``
subclass; drivers, riders and the record format never look at the concrete
policy.

Complexity: O(1) per fare calculation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from src.config import settings

from .enums import RideType
from .errors import InvalidArgument


# ── Strategy hierarchy ────────────────────────────────────────────────


class FarePolicy(ABC):
    label: str
    ride_type: Optional[RideType] = None

    def __init__(self, rate_per_mile: Optional[float] = None):
        rate = self.default_rate() if rate_per_mile is None else rate_per_mile
        if not rate > 0:
            raise InvalidArgument("Rate per mile must be greater than 0")
        self.rate_per_mile = rate

    @abstractmethod
    def default_rate(self) -> float: ...

    def calculate(self, distance: float) -> float:
        return distance * self.rate_per_mile


class StandardFare(FarePolicy):
    ride_type = RideType.STANDARD
    label = RideType.STANDARD.value

    def default_rate(self) -> float:
        return settings.standard_rate_per_mile


class PremiumFare(FarePolicy):
    ride_type = RideType.PREMIUM
    label = RideType.PREMIUM.value

    def default_rate(self) -> float:
        return settings.premium_rate_per_mile

"""Domain enumerations."""

import enum


class RideType(str, enum.Enum):
    STANDARD = "Standard"
    PREMIUM = "Premium"

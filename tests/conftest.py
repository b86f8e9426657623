"""Shared test fixtures."""

import pytest

from src.domain.entities import Driver, PremiumRide, Rider, StandardRide


# ── Rides ─────────────────────────────────────────────────────────────


@pytest.fixture
def standard_ride() -> StandardRide:
    ride = StandardRide(1, "Home", "Work", 5.0)
    ride.calculate_fare()
    return ride


@pytest.fixture
def premium_ride() -> PremiumRide:
    ride = PremiumRide(2, "Home", "Airport", 15.0)
    ride.calculate_fare()
    return ride


# ── Actors ────────────────────────────────────────────────────────────


@pytest.fixture
def driver() -> Driver:
    return Driver(101, "John Doe", 4.8)


@pytest.fixture
def rider() -> Rider:
    return Rider(201, "Alice")

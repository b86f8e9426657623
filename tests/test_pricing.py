"""Unit tests for the fare policies."""

import pytest

from src.config import settings
from src.domain.enums import RideType
from src.domain.errors import InvalidArgument
from src.domain.pricing import FarePolicy, PremiumFare, StandardFare


class TestFarePolicies:
    def test_standard_rate(self):
        assert StandardFare().calculate(10.0) == 15.0  # 10 * 1.50

    def test_premium_rate(self):
        assert PremiumFare().calculate(10.0) == 30.0  # 10 * 3.00

    @pytest.mark.parametrize("distance", [0.1, 1.0, 2.5, 8.0, 123.45])
    def test_fare_is_distance_times_rate(self, distance):
        assert StandardFare().calculate(distance) == pytest.approx(1.50 * distance)
        assert PremiumFare().calculate(distance) == pytest.approx(3.00 * distance)

    def test_labels(self):
        assert StandardFare().label == "Standard"
        assert PremiumFare().label == "Premium"
        assert PremiumFare().ride_type is RideType.PREMIUM

    def test_rate_override(self):
        assert StandardFare(rate_per_mile=2.0).calculate(4.0) == 8.0

    @pytest.mark.parametrize("rate", [0.0, -1.5])
    def test_non_positive_rate_rejected(self, rate):
        with pytest.raises(InvalidArgument, match="Rate per mile"):
            StandardFare(rate_per_mile=rate)

    def test_default_rate_follows_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "premium_rate_per_mile", 4.0)
        assert PremiumFare().calculate(2.0) == 8.0

    def test_policy_is_abstract(self):
        with pytest.raises(TypeError):
            FarePolicy()

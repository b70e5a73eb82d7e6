"""Shared fixtures.

Reference band used across engine tests: FIPE min R$ 1.000/m², average
R$ 2.000/m², max R$ 3.000/m², OLX average R$ 2.100/m².
"""

from decimal import Decimal

import pytest

from fairprice.data.neighborhoods import load_neighborhoods
from fairprice.models.neighborhood import Amenities, NeighborhoodRecord


@pytest.fixture
def band_record() -> NeighborhoodRecord:
    return NeighborhoodRecord(
        name="Centro Teste",
        min_price_m2=Decimal("1000"),
        avg_price_m2=Decimal("2000"),
        max_price_m2=Decimal("3000"),
        classifieds_avg_price_m2=Decimal("2100"),
        wellbeing_index=Decimal("0.95"),
        human_development_index=Decimal("0.85"),
        environmental_index=Decimal("0.72"),
        housing_index=Decimal("0.5"),
        region="Regional 12",
        amenities=Amenities(
            bus_stops=20,
            bike_stations=2,
            bike_lane_km=Decimal("1"),
            schools=10,
            health_units=2,
        ),
        latitude=-3.7275,
        longitude=-38.5275,
    )


@pytest.fixture
def zero_min_record() -> NeighborhoodRecord:
    """Record whose FIPE minimum is missing (0)."""
    return NeighborhoodRecord(
        name="Sem Minimo",
        min_price_m2=Decimal("0"),
        avg_price_m2=Decimal("2000"),
        max_price_m2=Decimal("3000"),
        classifieds_avg_price_m2=Decimal("1900"),
    )


@pytest.fixture
def bundled_repo():
    return load_neighborhoods()

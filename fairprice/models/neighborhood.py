"""Neighborhood reference data types."""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class Amenities:
    bus_stops: int = 0
    bike_stations: int = 0
    bike_lane_km: Decimal = Decimal("0")
    schools: int = 0
    health_units: int = 0
    squares: int = 0
    public_wifi: bool = False


@dataclass(frozen=True)
class NeighborhoodRecord:
    name: str

    # Official (FIPE) price per m² band
    min_price_m2: Decimal = Decimal("0")
    avg_price_m2: Decimal = Decimal("0")
    max_price_m2: Decimal = Decimal("0")

    # Classifieds market (OLX) average price per m²
    classifieds_avg_price_m2: Decimal = Decimal("0")

    # Socioeconomic indicators, typically 0-1
    wellbeing_index: Decimal = Decimal("0")
    human_development_index: Decimal = Decimal("0")
    environmental_index: Decimal = Decimal("0")
    housing_index: Decimal = Decimal("0")

    # Display only
    region: str = ""
    avg_household_income: Decimal = Decimal("0")  # monthly, BRL
    description: str = ""
    amenities: Amenities = field(default_factory=Amenities)

    # Map only
    latitude: float | None = None
    longitude: float | None = None

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

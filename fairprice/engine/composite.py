"""Composite amenity scores.

Mobility:         bus stops ×1 + bike stations ×5 + bike lane km ×3
Education/health: schools + health units ×3

Both are banded (strictly greater than) into Excellent / Good / Regular / Limited.
"""

from decimal import Decimal

from fairprice.models.neighborhood import Amenities
from fairprice.models.valuation import CompositeScores, IndicatorClassification, Tone

BUS_STOP_WEIGHT = Decimal("1")
BIKE_STATION_WEIGHT = Decimal("5")
BIKE_LANE_KM_WEIGHT = Decimal("3")

HEALTH_UNIT_WEIGHT = Decimal("3")

# (exclusive lower bound, label, tone), highest band first
MOBILITY_BANDS: list[tuple[Decimal, str, Tone]] = [
    (Decimal("60"), "Excellent", Tone.STRONG_POSITIVE),
    (Decimal("30"), "Good", Tone.POSITIVE),
    (Decimal("15"), "Regular", Tone.CAUTION),
]

EDUCATION_HEALTH_BANDS: list[tuple[Decimal, str, Tone]] = [
    (Decimal("25"), "Excellent", Tone.STRONG_POSITIVE),
    (Decimal("15"), "Good", Tone.POSITIVE),
    (Decimal("5"), "Regular", Tone.CAUTION),
]

LIMITED = ("Limited", Tone.NEGATIVE)


def mobility_score(bus_stops: int, bike_stations: int, bike_lane_km: Decimal | int | float) -> Decimal:
    return (
        Decimal(bus_stops) * BUS_STOP_WEIGHT
        + Decimal(bike_stations) * BIKE_STATION_WEIGHT
        + Decimal(str(bike_lane_km)) * BIKE_LANE_KM_WEIGHT
    )


def education_health_score(total_schools: int, health_units: int) -> Decimal:
    return Decimal(total_schools) + Decimal(health_units) * HEALTH_UNIT_WEIGHT


def _band(score: Decimal, bands: list[tuple[Decimal, str, Tone]]) -> IndicatorClassification:
    for lower, label, tone in bands:
        if score > lower:
            return IndicatorClassification(label=label, tone=tone, score=score)
    label, tone = LIMITED
    return IndicatorClassification(label=label, tone=tone, score=score)


def classify_mobility(score: Decimal) -> IndicatorClassification:
    return _band(score, MOBILITY_BANDS)


def classify_education_health(score: Decimal) -> IndicatorClassification:
    return _band(score, EDUCATION_HEALTH_BANDS)


def classify_composites(amenities: Amenities) -> CompositeScores:
    """Score and classify a neighborhood's mobility and education/health."""
    mobility = mobility_score(amenities.bus_stops, amenities.bike_stations, amenities.bike_lane_km)
    education_health = education_health_score(amenities.schools, amenities.health_units)
    return CompositeScores(
        mobility=classify_mobility(mobility),
        education_health=classify_education_health(education_health),
    )

"""Neighborhood reference data routes."""

from fastapi import APIRouter, Depends, HTTPException

from fairprice.api.deps import get_neighborhoods
from fairprice.api.schemas import (
    AmenitiesResponse,
    ClassificationResponse,
    NeighborhoodListResponse,
    NeighborhoodResponse,
)
from fairprice.data.neighborhoods import NeighborhoodRepository
from fairprice.engine.composite import classify_composites
from fairprice.engine.indicators import classify_neighborhood_indicators
from fairprice.models.valuation import IndicatorClassification

router = APIRouter(prefix="/api/v1/neighborhoods", tags=["neighborhoods"])


def _classification(c: IndicatorClassification) -> ClassificationResponse:
    return ClassificationResponse(label=c.label, tone=c.tone.value, score=c.score)


@router.get("", response_model=NeighborhoodListResponse)
def list_neighborhoods(q: str | None = None, repo: NeighborhoodRepository = Depends(get_neighborhoods)):
    """Neighborhood names, optionally filtered by a case-insensitive substring."""
    names = repo.search(q)
    return NeighborhoodListResponse(count=len(names), neighborhoods=names)


@router.get("/{name}", response_model=NeighborhoodResponse)
def get_neighborhood(name: str, repo: NeighborhoodRepository = Depends(get_neighborhoods)):
    record = repo.get(name)
    if record is None:
        raise HTTPException(status_code=404, detail=f"Neighborhood not found: {name}")

    indicators = classify_neighborhood_indicators(record)
    composites = classify_composites(record.amenities)
    a = record.amenities

    return NeighborhoodResponse(
        name=record.name,
        region=record.region,
        description=record.description,
        min_price_m2=record.min_price_m2,
        avg_price_m2=record.avg_price_m2,
        max_price_m2=record.max_price_m2,
        classifieds_avg_price_m2=record.classifieds_avg_price_m2,
        avg_household_income=record.avg_household_income,
        latitude=record.latitude,
        longitude=record.longitude,
        amenities=AmenitiesResponse(
            bus_stops=a.bus_stops,
            bike_stations=a.bike_stations,
            bike_lane_km=a.bike_lane_km,
            schools=a.schools,
            health_units=a.health_units,
            squares=a.squares,
            public_wifi=a.public_wifi,
        ),
        wellbeing=_classification(indicators.wellbeing),
        human_development=_classification(indicators.human_development),
        environmental=_classification(indicators.environmental),
        housing=_classification(indicators.housing),
        mobility=_classification(composites.mobility),
        education_health=_classification(composites.education_health),
    )

"""Pydantic schemas for API request/response models."""

from decimal import Decimal

from pydantic import BaseModel, Field


# ---- Request schemas ----

class ValuationRequest(BaseModel):
    neighborhood: str = Field(..., description="Exact neighborhood name")
    price: Decimal | None = Field(None, description="Total price in BRL")
    price_input: str | None = Field(None, description="Masked price text, e.g. 'R$ 250.000,00'")
    area: int | str | None = Field(None, description="Area in m²")


# ---- Response schemas ----

class ClassificationResponse(BaseModel):
    label: str
    tone: str
    score: Decimal


class AmenitiesResponse(BaseModel):
    bus_stops: int
    bike_stations: int
    bike_lane_km: Decimal
    schools: int
    health_units: int
    squares: int
    public_wifi: bool


class NeighborhoodResponse(BaseModel):
    name: str
    region: str
    description: str
    min_price_m2: Decimal
    avg_price_m2: Decimal
    max_price_m2: Decimal
    classifieds_avg_price_m2: Decimal
    avg_household_income: Decimal
    latitude: float | None = None
    longitude: float | None = None
    amenities: AmenitiesResponse

    # Classifications
    wellbeing: ClassificationResponse
    human_development: ClassificationResponse
    environmental: ClassificationResponse
    housing: ClassificationResponse
    mobility: ClassificationResponse
    education_health: ClassificationResponse


class NeighborhoodListResponse(BaseModel):
    count: int
    neighborhoods: list[str]


class ValuationResponse(BaseModel):
    status: str
    title: str
    message: str
    tone: str
    neighborhood: str
    price: Decimal | None = None
    area: int | None = None
    price_per_area: Decimal | None = None
    tier: str | None = None
    tier_rank: int | None = None
    estimated_market_value: Decimal | None = None
    difference_pct: Decimal | None = None
    classifieds_avg_price_m2: Decimal | None = None

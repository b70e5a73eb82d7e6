"""Valuation request/result types."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from fairprice.models.neighborhood import NeighborhoodRecord


class Tone(Enum):
    """Severity of a verdict or label, resolved to a colour by each surface."""
    STRONG_POSITIVE = "strong_positive"
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    CAUTION = "caution"
    NEGATIVE = "negative"


class PriceTier(Enum):
    EXCELLENT_DEAL = "excellent_deal"
    VERY_ADVANTAGEOUS = "very_advantageous"
    FAIR_PRICE = "fair_price"
    OVERPRICED = "overpriced"

    @property
    def rank(self) -> int:
        """Position from cheapest (0) to most expensive (3)."""
        return _TIER_ORDER.index(self)


_TIER_ORDER = [
    PriceTier.EXCELLENT_DEAL,
    PriceTier.VERY_ADVANTAGEOUS,
    PriceTier.FAIR_PRICE,
    PriceTier.OVERPRICED,
]


class ValuationStatus(Enum):
    EVALUATED = "evaluated"
    INVALID_INPUT = "invalid_input"
    INSUFFICIENT_DATA = "insufficient_data"


@dataclass(frozen=True)
class ValuationInput:
    neighborhood: str
    total_price: Decimal | None
    area: int | None


@dataclass(frozen=True)
class ValuationResult:
    status: ValuationStatus
    title: str
    message: str
    tone: Tone
    price_per_area: Decimal | None = None  # unrounded
    neighborhood: NeighborhoodRecord | None = None
    tier: PriceTier | None = None

    # Display only: official average × area, and % over/under it
    estimated_market_value: Decimal | None = None
    difference_pct: Decimal | None = None

    @property
    def is_evaluated(self) -> bool:
        return self.status is ValuationStatus.EVALUATED


@dataclass(frozen=True)
class IndicatorClassification:
    label: str
    tone: Tone
    score: Decimal


@dataclass(frozen=True)
class NeighborhoodIndicators:
    wellbeing: IndicatorClassification
    human_development: IndicatorClassification
    environmental: IndicatorClassification
    housing: IndicatorClassification


@dataclass(frozen=True)
class CompositeScores:
    mobility: IndicatorClassification
    education_health: IndicatorClassification

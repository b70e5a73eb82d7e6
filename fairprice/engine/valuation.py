"""Price-per-m² valuation engine.

Tiers (first match wins, all comparisons strict):
  EXCELLENT_DEAL     min > 0 and price < min × 0.95
  VERY_ADVANTAGEOUS  price < avg
  OVERPRICED         price > max
  FAIR_PRICE         otherwise
"""

import logging
from decimal import Decimal

from fairprice.engine.normalize import MAX_AREA, MAX_PRICE, format_currency
from fairprice.models.neighborhood import NeighborhoodRecord
from fairprice.models.valuation import (
    PriceTier,
    Tone,
    ValuationInput,
    ValuationResult,
    ValuationStatus,
)

logger = logging.getLogger(__name__)

# Discount below the official floor that counts as an excellent deal
EXCELLENT_DEAL_FACTOR = Decimal("0.95")

TIER_TITLES: dict[PriceTier, str] = {
    PriceTier.EXCELLENT_DEAL: "Excellent Deal",
    PriceTier.VERY_ADVANTAGEOUS: "Very Advantageous",
    PriceTier.FAIR_PRICE: "Fair Price",
    PriceTier.OVERPRICED: "Overpriced",
}

TIER_TONES: dict[PriceTier, Tone] = {
    PriceTier.EXCELLENT_DEAL: Tone.STRONG_POSITIVE,
    PriceTier.VERY_ADVANTAGEOUS: Tone.POSITIVE,
    PriceTier.FAIR_PRICE: Tone.NEUTRAL,
    PriceTier.OVERPRICED: Tone.NEGATIVE,
}

INSUFFICIENT_DATA_TITLE = "Insufficient Data"
INVALID_INPUT_TITLE = "Invalid Input"


def price_per_area(total_price: Decimal | None, area: int | None) -> Decimal | None:
    """total_price / area, or None when the inputs can't produce a finite value.

    Prices above R$ 99.999.999,99 and areas above MAX_AREA are rejected like
    any other invalid input.
    """
    if area is None or area <= 0 or area > MAX_AREA or total_price is None:
        return None
    if not isinstance(total_price, Decimal):
        total_price = Decimal(str(total_price))
    if not total_price.is_finite() or total_price <= 0 or total_price > MAX_PRICE:
        return None
    return total_price / Decimal(area)


def classify_tier(user_price: Decimal, record: NeighborhoodRecord) -> PriceTier:
    """Place a price per m² within the neighborhood's official band."""
    if record.min_price_m2 > 0 and user_price < record.min_price_m2 * EXCELLENT_DEAL_FACTOR:
        return PriceTier.EXCELLENT_DEAL
    if user_price < record.avg_price_m2:
        return PriceTier.VERY_ADVANTAGEOUS
    if user_price > record.max_price_m2:
        return PriceTier.OVERPRICED
    return PriceTier.FAIR_PRICE


def tier_message(tier: PriceTier, user_price: Decimal, record: NeighborhoodRecord) -> str:
    price = format_currency(user_price)
    market = format_currency(record.classifieds_avg_price_m2)

    if tier is PriceTier.EXCELLENT_DEAL:
        head = (
            f"Excellent deal! At {price}/m² this property is more than 5% below "
            f"the official minimum of {format_currency(record.min_price_m2)}/m² for {record.name}."
        )
    elif tier is PriceTier.VERY_ADVANTAGEOUS:
        head = (
            f"Very advantageous: {price}/m² is below the official average of "
            f"{format_currency(record.avg_price_m2)}/m² for {record.name}."
        )
    elif tier is PriceTier.OVERPRICED:
        head = (
            f"Overpriced: {price}/m² is above the official maximum of "
            f"{format_currency(record.max_price_m2)}/m² for {record.name}."
        )
    else:
        head = (
            f"Fair price: {price}/m² is within the official range for {record.name} "
            f"(average {format_currency(record.avg_price_m2)}/m², "
            f"maximum {format_currency(record.max_price_m2)}/m²)."
        )
    return f"{head} Classifieds market average: {market}/m²."


def _market_comparison(
    total_price: Decimal, area: int, record: NeighborhoodRecord,
) -> tuple[Decimal | None, Decimal | None]:
    """Estimated value at the official average and the % difference to it."""
    if record.avg_price_m2 <= 0:
        return None, None
    estimated = record.avg_price_m2 * area
    diff_pct = ((total_price - estimated) / estimated * 100).quantize(Decimal("0.1"))
    return estimated, diff_pct


def evaluate(
    total_price: Decimal | None,
    area: int | None,
    neighborhood: NeighborhoodRecord | None,
) -> ValuationResult:
    """Evaluate a price/area pair against a neighborhood's reference data.

    A missing neighborhood short-circuits to INSUFFICIENT_DATA whatever the
    inputs are. Otherwise a zero/negative/missing area or price yields
    INVALID_INPUT. Neither case raises.
    """
    ppa = price_per_area(total_price, area)

    if neighborhood is None:
        logger.info("No reference data for neighborhood; skipping tier classification")
        return ValuationResult(
            status=ValuationStatus.INSUFFICIENT_DATA,
            title=INSUFFICIENT_DATA_TITLE,
            message="Market data was not found for this neighborhood.",
            tone=Tone.CAUTION,
            price_per_area=ppa,
        )

    if ppa is None:
        logger.info("Invalid valuation input: price=%s area=%s", total_price, area)
        return ValuationResult(
            status=ValuationStatus.INVALID_INPUT,
            title=INVALID_INPUT_TITLE,
            message="Enter a price and an area greater than zero.",
            tone=Tone.CAUTION,
            neighborhood=neighborhood,
        )

    tier = classify_tier(ppa, neighborhood)
    estimated, diff_pct = _market_comparison(total_price, area, neighborhood)
    logger.info(
        "Valuation for %s: %.2f/m² → %s", neighborhood.name, ppa, tier.value,
    )

    return ValuationResult(
        status=ValuationStatus.EVALUATED,
        title=TIER_TITLES[tier],
        message=tier_message(tier, ppa, neighborhood),
        tone=TIER_TONES[tier],
        price_per_area=ppa,
        neighborhood=neighborhood,
        tier=tier,
        estimated_market_value=estimated,
        difference_pct=diff_pct,
    )


def evaluate_input(valuation_input: ValuationInput, neighborhood: NeighborhoodRecord | None) -> ValuationResult:
    return evaluate(valuation_input.total_price, valuation_input.area, neighborhood)

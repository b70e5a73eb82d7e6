"""Valuation routes — the primary API entry point.

INVALID_INPUT and INSUFFICIENT_DATA are ordinary outcomes and come back as
200 responses with the matching status, never as HTTP errors.
"""

from fastapi import APIRouter, Depends

from fairprice.api.deps import get_neighborhoods
from fairprice.api.schemas import ValuationRequest, ValuationResponse
from fairprice.data.neighborhoods import NeighborhoodRepository
from fairprice.engine.normalize import normalize_currency, parse_area
from fairprice.engine.valuation import evaluate_input
from fairprice.models.valuation import ValuationInput

router = APIRouter(prefix="/api/v1", tags=["valuation"])


def _build_input(req: ValuationRequest) -> ValuationInput:
    price = req.price if req.price is not None else normalize_currency(req.price_input)
    return ValuationInput(
        neighborhood=req.neighborhood.strip(),
        total_price=price,
        area=parse_area(req.area),
    )


@router.post("/valuations", response_model=ValuationResponse)
def create_valuation(req: ValuationRequest, repo: NeighborhoodRepository = Depends(get_neighborhoods)):
    """Evaluate a price/area pair against a neighborhood's reference band."""
    valuation_input = _build_input(req)
    record = repo.get(valuation_input.neighborhood)
    result = evaluate_input(valuation_input, record)

    return ValuationResponse(
        status=result.status.value,
        title=result.title,
        message=result.message,
        tone=result.tone.value,
        neighborhood=valuation_input.neighborhood,
        price=valuation_input.total_price,
        area=valuation_input.area,
        price_per_area=result.price_per_area,
        tier=result.tier.value if result.tier else None,
        tier_rank=result.tier.rank if result.tier else None,
        estimated_market_value=result.estimated_market_value,
        difference_pct=result.difference_pct,
        classifieds_avg_price_m2=record.classifieds_avg_price_m2 if record else None,
    )

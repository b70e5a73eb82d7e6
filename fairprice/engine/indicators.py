"""Socioeconomic indicator classification.

Each indicator is an independent 0-1 score mapped to a label through one of
two banded curves. Missing or unparsable scores count as 0.
"""

from decimal import Decimal, InvalidOperation
from enum import Enum

from fairprice.models.neighborhood import NeighborhoodRecord
from fairprice.models.valuation import (
    IndicatorClassification,
    NeighborhoodIndicators,
    Tone,
)


class Curve(Enum):
    WELLBEING = "wellbeing"
    GENERIC = "generic"


# (lower bound inclusive, label, tone), highest band first
WELLBEING_BANDS: list[tuple[Decimal, str, Tone]] = [
    (Decimal("0.9"), "Very High", Tone.STRONG_POSITIVE),
    (Decimal("0.8"), "High", Tone.POSITIVE),
    (Decimal("0.7"), "Medium", Tone.NEUTRAL),
    (Decimal("0.6"), "Low", Tone.CAUTION),
]
WELLBEING_FLOOR = ("Very Low", Tone.NEGATIVE)

GENERIC_BANDS: list[tuple[Decimal, str, Tone]] = [
    (Decimal("0.9"), "Excellent", Tone.STRONG_POSITIVE),
    (Decimal("0.8"), "Good", Tone.POSITIVE),
    (Decimal("0.7"), "Regular", Tone.CAUTION),
]
GENERIC_FLOOR = ("Poor", Tone.NEGATIVE)

_CURVES = {
    Curve.WELLBEING: (WELLBEING_BANDS, WELLBEING_FLOOR),
    Curve.GENERIC: (GENERIC_BANDS, GENERIC_FLOOR),
}


def parse_score(value: Decimal | float | int | str | None) -> Decimal:
    """Coerce a raw indicator value to Decimal, defaulting to 0."""
    if value is None or isinstance(value, bool):
        return Decimal("0")
    try:
        score = Decimal(str(value).strip().replace(",", "."))
    except InvalidOperation:
        return Decimal("0")
    if not score.is_finite():
        return Decimal("0")
    return score


def classify_indicator(
    score: Decimal | float | int | str | None,
    curve: Curve = Curve.GENERIC,
) -> IndicatorClassification:
    value = parse_score(score)
    bands, (floor_label, floor_tone) = _CURVES[curve]
    for lower, label, tone in bands:
        if value >= lower:
            return IndicatorClassification(label=label, tone=tone, score=value)
    return IndicatorClassification(label=floor_label, tone=floor_tone, score=value)


def classify_neighborhood_indicators(record: NeighborhoodRecord) -> NeighborhoodIndicators:
    return NeighborhoodIndicators(
        wellbeing=classify_indicator(record.wellbeing_index, Curve.WELLBEING),
        human_development=classify_indicator(record.human_development_index, Curve.GENERIC),
        environmental=classify_indicator(record.environmental_index, Curve.GENERIC),
        housing=classify_indicator(record.housing_index, Curve.GENERIC),
    )

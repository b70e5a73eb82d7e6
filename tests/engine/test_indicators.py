"""Tests for socioeconomic indicator classification."""

from dataclasses import replace
from decimal import Decimal

import pytest

from fairprice.engine.indicators import (
    Curve,
    classify_indicator,
    classify_neighborhood_indicators,
    parse_score,
)
from fairprice.models.valuation import Tone


class TestClassifyIndicator:
    def test_generic_good(self):
        result = classify_indicator(0.85, Curve.GENERIC)
        assert result.label == "Good"
        assert result.tone == Tone.POSITIVE
        assert result.score == Decimal("0.85")

    def test_wellbeing_very_high(self):
        assert classify_indicator(0.95, Curve.WELLBEING).label == "Very High"

    def test_missing_score_is_worst_label(self):
        result = classify_indicator(None, Curve.GENERIC)
        assert result.label == "Poor"
        assert result.score == Decimal("0")

    @pytest.mark.parametrize("raw", ["", "abc", "  ", float("nan")])
    def test_unparsable_scores_default_to_zero(self, raw):
        assert classify_indicator(raw, Curve.GENERIC).label == "Poor"
        assert classify_indicator(raw, Curve.WELLBEING).label == "Very Low"

    @pytest.mark.parametrize("score,label", [
        ("0.9", "Excellent"),
        ("0.8999", "Good"),
        ("0.8", "Good"),
        ("0.7", "Regular"),
        ("0.6999", "Poor"),
        ("1.2", "Excellent"),
    ])
    def test_generic_bands(self, score, label):
        assert classify_indicator(Decimal(score), Curve.GENERIC).label == label

    @pytest.mark.parametrize("score,label", [
        ("0.9", "Very High"),
        ("0.8", "High"),
        ("0.7", "Medium"),
        ("0.6", "Low"),
        ("0.59", "Very Low"),
    ])
    def test_wellbeing_bands(self, score, label):
        assert classify_indicator(Decimal(score), Curve.WELLBEING).label == label

    def test_default_curve_is_generic(self):
        assert classify_indicator("0.75").label == "Regular"

    def test_comma_decimal_text(self):
        assert parse_score("0,72") == Decimal("0.72")


class TestNeighborhoodIndicators:
    def test_each_indicator_uses_its_curve(self, band_record):
        indicators = classify_neighborhood_indicators(band_record)
        assert indicators.wellbeing.label == "Very High"
        assert indicators.human_development.label == "Good"
        assert indicators.environmental.label == "Regular"
        assert indicators.housing.label == "Poor"

    def test_indicators_are_independent(self, band_record):
        changed = replace(band_record, human_development_index=Decimal("0.1"))
        before = classify_neighborhood_indicators(band_record)
        after = classify_neighborhood_indicators(changed)
        assert after.human_development.label == "Poor"
        assert after.wellbeing == before.wellbeing
        assert after.environmental == before.environmental
        assert after.housing == before.housing

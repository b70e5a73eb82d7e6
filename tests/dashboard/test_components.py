"""Tests for dashboard result-panel builders."""

from decimal import Decimal

from dash import dcc

from fairprice.dashboard.components import (
    THEMES,
    TONE_COLORS,
    build_result_panel,
    get_theme,
    neighborhood_map,
    tone_color,
    verdict_banner,
)
from fairprice.engine.composite import classify_composites
from fairprice.engine.indicators import classify_neighborhood_indicators
from fairprice.engine.valuation import evaluate
from fairprice.models.neighborhood import NeighborhoodRecord
from fairprice.models.valuation import Tone

THEME = THEMES["dark"]


def _walk(component):
    """Yield every component and string in a Dash tree."""
    yield component
    children = getattr(component, "children", None)
    if children is None:
        return
    if not isinstance(children, (list, tuple)):
        children = [children]
    for child in children:
        yield from _walk(child)


def _texts(component) -> list[str]:
    return [c for c in _walk(component) if isinstance(c, str)]


class TestTheme:
    def test_unknown_theme_falls_back_to_dark(self):
        assert get_theme("neon") == THEMES["dark"]
        assert get_theme("light") == THEMES["light"]

    def test_every_tone_has_a_color(self):
        for tone in Tone:
            assert tone_color(tone) == TONE_COLORS[tone]


class TestResultPanel:
    def test_verdict_banner_uses_tier_color(self, band_record):
        result = evaluate(Decimal("400000"), 100, band_record)
        banner = verdict_banner(result, THEME)
        assert "Overpriced" in _texts(banner)
        assert TONE_COLORS[Tone.NEGATIVE] in banner.style["border"]

    def test_evaluated_panel_sections(self, band_record):
        result = evaluate(Decimal("250000"), 100, band_record)
        panel = build_result_panel(
            result, band_record.name, Decimal("250000"), 100,
            classify_neighborhood_indicators(band_record),
            classify_composites(band_record.amenities),
            THEME,
        )
        texts = _texts(panel)
        assert "Fair Price" in texts
        assert "R$ 2.500,00" in texts
        assert "Market analysis (FIPE/OLX)" in texts
        assert "Very High" in texts
        assert "+25.0%" in texts
        assert any(isinstance(c, dcc.Graph) for c in _walk(panel))

    def test_insufficient_data_panel(self):
        result = evaluate(Decimal("250000"), 100, None)
        panel = build_result_panel(result, "Atlantis", Decimal("250000"), 100, None, None, THEME)
        texts = _texts(panel)
        assert "Insufficient Data" in texts
        assert "Market analysis (FIPE/OLX)" not in texts
        assert len(panel.children) == 2

    def test_map_placeholder_without_coordinates(self):
        record = NeighborhoodRecord(name="Pirambu")
        placeholder = neighborhood_map(record, THEME)
        assert "Map unavailable" in _texts(placeholder)
        assert not any(isinstance(c, dcc.Graph) for c in _walk(placeholder))

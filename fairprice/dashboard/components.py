"""Result-panel builders shared by the dashboard pages.

Pure functions from engine results to Dash components. Colours are resolved
from Tone once, through the active theme.
"""

from decimal import Decimal

import plotly.graph_objects as go
from dash import dcc, html

from fairprice.engine.normalize import format_area, format_currency
from fairprice.models.neighborhood import NeighborhoodRecord
from fairprice.models.valuation import (
    CompositeScores,
    IndicatorClassification,
    NeighborhoodIndicators,
    Tone,
    ValuationResult,
    ValuationStatus,
)

THEMES: dict[str, dict[str, str]] = {
    "dark": {
        "background": "#0f1d2a",
        "card": "#1E293B",
        "input": "#334155",
        "primary": "#11ac5e",
        "text": "#F1F5F9",
        "muted": "#94A3B8",
        "border": "#475569",
    },
    "light": {
        "background": "#F8F8F8",
        "card": "#FFFFFF",
        "input": "#FFFFFF",
        "primary": "#6C5CE7",
        "text": "#333333",
        "muted": "#6B7280",
        "border": "#D1D5DB",
    },
}

TONE_COLORS: dict[Tone, str] = {
    Tone.STRONG_POSITIVE: "#16a34a",
    Tone.POSITIVE: "#4ade80",
    Tone.NEUTRAL: "#3b82f6",
    Tone.CAUTION: "#f59e0b",
    Tone.NEGATIVE: "#dc2626",
}

MAP_ZOOM = 14


def get_theme(name: str) -> dict[str, str]:
    return THEMES.get(name, THEMES["dark"])


def tone_color(tone: Tone) -> str:
    return TONE_COLORS[tone]


def _card(children, theme, **style):
    return html.Div(children, style={
        "backgroundColor": theme["card"],
        "border": f"1px solid {theme['border']}",
        "borderRadius": "12px",
        "padding": "1.25rem",
        "marginBottom": "1rem",
        **style,
    })


def _detail_row(label, value, theme):
    return html.Div([
        html.Span(label, style={"color": theme["muted"], "fontSize": "0.9rem"}),
        html.Span(value, style={"color": theme["text"], "fontWeight": "600", "fontSize": "0.9rem"}),
    ], style={
        "display": "flex",
        "justifyContent": "space-between",
        "padding": "0.5rem 0",
        "borderBottom": f"1px solid {theme['border']}",
    })


def verdict_banner(result: ValuationResult, theme: dict[str, str]):
    color = tone_color(result.tone)
    return html.Div([
        html.Div(result.title, id="verdict-title", style={
            "fontSize": "1.75rem", "fontWeight": "bold", "color": color,
        }),
        html.Div(result.message, id="verdict-message", style={
            "fontSize": "0.95rem", "color": theme["text"], "marginTop": "0.5rem",
        }),
    ], style={
        "textAlign": "center", "padding": "1rem",
        "border": f"3px solid {color}", "borderRadius": "12px",
        "marginBottom": "1rem",
    })


def property_details(
    result: ValuationResult,
    neighborhood_name: str,
    total_price: Decimal | None,
    area: int | None,
    theme: dict[str, str],
):
    rows = [
        _detail_row("Neighborhood", neighborhood_name or "N/A", theme),
        _detail_row("Total area", format_area(area), theme),
        _detail_row("Price", format_currency(total_price) or "N/A", theme),
    ]
    if result.price_per_area is not None:
        rows.append(_detail_row("Price per m²", format_currency(result.price_per_area), theme))
    return _card([html.H4("Property", style={"color": theme["primary"]}), *rows], theme)


def market_analysis(result: ValuationResult, theme: dict[str, str]):
    record = result.neighborhood
    if record is None:
        return None
    rows = [
        _detail_row("FIPE minimum /m²", format_currency(record.min_price_m2), theme),
        _detail_row("FIPE average /m²", format_currency(record.avg_price_m2), theme),
        _detail_row("FIPE maximum /m²", format_currency(record.max_price_m2), theme),
        _detail_row("OLX average /m²", format_currency(record.classifieds_avg_price_m2), theme),
    ]
    if result.estimated_market_value is not None:
        rows.append(_detail_row("Estimated market value", format_currency(result.estimated_market_value), theme))
    if result.difference_pct is not None:
        sign = "+" if result.difference_pct > 0 else ""
        rows.append(_detail_row("Versus FIPE average", f"{sign}{result.difference_pct}%", theme))
    return _card([html.H4("Market analysis (FIPE/OLX)", style={"color": theme["primary"]}), *rows], theme)


def indicator_badge(label: str, classification: IndicatorClassification, theme: dict[str, str]):
    color = tone_color(classification.tone)
    return html.Div([
        html.Div(style={"height": "4px", "backgroundColor": color, "borderRadius": "2px 2px 0 0"}),
        html.Div([
            html.Div(classification.label, style={"fontSize": "1.1rem", "fontWeight": "bold", "color": color}),
            html.Div(label, style={"fontSize": "0.8rem", "color": theme["muted"]}),
            html.Div(f"{classification.score}", style={"fontSize": "0.75rem", "color": theme["muted"]}),
        ], style={"padding": "0.75rem 1rem", "textAlign": "center"}),
    ], style={
        "backgroundColor": theme["card"], "border": f"1px solid {theme['border']}",
        "borderRadius": "8px", "minWidth": "140px", "overflow": "hidden",
    })


def indicator_panel(indicators: NeighborhoodIndicators, composites: CompositeScores, theme: dict[str, str]):
    badges = [
        ("Wellbeing", indicators.wellbeing),
        ("Human development", indicators.human_development),
        ("Environment", indicators.environmental),
        ("Housing", indicators.housing),
        ("Mobility", composites.mobility),
        ("Education & health", composites.education_health),
    ]
    return _card([
        html.H4("Neighborhood indicators", style={"color": theme["primary"]}),
        html.Div(
            [indicator_badge(label, c, theme) for label, c in badges],
            style={"display": "flex", "gap": "0.75rem", "flexWrap": "wrap"},
        ),
    ], theme)


def neighborhood_profile(record: NeighborhoodRecord, theme: dict[str, str]):
    a = record.amenities
    rows = [
        _detail_row("Region", record.region or "N/A", theme),
        _detail_row("Avg. household income", format_currency(record.avg_household_income), theme),
        _detail_row("Bus stops", str(a.bus_stops), theme),
        _detail_row("Bike stations", str(a.bike_stations), theme),
        _detail_row("Bike lanes", f"{a.bike_lane_km} km", theme),
        _detail_row("Schools", str(a.schools), theme),
        _detail_row("Health units", str(a.health_units), theme),
        _detail_row("Squares", str(a.squares), theme),
        _detail_row("Public Wi-Fi", "Yes" if a.public_wifi else "No", theme),
    ]
    children = [html.H4(record.name, style={"color": theme["primary"]})]
    if record.description:
        children.append(html.P(record.description, style={"color": theme["text"]}))
    return _card(children + rows, theme)


def neighborhood_map(record: NeighborhoodRecord, theme: dict[str, str]):
    """Map centred on the neighborhood, or a placeholder without coordinates."""
    if not record.has_coordinates:
        return _card([
            html.H4("Map unavailable", style={"color": theme["muted"]}),
            html.P(f"No coordinates on file for {record.name}.", style={"color": theme["muted"]}),
        ], theme, textAlign="center")

    fig = go.Figure(go.Scattermap(
        lat=[record.latitude],
        lon=[record.longitude],
        mode="markers",
        marker={"size": 14, "color": theme["primary"]},
        text=[record.name],
        hoverinfo="text",
    ))
    fig.update_layout(
        map={
            "style": "open-street-map",
            "center": {"lat": record.latitude, "lon": record.longitude},
            "zoom": MAP_ZOOM,
        },
        margin={"l": 0, "r": 0, "t": 0, "b": 0},
        height=320,
    )
    return _card([dcc.Graph(figure=fig, config={"displayModeBar": False})], theme, padding="0")


def build_result_panel(
    result: ValuationResult,
    neighborhood_name: str,
    total_price: Decimal | None,
    area: int | None,
    indicators: NeighborhoodIndicators | None,
    composites: CompositeScores | None,
    theme: dict[str, str],
):
    children = [verdict_banner(result, theme), property_details(result, neighborhood_name, total_price, area, theme)]

    if result.status is ValuationStatus.INSUFFICIENT_DATA or result.neighborhood is None:
        return html.Div(children)

    children.append(market_analysis(result, theme))
    if indicators is not None and composites is not None:
        children.append(indicator_panel(indicators, composites, theme))
    children.append(neighborhood_profile(result.neighborhood, theme))
    children.append(neighborhood_map(result.neighborhood, theme))
    return html.Div(children)

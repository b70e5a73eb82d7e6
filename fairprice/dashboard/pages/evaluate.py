"""Valuation page: price / area / neighborhood form and result panel.

The price field is re-masked on every keystroke; the Analyze button stays
disabled until price > 0, area > 0 and a neighborhood is selected.
"""

import dash
from dash import Input, Output, State, callback, dcc, html

from fairprice.config import settings
from fairprice.dashboard.components import build_result_panel, get_theme
from fairprice.data.neighborhoods import get_repository
from fairprice.engine.composite import classify_composites
from fairprice.engine.indicators import classify_neighborhood_indicators
from fairprice.engine.normalize import normalize_currency, parse_area, reformat_currency_input
from fairprice.engine.valuation import evaluate

dash.register_page(__name__, path="/", name="Evaluate")

THEME = get_theme(settings.theme)

FIELD_STYLE = {
    "width": "100%",
    "padding": "0.6rem",
    "fontSize": "1rem",
    "backgroundColor": THEME["input"],
    "color": THEME["text"],
    "border": f"1px solid {THEME['border']}",
    "borderRadius": "8px",
}

BTN_STYLE = {
    "width": "100%",
    "padding": "0.85rem",
    "fontSize": "1rem",
    "fontWeight": "bold",
    "backgroundColor": THEME["primary"],
    "color": "white",
    "border": "none",
    "borderRadius": "8px",
    "cursor": "pointer",
    "marginTop": "0.5rem",
}


def _field(label, component):
    return html.Div([
        html.Label(label, style={"fontSize": "0.85rem", "marginBottom": "0.25rem", "display": "block", "color": THEME["muted"]}),
        component,
    ], style={"marginBottom": "1rem"})


def _is_ready(price_text, area_text, neighborhood) -> bool:
    price = normalize_currency(price_text)
    area = parse_area(area_text)
    return price is not None and price > 0 and area is not None and area > 0 and bool(neighborhood)


layout = html.Div([
    html.H2("Is this property worth it?", style={"color": THEME["text"]}),
    html.P(
        "Enter the asking price, the area and the neighborhood to compare the price per m² "
        "with official (FIPE) and classifieds (OLX) references.",
        style={"color": THEME["muted"]},
    ),

    html.Div([
        _field("Property price", dcc.Input(
            id="price-input", type="text", inputMode="numeric",
            placeholder="R$ 250.000,00", style=FIELD_STYLE,
        )),
        _field("Area (m²)", dcc.Input(
            id="area-input", type="text", inputMode="numeric",
            placeholder="130", style=FIELD_STYLE,
        )),
        _field("Neighborhood", dcc.Dropdown(
            id="neighborhood-select",
            options=get_repository().names(),
            placeholder="Select the neighborhood...",
            searchable=True,
            clearable=True,
        )),
        html.Button("ANALYZE NOW", id="analyze-btn", n_clicks=0, disabled=True, style=BTN_STYLE),
    ], style={
        "backgroundColor": THEME["card"],
        "border": f"1px solid {THEME['border']}",
        "borderRadius": "12px",
        "padding": "1.5rem",
        "marginBottom": "1.5rem",
    }),

    dcc.Loading(html.Div(id="results-container"), type="circle"),
])


@callback(
    Output("price-input", "value"),
    Input("price-input", "value"),
    prevent_initial_call=True,
)
def mask_price(value):
    return reformat_currency_input(value)


@callback(
    Output("neighborhood-select", "options"),
    Input("neighborhood-select", "search_value"),
    State("neighborhood-select", "value"),
)
def filter_neighborhoods(search_value, selected):
    options = get_repository().search(search_value)
    if selected and selected not in options:
        options = [selected, *options]
    return options


@callback(
    Output("analyze-btn", "disabled"),
    [Input("price-input", "value"), Input("area-input", "value"), Input("neighborhood-select", "value")],
)
def toggle_analyze(price_text, area_text, neighborhood):
    return not _is_ready(price_text, area_text, neighborhood)


@callback(
    Output("results-container", "children"),
    Input("analyze-btn", "n_clicks"),
    [State("price-input", "value"), State("area-input", "value"), State("neighborhood-select", "value")],
    prevent_initial_call=True,
)
def run_valuation(n_clicks, price_text, area_text, neighborhood):
    price = normalize_currency(price_text)
    area = parse_area(area_text)
    record = get_repository().get(neighborhood)

    result = evaluate(price, area, record)

    indicators = classify_neighborhood_indicators(record) if record else None
    composites = classify_composites(record.amenities) if record else None
    return build_result_panel(result, neighborhood or "", price, area, indicators, composites, THEME)

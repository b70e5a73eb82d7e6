"""Plotly Dash application: property valuation form and result panel."""

import logging

from dash import Dash, html, page_container

from fairprice.config import settings
from fairprice.dashboard.components import get_theme

THEME = get_theme(settings.theme)

app = Dash(
    __name__,
    use_pages=True,
    suppress_callback_exceptions=True,
    title="FairPrice",
)

app.layout = html.Div([
    # Navigation
    html.Nav([
        html.Div([
            html.H1("FairPrice", style={"fontSize": "1.5rem", "margin": "0", "color": THEME["primary"]}),
            html.Span("Fortaleza · price per m² check", style={"color": THEME["muted"]}),
        ], style={
            "display": "flex",
            "justifyContent": "space-between",
            "alignItems": "center",
            "maxWidth": "900px",
            "margin": "0 auto",
            "padding": "0 1rem",
        }),
    ], style={
        "backgroundColor": THEME["card"],
        "padding": "1rem 0",
        "marginBottom": "2rem",
    }),

    # Page content
    html.Div(
        page_container,
        style={"maxWidth": "900px", "margin": "0 auto", "padding": "0 1rem"},
    ),
], style={"backgroundColor": THEME["background"], "minHeight": "100vh", "paddingBottom": "2rem"})


if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level)
    app.run(debug=settings.debug, port=settings.dashboard_port)

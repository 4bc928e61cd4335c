from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from domain_explorer.config.model import GlobalConfig
from domain_explorer.ui.ids import IDs


def build_navbar(global_config: GlobalConfig) -> dbc.Navbar:
    title = global_config.ui_title
    subtitle = global_config.subtitle

    return dbc.Navbar(
        dbc.Container(
            fluid=True,
            children=[
                # Left: title
                html.Div(
                    className="d-flex align-items-end",
                    children=[
                        html.Span("registro", className="de-brand"),
                        html.Span(".br", className="de-brand-tld me-2"),
                        html.Div(
                            [
                                html.Div(title, className="de-navbar-title"),
                                html.Small(subtitle, className="text-muted"),
                            ],
                            className="ms-2",
                        ),
                    ],
                ),
                # Right: corpus size
                dbc.Badge(
                    "carregando...",
                    id=IDs.Control.NAVBAR_CORPUS_BADGE,
                    color="dark",
                    pill=True,
                ),
            ],
        ),
        color="white",
        className="de-navbar shadow-sm",
    )

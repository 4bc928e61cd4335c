from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import dcc, html

from domain_explorer.ui.ids import IDs


def build_selection_bar() -> html.Div:
    return html.Div(
        id=IDs.Control.SELECTION_BAR,
        style={"display": "none"},
        className="de-selection-bar",
        children=[
            html.Span("0", id=IDs.Control.SELECTION_COUNT, className="de-selection-count"),
            html.Span("domínios selecionados", className="me-3"),
            dbc.Button(
                "Limpar",
                id=IDs.Control.SELECTION_CLEAR_BTN,
                color="link",
                size="sm",
                className="text-light me-2",
                title="Limpar lista",
            ),
            dbc.Button(
                "Baixar Lista (.txt)",
                id=IDs.Control.SELECTION_DOWNLOAD_BTN,
                color="success",
                size="sm",
                className="rounded-pill fw-bold",
            ),
            dcc.Download(id=IDs.Control.SELECTION_DOWNLOAD),
            dcc.ConfirmDialog(
                id=IDs.Control.SELECTION_CONFIRM_CLEAR,
                message="Tem certeza que deseja limpar sua lista de selecionados?",
            ),
        ],
    )

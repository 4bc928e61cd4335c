from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from domain_explorer.ui.ids import IDs


def build_search_header(semantic_enabled: bool) -> dbc.Card:
    hint = (
        "Descreva sua ideia e a busca sugere palavras relacionadas."
        if semantic_enabled
        else "Busca inteligente indisponível: o termo digitado será usado literalmente."
    )

    return dbc.Card(
        dbc.CardBody(
            [
                dbc.InputGroup(
                    [
                        dbc.Input(
                            id=IDs.Control.SEMANTIC_INPUT,
                            type="text",
                            value="",
                            placeholder="Busca Inteligente: descreva sua ideia (ex: 'loja de calçados', 'startup agro')...",
                        ),
                        dbc.Button("Buscar", id=IDs.Control.SEMANTIC_BTN, color="success"),
                    ],
                ),
                html.Small(hint, className="text-muted"),
                html.Div(
                    [
                        html.Div(
                            id=IDs.Control.SEMANTIC_KEYWORDS_LIST,
                            className="d-inline",
                        ),
                        dbc.Button(
                            "Limpar",
                            id=IDs.Control.SEMANTIC_CLEAR_BTN,
                            color="link",
                            size="sm",
                            className="ms-2 p-0",
                            style={"display": "none"},
                        ),
                    ],
                    className="mt-2",
                ),
            ]
        ),
        className="de-search-card mb-3",
    )

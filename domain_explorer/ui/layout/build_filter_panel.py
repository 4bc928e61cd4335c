from __future__ import annotations

import dash_bootstrap_components as dbc
from dash import html

from domain_explorer.config.model import GlobalConfig
from domain_explorer.core.filter_state import DIGITS_ALL, EXTENSION_ALL
from domain_explorer.ui.helpers import DIGIT_OPTIONS, EXTENSION_OPTIONS, first_letter_options
from domain_explorer.ui.ids import IDs

_TOGGLE_GROUP = dict(
    className="btn-group w-100",
    inputClassName="btn-check",
    labelClassName="btn btn-outline-secondary btn-sm",
    labelCheckedClassName="active",
)


def build_filter_panel(global_config: GlobalConfig) -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader("Filtros", className="fw-semibold"),
            dbc.CardBody(
                [
                    # Showing X of Y
                    html.Div(
                        [
                            html.Div(
                                id=IDs.Control.FILTER_SUMMARY,
                                className="small text-muted mb-1",
                            ),
                            dbc.Progress(
                                id=IDs.Control.FILTER_PROGRESS,
                                value=0,
                                color="success",
                                style={"height": "6px"},
                            ),
                            html.Hr(),
                        ]
                    ),

                    html.Label("Tamanho do domínio", className="form-label"),
                    html.Div(
                        [
                            dbc.Input(
                                id=IDs.Control.MIN_LENGTH,
                                type="number",
                                min=1,
                                value=global_config.default_min_length,
                                placeholder="Min",
                                debounce=True,
                            ),
                            html.Span("-", className="mx-2 text-muted fw-bold"),
                            dbc.Input(
                                id=IDs.Control.MAX_LENGTH,
                                type="number",
                                min=1,
                                value=global_config.default_max_length,
                                placeholder="Max",
                                debounce=True,
                            ),
                        ],
                        className="d-flex align-items-center mb-3",
                    ),

                    html.Label("Extensão", className="form-label"),
                    dbc.RadioItems(
                        id=IDs.Control.EXTENSION_SELECT,
                        options=EXTENSION_OPTIONS,
                        value=EXTENSION_ALL,
                        **_TOGGLE_GROUP,
                    ),

                    html.Label("Números", className="form-label mt-3"),
                    dbc.RadioItems(
                        id=IDs.Control.DIGITS_SELECT,
                        options=DIGIT_OPTIONS,
                        value=DIGITS_ALL,
                        **_TOGGLE_GROUP,
                    ),

                    html.Label("Começa com", className="form-label mt-3"),
                    dbc.Input(
                        id=IDs.Control.PREFIX_INPUT,
                        type="text",
                        value="",
                        placeholder="ex: web, loja...",
                        debounce=True,
                        className="mb-3",
                    ),

                    html.Label("Contém", className="form-label"),
                    dbc.Input(
                        id=IDs.Control.SEARCH_INPUT,
                        type="text",
                        value="",
                        placeholder="ex: shop",
                        debounce=True,
                        className="mb-3",
                    ),

                    html.Label("Primeira letra", className="form-label"),
                    dbc.RadioItems(
                        id=IDs.Control.FIRST_LETTER_SELECT,
                        options=first_letter_options(),
                        value="",
                        className="de-letter-grid",
                        inputClassName="btn-check",
                        labelClassName="btn btn-outline-secondary btn-sm de-letter-btn",
                        labelCheckedClassName="active",
                    ),

                    html.Hr(),
                    dbc.Button(
                        "Limpar todos os filtros",
                        id=IDs.Control.RESET_FILTERS_BTN,
                        color="link",
                        size="sm",
                        className="p-0",
                    ),
                ]
            ),
        ],
        className="de-sidebar",
    )

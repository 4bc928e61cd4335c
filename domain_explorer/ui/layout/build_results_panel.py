from __future__ import annotations

from typing import List

import dash_bootstrap_components as dbc
from dash import dcc, html

from domain_explorer.config.model import GlobalConfig
from domain_explorer.ui.ids import IDs

HIDDEN = {"display": "none"}


def _corpus_error_panel(global_config: GlobalConfig) -> html.Div:
    return html.Div(
        id=IDs.Control.CORPUS_ERROR,
        style=HIDDEN,
        children=dbc.Alert(
            [
                html.H5("Erro ao carregar lista", className="alert-heading"),
                html.P(id=IDs.Control.CORPUS_ERROR_MESSAGE),
                html.Div(
                    [
                        dbc.Button(
                            "Tentar novamente",
                            id=IDs.Control.CORPUS_RETRY_BTN,
                            color="danger",
                            outline=True,
                            size="sm",
                            className="me-3",
                        ),
                        dcc.Upload(
                            id=IDs.Control.CORPUS_UPLOAD,
                            accept=".txt",
                            multiple=False,
                            children=dbc.Button(
                                "Carregar arquivo .txt manualmente",
                                color="light",
                                size="sm",
                                className="border me-3",
                            ),
                        ),
                        html.A(
                            "Baixar original do Registro.br",
                            href=global_config.source_url,
                            target="_blank",
                            rel="noreferrer",
                            className="fw-bold small",
                        ),
                    ],
                    className="d-flex flex-wrap align-items-center",
                ),
                html.Div(id=IDs.Control.CORPUS_UPLOAD_STATUS, className="small mt-2"),
            ],
            color="danger",
        ),
    )


def _pager(prev_id: str, next_id: str, with_label: bool) -> html.Div:
    children: List = [
        dbc.Button("Anterior", id=prev_id, color="light", size="sm", className="border", disabled=True),
    ]
    if with_label:
        children.append(html.Span("1 / 1", id=IDs.Control.PAGE_LABEL, className="de-page-label mx-2"))
    children.append(
        dbc.Button("Próxima", id=next_id, color="light", size="sm", className="border", disabled=True),
    )
    return html.Div(children, className="d-flex align-items-center gap-2")


def build_results_panel(global_config: GlobalConfig) -> html.Div:
    page_size_options = [
        {"label": f"{n} por página", "value": str(n)} for n in global_config.page_size_options
    ]

    return html.Div(
        [
            # The spinner covers the download as well as chart updates
            dcc.Loading(
                id=IDs.Control.CORPUS_LOADING,
                type="circle",
                children=[
                    _corpus_error_panel(global_config),
                    dcc.Graph(
                        id=IDs.Control.STATS_GRAPH,
                        config={"displayModeBar": False, "responsive": True},
                        style={"height": "320px"},
                    ),
                ],
            ),

            # Results header + pagination
            html.Div(
                [
                    html.Div(
                        [
                            html.H4(
                                [
                                    "Resultados Disponíveis ",
                                    dbc.Badge("0", id=IDs.Control.RESULTS_COUNT, color="success", pill=True),
                                ],
                                className="mb-0",
                            ),
                            html.Small(
                                "Clique nos cartões para selecionar domínios para sua lista.",
                                className="text-muted",
                            ),
                        ]
                    ),
                    html.Div(
                        [
                            dbc.Select(
                                id=IDs.Control.PAGE_SIZE_SELECT,
                                options=page_size_options,
                                value=str(global_config.items_per_page),
                                size="sm",
                                className="me-3 w-auto",
                            ),
                            _pager(IDs.Control.PAGE_PREV_BTN, IDs.Control.PAGE_NEXT_BTN, with_label=True),
                        ],
                        className="d-flex align-items-center",
                    ),
                ],
                className="d-flex flex-wrap justify-content-between align-items-end border-bottom pb-3 mb-3",
            ),

            html.Div(id=IDs.Control.RESULTS_GRID, className="de-grid mb-4"),

            html.Div(
                id=IDs.Control.RESULTS_EMPTY,
                style=HIDDEN,
                className="de-empty text-center text-muted p-5",
                children=[
                    html.P("Nenhum domínio encontrado.", className="fs-5 mb-1"),
                    html.P("Tente ajustar seus filtros ou termo de busca.", className="small"),
                    dbc.Button(
                        "Limpar todos os filtros",
                        id=IDs.Control.EMPTY_RESET_BTN,
                        color="link",
                        className="fw-bold",
                    ),
                ],
            ),

            html.Div(
                _pager(IDs.Control.PAGE_PREV_BOTTOM_BTN, IDs.Control.PAGE_NEXT_BOTTOM_BTN, with_label=False),
                className="d-flex justify-content-center de-bottom-pager",
            ),
        ],
        className="de-results",
    )

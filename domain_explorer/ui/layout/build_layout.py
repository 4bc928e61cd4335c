from __future__ import annotations

from typing import TYPE_CHECKING

import dash_bootstrap_components as dbc
from dash import dcc

from domain_explorer.core.pagination import PaginationState
from domain_explorer.ui.helpers import default_filter_state
from domain_explorer.ui.ids import IDs
from domain_explorer.ui.layout.build_filter_panel import build_filter_panel
from domain_explorer.ui.layout.build_navbar import build_navbar
from domain_explorer.ui.layout.build_results_panel import build_results_panel
from domain_explorer.ui.layout.build_search_header import build_search_header
from domain_explorer.ui.layout.build_selection_bar import build_selection_bar

if TYPE_CHECKING:
    from domain_explorer.ui.config import AppConfig


def build_layout(ctx: AppConfig) -> dbc.Container:
    cfg = ctx.global_config

    navbar = build_navbar(cfg)
    filter_panel = build_filter_panel(cfg)
    search_header = build_search_header(ctx.semantic_service is not None and ctx.semantic_service.enabled)
    results_panel = build_results_panel(cfg)
    selection_bar = build_selection_bar()

    return dbc.Container(
        fluid=True,
        className="de-root",
        children=[
            navbar,

            # App-level stores
            dcc.Store(
                id=IDs.Store.FILTER_STATE,
                storage_type="session",
                data=default_filter_state(cfg).to_dict(),
            ),
            dcc.Store(
                id=IDs.Store.PAGINATION,
                storage_type="session",
                data=PaginationState(items_per_page=cfg.items_per_page).to_dict(),
            ),
            dcc.Store(id=IDs.Store.SELECTION, storage_type="session", data=[]),
            dcc.Store(id=IDs.Store.SEMANTIC_KEYWORDS, storage_type="memory", data=[]),
            dcc.Store(id=IDs.Store.CORPUS_VERSION, storage_type="memory"),

            dbc.Row(
                [
                    dbc.Col(filter_panel, md=3, className="mt-3"),
                    dbc.Col([search_header, results_panel], md=9, className="mt-3"),
                ],
                className="gx-3",
            ),

            selection_bar,
        ],
    )

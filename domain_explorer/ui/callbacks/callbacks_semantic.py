from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State

from domain_explorer.ui.helpers import keyword_badges
from domain_explorer.ui.ids import IDs

if TYPE_CHECKING:
    from domain_explorer.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_semantic_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Free-text concept -> keywords
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.SEMANTIC_KEYWORDS, "data"),
        Input(IDs.Control.SEMANTIC_BTN, "n_clicks"),
        Input(IDs.Control.SEMANTIC_INPUT, "n_submit"),
        State(IDs.Control.SEMANTIC_INPUT, "value"),
        State(IDs.Store.SEMANTIC_KEYWORDS, "data"),
        running=[
            (Output(IDs.Control.SEMANTIC_BTN, "disabled"), True, False),
            (Output(IDs.Control.SEMANTIC_BTN, "children"), "Pensando...", "Buscar"),
        ],
        prevent_initial_call=True,
    )
    def run_semantic_search(n_clicks, n_submit, query, current_keywords):
        if not n_clicks and not n_submit:
            raise dash.exceptions.PreventUpdate

        if not query or not query.strip():
            if not current_keywords:
                raise dash.exceptions.PreventUpdate
            return []

        keywords = ctx.semantic_service.search(query)
        if keywords is None:
            # A newer search is in flight; its answer wins
            raise dash.exceptions.PreventUpdate

        return keywords

    # ---------------------------------------------------------
    # Clear keywords
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.SEMANTIC_KEYWORDS, "data", allow_duplicate=True),
        Output(IDs.Control.SEMANTIC_INPUT, "value", allow_duplicate=True),
        Input(IDs.Control.SEMANTIC_CLEAR_BTN, "n_clicks"),
        prevent_initial_call=True,
    )
    def clear_semantic_keywords(n_clicks):
        if not n_clicks:
            raise dash.exceptions.PreventUpdate
        return [], ""

    # ---------------------------------------------------------
    # Keyword badges
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.SEMANTIC_KEYWORDS_LIST, "children"),
        Output(IDs.Control.SEMANTIC_CLEAR_BTN, "style"),
        Input(IDs.Store.SEMANTIC_KEYWORDS, "data"),
    )
    def show_semantic_keywords(keywords):
        keywords = keywords or []
        style = {} if keywords else {"display": "none"}
        return keyword_badges(keywords), style

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State

from domain_explorer.core.filter_state import DIGITS_ALL, EXTENSION_ALL, FilterState
from domain_explorer.ui.helpers import build_filter_state
from domain_explorer.ui.ids import IDs

if TYPE_CHECKING:
    from domain_explorer.ui.config import AppConfig

logger = logging.getLogger(__name__)


def register_filter_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Controls -> FilterState (only written when it actually changes)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.FILTER_STATE, "data"),
        Input(IDs.Control.MIN_LENGTH, "value"),
        Input(IDs.Control.MAX_LENGTH, "value"),
        Input(IDs.Control.EXTENSION_SELECT, "value"),
        Input(IDs.Control.DIGITS_SELECT, "value"),
        Input(IDs.Control.PREFIX_INPUT, "value"),
        Input(IDs.Control.FIRST_LETTER_SELECT, "value"),
        Input(IDs.Control.SEARCH_INPUT, "value"),
        Input(IDs.Store.SEMANTIC_KEYWORDS, "data"),
        State(IDs.Store.FILTER_STATE, "data"),
    )
    def sync_filter_state_from_ui(
            min_len, max_len, extension, has_numbers, prefix, first_letter, search, keywords, current
    ):
        new_state = build_filter_state(
            ctx.global_config,
            min_length=min_len,
            max_length=max_len,
            extension=extension,
            has_numbers=has_numbers,
            starts_with=prefix,
            first_letter=first_letter,
            search_term=search,
            semantic_keywords=keywords,
        )

        # Equality-based change detection: an unchanged state must not reset paging
        if current and FilterState.from_dict(current) == new_state:
            raise dash.exceptions.PreventUpdate

        logger.info("filter_state_changed", extra={"filter_state": new_state.to_dict()})
        return new_state.to_dict()

    # ---------------------------------------------------------
    # Reset every filter (sidebar link + empty-result button)
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.MIN_LENGTH, "value"),
        Output(IDs.Control.MAX_LENGTH, "value"),
        Output(IDs.Control.EXTENSION_SELECT, "value"),
        Output(IDs.Control.DIGITS_SELECT, "value"),
        Output(IDs.Control.PREFIX_INPUT, "value"),
        Output(IDs.Control.FIRST_LETTER_SELECT, "value"),
        Output(IDs.Control.SEARCH_INPUT, "value"),
        Output(IDs.Store.SEMANTIC_KEYWORDS, "data", allow_duplicate=True),
        Output(IDs.Control.SEMANTIC_INPUT, "value", allow_duplicate=True),
        Input(IDs.Control.RESET_FILTERS_BTN, "n_clicks"),
        Input(IDs.Control.EMPTY_RESET_BTN, "n_clicks"),
        prevent_initial_call=True,
    )
    def reset_filters(n_sidebar, n_empty):
        if not n_sidebar and not n_empty:
            raise dash.exceptions.PreventUpdate

        cfg = ctx.global_config
        return (
            cfg.default_min_length,
            cfg.default_max_length,
            EXTENSION_ALL,
            DIGITS_ALL,
            "",
            "",
            "",
            [],
            "",
        )

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import ALL, Input, Output, State, dcc

from domain_explorer.core.selection import SelectionSet
from domain_explorer.ui.ids import IDs

if TYPE_CHECKING:
    from domain_explorer.ui.config import AppConfig

logger = logging.getLogger(__name__)

HIDDEN = {"display": "none"}
SHOWN: dict = {}


def _clicked_domain() -> str | None:
    """The domain whose card was clicked, or None when cards were just (re)rendered."""
    triggered = dash.ctx.triggered
    # a real click fires exactly one card with n_clicks >= 1
    if len(triggered) != 1 or not triggered[0].get("value"):
        return None
    triggered_id = dash.ctx.triggered_id
    if isinstance(triggered_id, dict):
        return triggered_id.get("index")
    return None


def register_selection_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Card click -> toggle membership
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.SELECTION, "data"),
        Input({"type": IDs.Pattern.DOMAIN_CARD, "index": ALL}, "n_clicks"),
        State(IDs.Store.SELECTION, "data"),
        prevent_initial_call=True,
    )
    def toggle_selection(_n_clicks, selection_data):
        domain = _clicked_domain()
        if not domain:
            raise dash.exceptions.PreventUpdate

        selection = SelectionSet.from_list(selection_data).toggle(domain)
        logger.info(
            "selection_toggled",
            extra={"domain": domain, "selected": domain in selection, "n_selected": len(selection)},
        )
        return selection.to_list()

    # ---------------------------------------------------------
    # Floating bar
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.SELECTION_BAR, "style"),
        Output(IDs.Control.SELECTION_COUNT, "children"),
        Input(IDs.Store.SELECTION, "data"),
    )
    def update_selection_bar(selection_data):
        n = len(SelectionSet.from_list(selection_data))
        return (SHOWN if n else HIDDEN), str(n)

    # ---------------------------------------------------------
    # Clear: ask first, clear only on confirmation
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.SELECTION_CONFIRM_CLEAR, "displayed"),
        Input(IDs.Control.SELECTION_CLEAR_BTN, "n_clicks"),
        prevent_initial_call=True,
    )
    def ask_clear_selection(n_clicks):
        if not n_clicks:
            raise dash.exceptions.PreventUpdate
        return True

    @app.callback(
        Output(IDs.Store.SELECTION, "data", allow_duplicate=True),
        Input(IDs.Control.SELECTION_CONFIRM_CLEAR, "submit_n_clicks"),
        State(IDs.Store.SELECTION, "data"),
        prevent_initial_call=True,
    )
    def clear_selection(submit_n_clicks, selection_data):
        if not submit_n_clicks:
            raise dash.exceptions.PreventUpdate

        selection = SelectionSet.from_list(selection_data)
        logger.info("selection_cleared", extra={"n_cleared": len(selection)})
        return selection.clear(confirmed=True).to_list()

    # ---------------------------------------------------------
    # Download the selection as .txt
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.SELECTION_DOWNLOAD, "data"),
        Input(IDs.Control.SELECTION_DOWNLOAD_BTN, "n_clicks"),
        State(IDs.Store.SELECTION, "data"),
        prevent_initial_call=True,
    )
    def download_selection(n_clicks, selection_data):
        if not n_clicks:
            raise dash.exceptions.PreventUpdate

        export = ctx.export_service.build(SelectionSet.from_list(selection_data))
        if export is None:
            raise dash.exceptions.PreventUpdate

        return dcc.send_string(export.content, export.filename)

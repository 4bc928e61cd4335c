from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import dash
from dash import Input, Output, State

from domain_explorer.core.filter_state import FilterState
from domain_explorer.core.pagination import PaginationState
from domain_explorer.ui.ids import IDs

if TYPE_CHECKING:
    from domain_explorer.ui.config import AppConfig

logger = logging.getLogger(__name__)

_PREV_BUTTONS = (IDs.Control.PAGE_PREV_BTN, IDs.Control.PAGE_PREV_BOTTOM_BTN)
_NEXT_BUTTONS = (IDs.Control.PAGE_NEXT_BTN, IDs.Control.PAGE_NEXT_BOTTOM_BTN)


def next_pagination_state(
        triggered_id: str | None,
        pagination: PaginationState,
        filtered_count: int,
        page_size: int | None,
) -> PaginationState:
    """
    Pure transition for the pagination store.

    - filter or corpus change (or first render): back to page 1
    - page size change: new size, same page
    - prev/next: one step, bounded by the page count
    """
    if triggered_id in _PREV_BUTTONS:
        return pagination.previous_page()
    if triggered_id in _NEXT_BUTTONS:
        return pagination.next_page(filtered_count)
    if triggered_id == IDs.Control.PAGE_SIZE_SELECT:
        return pagination.with_items_per_page(page_size or pagination.items_per_page)
    return pagination.reset()


def register_pagination_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    @app.callback(
        Output(IDs.Store.PAGINATION, "data"),
        Input(IDs.Store.FILTER_STATE, "data"),
        Input(IDs.Store.CORPUS_VERSION, "data"),
        Input(IDs.Control.PAGE_SIZE_SELECT, "value"),
        Input(IDs.Control.PAGE_PREV_BTN, "n_clicks"),
        Input(IDs.Control.PAGE_NEXT_BTN, "n_clicks"),
        Input(IDs.Control.PAGE_PREV_BOTTOM_BTN, "n_clicks"),
        Input(IDs.Control.PAGE_NEXT_BOTTOM_BTN, "n_clicks"),
        State(IDs.Store.PAGINATION, "data"),
    )
    def update_pagination(fs_data, _corpus_version, page_size, *args):
        pag_data = args[-1]
        pagination = PaginationState.from_dict(pag_data)
        filters = FilterState.from_dict(fs_data)
        filtered_count = len(ctx.corpus_store.corpus.filtered(filters))

        try:
            size = int(page_size) if page_size else None
        except (TypeError, ValueError):
            size = None

        new_state = next_pagination_state(dash.ctx.triggered_id, pagination, filtered_count, size)
        # First render: the stored page size may differ from the select's value
        if size and new_state.items_per_page != size:
            new_state = new_state.with_items_per_page(size)

        if pag_data and new_state == pagination:
            raise dash.exceptions.PreventUpdate
        return new_state.to_dict()

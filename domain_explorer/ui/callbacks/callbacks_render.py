from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import dash
import plotly.graph_objs as go
from dash import Input, Output

from domain_explorer.core.filter_state import FilterState
from domain_explorer.core.pagination import PaginationState
from domain_explorer.core.selection import SelectionSet
from domain_explorer.core.state import ExplorerState
from domain_explorer.core.stats import DomainStats
from domain_explorer.ui.helpers import domain_grid, page_label
from domain_explorer.ui.ids import IDs
from domain_explorer.views.stats_view import StatsView

if TYPE_CHECKING:
    from domain_explorer.ui.config import AppConfig

logger = logging.getLogger(__name__)

HIDDEN = {"display": "none"}
SHOWN: dict = {}

LOADING_MESSAGE = "Carregando lista de domínios..."
RENDER_ERROR_MESSAGE = "Não foi possível gerar os gráficos."


def _explorer_state(
        ctx: AppConfig,
        fs_data: dict[str, Any] | None,
        pag_data: dict[str, Any] | None = None,
        selection_data: list | None = None,
) -> ExplorerState:
    return ExplorerState(
        corpus=ctx.corpus_store.corpus,
        filters=FilterState.from_dict(fs_data),
        pagination=PaginationState.from_dict(pag_data),
        selection=SelectionSet.from_list(selection_data),
    )


def stats_figure(view: StatsView, stats: DomainStats, corpus_size: int) -> go.Figure:
    """Charts for the filtered set; a message figure while loading or if rendering fails."""
    if corpus_size == 0:
        return view.empty_figure(LOADING_MESSAGE)
    try:
        return view.render_figure(view.compute_data(stats))
    except Exception:
        logger.exception("Stats rendering failed", extra={"n_filtered": stats.total})
        return view.empty_figure(RENDER_ERROR_MESSAGE)


def register_render_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Charts + counters: FilterState -> stats
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.STATS_GRAPH, "figure"),
        Output(IDs.Control.RESULTS_COUNT, "children"),
        Output(IDs.Control.FILTER_SUMMARY, "children"),
        Output(IDs.Control.FILTER_PROGRESS, "value"),
        Input(IDs.Store.FILTER_STATE, "data"),
        Input(IDs.Store.CORPUS_VERSION, "data"),
    )
    def update_stats(fs_data, _corpus_version):
        state = _explorer_state(ctx, fs_data)
        snapshot = state.snapshot()

        total = len(state.corpus)
        figure = stats_figure(ctx.stats_view, snapshot.stats, total)

        shown = snapshot.stats.total
        progress = round(100 * shown / total) if total else 0

        logger.info(
            "stats_rendered",
            extra={"n_filtered": shown, "n_total": total},
        )

        return (
            figure,
            f"{shown:,}",
            f"Exibindo {shown:,} de {total:,}",
            progress,
        )

    # ---------------------------------------------------------
    # Result grid + pager: FilterState, PaginationState, selection -> cards
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.RESULTS_GRID, "children"),
        Output(IDs.Control.RESULTS_EMPTY, "style"),
        Output(IDs.Control.PAGE_LABEL, "children"),
        Output(IDs.Control.PAGE_PREV_BTN, "disabled"),
        Output(IDs.Control.PAGE_NEXT_BTN, "disabled"),
        Output(IDs.Control.PAGE_PREV_BOTTOM_BTN, "disabled"),
        Output(IDs.Control.PAGE_NEXT_BOTTOM_BTN, "disabled"),
        Input(IDs.Store.FILTER_STATE, "data"),
        Input(IDs.Store.PAGINATION, "data"),
        Input(IDs.Store.CORPUS_VERSION, "data"),
        Input(IDs.Store.SELECTION, "data"),
    )
    def update_results(fs_data, pag_data, _corpus_version, selection_data):
        state = _explorer_state(ctx, fs_data, pag_data, selection_data)
        snapshot = state.snapshot()

        # No corpus yet: the error panel or the spinner says why
        nothing_found = len(state.corpus) > 0 and not snapshot.filtered

        grid = domain_grid(snapshot.page, state.selection, ctx.global_config.availability_url)
        no_prev = not snapshot.has_previous
        no_next = not snapshot.has_next

        return (
            grid,
            SHOWN if nothing_found else HIDDEN,
            page_label(state.pagination.current_page, snapshot.display_total_pages),
            no_prev,
            no_next,
            no_prev,
            no_next,
        )
